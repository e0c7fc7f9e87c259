import json

import pytest

from rubik.audit import MoveLog, audit_move
from rubik.cube import CubeState, audited_move
from rubik.moves import InvalidNotation


def test_audited_move_creates_log():
    cube, log = audited_move(CubeState.solved(), "U")
    assert isinstance(log, MoveLog)
    assert len(log.entries) == 1
    entry = log.entries[0]
    assert entry.token == "U"
    assert entry.angle == 90
    assert entry.turned == 21
    assert entry.conserved


def test_turned_counts_per_move_kind():
    cube = CubeState.solved()
    log = MoveLog()
    for token in ("R", "M", "r", "x"):
        cube, log = audited_move(cube, token, log)
    assert [e.turned for e in log.entries] == [21, 12, 33, 54]


def test_invalid_token_is_not_recorded():
    cube = CubeState.solved()
    log = MoveLog()
    with pytest.raises(InvalidNotation):
        audited_move(cube, "U3", log)
    assert log.entries == []


def test_summary_and_describe():
    cube = CubeState.solved()
    log = MoveLog()
    for token in "R U2 R' U".split():
        cube, log = audited_move(cube, token, log, note="test")
    s = log.summary()
    assert s["count"] == 4
    assert s["quarter_turns"] == 5
    assert s["by_base"] == {"R": 2, "U": 2}
    assert s["integrity_passed"]
    assert log.sequence() == "R U2 R' U"
    assert log.describe() == "MoveLog(count=4, quarter_turns=5, integrity=True)"


def test_empty_summary():
    log = MoveLog()
    assert log.summary() == {"count": 0, "integrity_passed": True}
    assert log.pop() is None


def test_export_json(tmp_path):
    cube = CubeState.solved()
    cube.apply_move("F")
    log = audit_move(cube, "F", 21)
    path = tmp_path / "log.json"
    log.export_json(str(path))

    data = json.loads(path.read_text())
    assert len(data) == 1
    assert data[0]["token"] == "F"
    assert data[0]["conserved"] is True
    assert set(data[0]) == {"timestamp", "token", "angle", "turned", "conserved", "note"}


def test_pop_and_clear():
    cube = CubeState.solved()
    log = MoveLog()
    for token in ("R", "U"):
        cube, log = audited_move(cube, token, log)
    assert log.pop().token == "U"
    log.clear()
    assert log.entries == []
