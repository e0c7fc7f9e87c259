from rubik.moves import parse_move
from rubik.sticker import Sticker


def test_new_sticker_starts_at_original_position():
    s = Sticker((3, 0, 2))
    assert s.current_position == s.original_position == (3, 0, 2)
    assert s.face() == s.original_face() == "R"


def test_apply_outside_layer_is_noop():
    s = Sticker((0, -3, 0))
    assert s.apply(parse_move("U")) is False
    assert s.current_position == (0, -3, 0)


def test_apply_u_moves_front_row_to_left():
    s = Sticker((2, 2, 3))
    assert s.apply(parse_move("U")) is True
    assert s.current_position == (-3, 2, 2)
    assert s.face() == "L"
    assert s.original_face() == "F"
    assert s.original_position == (2, 2, 3)


def test_positions_stay_integer():
    s = Sticker((3, 2, -2))
    for token in ("x", "y'", "z2", "R", "M", "S'"):
        s.apply(parse_move(token))
        assert all(type(v) is int for v in s.current_position)


def test_four_quarter_turns_return_home():
    s = Sticker((3, 2, -2))
    seen = set()
    for _ in range(4):
        s.apply(parse_move("R"))
        seen.add(s.current_position)
    assert s.current_position == (3, 2, -2)
    assert len(seen) == 4
