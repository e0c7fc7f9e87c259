import pytest

from rubik.moves import (
    ALL_TOKENS,
    MOVE_TABLE,
    InvalidNotation,
    Membership,
    Move,
    inverse_token,
    invert_sequence,
    parse_move,
    split_sequence,
)


def test_table_has_sixteen_base_letters():
    assert set(MOVE_TABLE) == set("UuDdEyLRlrMxFBSz")
    assert len(ALL_TOKENS) == 48


@pytest.mark.parametrize("token,angle", [("U", 90), ("U2", 180), ("U'", 270), ("x2", 180), ("M'", 270)])
def test_suffix_sets_angle(token, angle):
    assert parse_move(token).angle == angle


def test_axis_and_membership():
    move = parse_move("l")
    assert move.axis == (-1, 0, 0)
    assert move.membership is Membership.LESS_EQUAL
    assert move.coord == 0

    move = parse_move("z'")
    assert move.axis == (0, 0, 1)
    assert move.membership is Membership.ALWAYS
    assert move.coord is None


def test_u2_matches_hand_built_move():
    expected = Move("U2", (0, 1, 0), 180, Membership.GREATER, 1)
    assert parse_move("U2") == expected


@pytest.mark.parametrize("token", ["Q", "U3", "", "U2'", "UU", "'", "2", "u''", "X"])
def test_invalid_tokens_rejected(token):
    with pytest.raises(InvalidNotation) as exc:
        parse_move(token)
    assert exc.value.token == token
    assert isinstance(exc.value, ValueError)


def test_membership_predicates():
    assert parse_move("U").affects((0, 3, 0))
    assert parse_move("U").affects((2, 2, 3))
    assert not parse_move("U").affects((2, 0, 3))
    assert parse_move("u").affects((2, 0, 3))
    assert not parse_move("u").affects((2, -2, 3))
    assert parse_move("D").affects((0, -3, 2))
    assert parse_move("d").affects((3, 0, 0))
    assert parse_move("E").affects((3, 0, -2))
    assert not parse_move("E").affects((3, 2, -2))
    assert parse_move("M").affects((0, 3, 2))
    assert not parse_move("M").affects((-2, 3, 2))
    assert parse_move("S").affects((3, 2, 0))
    assert parse_move("B").affects((0, 0, -3))
    assert parse_move("y").affects((-3, -2, -2))


def test_split_sequence_handles_whitespace():
    assert list(split_sequence("  R  U'\tF2\n")) == ["R", "U'", "F2"]
    assert list(split_sequence("")) == []


def test_inverse_token():
    assert inverse_token("R") == "R'"
    assert inverse_token("R'") == "R"
    assert inverse_token("R2") == "R2"
    with pytest.raises(InvalidNotation):
        inverse_token("R3")


def test_invert_sequence():
    assert invert_sequence("R U R'") == "R U' R'"
    assert invert_sequence("x2 y F'") == "F y' x2"
    assert invert_sequence("") == ""
