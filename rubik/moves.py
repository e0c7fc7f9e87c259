"""
Rubik Core: moves.py
--------------------
Notation table: maps a move token to the rotation it performs.

Each base letter names an axis and a membership rule deciding which
stickers turn. A suffix picks the angle:

    "U"  → 90°      "U2" → 180°      "U'" → 270°

Stickers are rotated by the negated angle about the axis (see
sticker.py), which fixes the turning direction of the whole table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from rubik.lattice import Position

X_AXIS = (1, 0, 0)
Y_AXIS = (0, 1, 0)
Z_AXIS = (0, 0, 1)


def _neg(axis: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return (-axis[0], -axis[1], -axis[2])


# -------------------------------------------------------------------
# Errors
# -------------------------------------------------------------------

class InvalidNotation(ValueError):
    """Raised for a token whose base letter or suffix is not in the table."""

    def __init__(self, token: str):
        super().__init__(f"invalid notation: {token!r}")
        self.token = token


# -------------------------------------------------------------------
# Membership kinds
# -------------------------------------------------------------------

class Membership(Enum):
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="
    EQUAL_ZERO = "==0"
    ALWAYS = "*"


@dataclass(frozen=True)
class Move:
    """One parsed token: rotation axis, nominal angle and affected layer(s)."""
    token: str
    axis: Tuple[int, int, int]
    angle: int
    membership: Membership
    coord: Optional[int] = None

    def affects(self, position: Position) -> bool:
        """Return True if a sticker at `position` turns with this move."""
        kind = self.membership
        if kind is Membership.ALWAYS:
            return True

        value = position[self.coord]
        if kind is Membership.GREATER:
            return value > 0
        if kind is Membership.GREATER_EQUAL:
            return value >= 0
        if kind is Membership.LESS:
            return value < 0
        if kind is Membership.LESS_EQUAL:
            return value <= 0
        return value == 0


# -------------------------------------------------------------------
# Static table
# -------------------------------------------------------------------

# base letter → (axis, membership, inspected coordinate)
MOVE_TABLE: Dict[str, Tuple[Tuple[int, int, int], Membership, Optional[int]]] = {
    "U": (Y_AXIS, Membership.GREATER, 1),
    "u": (Y_AXIS, Membership.GREATER_EQUAL, 1),
    "D": (_neg(Y_AXIS), Membership.LESS, 1),
    "d": (_neg(Y_AXIS), Membership.LESS_EQUAL, 1),
    "E": (Y_AXIS, Membership.EQUAL_ZERO, 1),
    "y": (Y_AXIS, Membership.ALWAYS, None),

    "L": (_neg(X_AXIS), Membership.LESS, 0),
    "R": (X_AXIS, Membership.GREATER, 0),
    "l": (_neg(X_AXIS), Membership.LESS_EQUAL, 0),
    "r": (X_AXIS, Membership.GREATER_EQUAL, 0),
    "M": (_neg(X_AXIS), Membership.EQUAL_ZERO, 0),
    "x": (X_AXIS, Membership.ALWAYS, None),

    "F": (Z_AXIS, Membership.GREATER, 2),
    "B": (_neg(Z_AXIS), Membership.LESS, 2),
    "S": (Z_AXIS, Membership.EQUAL_ZERO, 2),
    "z": (Z_AXIS, Membership.ALWAYS, None),
}

SUFFIX_ANGLES = {"": 90, "2": 180, "'": 270}

_INVERSE_SUFFIX = {"": "'", "'": "", "2": "2"}

OUTER_FACES = ("U", "D", "L", "R", "F", "B")
OUTER_TOKENS = tuple(face + suffix for face in OUTER_FACES for suffix in SUFFIX_ANGLES)
ALL_TOKENS = tuple(base + suffix for base in MOVE_TABLE for suffix in SUFFIX_ANGLES)


# -------------------------------------------------------------------
# Parsing
# -------------------------------------------------------------------

def _split_token(token: str) -> Tuple[str, str]:
    if len(token) > 1 and token[-1] in SUFFIX_ANGLES:
        base, suffix = token[:-1], token[-1]
    else:
        base, suffix = token, ""
    if base not in MOVE_TABLE:
        raise InvalidNotation(token)
    return base, suffix


def parse_move(token: str) -> Move:
    """
    Resolve a notation token into a Move.

    Example:
        parse_move("r'") → Move(axis=(1, 0, 0), angle=270, membership=GREATER_EQUAL, coord=0)
    """
    base, suffix = _split_token(token)
    axis, membership, coord = MOVE_TABLE[base]
    return Move(token, axis, SUFFIX_ANGLES[suffix], membership, coord)


def split_sequence(sequence: str) -> Iterator[str]:
    """Yield the whitespace-separated tokens of a move sequence, left to right."""
    yield from sequence.split()


def inverse_token(token: str) -> str:
    """Return the token undoing `token` (plain ↔ prime, half turns are self-inverse)."""
    base, suffix = _split_token(token)
    return base + _INVERSE_SUFFIX[suffix]


def invert_sequence(sequence: str) -> str:
    """
    Return the sequence undoing `sequence`.
    Example: invert_sequence("R U R'") == "R U' R'"
    """
    inverted: List[str] = [inverse_token(t) for t in split_sequence(sequence)]
    return " ".join(reversed(inverted))


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    for token in ALL_TOKENS:
        parse_move(token)
    print(f"{len(ALL_TOKENS)} tokens resolved from {len(MOVE_TABLE)} base letters")

    for bad in ("Q", "U3", "", "U2'"):
        try:
            parse_move(bad)
        except InvalidNotation as e:
            print("rejected:", e)
    print("moves.py self-check passed ✓")
