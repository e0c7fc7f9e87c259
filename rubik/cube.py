"""
Rubik Core: cube.py
-------------------
The cube state: 54 stickers plus move application and serialization.

Storage order of the stickers carries no meaning. The face string is
rebuilt on demand: for every face, a clone is turned whole so that the
face sits on top, its stickers are read in row-major order and their
original faces (colors) are emitted.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from rubik.conservation import conserve_lattice, verify_conservation
from rubik.lattice import Position, get_face, solved_positions
from rubik.moves import parse_move, split_sequence
from rubik.sticker import Sticker

if TYPE_CHECKING:
    from rubik.audit import MoveLog

# -------------------------------------------------------------------
# Serialization constants
# -------------------------------------------------------------------

FACE_ORDER = ("U", "R", "F", "D", "L", "B")

# whole-cube turns bringing each face to the top
FACE_VIEWS = {
    "U": "",
    "R": "y x",
    "F": "x",
    "D": "x2",
    "L": "y' x",
    "B": "y2 x",
}

SOLVED_STATE = "".join(face * 9 for face in FACE_ORDER)


@dataclass
class CubeState:
    """Unordered collection of the 54 stickers of a 3×3×3 cube."""
    stickers: List[Sticker] = field(default_factory=list)

    # ---------------------------------------------------------------
    # Construction
    # ---------------------------------------------------------------

    @classmethod
    def solved(cls) -> "CubeState":
        return cls([Sticker(p) for p in solved_positions()])

    def clone(self) -> "CubeState":
        """Return an independent copy (stickers are copied, not shared)."""
        return CubeState([
            Sticker(s.current_position, s.original_position) for s in self.stickers
        ])

    # ---------------------------------------------------------------
    # Mutation
    # ---------------------------------------------------------------

    @conserve_lattice
    def apply_move(self, token: str) -> int:
        """
        Apply one notation token to every sticker.
        Raises InvalidNotation before touching any sticker if the token is unknown.
        Returns the number of stickers that turned.
        """
        move = parse_move(token)
        return sum(1 for s in self.stickers if s.apply(move))

    def apply_moves(self, sequence: str) -> None:
        """
        Apply whitespace-separated tokens strictly left to right.

        A bad token aborts the rest of the sequence; moves already applied
        stay applied.
        """
        for token in split_sequence(sequence):
            self.apply_move(token)

    # ---------------------------------------------------------------
    # Reading
    # ---------------------------------------------------------------

    def positions(self) -> List[Position]:
        return [s.current_position for s in self.stickers]

    def read_face(self, face: str) -> str:
        """Return the 9 color letters of `face`, top row first, left to right."""
        view = self.clone()
        view.apply_moves(FACE_VIEWS[face])

        top = [s for s in view.stickers if get_face(s.current_position) == "U"]
        top.sort(key=lambda s: (s.current_position[2], s.current_position[0]))
        return "".join(s.original_face() for s in top)

    def face_blocks(self) -> "OrderedDict[str, str]":
        return OrderedDict((face, self.read_face(face)) for face in FACE_ORDER)

    def serialize(self) -> str:
        """54-letter face string: blocks U, R, F, D, L, B of 9 letters each."""
        return "".join(self.face_blocks().values())

    def is_solved(self) -> bool:
        return self.serialize() == SOLVED_STATE

    def verify(self) -> bool:
        return verify_conservation(self)

    # ---------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        blocks = " ".join(self.face_blocks().values())
        return f"<CubeState stickers={len(self.stickers)} solved={self.is_solved()}> {blocks}"


# -------------------------------------------------------------------
# Audited wrapper: a move with memory
# -------------------------------------------------------------------

def audited_move(
    cube: CubeState,
    token: str,
    log: Optional["MoveLog"] = None,
    note: str = "",
) -> Tuple[CubeState, "MoveLog"]:
    """
    Apply a move in place and record it in a MoveLog (created if missing).
    Returns (cube, log). Invalid tokens raise before anything is recorded.

    Example:
        cube, log = audited_move(cube, "R", log)
    """
    from rubik.audit import audit_move

    turned = cube.apply_move(token)
    log = audit_move(cube, token, turned, log=log, note=note)
    return cube, log


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    cube = CubeState.solved()
    assert str(cube) == SOLVED_STATE, "Solved cube serialized incorrectly!"

    cube.apply_move("U")
    print(repr(cube))
    print("Invariants hold:", cube.verify())
    print("cube.py self-check passed ✓")
