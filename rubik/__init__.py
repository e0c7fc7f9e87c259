"""
Rubik Core: Initialization
==========================

Defines the canonical import interface for the cube engine.

This Core implements:
    - Lattice: 54 stickers at integer positions on a 3×3×3 cube
    - Moves: notation table (16 base letters × 3 suffixes)
    - Stickers: conditional quarter-turn rotation with quantization
    - Cube State: move application and the 54-letter face string
    - Conservation: every turn permutes the solved positions
    - Audit: every move applied through a session is recorded
"""

from __future__ import annotations

# -------------------------------------------------------------------
# Core imports
# -------------------------------------------------------------------

from .lattice import (
    Position,
    get_face,
    solved_positions,
    is_on_lattice,
)

from .moves import (
    InvalidNotation,
    Membership,
    Move,
    MOVE_TABLE,
    parse_move,
    inverse_token,
    invert_sequence,
)

from .sticker import Sticker

from .cube import (
    CubeState,
    FACE_ORDER,
    SOLVED_STATE,
    audited_move,
)

from .conservation import (
    verify_face_membership,
    verify_permutation,
    verify_conservation,
)

from .audit import (
    MoveEntry,
    MoveLog,
)

# -------------------------------------------------------------------
# Module Metadata
# -------------------------------------------------------------------

__version__ = "0.1.0"
__summary__ = "3×3×3 cube state, move notation and face serialization."

__all__ = [
    # lattice
    "Position",
    "get_face",
    "solved_positions",
    "is_on_lattice",

    # moves
    "InvalidNotation",
    "Membership",
    "Move",
    "MOVE_TABLE",
    "parse_move",
    "inverse_token",
    "invert_sequence",

    # state
    "Sticker",
    "CubeState",
    "FACE_ORDER",
    "SOLVED_STATE",
    "audited_move",

    # conservation
    "verify_face_membership",
    "verify_permutation",
    "verify_conservation",

    # auditing
    "MoveEntry",
    "MoveLog",
]


# -------------------------------------------------------------------
# Self-check (optional quick audit)
# -------------------------------------------------------------------

if __name__ == "__main__":
    cube = CubeState.solved()
    print(f"Rubik Core v{__version__} initialized ✓")
    print("State:", cube)
    print("Conserved:", verify_conservation(cube))
