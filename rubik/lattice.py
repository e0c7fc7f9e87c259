"""
Rubik Core: lattice.py
----------------------
Sticker coordinates on the 3×3×3 lattice.

The cube is centered at the origin. Each sticker sits on one of the six
outer layers (a component equal to ±3) and its two remaining components
are drawn from the middle coordinates {-2, 0, 2}:

    x → right   (R at +3, L at -3)
    y → up      (U at +3, D at -3)
    z → viewer  (F at +3, B at -3)

Positions are integer 3-tuples; floating point only appears inside the
rotation step (see rotation.py).
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Tuple

# -------------------------------------------------------------------
# Canonical Constants
# -------------------------------------------------------------------

FACE_LAYER = 3
MIDDLE_COORDS = (-2, 0, 2)
LATTICE_VALUES = frozenset((-FACE_LAYER, *MIDDLE_COORDS, FACE_LAYER))

STICKERS_PER_FACE = len(MIDDLE_COORDS) ** 2
TOTAL_STICKERS = 6 * STICKERS_PER_FACE

UNKNOWN_FACE = "X"

Position = Tuple[int, int, int]

# Priority order X, then Y, then Z: (axis index, label at +3, label at -3)
_FACE_LABELS = (
    (0, "R", "L"),
    (1, "U", "D"),
    (2, "F", "B"),
)


# -------------------------------------------------------------------
# Face lookup
# -------------------------------------------------------------------

def get_face(position: Position) -> str:
    """
    Return the face label of an outer-layer position.

    Components are inspected in the fixed order X, Y, Z; the first one equal
    to ±3 decides the label. Positions off every face yield UNKNOWN_FACE.
    """
    for index, positive, negative in _FACE_LABELS:
        value = position[index]
        if value == FACE_LAYER:
            return positive
        if value == -FACE_LAYER:
            return negative
    return UNKNOWN_FACE


def face_components(position: Position) -> int:
    """Return how many components of a position lie on an outer layer."""
    return sum(1 for value in position if abs(value) == FACE_LAYER)


def is_on_lattice(position: Position) -> bool:
    """True when every component is a lattice value and exactly one is a face layer."""
    return (
        len(position) == 3
        and all(value in LATTICE_VALUES for value in position)
        and face_components(position) == 1
    )


# -------------------------------------------------------------------
# Canonical construction
# -------------------------------------------------------------------

def solved_positions() -> Iterator[Position]:
    """
    Yield the 54 sticker positions of the solved cube.

    For both face values on each axis, every combination of the two
    remaining coordinates from MIDDLE_COORDS produces one sticker.
    """
    for face in (FACE_LAYER, -FACE_LAYER):
        for coord1 in MIDDLE_COORDS:
            for coord2 in MIDDLE_COORDS:
                yield (face, coord1, coord2)
                yield (coord1, face, coord2)
                yield (coord1, coord2, face)


SOLVED_POSITIONS = Counter(solved_positions())


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    positions = list(solved_positions())
    assert len(positions) == TOTAL_STICKERS, f"Expected {TOTAL_STICKERS}, got {len(positions)}"
    assert len(set(positions)) == TOTAL_STICKERS, "Duplicate sticker positions!"
    assert all(is_on_lattice(p) for p in positions), "Position off the lattice!"

    per_face = Counter(get_face(p) for p in positions)
    print("Stickers per face:", dict(per_face))
    print("lattice.py self-check passed ✓")
