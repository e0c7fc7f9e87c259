# Rubik Core: conservation.py
# -------------------------------------------------------------------
# Lattice invariants preserved by every quarter turn:
#   • each sticker lies on exactly one face (one component at ±3)
#   • the multiset of positions equals the solved multiset
# -------------------------------------------------------------------

from __future__ import annotations

import functools
import warnings
from collections import Counter

from rubik.lattice import SOLVED_POSITIONS, face_components, is_on_lattice


# -------------------------------------------------------------------
# Verification utilities
# -------------------------------------------------------------------

def verify_face_membership(cube) -> bool:
    """Check that every sticker has exactly one component at ±3."""
    return all(face_components(s.current_position) == 1 for s in cube.stickers)


def verify_permutation(cube) -> bool:
    """Check that current positions are a permutation of the solved positions."""
    return Counter(s.current_position for s in cube.stickers) == SOLVED_POSITIONS


def verify_conservation(cube) -> bool:
    """Both lattice invariants at once."""
    return verify_face_membership(cube) and verify_permutation(cube)


def off_lattice(cube) -> list:
    """Return the stickers whose current position left the lattice."""
    return [s for s in cube.stickers if not is_on_lattice(s.current_position)]


# -------------------------------------------------------------------
# Lattice safety decorator
# -------------------------------------------------------------------

def conserve_lattice(func):
    """Decorator verifying the lattice invariants after a cube mutation (non-fatal)."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        result = func(*args, **kwargs)
        cube = args[0]

        if not verify_conservation(cube):
            stray = off_lattice(cube)
            print(f"[Lattice Drift] {func.__name__}{args[1:]}: {len(stray)} stickers off the lattice")
            warnings.warn(
                f"⚠️ Lattice invariant broken in {func.__name__} (non-fatal).",
                RuntimeWarning,
            )

        return result

    return wrapper
