"""
Rubik Core: rotation.py
-----------------------
Quarter-turn geometry for sticker positions.

A position is rotated about a cardinal axis with the right-hand rule,
computed in floating point with numpy, then quantized back onto the
integer lattice. Rounding removes the trigonometric drift (cos 90° is
not exactly zero in floating point).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np

from rubik.lattice import Position

Axis = Tuple[int, int, int]


# -------------------------------------------------------------------
# Rotation matrices
# -------------------------------------------------------------------

@lru_cache(maxsize=None)
def rotation_matrix(axis: Axis, degrees: float) -> np.ndarray:
    """
    Return the 3×3 matrix rotating by `degrees` about `axis` (right-hand rule).

    Built with Rodrigues' formula: R = cosθ·I + sinθ·[k]× + (1 − cosθ)·kkᵀ.
    The returned array is read-only because it is shared through the cache.
    """
    k = np.asarray(axis, dtype=float)
    k = k / np.linalg.norm(k)
    theta = np.radians(degrees)

    cross = np.array([
        [0.0, -k[2], k[1]],
        [k[2], 0.0, -k[0]],
        [-k[1], k[0], 0.0],
    ])
    matrix = (
        np.cos(theta) * np.eye(3)
        + np.sin(theta) * cross
        + (1.0 - np.cos(theta)) * np.outer(k, k)
    )
    matrix.setflags(write=False)
    return matrix


def quantize(vector: np.ndarray) -> Position:
    """Round each component to the nearest integer lattice value."""
    x, y, z = np.rint(vector).astype(int)
    return int(x), int(y), int(z)


def rotate_position(position: Position, axis: Axis, degrees: float) -> Position:
    """Rotate an integer position about `axis` and snap it back to the lattice."""
    rotated = rotation_matrix(axis, degrees) @ np.asarray(position, dtype=float)
    return quantize(rotated)


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    p = (3, 2, 0)
    q = p
    for _ in range(4):
        q = rotate_position(q, (0, 1, 0), -90)
    assert q == p, f"Four quarter turns should return {p}, got {q}"

    print("Raw -90° about +Y:", rotation_matrix((0, 1, 0), -90) @ np.asarray(p, dtype=float))
    print("Quantized:", rotate_position(p, (0, 1, 0), -90))
    print("rotation.py self-check passed ✓")
