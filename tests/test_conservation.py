import pytest

from rubik.conservation import (
    off_lattice,
    verify_conservation,
    verify_face_membership,
    verify_permutation,
)
from rubik.cube import CubeState
from rubik.sticker import Sticker


def test_solved_cube_is_conserved():
    cube = CubeState.solved()
    assert verify_face_membership(cube)
    assert verify_permutation(cube)
    assert verify_conservation(cube)
    assert off_lattice(cube) == []


def test_scrambled_cube_is_conserved():
    cube = CubeState.solved()
    cube.apply_moves("R U2 F' l d' M E2 S x y' z2 B D L'")
    assert cube.verify()


def test_duplicate_position_breaks_permutation():
    cube = CubeState.solved()
    cube.stickers[0] = Sticker(cube.stickers[1].current_position)
    assert verify_face_membership(cube)
    assert not verify_permutation(cube)


def test_corner_position_breaks_face_membership():
    cube = CubeState.solved()
    cube.stickers[0] = Sticker((3, 3, 0))
    assert not verify_face_membership(cube)
    assert len(off_lattice(cube)) == 1


def test_broken_cube_warns_after_move():
    cube = CubeState.solved()
    cube.stickers[0] = Sticker((3, 3, 0))
    with pytest.warns(RuntimeWarning, match="Lattice invariant"):
        cube.apply_move("y")
