"""
Batch invariant check.

Scrambles fresh cubes, verifies the lattice invariants, then applies the
inverted scramble and expects the solved cube back.
"""

from __future__ import annotations
import random
from typing import Dict, Optional

from tqdm import tqdm

from rubik.conservation import verify_face_membership, verify_permutation
from rubik.cube import CubeState
from rubik.moves import invert_sequence
from console.config import CONFIG
from console.utils import random_scramble


def check_scramble(scramble: str) -> Dict[str, bool]:
    """Check one scramble; returns the outcome of each test."""
    cube = CubeState.solved()
    cube.apply_moves(scramble)
    result = {
        "face_membership": verify_face_membership(cube),
        "permutation": verify_permutation(cube),
    }
    cube.apply_moves(invert_sequence(scramble))
    result["restored"] = cube.is_solved()
    return result


def run_invariant_check(
    trials: Optional[int] = None,
    length: Optional[int] = None,
    seed: Optional[int] = None,
    progress: Optional[bool] = None,
) -> dict:
    """Run `trials` random scrambles; missing arguments come from CONFIG."""
    trials = CONFIG["check_trials"] if trials is None else trials
    length = CONFIG["scramble_length"] if length is None else length
    seed = CONFIG["seed"] if seed is None else seed
    progress = CONFIG["progress"] if progress is None else progress

    rng = random.Random(seed)
    failures = []
    for i in tqdm(range(trials), desc="Checking scrambles", disable=not progress):
        scramble = random_scramble(length, rng)
        outcome = check_scramble(scramble)
        if not all(outcome.values()):
            failures.append({"trial": i, "scramble": scramble, **outcome})

    return {
        "trials": trials,
        "length": length,
        "failures": failures,
        "passed": not failures,
    }
