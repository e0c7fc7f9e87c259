# console/utils.py
"""
General utilities: seeding and scramble generation.
"""
import random
from typing import Optional

import numpy as np

from rubik.moves import OUTER_TOKENS


# --- Determinism ---
def set_seed(seed: int):
    """Sets random seeds for reproducibility."""
    random.seed(seed)
    np.random.seed(seed)


# --- Scrambles ---
def random_scramble(length: int, rng: Optional[random.Random] = None) -> str:
    """
    Random sequence of outer-face tokens.
    Two consecutive tokens never turn the same face.
    """
    rng = rng or random
    tokens = []
    last_face = None
    while len(tokens) < length:
        token = rng.choice(OUTER_TOKENS)
        if token[0] == last_face:
            continue
        tokens.append(token)
        last_face = token[0]
    return " ".join(tokens)
