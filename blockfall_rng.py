"""Uniform piece picker"""
import random
from typing import Optional

from blockfall_shapes import PLAYABLE, BlockKind


class PieceRandom:
    """Draws each new piece uniformly from the seven playable kinds.

    Pass an int seed for a reproducible sequence.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_kind(self) -> BlockKind:
        return self._rng.choice(PLAYABLE)
