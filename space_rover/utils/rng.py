"""Seedable RNG wrapper for deterministic map generation."""

import random


class GameRNG:
    """Wrapper around random.Random so a seed always rebuilds the same map.

    All randomness in the game should go through this class.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self.rng = random.Random(seed)

    def tile(self, columns: int, rows: int) -> tuple[int, int]:
        """Pick a random (column, row) tile on a columns x rows board."""
        return self.rng.randrange(columns), self.rng.randrange(rows)

    def sample(self, seq, k: int) -> list:
        """Pick k distinct elements from seq."""
        return self.rng.sample(list(seq), k)
