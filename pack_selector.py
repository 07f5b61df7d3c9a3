"""Chooses which pack plays after the current one."""
from __future__ import annotations

import random


class PackSelector:
    def __init__(self, count: int, random_order: bool = True, rng=random):
        self.count = count
        self.random_order = random_order
        self._rng = rng

    def pick_next_index(self, exclude: int) -> int:
        if not self.random_order:
            return (exclude + 1) % self.count
        if self.count <= 1:
            return 0
        # uniform redraw until we land on a different pack
        while True:
            idx = self._rng.randrange(self.count)
            if idx != exclude:
                return idx
