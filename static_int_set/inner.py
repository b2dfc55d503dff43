# ==================================================
# static_int_set/inner.py
# ==================================================
import logging

import numpy as np

from .hashing import AffineHashFunction
from .probe import has_collisions


class InnerPerfectTable:
    """Collision-free table of k**2 slots for the k keys of one bucket."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        self._hash_function = AffineHashFunction()
        self.attempts = 0
        # slot i holds _keys[i] only where _occupied[i] is set
        self._keys = np.zeros(0, dtype=np.int64)
        self._occupied = np.zeros(0, dtype=bool)

    # ------------------------------------------------------------------
    def initialize(self, elements, rng: np.random.Generator):
        keys = np.asarray(elements, dtype=np.int64)
        size = len(keys) * len(keys)
        self._hash_function = AffineHashFunction()
        self.attempts = 0
        self._keys = np.zeros(size, dtype=np.int64)
        self._occupied = np.zeros(size, dtype=bool)
        if size == 0:
            return self

        while True:
            self.attempts += 1
            candidate = AffineHashFunction.generate_random(rng)
            if not has_collisions(keys, candidate, size):
                break
        self._hash_function = candidate
        if self.attempts > 1:
            self.logger.debug(f"{len(keys)} keys placed after {self.attempts} attempts")

        slots = candidate.apply_many(keys) % size
        self._keys[slots] = keys
        self._occupied[slots] = True
        self._keys.flags.writeable = False
        self._occupied.flags.writeable = False
        return self

    # ------------------------------------------------------------------
    @property
    def hash_function(self) -> AffineHashFunction:
        return self._hash_function

    @property
    def size(self) -> int:
        return len(self._occupied)

    def slots(self) -> tuple:
        """Slot contents, ``None`` marking an empty slot."""
        return tuple(int(k) if used else None
                     for k, used in zip(self._keys, self._occupied))

    def contains(self, value: int) -> bool:
        if self.size == 0:
            return False
        index = self.hash_function(value) % self.size
        return bool(self._occupied[index]) and int(self._keys[index]) == value

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __repr__(self):
        return f"<{self.__class__.__name__} size={self.size} {self.hash_function}>"
