# ==================================================
# static_int_set/hashing.py
# ==================================================
from dataclasses import dataclass

import numpy as np

from .const import HASH_PRIME, PRIME


@dataclass(frozen=True)
class AffineHashFunction:
    """h(x) = ((a*x) mod modulus + b) mod modulus.

    The default instance (a=0, b=0, modulus=1) maps everything to 0.
    """
    a: int = 0
    b: int = 0
    modulus: int = 1

    def __post_init__(self):
        if self.modulus < 1:
            raise ValueError("Modulus must be positive")
        if not (0 <= self.a < PRIME and 0 <= self.b < PRIME):
            raise ValueError("Parameters must lie in [0, PRIME)")

    def __call__(self, x: int) -> int:
        # python's % is already non-negative for a positive modulus
        return ((self.a * x) % self.modulus + self.b) % self.modulus

    def apply_many(self, keys: np.ndarray) -> np.ndarray:
        # |a*x| < 2**62 for 32-bit keys and modulus < 2**33, so int64 never wraps
        keys = np.asarray(keys, dtype=np.int64)
        return ((self.a * keys) % self.modulus + self.b) % self.modulus

    # ----------------------------------------------------------------------
    @classmethod
    def generate_random(cls, rng: np.random.Generator,
                        modulus: int = HASH_PRIME) -> "AffineHashFunction":
        a = int(rng.integers(0, PRIME))
        b = int(rng.integers(0, PRIME))
        return cls(a, b, modulus)
