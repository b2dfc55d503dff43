# ==================================================
# static_int_set/probe.py
# ==================================================
"""Bucket occupancy helpers shared by the outer and the inner tables."""
import numpy as np

from .hashing import AffineHashFunction


def count_per_bucket(elements, hash_func: AffineHashFunction,
                     modulus: int) -> np.ndarray:
    """Number of elements landing in each of ``modulus`` buckets.

    The hash value is reduced modulo ``modulus`` before counting, so a
    function sampled over the prime can score any table size.
    """
    keys = np.asarray(elements, dtype=np.int64)
    if keys.size == 0:
        return np.zeros(modulus, dtype=np.int64)
    index = hash_func.apply_many(keys) % modulus
    return np.bincount(index, minlength=modulus)


def memory_cost(bucket_sizes) -> int:
    """sum(size**2): slots needed if bucket i got a size_i**2 inner table."""
    sizes = np.asarray(bucket_sizes, dtype=np.int64)
    return int(np.dot(sizes, sizes))


def has_collisions(elements, hash_func: AffineHashFunction,
                   modulus: int) -> bool:
    counts = count_per_bucket(elements, hash_func, modulus)
    return bool((counts > 1).any())
