# ==================================================
# static_int_set/fixed_set.py
# ==================================================
import logging
from typing import Iterable, Optional

import numpy as np

from .const import INT32_MAX, INT32_MIN, MEMORY_FACTOR, seed_from_env
from .hashing import AffineHashFunction
from .inner import InnerPerfectTable
from .probe import count_per_bucket, memory_cost


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def validate_keys(elements: Iterable[int]) -> np.ndarray:
    """Check a key collection and return it as an int64 array, order kept.

    Raises TypeError for non-integer keys and ValueError for keys outside the
    int32 range or duplicates.
    """
    keys = list(elements)
    for key in keys:
        if not _is_int(key):
            raise TypeError(f"Keys must be integers, got {type(key).__name__}")
        if not INT32_MIN <= key <= INT32_MAX:
            raise ValueError(f"Key out of int32 range: {key}")
    arr = np.array(keys, dtype=np.int64)

    uniq, counts = np.unique(arr, return_counts=True)
    if (counts > 1).any():
        raise ValueError(f"Duplicate key {int(uniq[counts > 1][0])}")
    return arr


class FixedSet:
    """Immutable set of int32 keys with two-level perfect hashing.

    Lookups cost two hash evaluations and one comparison whatever the
    input. Building draws from a single numpy Generator: the outer
    function first, then one inner table per bucket in index order, so the
    same seed and key order always give the same tables.
    """

    def __init__(self, elements: Optional[Iterable[int]] = None,
                 seed: Optional[int] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        # used by initialize() whenever it is not handed a seed of its own
        self.seed = seed
        self._hash_function = AffineHashFunction()
        self._additional_memory = 0
        self._bucket_sizes = np.zeros(0, dtype=np.int64)
        self._bucket_sizes.flags.writeable = False
        self._hash_tables: tuple = ()
        self._size = 0
        if elements is not None:
            self.initialize(elements)

    # ------------------------------------------------------------------
    def initialize(self, elements: Iterable[int], seed: Optional[int] = None,
                   rng: Optional[np.random.Generator] = None) -> "FixedSet":
        """(Re)build from scratch; any previous contents are discarded."""
        keys = validate_keys(elements)
        if rng is None:
            if seed is None:
                seed = seed_from_env() if self.seed is None else self.seed
            rng = np.random.default_rng(seed)

        n = len(keys)
        self.logger.info(f"building set of {n} keys")
        if n == 0:
            hash_func, bucket_sizes, tables = AffineHashFunction(), np.zeros(0, dtype=np.int64), []
        else:
            hash_func, bucket_sizes = self._find_hash_function(keys, rng)
            tables = [InnerPerfectTable().initialize(bucket, rng)
                      for bucket in self._build_buckets(keys, hash_func, bucket_sizes)]
        bucket_sizes.flags.writeable = False

        # swap in only once every table is ready
        self._hash_function = hash_func
        self._bucket_sizes = bucket_sizes
        self._additional_memory = memory_cost(bucket_sizes)
        self._hash_tables = tuple(tables)
        self._size = n
        self.logger.info(f"outer {hash_func}, additional memory {self._additional_memory}")
        return self

    def _find_hash_function(self, keys: np.ndarray, rng: np.random.Generator):
        n = len(keys)
        limit = MEMORY_FACTOR * n
        rounds = 0
        while True:
            rounds += 1
            candidate = AffineHashFunction.generate_random(rng)
            bucket_sizes = count_per_bucket(keys, candidate, n)
            cost = memory_cost(bucket_sizes)
            if cost <= limit:
                break
            self.logger.debug(f"round {rounds}: memory {cost} > {limit}, resampling")
        self.logger.debug(f"outer function accepted after {rounds} rounds")
        return candidate, bucket_sizes

    @staticmethod
    def _build_buckets(keys: np.ndarray, hash_func: AffineHashFunction,
                       bucket_sizes: np.ndarray) -> list[np.ndarray]:
        index = hash_func.apply_many(keys) % len(bucket_sizes)
        # stable sort keeps encounter order inside a bucket
        order = np.argsort(index, kind="stable")
        return np.split(keys[order], np.cumsum(bucket_sizes)[:-1])

    # ------------------------------------------------------------------
    @property
    def tables(self) -> tuple:
        return self._hash_tables

    @property
    def hash_function(self) -> AffineHashFunction:
        return self._hash_function

    @property
    def bucket_sizes(self) -> np.ndarray:
        """Per-bucket key counts (read-only array)."""
        return self._bucket_sizes

    @property
    def additional_memory(self) -> int:
        """Total inner slots, sum(size**2); at most MEMORY_FACTOR * len(self)."""
        return self._additional_memory

    @property
    def bucket_count(self) -> int:
        return len(self._hash_tables)

    def contains(self, value) -> bool:
        if not self._hash_tables:
            return False
        if not _is_int(value) or not INT32_MIN <= value <= INT32_MAX:
            return False
        value = int(value)
        index = self.hash_function(value) % len(self._hash_tables)
        return self._hash_tables[index].contains(value)

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self._size

    def __repr__(self):
        return f"<{self.__class__.__name__} keys={self._size} memory={self.additional_memory}>"


def build(keys: Iterable[int], seed: Optional[int] = None) -> FixedSet:
    return FixedSet(keys, seed)
