import numpy as np
import pytest

from static_int_set.const import HASH_PRIME, INT32_MAX, INT32_MIN, PRIME
from static_int_set.hashing import AffineHashFunction


def test_default_maps_everything_to_zero():
    h = AffineHashFunction()
    assert (h.a, h.b, h.modulus) == (0, 0, 1)
    assert h(12345) == 0
    assert h(-7) == 0


def test_explicit_parameters():
    h = AffineHashFunction(3, 5, 7)
    assert h(10) == 0      # (30 % 7 + 5) % 7
    assert h(-10) == 3     # (-30 % 7 + 5) % 7, remainder normalised to 5


@pytest.mark.parametrize("x", [INT32_MIN, -1, 0, 1, INT32_MAX, 2_000_000_000, -2_000_000_000])
def test_result_in_range(x):
    h = AffineHashFunction(PRIME - 1, PRIME - 1, 1009)
    assert 0 <= h(x) < 1009


def test_apply_many_matches_scalar():
    rng = np.random.default_rng(11)
    keys = [INT32_MIN, INT32_MIN + 1, -2_000_000_000, -3, 0, 7, 2_000_000_000, INT32_MAX]
    for _ in range(20):
        h = AffineHashFunction.generate_random(rng)
        assert h.apply_many(keys).tolist() == [h(k) for k in keys]


def test_generate_random_samples_over_prime():
    rng = np.random.default_rng(1)
    for _ in range(100):
        h = AffineHashFunction.generate_random(rng, 16)
        assert 0 <= h.a < PRIME
        assert 0 <= h.b < PRIME
        assert h.modulus == 16


def test_generate_random_is_reproducible():
    first = AffineHashFunction.generate_random(np.random.default_rng(42))
    second = AffineHashFunction.generate_random(np.random.default_rng(42))
    assert first == second


@pytest.mark.parametrize("args", [(0, 0, 0), (-1, 0, 5), (0, PRIME, 5)])
def test_invalid_parameters(args):
    with pytest.raises(ValueError):
        AffineHashFunction(*args)


def test_sampled_functions_apply_above_int32_span():
    rng = np.random.default_rng(5)
    for _ in range(50):
        h = AffineHashFunction.generate_random(rng)
        assert h.modulus == HASH_PRIME
        if h.a:
            # keys one PRIME apart stay distinct before table reduction
            assert h(0) != h(PRIME)
            assert h(INT32_MIN) != h(INT32_MIN + PRIME)


def test_apply_many_extremes_under_hash_prime():
    h = AffineHashFunction(PRIME - 1, PRIME - 1, HASH_PRIME)
    keys = [INT32_MIN, -1, 0, INT32_MAX]
    values = h.apply_many(keys).tolist()
    assert values == [h(k) for k in keys]
    assert all(0 <= v < HASH_PRIME for v in values)
