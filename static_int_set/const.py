# ==================================================
# static_int_set/const.py
# ==================================================
import os

PRIME = 2_147_483_647     # 2**31 - 1, sampling domain for a and b
HASH_PRIME = 4_294_967_311  # smallest prime above 2**32, sampled functions apply under it
MEMORY_FACTOR = 4         # outer function accepted when sum(count**2) <= 4n
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
DEFAULT_SEED = 333

SEED_ENV = "STATIC_INT_SET_SEED"


def seed_from_env(default: int = DEFAULT_SEED) -> int:
    """Seed used when a build is not given one explicitly."""
    val = os.getenv(SEED_ENV)
    if val is None or val.strip() == "":
        return default
    try:
        return int(val)
    except ValueError:
        return default
