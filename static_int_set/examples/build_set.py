# ==================================================
# examples/build_set.py
# ==================================================
import argparse, logging

import numpy as np

from static_int_set import FixedSet
from static_int_set.const import INT32_MAX, INT32_MIN, seed_from_env


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("count", type=int, help="number of random int32 keys")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--probe", type=int, nargs="*", default=[])
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    seed = seed_from_env() if args.seed is None else args.seed
    rng = np.random.default_rng(seed)
    offsets = rng.choice(INT32_MAX - INT32_MIN + 1, size=args.count, replace=False)
    keys = INT32_MIN + offsets.astype(np.int64)

    fs = FixedSet(keys.tolist(), seed=seed)
    print(f"{len(fs)} keys, {fs.bucket_count} buckets, additional memory {fs.additional_memory}")
    for v in args.probe:
        print(f"{v}: {'present' if v in fs else 'absent'}")
    return fs


if __name__ == "__main__":
    main()
