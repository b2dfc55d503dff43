from .fixed_set import FixedSet, build, validate_keys
from .hashing import AffineHashFunction
from .inner import InnerPerfectTable

__all__ = ["FixedSet", "build", "validate_keys", "AffineHashFunction", "InnerPerfectTable"]
