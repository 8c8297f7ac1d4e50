from spacestation.helpers.levels import (
    MAX_LEVEL,
    MIN_LEVEL,
    cap_level,
    cap_max,
    cap_min,
    is_saturated,
)
from spacestation.helpers.rng import resolve_rng, sample_range

__all__ = [
    "MAX_LEVEL",
    "MIN_LEVEL",
    "cap_level",
    "cap_max",
    "cap_min",
    "is_saturated",
    "resolve_rng",
    "sample_range",
]
