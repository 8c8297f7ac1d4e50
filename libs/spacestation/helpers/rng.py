"""Random source used by every randomize-style constructor.

Callers may pass their own `random.Random` (seeded in tests); otherwise a
process-global, unseeded generator is used.
"""

import random

_default_rng = random.Random()


def resolve_rng(rng: random.Random | None = None) -> random.Random:
    """Return the given generator, or the shared default one."""
    return rng if rng is not None else _default_rng


def sample_range(rng: random.Random, low: int, high: int) -> int:
    """Sample an integer in the half-open range [low, high).

    A degenerate range (low == high) yields low.
    """
    if high <= low:
        return low
    return rng.randrange(low, high)
