"""Level cap policy — every resource counter lives in [MIN_LEVEL, MAX_LEVEL]."""

MIN_LEVEL = 0
MAX_LEVEL = 100


def cap_max(amount: int) -> int:
    """Clamp an amount to at most MAX_LEVEL."""
    return min(amount, MAX_LEVEL)


def cap_min(amount: int) -> int:
    """Clamp an amount to at least MIN_LEVEL."""
    return max(amount, MIN_LEVEL)


def cap_level(amount: int) -> int:
    """Clamp an amount into [MIN_LEVEL, MAX_LEVEL]."""
    return cap_min(cap_max(amount))


def is_saturated(amount: int) -> bool:
    return amount >= MAX_LEVEL
