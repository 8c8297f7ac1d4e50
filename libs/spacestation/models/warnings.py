"""GameWarning — the result taxonomy shared by every core operation."""

from enum import StrEnum


class GameWarning(StrEnum):
    """Outcome of a transfer, storage, move or mining operation.

    NOMINAL is the only successful outcome; everything else is a
    recoverable condition for the caller to decide on.
    """

    SHIP_STORAGE_FULL = "ship_storage_full"
    OUT_OF_BOUNDS = "out_of_bounds"
    UNREACHABLE = "unreachable"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    NOMINAL = "nominal"

    @property
    def ok(self) -> bool:
        return self is GameWarning.NOMINAL
