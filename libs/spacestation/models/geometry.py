"""Bounded 2D geometry — play area, positions, quadrants and distances."""

import logging
import math
import random
from enum import StrEnum

from pydantic import BaseModel

from spacestation.helpers.rng import resolve_rng, sample_range
from spacestation.models.resources import InvalidRangeError
from spacestation.models.warnings import GameWarning

logger = logging.getLogger(__name__)


class Quadrant(StrEnum):
    """Sign-based region of the plane. Points on an axis fall in FOURTH."""

    FIRST = "first"  # (x, y)
    SECOND = "second"  # (-x, y)
    THIRD = "third"  # (-x, -y)
    FOURTH = "fourth"  # (x, -y)


class WorldSize(BaseModel):
    """The (low, high) bounds of the play area, shared by both axes."""

    low: int
    high: int

    model_config = {"frozen": True}

    @classmethod
    def new(cls, size: int) -> "WorldSize":
        """Square play area spanning [-size, size] on both axes."""
        if size < 0:
            raise InvalidRangeError(f"World size must be >= 0, got {size}")
        return cls(low=-size, high=size)

    @classmethod
    def randomize(
        cls, low: int, high: int, rng: random.Random | None = None
    ) -> "WorldSize":
        """Draw two values from [low, high) and use them as ordered bounds.

        Raises:
            InvalidRangeError: If low > high.
        """
        if low > high:
            raise InvalidRangeError(f"Invalid world size range: {low}..{high}")
        rng = resolve_rng(rng)
        first = sample_range(rng, low, high)
        second = sample_range(rng, low, high)
        lo, hi = sorted((first, second))
        return cls(low=lo, high=hi)

    def get_values(self) -> tuple[int, int]:
        return self.low, self.high


class Coordinates(BaseModel):
    """A position tied to the play area it was generated against.

    Construction does not validate the position; use `within_bounds()`.
    """

    x: int
    y: int
    world_size: WorldSize

    model_config = {"frozen": True}

    @classmethod
    def randomize(
        cls, world_size: WorldSize, rng: random.Random | None = None
    ) -> "Coordinates":
        """Random position with both axes in [low, high)."""
        rng = resolve_rng(rng)
        low, high = world_size.get_values()
        return cls(
            x=sample_range(rng, low, high),
            y=sample_range(rng, low, high),
            world_size=world_size,
        )

    def get_values(self) -> tuple[int, int]:
        return self.x, self.y

    def within_bounds(self) -> bool:
        """Check both axes against the play area. Logs each failing axis."""
        is_valid = True
        low, high = self.world_size.get_values()
        for axis, value in (("x", self.x), ("y", self.y)):
            if value < low or value > high:
                is_valid = False
                logger.warning("%s value is out of bounds: %d", axis, value)
        return is_valid

    def check_bounds(self) -> GameWarning:
        return GameWarning.NOMINAL if self.within_bounds() else GameWarning.OUT_OF_BOUNDS

    def quadrant(self) -> Quadrant:
        return quadrant(self)

    def distance_to(self, other: "Coordinates") -> int:
        return distance(self, other)


def quadrant(point: Coordinates) -> Quadrant:
    """Classify a point by the signs of its coordinates.

    Anything not strictly in the first three quadrants, including
    points with a zero coordinate, is FOURTH.
    """
    if point.x > 0 and point.y > 0:
        return Quadrant.FIRST
    if point.x < 0 and point.y > 0:
        return Quadrant.SECOND
    if point.x < 0 and point.y < 0:
        return Quadrant.THIRD
    return Quadrant.FOURTH


def distance(a: Coordinates, b: Coordinates) -> int:
    """Euclidean distance between two points, floored to an integer."""
    side_a = b.x - a.x
    side_b = b.y - a.y
    return math.floor(math.sqrt(float(side_a**2 + side_b**2)))
