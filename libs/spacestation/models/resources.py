"""Resource kinds — the tagged quantities traded between ships and the environment."""

import random
from enum import StrEnum

from pydantic import BaseModel

from spacestation.helpers.levels import cap_max, cap_min
from spacestation.helpers.rng import resolve_rng

# Smallest amount a randomized resource can carry
MIN_RANDOM_AMOUNT = 5


class InvalidRangeError(ValueError):
    """Raised when a random range is empty (low bound above high bound)."""


class ResourceType(StrEnum):
    """The three resources of the game."""

    CONSUMABLES = "consumables"  # food & water
    GAS = "gas"  # breathable air
    PROPELLANT = "propellant"  # rocket fuel


class ResourceKind(BaseModel):
    """A resource type together with the amount held.

    Amounts are not validated on assignment: they may leave [0, 100]
    until `adjust_levels()` (or one of its halves) runs.
    """

    kind: ResourceType
    amount: int = 0

    @classmethod
    def consumables(cls, amount: int) -> "ResourceKind":
        return cls(kind=ResourceType.CONSUMABLES, amount=amount)

    @classmethod
    def gas(cls, amount: int) -> "ResourceKind":
        return cls(kind=ResourceType.GAS, amount=amount)

    @classmethod
    def propellant(cls, amount: int) -> "ResourceKind":
        return cls(kind=ResourceType.PROPELLANT, amount=amount)

    @classmethod
    def randomize(
        cls, max_amount: int, rng: random.Random | None = None
    ) -> "ResourceKind":
        """Pick a resource type uniformly and an amount in [5, max_amount].

        Raises:
            InvalidRangeError: If max_amount is below 5.
        """
        if max_amount < MIN_RANDOM_AMOUNT:
            raise InvalidRangeError(
                f"max_amount must be >= {MIN_RANDOM_AMOUNT}, got {max_amount}"
            )
        rng = resolve_rng(rng)
        kind = rng.choice(list(ResourceType))
        return cls(kind=kind, amount=rng.randint(MIN_RANDOM_AMOUNT, max_amount))

    def matches(self, kind: ResourceType) -> bool:
        return self.kind == kind

    def adjust_max_level(self) -> None:
        self.amount = cap_max(self.amount)

    def adjust_min_level(self) -> None:
        self.amount = cap_min(self.amount)

    def adjust_levels(self) -> None:
        """Clamp the amount into [0, 100]."""
        self.adjust_max_level()
        self.adjust_min_level()
