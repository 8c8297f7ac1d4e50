"""Environment resources — pickups scattered through the play area."""

import logging
import random

from pydantic import BaseModel, Field

from spacestation.helpers.rng import resolve_rng
from spacestation.models.geometry import Coordinates, WorldSize
from spacestation.models.resources import ResourceKind, ResourceType
from spacestation.models.warnings import GameWarning
from spacestation.transfer import give_from

logger = logging.getLogger(__name__)

# Largest population size accepted (signed 32-bit)
MAX_SPAWN_AMOUNT = 2**31 - 1


class EnvResource(BaseModel):
    """A resource floating in the environment, waiting to be mined.

    Location and id are fixed at spawn; only `kind` changes, through
    `give_resources()`.
    """

    kind: ResourceKind
    coordinates: Coordinates = Field(frozen=True)
    id: int = Field(frozen=True)

    @classmethod
    def randomize(
        cls,
        max_amount: int,
        id_num: int,
        world_size: WorldSize,
        rng: random.Random | None = None,
    ) -> "EnvResource":
        """Spawn a resource with a random kind and position."""
        rng = resolve_rng(rng)
        return cls(
            kind=ResourceKind.randomize(max_amount, rng),
            coordinates=Coordinates.randomize(world_size, rng),
            id=id_num,
        )

    def get_kind(self) -> ResourceKind:
        return self.kind

    def get_coordinates(self) -> Coordinates:
        return self.coordinates

    def get_id(self) -> int:
        return self.id

    def is_depleted(self) -> bool:
        return self.kind.amount <= 0

    def give_resources(self, kind: ResourceType, amount: int) -> GameWarning:
        return give_from(self.kind, kind, amount)


def _spawn_count(amount: int) -> int | None:
    """Validate a requested population size, or None if it is unusable."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        return None
    if amount < 0 or amount > MAX_SPAWN_AMOUNT:
        return None
    return amount


def randomize_world_resources(
    amount: int,
    max_amount: int,
    world_size: WorldSize,
    rng: random.Random | None = None,
) -> list[EnvResource]:
    """Spawn the resource population for a world.

    Ids run over the inclusive range 0..=amount, so `amount + 1`
    resources are produced. An amount that does not fit a signed 32-bit
    integer is logged and yields no resources.
    """
    count = _spawn_count(amount)
    if count is None:
        logger.error(
            "Error converting world resource amount %r to a 32-bit integer; "
            "spawning no resources",
            amount,
        )
        return []

    rng = resolve_rng(rng)
    resources = [
        EnvResource.randomize(max_amount, num, world_size, rng)
        for num in range(count + 1)
    ]
    logger.debug("Spawned %d environment resources", len(resources))
    return resources
