"""World — the play area, its settings, and the environment resources it owns.

The world is the sole owner of every EnvResource. Ships never hold on to
resources; they are handed one by id through the world for each operation.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import BaseModel, Field

from spacestation.environment import EnvResource, randomize_world_resources
from spacestation.helpers.rng import resolve_rng
from spacestation.models.geometry import Coordinates, WorldSize
from spacestation.models.warnings import GameWarning

logger = logging.getLogger(__name__)

DEFAULT_PLAY_AREA = 100
DEFAULT_SPAWN_AMOUNT = 100
DEFAULT_RESOURCE_MAX_CAP = 100
DEFAULT_CONSUMPTION_RATE = 1
DEFAULT_GAME_TICK = 1
DEFAULT_RECHARGE_RATE = 1
DEFAULT_RECHARGE_INTERVAL = 200  # milliseconds between recharge ticks

_ENV_PREFIX = "SPACESTATION_"


class WorldConfig(BaseModel):
    """Settings a world is built from."""

    play_area: int = Field(ge=0, default=DEFAULT_PLAY_AREA)
    spawn_amount: int = Field(ge=0, default=DEFAULT_SPAWN_AMOUNT)
    resource_max_cap: int = Field(ge=5, default=DEFAULT_RESOURCE_MAX_CAP)
    consumption_rate: int = Field(ge=0, default=DEFAULT_CONSUMPTION_RATE)
    game_tick: int = Field(gt=0, le=255, default=DEFAULT_GAME_TICK)
    recharge_rate: int = Field(gt=0, default=DEFAULT_RECHARGE_RATE)
    recharge_interval: int = Field(ge=0, default=DEFAULT_RECHARGE_INTERVAL)

    @classmethod
    def from_env(cls) -> "WorldConfig":
        """Build a config from SPACESTATION_* environment variables.

        `SPACESTATION_PLAY_AREA=50` overrides `play_area`, and so on.
        Unset variables keep their defaults.
        """
        overrides = {
            name: os.environ[_ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if _ENV_PREFIX + name.upper() in os.environ
        }
        return cls.model_validate(overrides)


class Miner(Protocol):
    """Anything that can mine an environment resource."""

    def mine(self, resource: EnvResource) -> GameWarning: ...


@dataclass
class World:
    """The play area and its population of environment resources."""

    play_area: WorldSize
    consumption_rate: int = DEFAULT_CONSUMPTION_RATE
    recharge_rate: int = DEFAULT_RECHARGE_RATE
    recharge_interval: int = DEFAULT_RECHARGE_INTERVAL
    game_tick: int = DEFAULT_GAME_TICK
    _resources: dict[int, EnvResource] = field(default_factory=dict)

    @classmethod
    def new(
        cls,
        play_area: int,
        spawn_amount: int,
        resource_max_cap: int,
        consumption_rate: int = DEFAULT_CONSUMPTION_RATE,
        game_tick: int = DEFAULT_GAME_TICK,
        recharge_rate: int = DEFAULT_RECHARGE_RATE,
        recharge_interval: int = DEFAULT_RECHARGE_INTERVAL,
        rng: random.Random | None = None,
    ) -> "World":
        """Create a square world of [-play_area, play_area] and spawn its resources."""
        size = WorldSize.new(play_area)
        world = cls(
            play_area=size,
            consumption_rate=consumption_rate,
            recharge_rate=recharge_rate,
            recharge_interval=recharge_interval,
            game_tick=game_tick,
        )
        world.populate(randomize_world_resources(spawn_amount, resource_max_cap, size, rng))
        return world

    @classmethod
    def from_config(
        cls, config: WorldConfig, rng: random.Random | None = None
    ) -> "World":
        return cls.new(
            play_area=config.play_area,
            spawn_amount=config.spawn_amount,
            resource_max_cap=config.resource_max_cap,
            consumption_rate=config.consumption_rate,
            game_tick=config.game_tick,
            recharge_rate=config.recharge_rate,
            recharge_interval=config.recharge_interval,
            rng=rng,
        )

    @classmethod
    def randomize(cls, rng: random.Random | None = None) -> "World":
        """Create a world with a random play area, tick and recharge interval."""
        rng = resolve_rng(rng)
        size = WorldSize.randomize(100, 200, rng)
        world = cls(
            play_area=size,
            consumption_rate=1,
            recharge_rate=1,
            recharge_interval=rng.randrange(100, 500),
            game_tick=rng.randrange(1, 5),
        )
        world.populate(randomize_world_resources(100, 100, size, rng))
        return world

    # --- Resource arena ---

    def populate(self, resources: list[EnvResource]) -> None:
        """Add resources to the world, keyed by id. Existing ids are replaced."""
        for resource in resources:
            self._resources[resource.id] = resource
        logger.info(
            "World holds %d resources in %s", len(self._resources), self.play_area
        )

    @property
    def resources(self) -> list[EnvResource]:
        """All resources, ordered by id."""
        return [self._resources[rid] for rid in sorted(self._resources)]

    def resource_count(self) -> int:
        return len(self._resources)

    def get_resource(self, resource_id: int) -> EnvResource | None:
        return self._resources.get(resource_id)

    def remove_resource(self, resource_id: int) -> EnvResource | None:
        """Remove and return a resource from the world."""
        return self._resources.pop(resource_id, None)

    def remove_depleted(self) -> list[EnvResource]:
        """Remove every resource whose amount has run out. Returns the removed ones."""
        depleted = [r for r in self._resources.values() if r.is_depleted()]
        for resource in depleted:
            del self._resources[resource.id]
        if depleted:
            logger.debug("Removed %d depleted resources", len(depleted))
        return depleted

    def resources_within(self, position: Coordinates, radius: int) -> list[EnvResource]:
        """Resources at most `radius` away from a position, nearest first."""
        nearby = [
            r for r in self._resources.values()
            if r.coordinates.distance_to(position) <= radius
        ]
        return sorted(nearby, key=lambda r: (r.coordinates.distance_to(position), r.id))

    def mine(self, resource_id: int, miner: Miner) -> GameWarning:
        """Let `miner` mine the resource with the given id.

        An unknown id is reported as RESOURCE_EXHAUSTED: removed resources
        are depleted ones.
        """
        resource = self._resources.get(resource_id)
        if resource is None:
            logger.warning("Resource %d not found in world", resource_id)
            return GameWarning.RESOURCE_EXHAUSTED
        return miner.mine(resource)
