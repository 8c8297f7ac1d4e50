"""Spaceships and motherships — the actors of the resource economy.

Both keep their own resource levels in a Storage (three clamped counters)
and act as TransferResources sources for each other.
"""

import logging
import math
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from spacestation.environment import EnvResource
from spacestation.helpers.levels import MAX_LEVEL, is_saturated
from spacestation.helpers.rng import resolve_rng
from spacestation.models.geometry import Coordinates, WorldSize
from spacestation.models.resources import ResourceKind, ResourceType
from spacestation.models.status import (
    MotherShipDockStatus,
    MotherShipRechargeStatus,
    ShipStatus,
    SpaceShipDockStatus,
)
from spacestation.models.warnings import GameWarning
from spacestation.storage import Storage
from spacestation.transfer import TransferResources, receive_into
from spacestation.world import World

logger = logging.getLogger(__name__)

# Starting levels of a new spaceship are drawn from [50, 100)
SHIP_START_LEVELS = (50, 100)

# A resource can be mined from at most this distance
MINING_RANGE = 5

# Distance searched by a ping
PING_RADIUS = 25


def _center(world_size: WorldSize) -> Coordinates:
    low, high = world_size.get_values()
    mid = (low + high) // 2
    return Coordinates(x=mid, y=mid, world_size=world_size)


@dataclass
class MotherShip:
    """The home base: starts full, recharges and collects from spaceships."""

    name: str
    coordinates: Coordinates
    levels: Storage = field(default_factory=lambda: Storage.new(MAX_LEVEL))
    dock: MotherShipDockStatus = MotherShipDockStatus.EMPTY
    recharge: MotherShipRechargeStatus = MotherShipRechargeStatus.IDLE

    @classmethod
    def new(cls, name: str, world: World) -> "MotherShip":
        """A full mothership parked at the center of the play area."""
        return cls(name=name, coordinates=_center(world.play_area))

    def get_resource_amount(self, kind: ResourceType) -> int:
        return self.levels.get_resource_amount(kind)

    def give_resources(self, kind: ResourceType, amount: int) -> GameWarning:
        return self.levels.give_resources(kind, amount)

    def receive_resources(
        self, request: ResourceKind, source: TransferResources
    ) -> GameWarning:
        return receive_into(self.levels.counter(request.kind), request, source)

    def status(self) -> ShipStatus:
        x, y = self.coordinates.get_values()
        return ShipStatus(
            name=self.name,
            consumables=self.get_resource_amount(ResourceType.CONSUMABLES),
            gas=self.get_resource_amount(ResourceType.GAS),
            propellant=self.get_resource_amount(ResourceType.PROPELLANT),
            x=x,
            y=y,
            quadrant=self.coordinates.quadrant(),
            dock_status=self.dock,
        )


@dataclass
class SpaceShip:
    """A mobile unit that flies around, mines resources and stores them."""

    name: str
    coordinates: Coordinates
    levels: Storage
    storage: Storage = field(default_factory=Storage)
    dock_status: SpaceShipDockStatus = SpaceShipDockStatus.UNDOCKED

    @classmethod
    def new(
        cls, name: str, world: World, rng: random.Random | None = None
    ) -> "SpaceShip":
        """A ship with random levels at a random point of the world."""
        rng = resolve_rng(rng)
        levels = Storage()
        for kind in ResourceType:
            levels.counter(kind).amount = rng.randrange(*SHIP_START_LEVELS)
        levels.adjust_levels()
        return cls(
            name=name,
            coordinates=Coordinates.randomize(world.play_area, rng),
            levels=levels,
        )

    # --- Transfers ---

    def get_resource_amount(self, kind: ResourceType) -> int:
        return self.levels.get_resource_amount(kind)

    def give_resources(self, kind: ResourceType, amount: int) -> GameWarning:
        """Spend resources the ship currently has."""
        return self.levels.give_resources(kind, amount)

    def receive_resources(
        self, request: ResourceKind, source: TransferResources
    ) -> GameWarning:
        """Take resources from another ship (or any source) into the ship's levels."""
        return receive_into(self.levels.counter(request.kind), request, source)

    def receive_to_storage(self, resource: ResourceKind) -> GameWarning:
        return self.storage.receive_to_storage(resource)

    # --- Movement ---

    def to_location(self, destination: Coordinates, consumption_rate: int = 1) -> GameWarning:
        """Fly to a destination, burning propellant in proportion to the distance.

        Each move also uses `consumption_rate` of consumables and gas.
        The destination is checked against the ship's own play area,
        whatever play area it was built with.
        """
        destination = destination.model_copy(
            update={"world_size": self.coordinates.world_size}
        )
        if not destination.within_bounds():
            return GameWarning.OUT_OF_BOUNDS

        cost = self.coordinates.distance_to(destination) * consumption_rate
        if cost > self.get_resource_amount(ResourceType.PROPELLANT):
            logger.info(
                "%s cannot reach (%d, %d): needs %d propellant",
                self.name,
                destination.x,
                destination.y,
                cost,
            )
            return GameWarning.UNREACHABLE

        self.give_resources(ResourceType.PROPELLANT, cost)
        for kind in (ResourceType.CONSUMABLES, ResourceType.GAS):
            counter = self.levels.counter(kind)
            counter.amount -= consumption_rate
            counter.adjust_levels()

        self.coordinates = destination
        logger.info("%s moved to (%d, %d)", self.name, destination.x, destination.y)
        return GameWarning.NOMINAL

    def move_to(self, x: int, y: int, consumption_rate: int = 1) -> GameWarning:
        """Fly to (x, y) in the ship's current play area."""
        destination = Coordinates(x=x, y=y, world_size=self.coordinates.world_size)
        return self.to_location(destination, consumption_rate)

    def teleport(self, mothership: MotherShip) -> None:
        """Jump to the mothership. Uses no propellant."""
        self.coordinates = mothership.coordinates

    # --- Mining ---

    def mine(self, resource: EnvResource) -> GameWarning:
        """Mine an environment resource into storage.

        The resource must be within MINING_RANGE. Its whole amount goes
        into the matching storage counter (clamped at 100) and is spent
        from the resource, leaving it depleted.
        """
        if self.coordinates.distance_to(resource.coordinates) > MINING_RANGE:
            return GameWarning.UNREACHABLE

        if resource.is_depleted():
            return GameWarning.RESOURCE_EXHAUSTED

        mined = resource.kind.model_copy()
        result = self.receive_to_storage(mined)
        if not result.ok:
            return result

        resource.give_resources(mined.kind, mined.amount)
        logger.info(
            "%s mined %d %s from resource %d",
            self.name,
            mined.amount,
            mined.kind,
            resource.id,
        )
        return GameWarning.NOMINAL

    def offload_storage(self, mothership: MotherShip) -> GameWarning:
        """Hand everything in storage over to the mothership.

        A resource whose mothership counter is already at 100 stays in
        storage, and the call reports SHIP_STORAGE_FULL. Other resources
        are still offloaded; overflow into a non-full counter is clamped.
        """
        outcome = GameWarning.NOMINAL
        for kind in ResourceType:
            amount = self.storage.get_resource_amount(kind)
            if amount == 0:
                continue
            if is_saturated(mothership.get_resource_amount(kind)):
                logger.info("%s cannot take more %s", mothership.name, kind)
                outcome = GameWarning.SHIP_STORAGE_FULL
                continue
            result = mothership.receive_resources(
                ResourceKind(kind=kind, amount=amount), self.storage
            )
            if not result.ok:
                return result
        logger.info("%s offloaded storage to %s", self.name, mothership.name)
        return outcome

    # --- Recharging ---

    def dock(self, mothership: MotherShip) -> None:
        mothership.dock = MotherShipDockStatus.POPULATED
        mothership.recharge = MotherShipRechargeStatus.CHARGING
        self.dock_status = SpaceShipDockStatus.DOCKED

    def undock(self, mothership: MotherShip) -> None:
        mothership.dock = MotherShipDockStatus.EMPTY
        mothership.recharge = MotherShipRechargeStatus.IDLE
        self.dock_status = SpaceShipDockStatus.UNDOCKED

    def recharge_step(self, rate: int = 1) -> None:
        """One recharge tick: raise every level by `rate`, capped at 100."""
        for kind in ResourceType:
            counter = self.levels.counter(kind)
            counter.amount += rate
            counter.adjust_levels()

    def is_fully_charged(self) -> bool:
        return all(self.get_resource_amount(kind) >= MAX_LEVEL for kind in ResourceType)

    def recharge_ticks_needed(self, rate: int = 1) -> int:
        """Ticks until the lowest level reaches 100; 0 for a non-positive rate."""
        if rate <= 0:
            logger.warning("Recharge rate must be positive, got %d", rate)
            return 0
        lowest = min(self.get_resource_amount(kind) for kind in ResourceType)
        return max(0, math.ceil((MAX_LEVEL - lowest) / rate))

    def recharge(
        self,
        mothership: MotherShip,
        rate: int = 1,
        on_tick: Callable[["SpaceShip"], None] | None = None,
    ) -> int:
        """Dock, recharge to full one tick at a time, then undock.

        `on_tick` is called after every step (the console uses it to pace
        and display the recharge). Returns the number of ticks taken.
        """
        self.dock(mothership)
        ticks = self.recharge_ticks_needed(rate)
        for _ in range(ticks):
            self.recharge_step(rate)
            if on_tick is not None:
                on_tick(self)
        self.undock(mothership)
        logger.info("%s recharged in %d ticks", self.name, ticks)
        return ticks

    def status(self) -> ShipStatus:
        x, y = self.coordinates.get_values()
        return ShipStatus(
            name=self.name,
            consumables=self.get_resource_amount(ResourceType.CONSUMABLES),
            gas=self.get_resource_amount(ResourceType.GAS),
            propellant=self.get_resource_amount(ResourceType.PROPELLANT),
            x=x,
            y=y,
            quadrant=self.coordinates.quadrant(),
            dock_status=self.dock_status,
            storage=self.storage.amounts(),
        )
