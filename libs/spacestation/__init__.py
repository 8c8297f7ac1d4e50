"""Space Station — resource economy core for ships in a bounded 2D world."""

from spacestation.environment import EnvResource, randomize_world_resources
from spacestation.helpers.levels import MAX_LEVEL, MIN_LEVEL
from spacestation.models.commands import Command, parse_command
from spacestation.models.geometry import (
    Coordinates,
    Quadrant,
    WorldSize,
    distance,
    quadrant,
)
from spacestation.models.resources import InvalidRangeError, ResourceKind, ResourceType
from spacestation.models.status import (
    MotherShipDockStatus,
    MotherShipRechargeStatus,
    ShipStatus,
    SpaceShipDockStatus,
)
from spacestation.models.warnings import GameWarning
from spacestation.ships import MINING_RANGE, PING_RADIUS, MotherShip, SpaceShip
from spacestation.storage import Storage
from spacestation.transfer import TransferResources, give_from, on_kind_mismatch
from spacestation.world import World, WorldConfig

__all__ = [
    # Models
    "Command",
    "Coordinates",
    "GameWarning",
    "InvalidRangeError",
    "MotherShipDockStatus",
    "MotherShipRechargeStatus",
    "Quadrant",
    "ResourceKind",
    "ResourceType",
    "ShipStatus",
    "SpaceShipDockStatus",
    "WorldSize",
    # Entities
    "EnvResource",
    "MotherShip",
    "SpaceShip",
    "Storage",
    "World",
    "WorldConfig",
    # Transfer protocol
    "TransferResources",
    "give_from",
    "on_kind_mismatch",
    # Helpers
    "MAX_LEVEL",
    "MINING_RANGE",
    "MIN_LEVEL",
    "PING_RADIUS",
    "distance",
    "parse_command",
    "quadrant",
    "randomize_world_resources",
]
