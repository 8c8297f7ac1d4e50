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

__all__ = [
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
    "distance",
    "parse_command",
    "quadrant",
]
