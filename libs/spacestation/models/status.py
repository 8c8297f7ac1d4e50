"""Docking/recharge states and the read-only ship snapshot used for display."""

from enum import StrEnum

from pydantic import BaseModel, Field

from spacestation.models.geometry import Quadrant


class SpaceShipDockStatus(StrEnum):
    DOCKED = "docked"
    UNDOCKED = "undocked"


class MotherShipRechargeStatus(StrEnum):
    CHARGING = "charging"  # recharging a docked spaceship
    IDLE = "idle"  # charging port vacant


class MotherShipDockStatus(StrEnum):
    POPULATED = "populated"
    EMPTY = "empty"


class ShipStatus(BaseModel):
    """Snapshot of a ship's resource levels and position."""

    name: str
    consumables: int
    gas: int
    propellant: int
    x: int
    y: int
    quadrant: Quadrant
    dock_status: SpaceShipDockStatus | MotherShipDockStatus
    storage: dict[str, int] = Field(default_factory=dict)
