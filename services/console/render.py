"""Text rendering for the console — pure functions, no I/O."""

from spacestation import Coordinates, EnvResource, GameWarning, ShipStatus

WARNING_MESSAGES: dict[GameWarning, str] = {
    GameWarning.NOMINAL: "OK",
    GameWarning.SHIP_STORAGE_FULL: "Storage is full",
    GameWarning.OUT_OF_BOUNDS: "Destination is outside the play area",
    GameWarning.UNREACHABLE: "Target is out of reach",
    GameWarning.RESOURCE_EXHAUSTED: "Resource exhausted",
}

HELP_TEXT = (
    "Commands: move <x> <y> | mine [id] | recharge | info | ping | offload | quit"
)


def render_warning(warning: GameWarning) -> str:
    return WARNING_MESSAGES[warning]


def render_status(status: ShipStatus) -> str:
    """Multi-line block with a ship's levels, position and storage."""
    lines = [
        "--Ship Status--",
        f"Name: {status.name}",
        f"Food & Water: {status.consumables}",
        f"Oxygen: {status.gas}",
        f"Fuel: {status.propellant}",
        f"Position: ({status.x}, {status.y}) [{status.quadrant} quadrant]",
        f"Dock: {status.dock_status}",
    ]
    if status.storage:
        stored = ", ".join(f"{kind} {amount}" for kind, amount in status.storage.items())
        lines.append(f"Storage: {stored}")
    return "\n".join(lines)


def render_resource(resource: EnvResource, origin: Coordinates) -> str:
    """One line describing a resource and how far it is from `origin`."""
    x, y = resource.coordinates.get_values()
    return (
        f"#{resource.id}: {resource.kind.amount} {resource.kind.kind} "
        f"at ({x}, {y}), distance {resource.coordinates.distance_to(origin)}"
    )
