"""Console — dispatches player commands to the simulation core."""

import logging
import random
import time
from collections.abc import Callable

from spacestation import (
    MINING_RANGE,
    PING_RADIUS,
    Command,
    GameWarning,
    MotherShip,
    SpaceShip,
    World,
    WorldConfig,
    parse_command,
)

from services.console.render import (
    HELP_TEXT,
    render_resource,
    render_status,
    render_warning,
)

logger = logging.getLogger(__name__)

SHIP_NAME = "Zeus"
MOTHERSHIP_NAME = "Ada"
QUIT_WORDS = ("quit", "exit")


class Console:
    """Owns one world, one spaceship and its mothership.

    Output goes through `emit` and recharge pacing through `sleep`, so
    both can be replaced in tests.
    """

    def __init__(
        self,
        world: World | None = None,
        rng: random.Random | None = None,
        emit: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._world = world if world is not None else World.from_config(
            WorldConfig.from_env(), rng
        )
        self._ship = SpaceShip.new(SHIP_NAME, self._world, rng)
        self._mothership = MotherShip.new(MOTHERSHIP_NAME, self._world)
        self._emit = emit
        self._sleep = sleep

    @property
    def world(self) -> World:
        return self._world

    @property
    def ship(self) -> SpaceShip:
        return self._ship

    @property
    def mothership(self) -> MotherShip:
        return self._mothership

    def execute(self, line: str) -> GameWarning | None:
        """Run one line of input. Returns the outcome of core commands."""
        command, args = parse_command(line)
        logger.debug("Command %r with args %s", command, args)

        if command == Command.MOVE_TO:
            return self._move(args)
        elif command == Command.MINE:
            return self._mine(args)
        elif command == Command.RECHARGE:
            return self._recharge()
        elif command == Command.INFO:
            self._info()
        elif command == Command.PING:
            self._ping()
        elif command == Command.OFFLOAD:
            return self._offload()
        elif line.strip():
            # Unknown command
            self._emit(HELP_TEXT)
        return None

    def run(self, read: Callable[[str], str] = input) -> None:
        """Read and execute commands until quit or end of input."""
        self._emit(HELP_TEXT)
        while True:
            try:
                line = read("> ")
            except (EOFError, KeyboardInterrupt):
                logger.info("Shutdown signal received")
                break
            if line.strip().lower() in QUIT_WORDS:
                break
            self.execute(line)

    # --- Command handlers ---

    def _report(self, warning: GameWarning) -> GameWarning:
        self._emit(render_warning(warning))
        return warning

    def _move(self, args: list[str]) -> GameWarning | None:
        try:
            x, y = (int(value) for value in args)
        except ValueError:
            self._emit("Usage: move <x> <y>")
            return None
        return self._report(
            self._ship.move_to(x, y, self._world.consumption_rate)
        )

    def _mine(self, args: list[str]) -> GameWarning | None:
        if args:
            try:
                resource_id = int(args[0])
            except ValueError:
                self._emit("Usage: mine [id]")
                return None
        else:
            nearby = self._world.resources_within(self._ship.coordinates, MINING_RANGE)
            if not nearby:
                return self._report(GameWarning.UNREACHABLE)
            resource_id = nearby[0].id

        result = self._world.mine(resource_id, self._ship)
        if result.ok:
            self._world.remove_depleted()
        return self._report(result)

    def _recharge(self) -> GameWarning:
        interval = self._world.recharge_interval / 1000

        def on_tick(ship: SpaceShip) -> None:
            self._sleep(interval)
            self._emit(render_status(ship.status()))

        self._ship.teleport(self._mothership)
        self._emit(render_status(self._mothership.status()))
        self._ship.recharge(self._mothership, self._world.recharge_rate, on_tick)
        return self._report(GameWarning.NOMINAL)

    def _info(self) -> None:
        self._emit(render_status(self._ship.status()))
        self._emit(render_status(self._mothership.status()))

    def _ping(self) -> None:
        origin = self._ship.coordinates
        nearby = self._world.resources_within(origin, PING_RADIUS)
        if not nearby:
            self._emit(f"No resources within {PING_RADIUS}")
            return
        for resource in nearby:
            self._emit(render_resource(resource, origin))

    def _offload(self) -> GameWarning:
        if self._ship.coordinates.distance_to(self._mothership.coordinates) > MINING_RANGE:
            return self._report(GameWarning.UNREACHABLE)
        return self._report(self._ship.offload_storage(self._mothership))
