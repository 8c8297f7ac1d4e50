"""User commands understood by the console loop."""

from enum import StrEnum


class Command(StrEnum):
    """All commands a player can issue."""

    MOVE_TO = "move"
    MINE = "mine"
    RECHARGE = "recharge"
    INFO = "info"
    PING = "ping"
    OFFLOAD = "offload"
    EMPTY = ""  # no input or unknown input, does nothing


_ALIASES: dict[str, Command] = {
    "moveto": Command.MOVE_TO,
    "goto": Command.MOVE_TO,
    "status": Command.INFO,
}


def parse_command(text: str) -> tuple[Command, list[str]]:
    """Split a line of input into a Command and its arguments.

    `move 10 -4` → (Command.MOVE_TO, ["10", "-4"])
    Unknown commands map to Command.EMPTY.
    """
    parts = text.strip().split()
    if not parts:
        return Command.EMPTY, []

    word = parts[0].lower()
    try:
        command = Command(word)
    except ValueError:
        command = _ALIASES.get(word, Command.EMPTY)
    if command == Command.EMPTY:
        return Command.EMPTY, []
    return command, parts[1:]
