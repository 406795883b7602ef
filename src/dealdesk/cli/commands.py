"""Single-token command and entity parsing."""

from enum import Enum


class Command(str, Enum):
    LIST = "l"
    CREATE = "c"
    READ = "r"
    UPDATE = "u"
    DELETE = "d"
    DEAL = "deal"
    EXIT = "e"
    UNKNOWN = "?"


class EntityKind(str, Enum):
    PRODUCT = "p"
    CUSTOMER = "c"
    DEAL = "d"
    UNKNOWN = "?"


_COMMANDS = {command.value: command for command in Command if command is not Command.UNKNOWN}
_ENTITIES = {kind.value: kind for kind in EntityKind if kind is not EntityKind.UNKNOWN}

HELP = "Commands list: [c,r,u,d,l,deal,e]"


def normalize_input(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip().lower()


def parse_command(text: str | None) -> Command:
    """Map a command token to a :class:`Command`; ``None`` and anything unknown map to UNKNOWN."""
    token = normalize_input(text)
    if token is None:
        return Command.UNKNOWN
    return _COMMANDS.get(token, Command.UNKNOWN)


def parse_entity(text: str | None) -> EntityKind:
    token = normalize_input(text)
    if token is None:
        return EntityKind.UNKNOWN
    return _ENTITIES.get(token, EntityKind.UNKNOWN)
