from enum import Enum
from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
ABORT_TOKEN: Final[str] = "abort"
MAX_COMMAND_TOKENS: Final[int] = 3
MAX_UNIT_TOKENS: Final[int] = 2


class ValidCommand(Enum):
    ADD = "add"
    REMOVE = "remove"
    FIND = "find"
    LIST = "list"
    CLEAR = "clear"
    GO = "go"
    STATS = "stats"
    HELP = "help"
    EXIT = "exit"
    UNKNOWN = "unknown"

    @classmethod
    def find_command(cls, word):
        '''Resolves a lower-cased command word, UNKNOWN when nothing matches.'''
        if not word:
            return cls.UNKNOWN
        for command in cls:
            if command is not cls.UNKNOWN and command.value == word:
                return command
        return cls.UNKNOWN


HELP_MESSAGES: Final[dict[str, str]] = {
    "general": (
        "Available commands: add, remove, find, list, clear, go, stats, help, exit.\n"
        "Type 'help <command>' for details. Type 'abort' at any prompt to cancel."
    ),
    "add": "add storage <name> | add ingredient <name> | add recipe",
    "remove": "remove storage <name> | remove ingredient <name> | remove expired | remove recipe <name>",
    "find": "find ingredient <name> | find recipe <name>",
    "list": "list storages | list ingredients | list expired | list recipes | list suggested",
    "clear": "clear storage | clear history",
    "go": "go storage <name> | go back",
    "stats": "stats storage | stats inventory",
    "help": "help | help <command>",
    "exit": "exit - leave the application",
}

PAST_TENSE: Final[dict[str, str]] = {
    "add": "added",
    "remove": "removed",
    "find": "found",
    "clear": "cleared",
    "go": "moved to",
}
