"""
Command and Response Definitions

This module defines the data structures passed between the command-line
parser and the dispatcher.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..store.format import Entry


class CommandType(Enum):
    """Enumeration of supported command types."""
    GET = auto()
    SET = auto()
    LIST = auto()
    DELETE = auto()
    HELP = auto()
    COMPLETE_COMMANDS = auto()
    COMPLETE_KEYS = auto()


@dataclass
class Command:
    """
    Represents a parsed command line.

    Attributes:
        type: The type of command
        key: The key for GET, SET and DELETE
        value: The value for SET
        topic: Command name whose help was requested (HELP only)
        file: Store file given with --file, None for the default
        debug: True when --debug was given
    """
    type: CommandType
    key: str = ""
    value: str = ""
    topic: str = ""
    file: Optional[str] = None
    debug: bool = False

    @property
    def is_valid(self) -> bool:
        """Check if the command carries the arguments its type needs."""
        if self.type in (CommandType.GET, CommandType.SET, CommandType.DELETE):
            return bool(self.key)
        return True

    @property
    def is_mutation(self) -> bool:
        """True for commands that rewrite the store file."""
        return self.type in (CommandType.SET, CommandType.DELETE)


@dataclass
class Response:
    """
    Represents the outcome of a successful command.

    Failures are raised as KVError subclasses instead.

    Attributes:
        message: Response message
        value: The value returned (for GET)
        entries: The entries returned (for LIST)
    """
    message: str = ""
    value: Optional[str] = None
    entries: Optional[List[Entry]] = None

    @classmethod
    def ok(cls, message: str = "", value: Optional[str] = None) -> "Response":
        """Create a successful response."""
        return cls(message=message, value=value)

    @classmethod
    def stored(cls, key: str, value: str) -> "Response":
        """Create the response for SET."""
        return cls.ok(message=f'Key "{key}" set to value "{value}".')

    @classmethod
    def deleted(cls, key: str) -> "Response":
        """Create the response for DELETE."""
        return cls.ok(message=f'Deleted key "{key}".')

    @classmethod
    def value_response(cls, value: str) -> "Response":
        """Create a GET response with a value."""
        return cls.ok(value=value)

    @classmethod
    def entries_response(cls, entries: List[Entry]) -> "Response":
        """Create a LIST response."""
        return cls(entries=list(entries))
