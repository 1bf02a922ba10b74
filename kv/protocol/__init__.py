"""Protocol module for kv."""

from .commands import Command, CommandType, Response
from .parser import CommandParser

__all__ = [
    "Command",
    "CommandType",
    "Response",
    "CommandParser",
]
