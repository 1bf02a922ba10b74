"""
Store File Format

Encodes entries as newline-separated key:value lines and decodes them back.

Format:
    one <key>:<value> pair per line, each line ending in a newline

Rules:
    - A line is split on the first separator, so values may contain ':'
    - Keys are non-empty and contain neither ':' nor a newline
    - Values contain no newline
    - Blank lines are skipped when reading
"""

from collections import OrderedDict
from typing import Iterable, List, NamedTuple

from ..config.settings import settings
from ..errors import InvalidArgument, StoreFormatError


class Entry(NamedTuple):
    """One key:value pair of the store."""
    key: str
    value: str


def validate_entry(key: str, value: str) -> None:
    """Raise InvalidArgument if the pair cannot be written as a single line."""
    if not key:
        raise InvalidArgument("Key must not be empty.")
    if settings.SEPARATOR in key:
        raise InvalidArgument(f'Key "{key}" must not contain "{settings.SEPARATOR}".')
    if "\n" in key or "\r" in key:
        raise InvalidArgument("Key must not contain a line break.")
    if "\n" in value or "\r" in value:
        raise InvalidArgument(f'Value for key "{key}" must not contain a line break.')


def parse_lines(text: str, path="<store>") -> "OrderedDict[str, str]":
    """
    Parse the contents of a store file.

    Args:
        text: Whole file contents
        path: Used in error messages only

    Returns:
        OrderedDict of key -> value in file order. A key repeated on a later
        line keeps its first position and takes the later value.

    Raises:
        StoreFormatError: If a non-blank line has no separator
    """
    data: "OrderedDict[str, str]" = OrderedDict()
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line:
            continue
        key, sep, value = line.partition(settings.SEPARATOR)
        if not sep or not key:
            raise StoreFormatError(path, line_number, line)
        data[key] = value
    return data


def format_entries(entries: Iterable[Entry]) -> str:
    """Serialize entries to file contents, one line each, newline-terminated."""
    lines: List[str] = [f"{key}{settings.SEPARATOR}{value}\n" for key, value in entries]
    return "".join(lines)
