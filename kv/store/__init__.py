"""Store module for kv."""

from .file_store import FileStore
from .format import Entry, format_entries, parse_lines, validate_entry

__all__ = ["Entry", "FileStore", "format_entries", "parse_lines", "validate_entry"]
