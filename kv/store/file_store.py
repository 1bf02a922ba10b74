"""
File-Backed Key-Value Store

This module implements the persistent storage behind the kv command line.

Every operation reads the whole store file into memory. Mutations write the
whole file back before returning, through a temporary sibling file that is
renamed over the original so a failed write never leaves a half-written
store behind.
"""

import logging
import os
import stat
from collections import OrderedDict
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config.settings import settings
from ..errors import IoError, NotFound
from .format import Entry, format_entries, parse_lines, validate_entry

logger = logging.getLogger(__name__)


class FileStore:
    """
    Key-value store persisted as key:value lines in a single file.

    Keys keep the position of their first insertion; overwriting a key
    changes its value in place.

    Attributes:
        path: Location of the store file
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            path: Store file location (default from settings.STORE_PATH)
        """
        self.path = Path(path) if path is not None else settings.STORE_PATH

    @property
    def target_path(self) -> Path:
        """The store file with symlinks resolved; writes replace this file."""
        return self.path.resolve()

    @property
    def temp_path(self) -> Path:
        """Sibling of the target file that receives writes before the atomic rename."""
        target = self.target_path
        return target.with_name(target.name + ".tmp")

    def load(self) -> List[Entry]:
        """
        Read every entry from the store file.

        The file and its parent directory are created empty if missing.

        Returns:
            Entries in file order

        Raises:
            IoError: If the file cannot be created, read or decoded
            StoreFormatError: If a line is not a key:value pair
        """
        return [Entry(key, value) for key, value in self._read().items()]

    def save(self, entries: Iterable[Entry]) -> None:
        """
        Replace the store file contents with the given entries.

        Raises:
            InvalidArgument: If an entry cannot be written as a single line
            IoError: If the file cannot be written
        """
        data: "OrderedDict[str, str]" = OrderedDict()
        for key, value in entries:
            validate_entry(key, value)
            data[key] = value
        self._write(data)

    def get(self, key: str) -> str:
        """
        Retrieve the value for a given key.

        Raises:
            NotFound: If the key is not in the store
        """
        data = self._read()
        if key not in data:
            logger.info(f"Key '{key}' not found in {self.path}")
            raise NotFound(key)
        return data[key]

    def set(self, key: str, value: str) -> None:
        """
        Insert or overwrite the value for a key and persist immediately.

        Raises:
            InvalidArgument: If the key or value cannot be stored
        """
        validate_entry(key, value)
        data = self._read()
        if key in data:
            logger.debug(f"Updating key '{key}'")
        else:
            logger.debug(f"Inserting key '{key}'")
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        """
        Remove a key and persist immediately.

        The file is left untouched when the key is missing.

        Raises:
            NotFound: If the key is not in the store
        """
        data = self._read()
        if key not in data:
            logger.info(f"Key '{key}' not found for delete in {self.path}")
            raise NotFound(key)
        del data[key]
        self._write(data)
        logger.debug(f"Deleted key '{key}'")

    def list(self) -> List[Entry]:
        """Return all entries in file order."""
        return self.load()

    def _read(self) -> "OrderedDict[str, str]":
        try:
            if not self.path.exists():
                target = self.target_path
                logger.debug(f"Creating empty store at {target}")
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
            text = self.path.read_text(encoding=settings.ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise IoError(self.path, f"cannot read store: {e}") from e

        data = parse_lines(text, self.path)
        logger.debug(f"Loaded {len(data)} entries from {self.path}")
        return data

    def _write(self, data: "OrderedDict[str, str]") -> None:
        contents = format_entries(Entry(k, v) for k, v in data.items())
        target = self.target_path
        temp_path = self.temp_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding=settings.ENCODING, newline="\n") as f:
                f.write(contents)
                f.flush()
                os.fsync(f.fileno())
            if target.exists():
                os.chmod(temp_path, stat.S_IMODE(target.stat().st_mode))
            os.replace(temp_path, target)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise IoError(self.path, f"cannot write store: {e}") from e
        logger.debug(f"Saved {len(data)} entries to {self.path}")
