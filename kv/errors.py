"""
Custom exceptions for the kv store.

Each exception carries the process exit code the CLI reports for it.
"""


class KVError(Exception):
    """Base class for every error the store reports to the user."""

    exit_code = 1


class NotFound(KVError):
    """Raised when get or delete names a key that is not in the store."""

    exit_code = 1

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Key "{key}" not found.')


class InvalidArgument(KVError):
    """Raised for malformed command-line input or unstorable keys and values."""

    exit_code = 2


class IoError(KVError):
    """Raised when the store file cannot be read or written."""

    exit_code = 3

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class StoreFormatError(IoError):
    """
    Raised when a line of the store file is not a key:value pair.

    Args:
        path: Store file being loaded.
        line_number: 1-based line number of the bad line.
        line: The offending line, without its newline.
    """

    def __init__(self, path, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(path, f"line {line_number} is not a key:value pair: {line!r}")
