#!/usr/bin/env python3
"""
kv Command-Line Entry Point

This is the main entry point for the kv command.

Usage:
    kv set greeting hello           # Store a pair
    kv get greeting                 # Print its value
    kv list                         # Print every pair
    kv delete greeting              # Remove a pair
    kv --file ./data.txt list       # Use another store file
    kv --debug get greeting         # Enable debug logging

Environment Variables:
    KV_STORE_PATH   - Store file location
    KV_DEBUG        - Enable debug mode (true/false)
    KV_LOG_LEVEL    - Log level when not in debug mode

Exit codes:
    0  success
    1  key not found
    2  invalid arguments
    3  store file could not be read or written
"""

import logging
import sys
from typing import Optional, Sequence

from .config.settings import settings
from .errors import InvalidArgument, KVError
from .protocol.commands import Command, CommandType, Response
from .protocol.parser import PROG, CommandParser
from .store.file_store import FileStore

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, level: Optional[str] = None) -> None:
    """Configure logging on stderr; stdout carries command output only."""
    if debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def execute(command: Command, store: FileStore, parser: CommandParser) -> Response:
    """
    Run a parsed command against the store.

    Args:
        command: Parsed command
        store: Store the command operates on
        parser: Parser, used for help and completion text

    Returns:
        Response describing the result

    Raises:
        KVError: For missing keys, bad arguments and file failures
    """
    if not command.is_valid:
        raise InvalidArgument(f"{command.type.name.lower()} needs a non-empty key")
    if command.is_mutation:
        logger.debug(f"{command.type.name} will rewrite {store.path}")

    if command.type == CommandType.GET:
        return Response.value_response(store.get(command.key))

    if command.type == CommandType.SET:
        store.set(command.key, command.value)
        return Response.stored(command.key, command.value)

    if command.type == CommandType.DELETE:
        store.delete(command.key)
        return Response.deleted(command.key)

    if command.type == CommandType.LIST:
        return Response.entries_response(store.list())

    if command.type == CommandType.HELP:
        return Response.ok(message=parser.help_text(command.topic))

    if command.type == CommandType.COMPLETE_COMMANDS:
        return Response.ok(
            message="\n".join(f"{name}:{about}" for name, about in parser.visible_commands())
        )

    if command.type == CommandType.COMPLETE_KEYS:
        return Response.ok(
            message="\n".join(f"{key}:{value}" for key, value in store.list())
        )

    raise InvalidArgument(f"unsupported command: {command.type}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the kv command.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = CommandParser()

    try:
        command = parser.parse_request(argv)
        setup_logging(debug=command.debug)
        store = FileStore(command.file)
        logger.debug(f"Running {command.type.name} against {store.path}")
        response = execute(command, store, parser)
    except KVError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"{PROG}: {e}", file=sys.stderr)
        return e.exit_code

    output = parser.format_response(response)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
