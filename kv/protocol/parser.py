"""
Command-Line Parser Module

This module turns argv into Command objects and formats Response objects
for the terminal.

Usage:
    kv get <key>             -> <value>
    kv set <key> <value>     -> Key "<key>" set to value "<value>".
    kv delete <key>          -> Deleted key "<key>".
    kv list                  -> <key> -> <value> (one per line)
    kv help [command]        -> usage text
    kv --version             -> kv <version>

Malformed input raises InvalidArgument rather than exiting, so the caller
decides how errors reach the user.
"""

import argparse
from typing import Dict, List, Sequence, Tuple

from .. import __version__
from ..config.settings import settings
from ..errors import InvalidArgument
from .commands import Command, CommandType, Response

PROG = "kv"

# name -> (type, about); order is the order shown in help and completion
COMMANDS: Dict[str, Tuple[CommandType, str]] = {
    "delete": (CommandType.DELETE, "Deletes key:value pairs."),
    "get": (CommandType.GET, "Gets the value for a given key."),
    "help": (CommandType.HELP, "Prints help for kv or one of its commands."),
    "list": (CommandType.LIST, "Lists all key:value pairs."),
    "set": (CommandType.SET, "Sets a value for a key."),
}

# Used by shell completion scripts, not listed in help
HIDDEN_COMMANDS: Dict[str, CommandType] = {
    "complete-commands": CommandType.COMPLETE_COMMANDS,
    "complete-keys": CommandType.COMPLETE_KEYS,
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises InvalidArgument instead of exiting on errors."""

    def error(self, message: str):
        raise InvalidArgument(f"{message} (see '{PROG} help')")


class CommandParser:
    """
    Parser for the kv command line.

    Global options:
        --file PATH   Store file to use instead of the configured one
        --debug       Enable debug logging on stderr
        --version     Print the version and exit
    """

    def __init__(self):
        """Build the argparse tree for every command."""
        self._parser = _ArgumentParser(
            prog=PROG,
            description="A key-value store for the command line.",
        )
        self._parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        self._parser.add_argument(
            "--file",
            type=str,
            default=None,
            metavar="PATH",
            help=f"Store file to use (default: {settings.STORE_PATH})",
        )
        self._parser.add_argument(
            "--debug",
            action="store_true",
            default=settings.DEBUG,
            help="Enable debug logging",
        )

        subparsers = self._parser.add_subparsers(dest="command", metavar="<command>")
        self._subparsers: Dict[str, argparse.ArgumentParser] = {}

        for name, (_, about) in COMMANDS.items():
            self._subparsers[name] = subparsers.add_parser(
                name, help=about, description=about
            )
        for name in HIDDEN_COMMANDS:
            subparsers.add_parser(name)

        self._subparsers["delete"].add_argument(
            "key", help="The key of the key:value pair to delete."
        )
        self._subparsers["get"].add_argument(
            "key", help="The key of the value to retrieve."
        )
        self._subparsers["set"].add_argument("key", help="The key to set.")
        self._subparsers["set"].add_argument("value", help="The value of the key.")
        self._subparsers["help"].add_argument(
            "topic", nargs="?", default="", help="The command to describe."
        )

    def parse_request(self, argv: Sequence[str]) -> Command:
        """
        Parse command-line arguments into a Command object.

        Args:
            argv: Arguments without the program name

        Returns:
            Command object representing the request

        Raises:
            InvalidArgument: For missing, unknown or extra arguments
            SystemExit: For --version and -h/--help, after printing

        Examples:
            >>> parser = CommandParser()
            >>> cmd = parser.parse_request(["set", "mykey", "myvalue"])
            >>> cmd.type == CommandType.SET
            True
            >>> cmd.key, cmd.value
            ('mykey', 'myvalue')
        """
        args = self._parser.parse_args(list(argv))

        if args.command is None:
            raise InvalidArgument(f"no command given (see '{PROG} help')")

        if args.command in HIDDEN_COMMANDS:
            command_type = HIDDEN_COMMANDS[args.command]
        else:
            command_type = COMMANDS[args.command][0]

        topic = getattr(args, "topic", "")
        if topic and topic not in COMMANDS:
            raise InvalidArgument(f"unknown command '{topic}' (see '{PROG} help')")

        return Command(
            type=command_type,
            key=getattr(args, "key", ""),
            value=getattr(args, "value", ""),
            topic=topic,
            file=args.file,
            debug=args.debug,
        )

    def help_text(self, topic: str = "") -> str:
        """Return usage text for kv, or for one command when topic is given."""
        if topic:
            return self._subparsers[topic].format_help().rstrip("\n")
        return self._parser.format_help().rstrip("\n")

    def visible_commands(self) -> List[Tuple[str, str]]:
        """Return (name, about) for every command shown in help."""
        return [(name, about) for name, (_, about) in COMMANDS.items()]

    def format_response(self, response: Response) -> str:
        """
        Format a Response object for the terminal.

        Returns:
            Text to print, without a trailing newline.

        Examples:
            >>> parser = CommandParser()
            >>> parser.format_response(Response.value_response("hello"))
            'hello'
            >>> parser.format_response(Response.deleted("a"))
            'Deleted key "a".'
        """
        if response.value is not None:
            return response.value

        if response.entries is not None:
            if not response.entries:
                return "No keys found."
            return "\n".join(f"{key} -> {value}" for key, value in response.entries)

        return response.message

