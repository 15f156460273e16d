"""SVCS command-line interface.

Usage: svcs [--debug] <command> [argument]

Each command is a small dataclass holding only its optional argument.
``describe`` prints what the command shows when no argument is given;
``execute`` runs it.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import ClassVar

from .. import __version__
from ..config import Settings
from ..core.controller import VcsController
from ..core.engine import CommitNotFound, NothingToCommit
from ..core.errors import SvcsError
from ..utils.env import DEBUG_ENV


@dataclass(frozen=True, slots=True)
class ConfigCommand:
    name: ClassVar[str] = "config"
    help: ClassVar[str] = "Get and set a username."
    username: str | None = None

    def describe(self, controller: VcsController) -> int:
        author = controller.get_author()
        if author is None:
            print("Please, tell me who you are.")
            return 0
        print(f"The username is {author}.")
        return 0

    def execute(self, controller: VcsController) -> int:
        if self.username is None:
            return self.describe(controller)
        controller.configure_author(self.username)
        return self.describe(controller)


@dataclass(frozen=True, slots=True)
class AddCommand:
    name: ClassVar[str] = "add"
    help: ClassVar[str] = "Add a file to the index."
    path: str | None = None

    def describe(self, controller: VcsController) -> int:
        tracked = controller.list_tracked_files()
        if not tracked:
            print(self.help)
            return 0
        print("Tracked files:")
        for path in tracked:
            print(path)
        return 0

    def execute(self, controller: VcsController) -> int:
        if self.path is None:
            return self.describe(controller)
        controller.track_file(self.path)
        print(f"The file '{self.path}' is tracked.")
        return 0


@dataclass(frozen=True, slots=True)
class LogCommand:
    name: ClassVar[str] = "log"
    help: ClassVar[str] = "Show commit logs."

    def describe(self, controller: VcsController) -> int:
        commits = controller.list_history()
        if not commits:
            print("No commits yet.")
            return 0
        for commit in commits:
            print(commit)
        return 0

    def execute(self, controller: VcsController) -> int:
        return self.describe(controller)


@dataclass(frozen=True, slots=True)
class CommitCommand:
    name: ClassVar[str] = "commit"
    help: ClassVar[str] = "Save changes."
    message: str | None = None

    def describe(self, controller: VcsController) -> int:
        print("Message was not passed.")
        return 1

    def execute(self, controller: VcsController) -> int:
        if self.message is None:
            return self.describe(controller)
        result = controller.commit(self.message)
        if isinstance(result, NothingToCommit):
            print("Nothing to commit.")
            return 0
        print("Changes are committed.")
        return 0


@dataclass(frozen=True, slots=True)
class CheckoutCommand:
    name: ClassVar[str] = "checkout"
    help: ClassVar[str] = "Restore a file."
    commit_id: str | None = None

    def describe(self, controller: VcsController) -> int:
        print("Commit id was not passed.")
        return 1

    def execute(self, controller: VcsController) -> int:
        if self.commit_id is None:
            return self.describe(controller)
        result = controller.checkout(self.commit_id)
        if isinstance(result, CommitNotFound):
            print("Commit does not exist.")
            return 1
        print(f"Switched to commit {result.identifier}.")
        return 0


Command = ConfigCommand | AddCommand | LogCommand | CommitCommand | CheckoutCommand

COMMANDS: tuple[type[Command], ...] = (
    ConfigCommand,
    AddCommand,
    LogCommand,
    CommitCommand,
    CheckoutCommand,
)


def parse_command(name: str | None, argument: str | None) -> Command | None:
    """Build the command variant for a name, or None if unknown."""
    if name == LogCommand.name:
        return LogCommand()
    for command_type in COMMANDS:
        if command_type.name == name:
            return command_type(argument)
    return None


def format_help() -> str:
    longest = max(len(command_type.name) for command_type in COMMANDS)
    lines = ["These are SVCS commands:"]
    for command_type in COMMANDS:
        lines.append(f"{command_type.name.ljust(longest + 3)}{command_type.help}")
    return "\n".join(lines)


GLOBAL_FLAGS = frozenset({"--help", "-h", "--debug", "--version", "-v"})


def split_args(argv: list[str]) -> tuple[list[str], str | None, list[str]]:
    """Split raw arguments into (global flags, command, command params).

    The first token not starting with ``-`` names the command; everything
    after it belongs to the command except the global flags. After ``--``
    every token is taken literally.
    """
    flags: list[str] = []
    params: list[str] = []
    command: str | None = None
    literal = False

    for token in argv:
        if not literal and token == "--":
            literal = True
        elif not literal and token in GLOBAL_FLAGS:
            flags.append(token)
        elif command is None and (literal or not token.startswith("-")):
            command = token
        elif command is None:
            flags.append(token)
        else:
            params.append(token)

    return flags, command, params


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svcs",
        description="Simple version control for a single working directory",
        usage="%(prog)s [--help] [--debug] [--version] <command> [argument]",
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    flags, command_name, params = split_args(sys.argv[1:] if args is None else list(args))
    parsed = create_parser().parse_args(flags)

    if parsed.debug:
        os.environ[DEBUG_ENV] = "1"

    command = parse_command(command_name, params[0] if params else None)
    if command is None or parsed.help:
        if command_name and command is None:
            print(f"'{command_name}' is not a SVCS command.")
            return 1
        print(format_help())
        return 0

    try:
        settings = Settings.from_env()
        controller = VcsController(settings.root, layout=settings.layout)
        return command.execute(controller)
    except (SvcsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
