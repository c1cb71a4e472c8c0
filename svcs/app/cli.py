"""SVCS command line interface.

Every command prints a single human-readable line or block on stdout.
Expected failures (nothing to commit, unknown commit, ...) print their
message and exit 0 unless `strictExitCodes` is enabled.
"""

from __future__ import annotations

import argparse
import os
import sys

from .. import __version__
from ..core.controller import SvcsController
from ..core.errors import MissingFile, SvcsError
from ..utils.env import get_project_root
from ..utils.log import displayable, log_debug
from .commands import (
    AddCommand,
    CheckoutCommand,
    Command,
    CommitCommand,
    ConfigCommand,
    HelpCommand,
    LogCommand,
    parse_command,
)


HELP_TEXT = (
    "These are SVCS commands:\n"
    "config     Get and set a username.\n"
    "add        Add a file to the index.\n"
    "log        Show commit logs.\n"
    "commit     Save changes.\n"
    "checkout   Restore a file."
)

GLOBAL_OPTIONS = ("--debug", "--version", "-v")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svcs",
        description="SVCS - a minimal local version control system",
        add_help=False,
    )
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


def emit(message: str) -> None:
    """Print a user-facing line on stdout."""
    print(displayable(message))


def main(args: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if args is None else args)

    # argparse only sees the global flags. Command words go through
    # parse_command instead of subparsers, because subparser usage errors
    # would replace the fixed one-line SVCS messages.
    leading: list[str] = []
    while argv and argv[0] in GLOBAL_OPTIONS:
        leading.append(argv.pop(0))
    parsed = create_parser().parse_args(leading)

    if parsed.debug:
        os.environ["SVCS_DEBUG"] = "1"

    controller = SvcsController(project_root=get_project_root())
    controller.init()

    try:
        command = parse_command(argv)
        log_debug(f"Running {type(command).__name__}")
        return dispatch(command, controller)
    except SvcsError as e:
        emit(e.message)
        return _failure_code(controller)


def dispatch(command: Command, controller: SvcsController) -> int:
    if isinstance(command, HelpCommand):
        emit(HELP_TEXT)
        return 0
    if isinstance(command, ConfigCommand):
        return cmd_config(command, controller)
    if isinstance(command, AddCommand):
        return cmd_add(command, controller)
    if isinstance(command, LogCommand):
        return cmd_log(controller)
    if isinstance(command, CommitCommand):
        return cmd_commit(command, controller)
    if isinstance(command, CheckoutCommand):
        return cmd_checkout(command, controller)

    emit(HELP_TEXT)
    return 1


def cmd_config(command: ConfigCommand, controller: SvcsController) -> int:
    if command.name is not None:
        name = controller.set_username(command.name)
        emit(f"The username is {name}.")
        return 0

    name = controller.get_username()
    if not name:
        emit("Please, tell me who you are.")
    else:
        emit(f"The username is {name}.")
    return 0


def cmd_add(command: AddCommand, controller: SvcsController) -> int:
    if not command.paths:
        tracked = controller.tracked_paths()
        if not tracked:
            emit("Add a file to the index.")
            return 0
        emit("Tracked files:")
        for path in tracked:
            emit(path)
        return 0

    code = 0
    for path in command.paths:
        try:
            controller.add(path)
        except MissingFile as e:
            emit(e.message)
            code = _failure_code(controller)
            continue
        emit(f"The file '{path}' is tracked.")
    return code


def cmd_log(controller: SvcsController) -> int:
    text = controller.log_text()
    if not text:
        emit("No commits yet.")
        return 0
    emit(text.rstrip("\n"))
    return 0


def cmd_commit(command: CommitCommand, controller: SvcsController) -> int:
    controller.commit(command.message)
    emit("Changes are committed.")
    return 0


def cmd_checkout(command: CheckoutCommand, controller: SvcsController) -> int:
    result = controller.checkout(command.commit_id)
    emit(f"Switched to commit {result.commit_id}.")
    return 0


def _failure_code(controller: SvcsController) -> int:
    return 1 if controller.config.strict_exit_codes else 0


if __name__ == "__main__":
    sys.exit(main())
