"""Typed SVCS commands parsed from argv.

Argument validation happens here, once; handlers receive complete commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from ..core.errors import MissingArgument, UnknownCommand


@dataclass(frozen=True, slots=True)
class HelpCommand:
    pass


@dataclass(frozen=True, slots=True)
class ConfigCommand:
    """Show the username, or set it when `name` is given."""
    name: str | None = None


@dataclass(frozen=True, slots=True)
class AddCommand:
    """List tracked files, or track each of `paths`."""
    paths: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class LogCommand:
    pass


@dataclass(frozen=True, slots=True)
class CommitCommand:
    message: str


@dataclass(frozen=True, slots=True)
class CheckoutCommand:
    commit_id: str


Command = Union[HelpCommand, ConfigCommand, AddCommand, LogCommand, CommitCommand, CheckoutCommand]

HELP_FLAGS = ("--help", "-h")


def _parse_config(rest: list[str]) -> ConfigCommand:
    if not rest:
        return ConfigCommand()
    return ConfigCommand(name=" ".join(rest))


def _parse_add(rest: list[str]) -> AddCommand:
    return AddCommand(paths=tuple(rest))


def _parse_log(rest: list[str]) -> LogCommand:
    """`log` takes no arguments; anything after it is ignored."""
    return LogCommand()


def _parse_commit(rest: list[str]) -> CommitCommand:
    if not rest:
        raise MissingArgument("Message was not passed.")
    return CommitCommand(message=" ".join(rest))


def _parse_checkout(rest: list[str]) -> CheckoutCommand:
    """Only the first word is the commit id; further words are ignored."""
    if not rest:
        raise MissingArgument("Commit id was not passed.")
    return CheckoutCommand(commit_id=rest[0])


_PARSERS: dict[str, Callable[[list[str]], Command]] = {
    "config": _parse_config,
    "add": _parse_add,
    "log": _parse_log,
    "commit": _parse_commit,
    "checkout": _parse_checkout,
}


def parse_command(argv: list[str]) -> Command:
    """Turn argv (without the program name) into a typed command.

    Raises:
        MissingArgument: commit/checkout without their argument
        UnknownCommand: first word is not a SVCS command
    """
    if not argv or argv[0] in HELP_FLAGS:
        return HelpCommand()

    name, rest = argv[0], argv[1:]
    parser = _PARSERS.get(name)
    if parser is None:
        raise UnknownCommand(name)
    return parser(rest)
