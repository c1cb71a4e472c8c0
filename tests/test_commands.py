"""Tests for argv -> command parsing."""

import pytest

from svcs.app.commands import (
    AddCommand,
    CheckoutCommand,
    CommitCommand,
    ConfigCommand,
    HelpCommand,
    LogCommand,
    parse_command,
)
from svcs.core.errors import MissingArgument, UnknownCommand


class TestParseCommand:
    @pytest.mark.parametrize("argv", [[], ["--help"], ["-h"]])
    def test_help(self, argv):
        assert parse_command(argv) == HelpCommand()

    def test_config(self):
        assert parse_command(["config"]) == ConfigCommand(name=None)
        assert parse_command(["config", "John", "Doe"]) == ConfigCommand(name="John Doe")

    def test_add(self):
        assert parse_command(["add"]) == AddCommand()
        assert parse_command(["add", "a.txt"]) == AddCommand(paths=("a.txt",))

    def test_log(self):
        assert parse_command(["log"]) == LogCommand()

    def test_log_ignores_extra_words(self):
        assert parse_command(["log", "extra"]) == LogCommand()

    def test_commit(self):
        assert parse_command(["commit", "fix bug"]) == CommitCommand(message="fix bug")

    def test_commit_without_message(self):
        with pytest.raises(MissingArgument) as exc:
            parse_command(["commit"])
        assert exc.value.message == "Message was not passed."

    def test_checkout(self):
        assert parse_command(["checkout", "abc"]) == CheckoutCommand(commit_id="abc")

    def test_checkout_uses_first_word_only(self):
        assert parse_command(["checkout", "abc", "def"]) == CheckoutCommand(commit_id="abc")

    def test_checkout_without_id(self):
        with pytest.raises(MissingArgument) as exc:
            parse_command(["checkout"])
        assert exc.value.message == "Commit id was not passed."

    def test_unknown(self):
        with pytest.raises(UnknownCommand) as exc:
            parse_command(["push"])
        assert exc.value.message == "'push' is not a SVCS command."
