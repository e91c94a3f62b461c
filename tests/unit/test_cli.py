"""Tests for the command-line entry point."""

from importlib.metadata import version as installed_version

import pytest
from typer.testing import CliRunner

from echochat.cli import __main__ as cli
from echochat.loop import EchoLoop
from echochat.messages import CATALOGS
from echochat.version import VERSION

runner = CliRunner()


def test_hello_empty_exit() -> None:
    result = runner.invoke(cli.app, ["--lang", "en"], input="hello\n\nexit\n")

    assert result.exit_code == 0
    assert result.stdout == (
        "Welcome to EchoChat!\n"
        "Type 'exit' to quit.\n"
        'You: EchoChat: You entered "hello".\n'
        "You: EchoChat: Please enter something.\n"
        "You: Exiting EchoChat.\n"
    )


def test_end_of_input_exits_cleanly() -> None:
    result = runner.invoke(cli.app, ["--lang", "en"], input="hello\n")

    assert result.exit_code == 0
    assert "Exiting EchoChat." not in result.stdout
    assert result.stdout.endswith("You: ")


def test_japanese_option() -> None:
    result = runner.invoke(cli.app, ["-l", "ja"], input="exit\n")

    assert result.exit_code == 0
    assert result.stdout.endswith("あなた: EchoChat を終了します。\n")


def test_language_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli.settings, "lang", "ja")

    result = runner.invoke(cli.app, [], input="exit\n")

    assert result.exit_code == 0
    assert result.stdout.startswith("EchoChat へようこそ！\n")


def test_unknown_language_is_usage_error() -> None:
    result = runner.invoke(cli.app, ["--lang", "fr"], input="exit\n")

    assert result.exit_code == 2


def test_version() -> None:
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout == f"echochat {VERSION}\n"


def test_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(self: EchoLoop) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(EchoLoop, "run", interrupted)

    result = runner.invoke(cli.app, ["--lang", "en"], input="")

    assert result.exit_code == cli.INTERRUPTED_EXIT_CODE
    assert result.stdout == "\n"


def test_undecodable_bytes_are_echoed_unchanged() -> None:
    result = runner.invoke(cli.app, ["--lang", "en"], input=b"caf\xe9\nexit\n")

    assert result.exit_code == 0
    assert b'EchoChat: You entered "caf\xe9".\n' in result.stdout_bytes
    assert result.stdout_bytes.endswith(b"You: Exiting EchoChat.\n")


def test_language_choices_follow_catalogs() -> None:
    assert [option.value for option in cli.LanguageOption] == list(CATALOGS)


def test_installed_version_matches_package() -> None:
    assert installed_version("echochat") == VERSION
