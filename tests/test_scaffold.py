"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and distinct.
"""

from __future__ import annotations

import pytest

from secvarctl import __version__
from secvarctl.cli import exit_codes
from secvarctl.cli.app import main
from secvarctl.exceptions import (
    ArgumentParseError,
    BackendUnavailableError,
    ConfigurationError,
    DescriptorReadError,
    EnvironmentError,
    InvalidModeError,
    InvalidVariableError,
    MissingCommandError,
    SecvarctlError,
    UnknownCommandError,
    VariableError,
    VariableNotFoundError,
    VariableReadError,
    VariableWriteError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ArgumentParseError,
            BackendUnavailableError,
            ConfigurationError,
            DescriptorReadError,
            EnvironmentError,
            VariableError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[SecvarctlError]
    ) -> None:
        assert issubclass(exc_class, SecvarctlError)

    @pytest.mark.parametrize("exc_class", [MissingCommandError, InvalidModeError])
    def test_argument_errors(self, exc_class: type[SecvarctlError]) -> None:
        assert issubclass(exc_class, ArgumentParseError)

    @pytest.mark.parametrize(
        "exc_class",
        [InvalidVariableError, VariableNotFoundError, VariableReadError, VariableWriteError],
    )
    def test_variable_errors(self, exc_class: type[SecvarctlError]) -> None:
        assert issubclass(exc_class, VariableError)

    def test_hint_is_stored(self) -> None:
        err = SecvarctlError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert SecvarctlError("boom").hint is None

    def test_unknown_command_keeps_token(self) -> None:
        err = UnknownCommandError("delete")
        assert err.command == "delete"
        assert str(err) == "unknown command delete"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_codes_are_distinct(self) -> None:
        codes = [
            exit_codes.SUCCESS,
            exit_codes.GENERAL_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.ARG_PARSE_FAIL,
            exit_codes.UNKNOWN_COMMAND,
            exit_codes.KEYBOARD_INTERRUPT,
        ]
        assert len(set(codes)) == len(codes)


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_prints_usage_and_fails(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.ARG_PARSE_FAIL
        assert "USAGE" in capsys.readouterr().out

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--help"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "HELP" in out
        assert "USAGE" in out
