"""``read`` and ``write`` subcommands shared by the built-in backends.

Each backend builds its own command instances from the variables it
supports; the handlers receive the arguments that follow the subcommand
token and parse them with :mod:`argparse`.

Variable contents are handled as opaque bytes: no ESL, X.509 or PKCS7
parsing or signature checking happens here.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from secvarctl.cli import exit_codes
from secvarctl.cli.console import console, output
from secvarctl.core.models import FunctionCommand
from secvarctl.exceptions import ArgumentParseError, InvalidVariableError, VariableReadError
from secvarctl.infra.sysfs import SECVAR_VARS_PATH, SecvarStore
from secvarctl.utils.hexdump import format_hexdump

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VariableSet:
    """Secure variables a backend can read, and the subset it can update."""

    readable: tuple[str, ...]
    writable: tuple[str, ...]

    def require_readable(self, name: str) -> None:
        if name not in self.readable:
            raise InvalidVariableError(
                f"{name} is not a valid variable name",
                hint=f"Valid names: {', '.join(self.readable)}",
            )

    def require_writable(self, name: str) -> None:
        self.require_readable(name)
        if name not in self.writable:
            raise InvalidVariableError(
                f"{name} is read-only",
                hint=f"Writable names: {', '.join(self.writable)}",
            )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class _ParserExit(Exception):
    """Raised instead of ``SystemExit`` when argparse finishes early (``-h``)."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class _CommandParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports through exceptions, never ``SystemExit``."""

    def exit(self, status: int = 0, message: str | None = None) -> None:  # type: ignore[override]
        if message:
            self._print_message(message, sys.stderr)
        raise _ParserExit(status)

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        raise ArgumentParseError(f"{self.prog}: {message}")


def _parse(parser: argparse.ArgumentParser, args: Sequence[str]) -> argparse.Namespace | int:
    """Parse *args*, or return the status the handler must exit with."""
    try:
        return parser.parse_args(list(args))
    except _ParserExit as exc:
        return exit_codes.SUCCESS if exc.status == 0 else exit_codes.ARG_PARSE_FAIL
    except ArgumentParseError as exc:
        logger.error("%s", exc)
        return exit_codes.ARG_PARSE_FAIL


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------

def _read_parser(variables: VariableSet) -> argparse.ArgumentParser:
    parser = _CommandParser(
        prog="secvarctl read",
        description="Print the contents of secure variables.",
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=SECVAR_VARS_PATH,
        help="secvar variables directory (default: %(default)s)",
    )
    parser.add_argument(
        "-r",
        "--raw",
        action="store_true",
        help="write the raw variable data to stdout",
    )
    parser.add_argument(
        "variables",
        nargs="*",
        metavar="VARIABLE",
        help=f"one of: {', '.join(variables.readable)} (default: all present)",
    )
    return parser


def run_read(args: Sequence[str], variables: VariableSet) -> int:
    """Print the variables named in *args*, or every one present."""
    opts = _parse(_read_parser(variables), args)
    if isinstance(opts, int):
        return opts
    store = SecvarStore(opts.path)

    for name in opts.variables:
        variables.require_readable(name)
    names: list[str] = opts.variables or [
        name for name in variables.readable if store.has_variable(name)
    ]

    contents = [(name, store.read_variable(name)) for name in names]
    if not contents:
        console.print(f"[yellow]No secure variables found in {store.root}[/yellow]")
        return exit_codes.SUCCESS

    if opts.raw:
        for _, data in contents:
            output.write_bytes(data)
        return exit_codes.SUCCESS

    _render_variables(contents)
    return exit_codes.SUCCESS


def _render_variables(contents: list[tuple[str, bytes]]) -> None:
    """Render a size summary followed by a hex dump of every variable."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        for name, data in contents:
            print(f"{name:<12} {len(data)} bytes", file=sys.stdout)
    else:
        table = Table(show_header=True, header_style="bold cyan", border_style="dim")
        table.add_column("Variable", style="bold", min_width=12)
        table.add_column("Size (bytes)", justify="right")
        for name, data in contents:
            table.add_row(name, str(len(data)))
        output.print(table)

    for name, data in contents:
        output.print(f"\n{name}:", markup=False)
        if not data:
            output.print("  (empty)", markup=False)
            continue
        output.print("\n".join(format_hexdump(data)), markup=False)


# ---------------------------------------------------------------------------
# write
# ---------------------------------------------------------------------------

def _write_parser(variables: VariableSet) -> argparse.ArgumentParser:
    parser = _CommandParser(
        prog="secvarctl write",
        description=(
            "Submit a signed auth file as an update to a secure variable. "
            "The update is committed by firmware on the next reboot."
        ),
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=SECVAR_VARS_PATH,
        help="secvar variables directory (default: %(default)s)",
    )
    parser.add_argument(
        "variable",
        metavar="VARIABLE",
        help=f"one of: {', '.join(variables.writable)}",
    )
    parser.add_argument("auth_file", type=Path, metavar="FILE", help="signed auth file")
    return parser


def run_write(args: Sequence[str], variables: VariableSet) -> int:
    """Submit the auth file named in *args* to the variable's update file."""
    opts = _parse(_write_parser(variables), args)
    if isinstance(opts, int):
        return opts
    variables.require_writable(opts.variable)

    data = _read_auth_file(opts.auth_file)
    SecvarStore(opts.path).submit_update(opts.variable, data)

    console.print(
        f"[green]Update for {opts.variable} submitted.[/green] "
        "It will be committed on reboot."
    )
    return exit_codes.SUCCESS


def _read_auth_file(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise VariableReadError(f"could not read {path}: {exc.strerror or exc}") from exc
    if not data:
        raise VariableReadError(f"{path} is empty")
    return data


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def build_commands(variables: VariableSet) -> tuple[FunctionCommand, ...]:
    """Return the ``read``/``write`` command table for *variables*."""
    return (
        FunctionCommand("read", lambda args: run_read(args, variables)),
        FunctionCommand("write", lambda args: run_write(args, variables)),
    )
