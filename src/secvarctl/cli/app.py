"""CLI application entry point and command routing for secvarctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~secvarctl.exceptions.SecvarctlError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — flag scanning, backend selection and
  dispatch are delegated to the core layer.
* Several malformed invocations (bad ``-m`` value, no mode at all,
  requested mode not enabled) print a diagnostic but still exit with
  :data:`~secvarctl.cli.exit_codes.SUCCESS`.  Missing subcommands and
  unknown subcommands exit with their own codes.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from secvarctl.cli import exit_codes
from secvarctl.cli.console import console
from secvarctl.cli.log import configure_logging
from secvarctl.cli.usage import print_help, print_usage
from secvarctl.core.arguments import scan_arguments
from secvarctl.core.detector import BackendDetector
from secvarctl.core.dispatcher import CommandDispatcher
from secvarctl.core.models import Mode
from secvarctl.core.protocols import DescriptorSource
from secvarctl.core.registry import BackendRegistry
from secvarctl.exceptions import (
    BackendUnavailableError,
    InvalidModeError,
    MissingCommandError,
    SecvarctlError,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    registry: BackendRegistry | None = None,
    descriptor: DescriptorSource | None = None,
) -> int:
    """Run the secvarctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    registry:
        Enabled backends.  Built from every built-in backend when ``None``.
    descriptor:
        Platform descriptor.  The sysfs ``format`` file when ``None``.

    Returns
    -------
    int
        OS process exit code, or the executed subcommand's status.
    """
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    if not argv:
        print_usage()
        return exit_codes.ARG_PARSE_FAIL

    try:
        intent = scan_arguments(argv)
    except InvalidModeError as exc:
        logger.error("%s", exc)
        print_usage()
        return exit_codes.SUCCESS
    except MissingCommandError as exc:
        logger.error("%s", exc)
        print_usage()
        return exit_codes.ARG_PARSE_FAIL

    if intent.help_requested:
        print_help()
        return exit_codes.SUCCESS
    if intent.usage_requested:
        print_usage()
        return exit_codes.SUCCESS

    configure_logging(intent.verbosity)

    if intent.mode is Mode.UNSET:
        print_usage()
        return exit_codes.SUCCESS

    if registry is None:
        from secvarctl.backends import build_registry

        registry = build_registry()
    if descriptor is None:
        from secvarctl.infra.sysfs import SysfsDescriptor

        descriptor = SysfsDescriptor()

    dispatcher = CommandDispatcher(registry, BackendDetector(registry, descriptor))

    try:
        return dispatcher.dispatch(intent)
    except BackendUnavailableError as exc:
        logger.warning("%s", exc)
        return exit_codes.SUCCESS
    except UnknownCommandError as exc:
        logger.error("%s", exc)
        print_usage()
        return exit_codes.UNKNOWN_COMMAND


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SecvarctlError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
