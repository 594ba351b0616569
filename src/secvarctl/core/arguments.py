"""Scanner for the global flags that precede a subcommand.

Consumes a strict prefix of the command line made of tokens starting
with ``-`` and stops at the first other token, which is the subcommand.
Flags are evaluated in encounter order; ``--usage``, ``--help`` and
unrecognised flags end the scan immediately, so later flags are never
looked at.

Guarantees
----------
* Pure — no I/O, no ``print()``; the CLI layer renders the outcome.
* Only :class:`~secvarctl.exceptions.ArgumentParseError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from secvarctl.core.models import Mode, ParsedIntent
from secvarctl.exceptions import InvalidModeError, MissingCommandError

USAGE_FLAGS: frozenset[str] = frozenset({"--usage"})
HELP_FLAGS: frozenset[str] = frozenset({"--help", "-h"})
MODE_FLAGS: frozenset[str] = frozenset({"-m", "--mode"})
VERBOSE_FLAGS: frozenset[str] = frozenset({"-v", "--verbose"})

_MODES_BY_VALUE: dict[str, Mode] = {"host": Mode.HOST, "guest": Mode.GUEST}


def scan_arguments(argv: Sequence[str]) -> ParsedIntent:
    """Scan the leading flags of *argv* (program name excluded).

    Returns
    -------
    ParsedIntent
        With ``help_requested``/``usage_requested`` set when the scan was
        cut short, otherwise with the selected mode and the remaining
        arguments (subcommand first).

    Raises
    ------
    InvalidModeError
        If ``-m``/``--mode`` is the last token or its value is neither
        ``host`` nor ``guest``.
    MissingCommandError
        If the flags consume the whole command line.
    """
    mode = Mode.UNSET
    verbosity = logging.WARNING
    index = 0

    while index < len(argv) and argv[index].startswith("-"):
        token = argv[index]

        if token in USAGE_FLAGS:
            return ParsedIntent(usage_requested=True, verbosity=verbosity)
        if token in HELP_FLAGS:
            return ParsedIntent(help_requested=True, verbosity=verbosity)

        if token in MODE_FLAGS:
            index += 1
            mode = _parse_mode(argv[index] if index < len(argv) else None)
        elif token in VERBOSE_FLAGS:
            verbosity = logging.DEBUG
        else:
            return ParsedIntent(usage_requested=True, verbosity=verbosity)

        index += 1

    if index >= len(argv):
        raise MissingCommandError("commands not found")

    return ParsedIntent(
        mode=mode,
        requested_backend_name=mode.backend_name,
        verbosity=verbosity,
        remaining_args=tuple(argv[index:]),
    )


def _parse_mode(value: str | None) -> Mode:
    """Map the token following ``-m`` to a :class:`Mode`."""
    if value is None:
        raise InvalidModeError(
            "mode name is needed",
            hint="Use -m host or -m guest.",
        )
    try:
        return _MODES_BY_VALUE[value]
    except KeyError:
        raise InvalidModeError(
            f"{value} is unknown mode",
            hint="Use -m host or -m guest.",
        ) from None
