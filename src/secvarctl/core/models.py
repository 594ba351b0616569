"""Domain models for secvarctl.

All models are **frozen** dataclasses or enums — immutable value objects
created once per invocation (or once at start-up for the backend
tables) and never mutated afterwards.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secvarctl.core.protocols import Command


HOST_BACKEND_NAME: str = "ibm,edk2-compat-v1"
"""Descriptor identifier of the EDK2-compatible host firmware interface."""

GUEST_BACKEND_NAME: str = "ibm,plpks-sb-v1"
"""Descriptor identifier of the PLPKS-based guest interface."""

COMMAND_NAME_MAX: int = 32
"""Number of significant characters when matching subcommand names."""


# ---------------------------------------------------------------------------
# Mode selector
# ---------------------------------------------------------------------------

class Mode(enum.Enum):
    """Backend family chosen with ``-m``/``--mode``."""

    UNSET = "unset"
    HOST = "host"
    GUEST = "guest"

    @property
    def backend_name(self) -> str | None:
        """Backend name this mode requests, or ``None`` when unset."""
        return _MODE_BACKENDS.get(self)


_MODE_BACKENDS: dict[Mode, str] = {
    Mode.HOST: HOST_BACKEND_NAME,
    Mode.GUEST: GUEST_BACKEND_NAME,
}


# ---------------------------------------------------------------------------
# Commands and backends
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FunctionCommand:
    """A :class:`~secvarctl.core.protocols.Command` backed by a plain callable."""

    name: str
    """Subcommand token, significant up to :data:`COMMAND_NAME_MAX` characters."""

    handler: Callable[[Sequence[str]], int]
    """Callable receiving the arguments after the subcommand token."""

    def execute(self, args: Sequence[str]) -> int:
        return self.handler(args)


@dataclass(frozen=True, slots=True)
class Backend:
    """A named secure-variable implementation and its ordered command table."""

    name: str
    """Stable identifier, matched against the platform descriptor."""

    commands: tuple[Command, ...]
    """Subcommands in registration order."""

    def command_names(self) -> tuple[str, ...]:
        return tuple(command.name for command in self.commands)


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedIntent:
    """Result of scanning the leading global flags."""

    mode: Mode = Mode.UNSET
    requested_backend_name: str | None = None
    verbosity: int = logging.WARNING
    """A :mod:`logging` level; ``WARNING`` unless ``-v`` was given."""

    help_requested: bool = False
    usage_requested: bool = False
    remaining_args: tuple[str, ...] = ()
    """Subcommand token followed by its own arguments, untouched."""


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

class DetectionStatus(enum.Enum):
    """Outcome of probing the platform descriptor."""

    FOUND = "found"
    NOT_FOUND = "not found"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Backend advertised by the platform, if any."""

    status: DetectionStatus
    backend: Backend | None = None

    @property
    def found(self) -> bool:
        return self.status is DetectionStatus.FOUND and self.backend is not None
