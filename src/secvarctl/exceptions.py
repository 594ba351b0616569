"""Custom exception hierarchy for secvarctl.

All exceptions that cross layer boundaries must inherit from
:class:`SecvarctlError`.  Raw ``OSError`` instances must NEVER propagate
beyond the infrastructure layer — they are caught there and re-raised
as a typed subclass defined here.

Hierarchy
---------
SecvarctlError
├── ArgumentParseError
│   ├── MissingCommandError
│   └── InvalidModeError
├── DescriptorReadError
├── BackendUnavailableError
├── UnknownCommandError
├── ConfigurationError
├── VariableError
│   ├── InvalidVariableError
│   ├── VariableNotFoundError
│   ├── VariableReadError
│   └── VariableWriteError
└── EnvironmentError
"""

from __future__ import annotations


class SecvarctlError(Exception):
    """Base exception for all secvarctl errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class ArgumentParseError(SecvarctlError):
    """Raised when the global flags cannot be parsed."""


class MissingCommandError(ArgumentParseError):
    """Raised when the flags consume the whole command line."""


class InvalidModeError(ArgumentParseError):
    """Raised when ``-m``/``--mode`` is missing its value or the value is unknown."""


# --- Backend selection -----------------------------------------------------

class DescriptorReadError(SecvarctlError):
    """Raised when the platform descriptor file exists but cannot be read."""


class BackendUnavailableError(SecvarctlError):
    """Raised when neither the platform nor the requested mode yields a backend."""


class UnknownCommandError(SecvarctlError):
    """Raised when a subcommand is not in the selected backend's table."""

    def __init__(self, command: str, *, hint: str | None = None) -> None:
        super().__init__(f"unknown command {command}", hint=hint)
        self.command: str = command


class ConfigurationError(SecvarctlError):
    """Raised when the backend registry is assembled from unknown features."""


# --- Secure variables ------------------------------------------------------

class VariableError(SecvarctlError):
    """Base class for failures while handling a secure variable."""


class InvalidVariableError(VariableError):
    """Raised when a variable name is not supported by the selected backend."""


class VariableNotFoundError(VariableError):
    """Raised when a supported variable is absent from the variables directory."""


class VariableReadError(VariableError):
    """Raised when variable data or an input file cannot be read."""


class VariableWriteError(VariableError):
    """Raised when an update cannot be submitted to the firmware."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SecvarctlError):
    """Raised when a required runtime dependency is not available."""
