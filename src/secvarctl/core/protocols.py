"""Protocols (interfaces) consumed by the core layer.

These define the contracts that backends and infrastructure adapters
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class Command(Protocol):
    """A named subcommand a backend can execute.

    Any object exposing a ``name`` attribute and an :meth:`execute`
    method satisfies this protocol structurally (no explicit
    inheritance required).
    """

    @property
    def name(self) -> str:
        """Subcommand token, significant up to 32 characters."""
        ...  # pragma: no cover

    def execute(self, args: Sequence[str]) -> int:
        """Run the subcommand with the arguments that follow its token.

        Returns
        -------
        int
            Process exit status, passed through by the CLI unchanged.
        """
        ...  # pragma: no cover


class DescriptorSource(Protocol):
    """Contract for the platform file that names the active backend."""

    @property
    def location(self) -> str:
        """Human-readable location used in diagnostics."""
        ...  # pragma: no cover

    def exists(self) -> bool:
        """Return whether the platform exposes the descriptor at all."""
        ...  # pragma: no cover

    def read(self, max_bytes: int) -> bytes:
        """Return at most *max_bytes* bytes from the start of the descriptor.

        Raises
        ------
        DescriptorReadError
            When the descriptor exists but cannot be read.
        """
        ...  # pragma: no cover
