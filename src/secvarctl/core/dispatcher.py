"""Backend reconciliation and subcommand dispatch.

Flow per invocation (linear, no retries):

1. Ask the :class:`~secvarctl.core.detector.BackendDetector` which backend
   the platform advertises.  A detected backend always wins over the
   mode requested on the command line.
2. Otherwise fall back to the backend named by the requested mode, if it
   is registered, and warn that platform support is unconfirmed.
3. Match the first remaining argument against the backend's command
   table and execute the command with the arguments after it.
"""

from __future__ import annotations

import logging

from secvarctl.core.detector import BackendDetector
from secvarctl.core.models import Backend, ParsedIntent
from secvarctl.core.protocols import Command
from secvarctl.core.registry import BackendRegistry
from secvarctl.exceptions import BackendUnavailableError, MissingCommandError, UnknownCommandError

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Pick one :class:`Backend` and run one of its commands.

    Parameters
    ----------
    registry:
        Enabled backends, used for the requested-mode fallback.
    detector:
        Detector bound to the same registry.
    """

    def __init__(self, registry: BackendRegistry, detector: BackendDetector) -> None:
        self._registry: BackendRegistry = registry
        self._detector: BackendDetector = detector

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, intent: ParsedIntent) -> int:
        """Resolve the backend and command for *intent* and execute it.

        Returns
        -------
        int
            Whatever the executed command returns.

        Raises
        ------
        MissingCommandError
            If *intent* carries no subcommand.
        BackendUnavailableError
            If no backend could be selected.
        UnknownCommandError
            If the subcommand is not in the selected backend's table.
        """
        if not intent.remaining_args:
            raise MissingCommandError("commands not found")

        backend = self.resolve_backend(intent)
        token, *args = intent.remaining_args
        command = self.resolve_command(backend, token)

        logger.debug("running %s on backend %s", command.name, backend.name)
        return command.execute(tuple(args))

    def resolve_backend(self, intent: ParsedIntent) -> Backend:
        """Return the detected backend, or the requested one as a fallback."""
        result = self._detector.detect()
        if result.found and result.backend is not None:
            return result.backend

        backend = self._registry.lookup(intent.requested_backend_name)
        if backend is None:
            raise BackendUnavailableError(f"{intent.mode.value} mode is not enabled.")

        logger.warning(
            "unsupported backend detected, assuming %s; "
            "read/write may not work as expected",
            backend.name,
        )
        return backend

    def resolve_command(self, backend: Backend, token: str) -> Command:
        """Return the command of *backend* matching *token*."""
        command = self._registry.find_command(backend, token)
        if command is None:
            raise UnknownCommandError(
                token,
                hint=f"Available commands: {', '.join(backend.command_names())}",
            )
        return command
