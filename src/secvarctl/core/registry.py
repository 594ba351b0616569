"""Ordered, read-only registry of the enabled backends.

Backend names are matched as prefixes anchored at the start of the
candidate: ``"ibm,edk2-compat-v1\\n"`` selects ``ibm,edk2-compat-v1``.
When one registered name is a prefix of another, the entry registered
first wins.  Names are compared case-sensitively.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from secvarctl.core.models import COMMAND_NAME_MAX, Backend
from secvarctl.core.protocols import Command

logger = logging.getLogger(__name__)


def command_name_matches(token: str, name: str, limit: int = COMMAND_NAME_MAX) -> bool:
    """Compare *token* and *name* on their first *limit* characters only."""
    return token[:limit] == name[:limit]


def backend_name_matches(candidate: str | bytes, name: str) -> bool:
    """Return whether *candidate* starts with the backend *name*."""
    if isinstance(candidate, bytes):
        return candidate.startswith(name.encode("ascii"))
    return candidate.startswith(name)


class BackendRegistry:
    """Fixed sequence of :class:`Backend` entries in registration order.

    Parameters
    ----------
    backends:
        Backends to register.  The registry keeps its own tuple, so the
        caller's iterable is not retained.
    """

    def __init__(self, backends: Iterable[Backend] = ()) -> None:
        self._backends: tuple[Backend, ...] = tuple(backends)

    def __iter__(self) -> Iterator[Backend]:
        return iter(self._backends)

    def __len__(self) -> int:
        return len(self._backends)

    def __bool__(self) -> bool:
        return len(self._backends) > 0

    @property
    def backends(self) -> tuple[Backend, ...]:
        return self._backends

    @property
    def max_name_length(self) -> int:
        """Length of the longest registered name, ``0`` when empty."""
        return max((len(backend.name) for backend in self._backends), default=0)

    def lookup(self, candidate: str | bytes | None) -> Backend | None:
        """Return the first backend whose name prefixes *candidate*."""
        if candidate is None:
            return None
        for backend in self._backends:
            if backend_name_matches(candidate, backend.name):
                logger.info("found backend %s", backend.name)
                return backend
        return None

    @staticmethod
    def find_command(backend: Backend, token: str) -> Command | None:
        """Return the first command of *backend* matching *token*."""
        for command in backend.commands:
            if command_name_matches(token, command.name):
                return command
        return None
