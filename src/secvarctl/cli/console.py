"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--usage``) remain functional even when
Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from secvarctl.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain print."""
        stream = sys.stderr if self._stderr else sys.stdout
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=stream)
            return
        rich_console.print(*objects, markup=markup, soft_wrap=True)

    def write_bytes(self, data: bytes) -> None:
        """Write raw *data* to the underlying binary stream."""
        stream = sys.stderr if self._stderr else sys.stdout
        stream.flush()
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(data.decode("latin-1"))
            return
        buffer.write(data)
        buffer.flush()


console = _ConsoleProxy(stderr=True)
"""Diagnostics and status messages."""

output = _ConsoleProxy(stderr=False)
"""Command results (usage text, variable contents)."""
