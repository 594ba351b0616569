"""Single source of truth for the secvarctl package version."""

from __future__ import annotations

__version__: str = "1.0.0"
