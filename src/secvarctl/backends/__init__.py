"""Built-in backends and registry assembly.

A backend is enabled by naming its feature when the registry is built.
Registration order is fixed (host, then guest) regardless of the order
in which features are given, so prefix matching stays deterministic.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from secvarctl.backends import guest, host
from secvarctl.core.models import Backend
from secvarctl.core.registry import BackendRegistry
from secvarctl.exceptions import ConfigurationError

BACKEND_FEATURES: dict[str, Callable[[], Backend]] = {
    "host": host.build_backend,
    "guest": guest.build_backend,
}

DEFAULT_FEATURES: tuple[str, ...] = tuple(BACKEND_FEATURES)


def build_registry(features: Iterable[str] = DEFAULT_FEATURES) -> BackendRegistry:
    """Build a :class:`BackendRegistry` holding the enabled backends.

    Raises
    ------
    ConfigurationError
        If *features* names a backend that does not exist.
    """
    enabled = set(features)
    unknown = enabled.difference(BACKEND_FEATURES)
    if unknown:
        raise ConfigurationError(
            f"unknown backend feature(s): {', '.join(sorted(unknown))}",
            hint=f"Available features: {', '.join(BACKEND_FEATURES)}",
        )
    return BackendRegistry(
        factory() for feature, factory in BACKEND_FEATURES.items() if feature in enabled
    )


__all__: list[str] = ["BACKEND_FEATURES", "DEFAULT_FEATURES", "build_registry"]
