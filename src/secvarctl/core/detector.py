"""Detection of the backend advertised by the running platform.

The platform exposes a short ASCII identifier (not necessarily
newline-terminated) in a descriptor file.  Only as many bytes as the
longest registered backend name are read; the registry then matches
them by prefix.

A missing descriptor is a normal condition on platforms without secure
variables, so every failure here is reported through the returned
:class:`~secvarctl.core.models.DetectionResult` plus a warning — this
module never raises.
"""

from __future__ import annotations

import logging

from secvarctl.core.models import DetectionResult, DetectionStatus
from secvarctl.core.protocols import DescriptorSource
from secvarctl.core.registry import BackendRegistry
from secvarctl.exceptions import DescriptorReadError

logger = logging.getLogger(__name__)


class BackendDetector:
    """Resolve the platform descriptor against a :class:`BackendRegistry`.

    Parameters
    ----------
    registry:
        Enabled backends, searched in registration order.
    source:
        Any object satisfying the :class:`DescriptorSource` protocol.
    """

    def __init__(self, registry: BackendRegistry, source: DescriptorSource) -> None:
        self._registry: BackendRegistry = registry
        self._source: DescriptorSource = source

    def detect(self) -> DetectionResult:
        """Probe the descriptor once and report the matching backend."""
        if not self._source.exists():
            logger.warning("platform does not support secure variables")
            return DetectionResult(DetectionStatus.NOT_FOUND)

        data = self._read_descriptor()
        if not data:
            logger.warning(
                "could not extract data from %s, "
                "assuming platform does not support secure variables",
                self._source.location,
            )
            return DetectionResult(DetectionStatus.NOT_FOUND)

        backend = self._registry.lookup(data)
        if backend is None:
            logger.warning(
                "%s does not contain known backend format",
                self._source.location,
            )
            return DetectionResult(DetectionStatus.UNKNOWN)

        return DetectionResult(DetectionStatus.FOUND, backend)

    def _read_descriptor(self) -> bytes:
        """Read the descriptor prefix, mapping read failures to ``b""``."""
        max_bytes = self._registry.max_name_length
        if max_bytes == 0:
            return b""
        try:
            return self._source.read(max_bytes)
        except DescriptorReadError as exc:
            logger.debug("descriptor read failed: %s", exc)
            return b""
