"""Core layer — backend selection and subcommand dispatch.

Rules
-----
* No ``print()`` calls; diagnostics go through :mod:`logging` only.
* No filesystem I/O — the descriptor is reached through a protocol.
* No imports from ``cli``, ``infra`` or ``backends``.
"""

from secvarctl.core.arguments import scan_arguments
from secvarctl.core.detector import BackendDetector
from secvarctl.core.dispatcher import CommandDispatcher
from secvarctl.core.models import (
    Backend,
    DetectionResult,
    DetectionStatus,
    FunctionCommand,
    Mode,
    ParsedIntent,
)
from secvarctl.core.protocols import Command, DescriptorSource
from secvarctl.core.registry import BackendRegistry

__all__: list[str] = [
    "Backend",
    "BackendDetector",
    "BackendRegistry",
    "Command",
    "CommandDispatcher",
    "DescriptorSource",
    "DetectionResult",
    "DetectionStatus",
    "FunctionCommand",
    "Mode",
    "ParsedIntent",
    "scan_arguments",
]
