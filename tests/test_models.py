"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import logging

import pytest

from secvarctl.core.models import (
    GUEST_BACKEND_NAME,
    HOST_BACKEND_NAME,
    Backend,
    DetectionResult,
    DetectionStatus,
    FunctionCommand,
    Mode,
    ParsedIntent,
)


# ---------------------------------------------------------------------------
# Mode
# ---------------------------------------------------------------------------

class TestMode:
    def test_host_requests_edk2_backend(self) -> None:
        assert Mode.HOST.backend_name == HOST_BACKEND_NAME == "ibm,edk2-compat-v1"

    def test_guest_requests_plpks_backend(self) -> None:
        assert Mode.GUEST.backend_name == GUEST_BACKEND_NAME == "ibm,plpks-sb-v1"

    def test_unset_requests_nothing(self) -> None:
        assert Mode.UNSET.backend_name is None


# ---------------------------------------------------------------------------
# FunctionCommand / Backend
# ---------------------------------------------------------------------------

class TestFunctionCommand:
    def test_execute_forwards_args_and_status(self) -> None:
        seen: list[tuple[str, ...]] = []

        def handler(args: object) -> int:
            seen.append(tuple(args))  # type: ignore[arg-type]
            return 7

        command = FunctionCommand("read", handler)
        assert command.execute(("PK",)) == 7
        assert seen == [("PK",)]

    def test_frozen(self) -> None:
        command = FunctionCommand("read", lambda args: 0)
        with pytest.raises(AttributeError):
            command.name = "write"  # type: ignore[misc]


class TestBackend:
    def test_command_names_keep_order(self) -> None:
        backend = Backend(
            name="x",
            commands=(
                FunctionCommand("read", lambda args: 0),
                FunctionCommand("write", lambda args: 0),
                FunctionCommand("validate", lambda args: 0),
            ),
        )
        assert backend.command_names() == ("read", "write", "validate")

    def test_frozen(self) -> None:
        backend = Backend(name="x", commands=())
        with pytest.raises(AttributeError):
            backend.name = "y"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# ParsedIntent / DetectionResult
# ---------------------------------------------------------------------------

class TestParsedIntent:
    def test_defaults(self) -> None:
        intent = ParsedIntent()
        assert intent.mode is Mode.UNSET
        assert intent.requested_backend_name is None
        assert intent.verbosity == logging.WARNING
        assert intent.help_requested is False
        assert intent.usage_requested is False
        assert intent.remaining_args == ()


class TestDetectionResult:
    def test_found_requires_backend(self) -> None:
        backend = Backend(name="x", commands=())
        assert DetectionResult(DetectionStatus.FOUND, backend).found is True
        assert DetectionResult(DetectionStatus.FOUND).found is False

    @pytest.mark.parametrize("status", [DetectionStatus.NOT_FOUND, DetectionStatus.UNKNOWN])
    def test_failures_are_not_found(self, status: DetectionStatus) -> None:
        assert DetectionResult(status).found is False
