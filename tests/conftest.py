"""Shared pytest fixtures and configuration for the secvarctl test suite.

Guidelines
----------
* No test touches the real ``/sys/firmware/secvar`` tree.
* Descriptor files and variable directories live under ``tmp_path``.
* Core tests must be pure — no side effects.
* Logging handlers installed by the CLI are removed after every test.
* Commands are recorded with ``make_command`` rather than real handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from secvarctl.cli.log import LOGGER_NAME
from secvarctl.infra.sysfs import SysfsDescriptor


@pytest.fixture(autouse=True)
def _reset_secvarctl_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def descriptor_file(tmp_path: Path) -> Callable[[bytes], SysfsDescriptor]:
    """Factory writing *content* to a descriptor file under ``tmp_path``."""

    def _make(content: bytes) -> SysfsDescriptor:
        path = tmp_path / "format"
        path.write_bytes(content)
        return SysfsDescriptor(path)

    return _make


@pytest.fixture
def missing_descriptor(tmp_path: Path) -> SysfsDescriptor:
    return SysfsDescriptor(tmp_path / "no-such-format")


@pytest.fixture
def secvar_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating ``vars/<NAME>/{data,size,update}`` under ``tmp_path``."""
    root = tmp_path / "vars"
    root.mkdir()

    def _make(name: str, data: bytes = b"", *, size: int | None = None) -> Path:
        var_dir = root / name
        var_dir.mkdir()
        (var_dir / "data").write_bytes(data)
        (var_dir / "size").write_text(f"{len(data) if size is None else size}\n")
        (var_dir / "update").write_bytes(b"")
        return root

    return _make


class RecordingCommand:
    """Command fake that records every argument list it receives."""

    def __init__(self, name: str, status: int = 0) -> None:
        self.name = name
        self.status = status
        self.calls: list[tuple[str, ...]] = []

    def execute(self, args: Sequence[str]) -> int:
        self.calls.append(tuple(args))
        return self.status


@pytest.fixture
def make_command() -> type[RecordingCommand]:
    """Factory for :class:`RecordingCommand`: ``make_command("read", status=0)``."""
    return RecordingCommand
