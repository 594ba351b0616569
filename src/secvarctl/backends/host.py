"""Host backend: EDK2-compatible firmware secure variables (``ibm,edk2-compat-v1``)."""

from __future__ import annotations

from secvarctl.backends.commands import VariableSet, build_commands
from secvarctl.core.models import HOST_BACKEND_NAME, Backend

VARIABLES = VariableSet(
    readable=("PK", "KEK", "db", "dbx", "TS"),
    writable=("PK", "KEK", "db", "dbx"),
)


def build_backend() -> Backend:
    return Backend(name=HOST_BACKEND_NAME, commands=build_commands(VARIABLES))
