"""Guest backend: PLPKS-based secure boot variables (``ibm,plpks-sb-v1``).

The guest key store exposes the UEFI-style key hierarchy plus the
GRUB and module signing databases.
"""

from __future__ import annotations

from secvarctl.backends.commands import VariableSet, build_commands
from secvarctl.core.models import GUEST_BACKEND_NAME, Backend

_GUEST_VARIABLES: tuple[str, ...] = (
    "PK",
    "KEK",
    "db",
    "dbx",
    "grubdb",
    "grubdbx",
    "sbat",
    "moduledb",
    "trustedcadb",
)

VARIABLES = VariableSet(readable=_GUEST_VARIABLES, writable=_GUEST_VARIABLES)


def build_backend() -> Backend:
    return Backend(name=GUEST_BACKEND_NAME, commands=build_commands(VARIABLES))
