"""Infrastructure layer — operating system integration.

This layer wraps all interaction with the secvar sysfs interface.  Every
raw ``OSError`` must be caught here and re-raised as a
:class:`~secvarctl.exceptions.SecvarctlError` subclass.

Rules
-----
* No imports from ``cli`` or ``backends``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from secvarctl.infra.sysfs import (
    SECVAR_FORMAT_PATH,
    SECVAR_VARS_PATH,
    SecvarStore,
    SysfsDescriptor,
)

__all__: list[str] = [
    "SECVAR_FORMAT_PATH",
    "SECVAR_VARS_PATH",
    "SecvarStore",
    "SysfsDescriptor",
]
