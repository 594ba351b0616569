"""Shared utilities — formatting helpers and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from secvarctl.utils.hexdump import format_hexdump

__all__: list[str] = ["format_hexdump"]
