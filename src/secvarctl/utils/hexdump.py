"""Hex dump formatting for variable contents."""

from __future__ import annotations

BYTES_PER_LINE: int = 16


def format_hexdump(data: bytes, width: int = BYTES_PER_LINE) -> list[str]:
    """Return ``offset  hex  |ascii|`` lines for *data*, *width* bytes each."""
    lines: list[str] = []
    for offset in range(0, len(data), width):
        chunk = data[offset : offset + width]
        hex_part = " ".join(f"{byte:02x}" for byte in chunk)
        text_part = "".join(chr(byte) if 0x20 <= byte < 0x7F else "." for byte in chunk)
        lines.append(f"{offset:08x}  {hex_part:<{width * 3 - 1}}  |{text_part}|")
    return lines
