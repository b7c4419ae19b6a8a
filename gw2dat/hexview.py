"""Text layout of a hex dump: offset column, hex bytes and printable text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

BYTES_PER_LINE = 0x10


@dataclass(frozen=True)
class HexLine:
    """One line of a hex dump."""

    offset: int
    hex: Tuple[str, ...]
    text: str

    @property
    def offset_text(self) -> str:
        """Offset column as shown in the dump, e.g. ``00000010h``."""
        return f"{self.offset:08x}h"

    def __str__(self) -> str:
        hex_column = " ".join(self.hex).ljust(BYTES_PER_LINE * 3 - 1)
        return f"{self.offset_text}  {hex_column}  {self.text}".rstrip()


def filter_text_char(value: int) -> str:
    """Printable ASCII characters as themselves, anything else as ``.``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value!r} is not a byte value")
    return chr(value) if 31 < value < 127 else "."


def line_count(size: int) -> int:
    """Number of dump lines for ``size`` bytes; an empty buffer still has one."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return 1
    return ((size - 1) >> 4) + 1


def hex_lines(
    data: bytes, first_line: int = 0, last_line: Optional[int] = None
) -> Iterator[HexLine]:
    """Yield the dump lines from ``first_line`` to ``last_line`` inclusive.

    The range is clamped to the lines that exist for ``data``.
    """
    data = bytes(data)
    final = line_count(len(data)) - 1
    last = final if last_line is None else min(final, last_line)
    for line in range(max(0, first_line), last + 1):
        start = line * BYTES_PER_LINE
        chunk = data[start:start + BYTES_PER_LINE]
        yield HexLine(
            offset=start,
            hex=tuple(f"{b:02x}" for b in chunk),
            text="".join(filter_text_char(b) for b in chunk),
        )


def format_hex_dump(data: bytes) -> str:
    """Full hex dump of ``data`` as newline separated lines."""
    return "\n".join(str(line) for line in hex_lines(data))