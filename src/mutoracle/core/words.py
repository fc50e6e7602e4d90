"""Fixed-width little-endian word access over byte buffers.

Words are composed and decomposed with explicit shifts so the result never
depends on host byte order or on struct format strings. A 16-bit word at
offset 12 holding 0x0100 is always the byte pair 00 01.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mutoracle.enums import Width

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "bit_distance",
    "pack_word",
    "read_u8",
    "read_u16_le",
    "read_u32_le",
    "read_word",
]


def _check_span(data: Sequence[int], offset: int, size: int) -> None:
    if offset < 0 or offset + size > len(data):
        msg = f"{size}-byte read at offset {offset} exceeds {len(data)}-byte buffer"
        raise IndexError(msg)


def read_u8(data: Sequence[int], offset: int) -> int:
    """Read one unsigned byte."""
    _check_span(data, offset, 1)
    return data[offset]


def read_u16_le(data: Sequence[int], offset: int) -> int:
    """Read an unsigned 16-bit little-endian word."""
    _check_span(data, offset, 2)
    return data[offset] | (data[offset + 1] << 8)


def read_u32_le(data: Sequence[int], offset: int) -> int:
    """Read an unsigned 32-bit little-endian word."""
    _check_span(data, offset, 4)
    return (
        data[offset]
        | (data[offset + 1] << 8)
        | (data[offset + 2] << 16)
        | (data[offset + 3] << 24)
    )


def read_word(data: Sequence[int], offset: int, width: Width) -> int:
    """Read an unsigned little-endian word of the given width.

    Args:
        data: Buffer to read from (bytes, bytearray, or InputBuffer)
        offset: Index of the least significant byte
        width: Word width

    Returns:
        Unsigned integer value

    Raises:
        IndexError: If the word extends past the end of data
    """
    match width:
        case Width.U8:
            return read_u8(data, offset)
        case Width.U16:
            return read_u16_le(data, offset)
        case Width.U32:
            return read_u32_le(data, offset)


def pack_word(value: int, width: Width) -> bytes:
    """Encode an unsigned value as little-endian bytes of the given width.

    Raises:
        ValueError: If value does not fit in width
    """
    if not 0 <= value <= width.max_value:
        msg = f"Value {value:#x} does not fit in {int(width)} bits"
        raise ValueError(msg)
    return bytes((value >> (8 * i)) & 0xFF for i in range(width.size))


def bit_distance(a: int, b: int) -> int:
    """Count bits that differ between two unsigned values.

    A single-bit flip has distance 1; an interesting value must be at
    distance 2 or more from its seed to be unambiguous.
    """
    return (a ^ b).bit_count()
