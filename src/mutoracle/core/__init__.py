"""Core utilities shared by the predicate layer and the run loop.

Exports:
    InputBuffer: Fixed-capacity zero-initialized byte buffer
    read_word / pack_word: Explicit little-endian word access
    read_bytes / zero_fill / abort_process: Platform services

Python 3.13+.
"""

from .buffer import InputBuffer
from .platform import abort_process, read_bytes, zero_fill
from .words import bit_distance, pack_word, read_u8, read_u16_le, read_u32_le, read_word

__all__ = [
    "InputBuffer",
    "abort_process",
    "bit_distance",
    "pack_word",
    "read_bytes",
    "read_u8",
    "read_u16_le",
    "read_u32_le",
    "read_word",
    "zero_fill",
]
