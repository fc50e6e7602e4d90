"""Fixed-capacity, zero-initialized input buffer.

Mirrors a stack array that is memset to zero and then partially filled by a
single read: bytes past the filled length stay zero and remain readable, so
predicates may inspect offsets the input never reached.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import overload

from mutoracle.diagnostics import BufferOverflowError

__all__ = ["InputBuffer"]


@dataclass(slots=True)
class InputBuffer:
    """Zero-initialized byte buffer owned by one harness invocation.

    Usage:
        buf = InputBuffer(128)
        buf.fill(data)
        if buf[3] == 0xFF:
            ...

    Mutability Note:
        Intentionally mutable (not frozen=True): the buffer is zeroed and then
        filled in place, exactly once per invocation.

    Attributes:
        capacity: Total size in bytes
        filled: Number of bytes written by the last fill()
    """

    capacity: int
    filled: int = field(default=0, init=False)
    _data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate zeroed storage.

        Raises:
            ValueError: If capacity is not positive
        """
        if self.capacity <= 0:
            msg = "capacity must be positive"
            raise ValueError(msg)
        self._data = bytearray(self.capacity)

    def reset(self) -> None:
        """Zero every byte and mark the buffer empty."""
        self._data[:] = bytes(self.capacity)
        self.filled = 0

    def fill(self, chunk: bytes) -> int:
        """Copy chunk to the start of the buffer.

        Bytes after the chunk keep their current value (zero after reset()).

        Returns:
            Number of bytes copied

        Raises:
            BufferOverflowError: If chunk is longer than capacity
        """
        if len(chunk) > self.capacity:
            raise BufferOverflowError(self.capacity, len(chunk))
        self._data[: len(chunk)] = chunk
        self.filled = len(chunk)
        return self.filled

    def snapshot(self) -> bytes:
        """Return an immutable copy of the full capacity."""
        return bytes(self._data)

    def __len__(self) -> int:
        return self.capacity

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> bytes: ...

    def __getitem__(self, index: int | slice) -> int | bytes:
        if isinstance(index, slice):
            return bytes(self._data[index])
        return self._data[index]
