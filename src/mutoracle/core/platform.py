"""Platform services used by the harness run loop.

The three operations a harness needs from its host: read raw bytes, zero a
buffer, and die with a status an external driver recognises as a crash.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, BinaryIO, NoReturn

if TYPE_CHECKING:
    from mutoracle.core.buffer import InputBuffer

__all__ = ["abort_process", "read_bytes", "zero_fill"]


def read_bytes(stream: BinaryIO | None, max_len: int) -> bytes:
    """Read up to max_len bytes from a binary stream.

    Keeps reading until max_len bytes arrive or the stream reports EOF, so
    the result does not depend on how a pipe happens to chunk its writes.
    Short input is returned as-is.

    Args:
        stream: Binary stream, or None for sys.stdin.buffer
        max_len: Maximum number of bytes to return

    Returns:
        Between 0 and max_len bytes

    Raises:
        ValueError: If max_len is negative
    """
    if max_len < 0:
        msg = "max_len must not be negative"
        raise ValueError(msg)
    if stream is None:
        stream = sys.stdin.buffer

    chunks: list[bytes] = []
    remaining = max_len
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def zero_fill(buffer: InputBuffer) -> None:
    """Set every byte of buffer to zero."""
    buffer.reset()


def abort_process() -> NoReturn:
    """Terminate the process with SIGABRT.

    Flushes logging handlers first; os.abort() skips interpreter cleanup.
    """
    logging.shutdown()
    os.abort()
