"""Harness geometry configuration.

One frozen dataclass describes everything about a harness that is not a
predicate: how large its buffer is, how much it reads, the minimum input it
accepts, and the seed corpus and dictionary a fuzzer should be started with.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["HarnessConfig"]


@dataclass(frozen=True, slots=True)
class HarnessConfig:
    """Immutable description of a harness's input handling.

    Attributes:
        name: Short harness identifier used by the CLI and registry
        capacity: Size of the zero-initialized input buffer
        read_size: Maximum bytes read from the input stream
        min_length: Inputs shorter than this exit normally without evaluation
        seeds: Seed inputs to start a fuzzing campaign from
        dictionary: Tokens to hand the fuzzer as user extras

    Example:
        >>> config = HarnessConfig(name="b", capacity=128, read_size=100, min_length=64)
        >>> config.accepts(63)
        False
    """

    name: str
    capacity: int
    read_size: int
    min_length: int = 0
    seeds: tuple[bytes, ...] = ()
    dictionary: tuple[bytes, ...] = ()

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If any size is out of range, a seed does not fit in
                read_size, or a dictionary token is empty.
        """
        if not self.name:
            msg = "name must not be empty"
            raise ValueError(msg)
        if self.capacity <= 0:
            msg = "capacity must be positive"
            raise ValueError(msg)
        if not 0 < self.read_size <= self.capacity:
            msg = "read_size must be positive and not exceed capacity"
            raise ValueError(msg)
        if not 0 <= self.min_length <= self.read_size:
            msg = "min_length must be between 0 and read_size"
            raise ValueError(msg)
        for seed in self.seeds:
            if len(seed) > self.read_size:
                msg = f"seed of {len(seed)} bytes exceeds read_size {self.read_size}"
                raise ValueError(msg)
        if any(not token for token in self.dictionary):
            msg = "dictionary tokens must not be empty"
            raise ValueError(msg)

    @property
    def baseline(self) -> bytes:
        """First seed, or a single zero byte for seedless harnesses."""
        return self.seeds[0] if self.seeds else b"\x00"

    def accepts(self, length: int) -> bool:
        """Whether an input of this many bytes is evaluated."""
        return length >= self.min_length
