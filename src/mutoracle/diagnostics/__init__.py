"""Error types for mutoracle.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    BufferOverflowError,
    ChainDefinitionError,
    OracleError,
    OverlappingTriggerError,
    StrategyCrashError,
    UnknownHarnessError,
)

__all__ = [
    "BufferOverflowError",
    "ChainDefinitionError",
    "OracleError",
    "OverlappingTriggerError",
    "StrategyCrashError",
    "UnknownHarnessError",
]
