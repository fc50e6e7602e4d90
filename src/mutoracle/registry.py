"""Registered oracle harnesses.

    a - ASCII seed "AAAA", four strategies on bytes 0..3
    b - zero/0xFF seeds, fifteen strategy predicates at disjoint offsets

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from mutoracle.diagnostics import UnknownHarnessError
from mutoracle.harnesses import harness_a, harness_b

if TYPE_CHECKING:
    from mutoracle.runner import Harness

__all__ = ["HARNESSES", "get_harness"]

HARNESSES = MappingProxyType(
    {
        harness_a.HARNESS.name: harness_a.HARNESS,
        harness_b.HARNESS.name: harness_b.HARNESS,
    },
)


def get_harness(name: str) -> Harness:
    """Look up a registered harness by name (case-insensitive).

    Raises:
        UnknownHarnessError: If name is not registered
    """
    key = name.strip().lower()
    try:
        return HARNESSES[key]
    except KeyError:
        raise UnknownHarnessError(name, tuple(HARNESSES)) from None
