"""Tests for registry.py lookups and the diagnostics exception hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import pytest

import mutoracle
from mutoracle.diagnostics import (
    BufferOverflowError,
    ChainDefinitionError,
    OracleError,
    OverlappingTriggerError,
    StrategyCrashError,
    UnknownHarnessError,
)
from mutoracle.harnesses import harness_a, harness_b
from mutoracle.registry import HARNESSES, get_harness


class TestRegistry:
    """Harness lookup by name."""

    def test_registered_names(self) -> None:
        assert list(HARNESSES) == ["a", "b"]

    def test_lookup(self) -> None:
        assert get_harness("a") is harness_a.HARNESS
        assert get_harness("b") is harness_b.HARNESS

    def test_lookup_normalizes(self) -> None:
        assert get_harness(" B ") is harness_b.HARNESS

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownHarnessError) as exc_info:
            get_harness("c")
        assert str(exc_info.value) == "Unknown harness 'c' (known: a, b)"
        assert exc_info.value.known == ("a", "b")

    def test_unknown_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_harness("zzz")

    def test_mapping_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            HARNESSES["c"] = harness_a.HARNESS  # type: ignore[index]


class TestExceptionHierarchy:
    """Every library error derives from OracleError."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            ChainDefinitionError,
            OverlappingTriggerError,
            BufferOverflowError,
            StrategyCrashError,
            UnknownHarnessError,
        ],
    )
    def test_subclasses_oracle_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, OracleError)

    def test_overlap_is_chain_definition_error(self) -> None:
        assert issubclass(OverlappingTriggerError, ChainDefinitionError)

    def test_overlap_message(self) -> None:
        err = OverlappingTriggerError("a", "b", (4, 5))
        assert str(err) == "Predicates 'a' and 'b' both trigger on byte(s) 4, 5"

    def test_overflow_message(self) -> None:
        assert str(BufferOverflowError(128, 200)) == "Cannot fill 200 bytes into a 128-byte buffer"

    def test_strategy_crash_message(self) -> None:
        err = StrategyCrashError(harness_b.CHAIN.get("havoc_hvc"))
        assert str(err) == "Predicate 'havoc_hvc' matched (havoc)"


class TestPackageExports:
    """Top-level package API."""

    def test_version_is_string(self) -> None:
        assert isinstance(mutoracle.__version__, str)

    @pytest.mark.parametrize("name", mutoracle.__all__)
    def test_all_names_resolve(self, name: str) -> None:
        assert hasattr(mutoracle, name)
