"""Fuzz testing infrastructure for mutoracle.

This package contains:
- shadow_oracle: Flat reference tables for differential testing
- test_harness_oracle: State machine applying fuzzer mutations to seeds

Python 3.13+.
"""
