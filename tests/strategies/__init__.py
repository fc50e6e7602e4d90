"""Hypothesis strategies for mutoracle property-based testing.

- buffers: harness inputs, trigger-free noise, and knocked-out witnesses

Usage:
    from tests.strategies import untriggered_inputs, knocked_out_witnesses

Event-Emitting Strategies (HypoFuzz-Optimized):
    - width_and_value, untriggered_inputs, knocked_out_witnesses
"""

from .buffers import (
    knocked_out_witnesses,
    short_inputs,
    trigger_offsets,
    untriggered_inputs,
    width_and_value,
    widths,
)

__all__ = [
    "knocked_out_witnesses",
    "short_inputs",
    "trigger_offsets",
    "untriggered_inputs",
    "width_and_value",
    "widths",
]
