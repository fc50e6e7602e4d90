"""Oracle harness definitions.

    harness_a - ASCII seed "AAAA", four strategies on bytes 0..3
    harness_b - zero/0xFF seeds, fifteen strategy predicates at disjoint offsets

Each module is runnable with ``python -m`` and is looked up by name through
mutoracle.registry. This package imports nothing eagerly so that running a
harness module does not load it twice.
"""
