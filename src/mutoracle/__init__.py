"""mutoracle - mutation-strategy oracle harnesses for coverage-guided fuzzers.

Each harness reads raw bytes from standard input into a fixed-size buffer and
walks an ordered chain of byte-level predicates. A satisfied predicate aborts
the process; every predicate is reachable by exactly one class of mutation
(bit flip, byte flip, arithmetic, interesting value, havoc, splice, or
dictionary token), so the set of crashes a fuzzer finds shows which of its
mutation stages work.

Public API:
    Harness - HarnessConfig paired with a PredicateChain
    HarnessConfig - Buffer geometry, seeds, and dictionary
    PredicateChain - Ordered, validated predicate collection
    Predicate - Strategy-tagged trigger plus optional guard
    evaluate_bytes - Pure evaluation of one input, returns a Verdict
    run - Out-of-process harness loop (aborts on a match)

Exceptions:
    OracleError - Base exception class
    ChainDefinitionError - Malformed predicate chain
    StrategyCrashError - Predicate matched during in-process evaluation

Submodules:
    mutoracle.harnesses.harness_a - ASCII seed harness (4 predicates)
    mutoracle.harnesses.harness_b - Zero/0xFF seed strategy matrix
    mutoracle.registry - Harness lookup by name
    mutoracle.corpus - Seed corpus, dictionary, and witness files
    mutoracle.triage - Group crash files by matched predicate
"""

from .config import HarnessConfig
from .diagnostics import ChainDefinitionError, OracleError, StrategyCrashError
from .enums import Outcome, Strategy, Width
from .evaluator import PredicateChain
from .predicates import AllOf, ByteSequence, Guard, Predicate, WordEquals
from .runner import Harness, Verdict, evaluate_bytes, run

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("mutoracle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AllOf",
    "ByteSequence",
    "ChainDefinitionError",
    "Guard",
    "Harness",
    "HarnessConfig",
    "OracleError",
    "Outcome",
    "Predicate",
    "PredicateChain",
    "Strategy",
    "StrategyCrashError",
    "Verdict",
    "WordEquals",
    "Width",
    "__version__",
    "evaluate_bytes",
    "run",
]
