"""Benchmark suites for treewidth heuristics.

Exports heuristic identities, the registry lookups and the suite catalog.
"""

from benchmark_suites.models import (  # noqa: F401
    AlgorithmConfiguration,
    ConstructionMethod,
    EdgeWeight,
    Heuristic,
    HeuristicKind,
    ScoreShape,
)
from benchmark_suites.registry import (  # noqa: F401
    algorithm_configuration,
    clique_bound,
    display_label,
    is_baseline,
)
from benchmark_suites.suites import SUITES, get_suite  # noqa: F401

__all__ = [
    "AlgorithmConfiguration",
    "ConstructionMethod",
    "EdgeWeight",
    "Heuristic",
    "HeuristicKind",
    "ScoreShape",
    "algorithm_configuration",
    "clique_bound",
    "display_label",
    "is_baseline",
    "SUITES",
    "get_suite",
]
