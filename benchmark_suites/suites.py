"""Named, ordered groups of heuristics exercised by one benchmark run.

Order matters: it fixes the column order of every result table and must match
the order in which trials are executed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple

from benchmark_suites.models import Heuristic, HeuristicKind
from benchmark_suites.registry import display_label

Suite = Tuple[Heuristic, ...]

_K = HeuristicKind

COMPARISON_OF_EDGE_WEIGHTS: Suite = (
    Heuristic(_K.MST_LEAST_DIFFERENCE),
    Heuristic(_K.MST_NEGATIVE_INTERSECTION),
    Heuristic(_K.MST_UNION),
    Heuristic(_K.MST_DISJOINT_UNION),
)

COMPARISON_OF_COMBINED_EDGE_WEIGHTS: Suite = (
    Heuristic(_K.MST_NEGATIVE_INTERSECTION),
    Heuristic(_K.MST_NI_THEN_LD),
    Heuristic(_K.MST_LD_THEN_NI),
)

COMPARISON_OF_SPANNING_TREE_CONSTRUCTION: Suite = (
    Heuristic(_K.MST_NI_THEN_LD),
    Heuristic(_K.FILL_WHILST_NI_THEN_LD),
    Heuristic(_K.FILL_WHILST_UPDATE_EDGES_NI_THEN_LD),
    Heuristic(_K.FILL_WHILST_BAG_SIZE),
)

COMPARISON_WITH_GREEDY_DEGREE_FILL_IN: Suite = (
    Heuristic(_K.FILL_WHILST_NI_THEN_LD),
    Heuristic(_K.GREEDY_DEGREE_FILL_IN),
)

# Default suites in execution order
SUITES: Mapping[str, Suite] = MappingProxyType(
    {
        "comparison_of_edge_weights": COMPARISON_OF_EDGE_WEIGHTS,
        "comparison_of_combined_edge_weights": COMPARISON_OF_COMBINED_EDGE_WEIGHTS,
        "comparison_with_greedy_degree_fill_in": COMPARISON_WITH_GREEDY_DEGREE_FILL_IN,
        "comparison_of_spanning_tree_construction": COMPARISON_OF_SPANNING_TREE_CONSTRUCTION,
    }
)

BOUNDED_CLIQUES_SUITE = "comparison_of_bounded_cliques"


def comparison_of_bounded_cliques(bounds: Iterable[int]) -> Suite:
    """Unbounded fill-whilst heuristic followed by one bounded variant per bound."""
    bounds = list(bounds)
    if not bounds:
        raise ValueError("comparison_of_bounded_cliques needs at least one clique bound")
    return (Heuristic(_K.FILL_WHILST_NI_THEN_LD),) + tuple(
        Heuristic(_K.FILL_WHILST_NI_THEN_LD_BOUNDED, b) for b in bounds
    )


def get_suite(name: str, clique_bounds: Sequence[int] = ()) -> Suite:
    """Return suite ``name``.

    Raises:
        ValueError: For an unknown suite name, or for the bounded clique
            suite without clique bounds.
    """
    if name == BOUNDED_CLIQUES_SUITE:
        return comparison_of_bounded_cliques(clique_bounds)
    try:
        return SUITES[name]
    except KeyError:
        known = ", ".join(list(SUITES) + [BOUNDED_CLIQUES_SUITE])
        raise ValueError(f"Unknown suite '{name}' (known: {known})") from None


def header_labels(suite: Sequence[Heuristic], runs_per_graph: int) -> List[str]:
    """Display label of every heuristic, repeated once per trial."""
    return [display_label(h) for h in suite for _ in range(runs_per_graph)]
