"""Core data structures describing benchmarkable treewidth heuristics.

This module defines:
    HeuristicKind          -- closed set of heuristic variants.
    Heuristic              -- immutable (kind, clique_bound) identity.
    ConstructionMethod     -- spanning tree construction strategies.
    ScoreShape / EdgeWeight -- edge weight functions and their result shape.
    AlgorithmConfiguration -- (construction method, edge weight) pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class HeuristicKind(Enum):
    """Tag of a heuristic variant.

    The value is the mnemonic used in the thesis tables: spanning tree
    construction abbreviation, ``I``, edge weight abbreviation and an optional
    ``IBC`` suffix for variants with a bounded clique size.
    """

    # comparison of edge weights
    MST_LEAST_DIFFERENCE = "MSTreILeDif"
    MST_NEGATIVE_INTERSECTION = "MSTreINegIn"
    MST_UNION = "MSTreIUnion"
    MST_DISJOINT_UNION = "MSTreIDisjU"

    # comparison of combined edge weights
    MST_NI_THEN_LD = "MSTreINiTLd"
    MST_LD_THEN_NI = "MSTreILdTNi"

    # comparison of spanning tree construction
    FILL_WHILST_NI_THEN_LD = "FilWhINiTLd"
    FILL_WHILST_UPDATE_EDGES_NI_THEN_LD = "FWhUEINiTLd"
    FILL_WHILST_BAG_SIZE = "FWBagINonee"

    # external baseline
    GREEDY_DEGREE_FILL_IN = "GreedyDegreeFillIn"

    # bounded clique
    FILL_WHILST_NI_THEN_LD_BOUNDED = "FilWhINiTLdIBC"

    # legacy variants, not part of any default suite
    FILL_WHILST_NEGATIVE_INTERSECTION = "FilWhINegIn"
    FILL_WHILST_LEAST_DIFFERENCE = "FilWhILeDif"
    FILL_WHILST_TREE_NI_THEN_LD = "FiWhTINiTLd"
    FILL_WHILST_LD_THEN_NI = "FilWhILdTNi"
    MST_NI_THEN_LD_BOUNDED = "MSTreINiTLdIBC"
    FILL_WHILST_TREE_NI_THEN_LD_BOUNDED = "FiWhTINiTLdIBC"

    @property
    def bounded(self) -> bool:
        return self.value.endswith("IBC")


@dataclass(frozen=True)
class Heuristic:
    """Identity of one benchmarkable configuration.

    Attributes:
        kind: Variant tag.
        clique_bound: Maximum clique size for bounded variants, ``None`` for
            every other kind.
    """

    kind: HeuristicKind
    clique_bound: int | None = None

    def __post_init__(self) -> None:
        if self.kind.bounded:
            if isinstance(self.clique_bound, bool) or not isinstance(self.clique_bound, int):
                raise ValueError(f"{self.kind.name} requires an integer clique_bound")
            if self.clique_bound < 0:
                raise ValueError(f"clique_bound must be non-negative, got {self.clique_bound}")
        elif self.clique_bound is not None:
            raise ValueError(f"{self.kind.name} does not take a clique_bound")


class ConstructionMethod(Enum):
    """Spanning tree construction strategy, valued by the library tag."""

    MST_AND_USE_TREE_STRUCTURE = "MSTAndUseTreeStructure"
    FILL_WHILST_MST = "FillWhilstMST"
    FILL_WHILST_MST_EDGE_UPDATE = "FillWhilstMSTEdgeUpdate"
    FILL_WHILST_MST_TREE = "FillWhilstMSTTree"
    FILL_WHILST_MST_BAG_SIZE = "FillWhilstMSTBagSize"


class ScoreShape(Enum):
    SCALAR = "scalar"  # one int
    PAIR = "pair"  # (primary, tie-break)


class EdgeWeight(Enum):
    """Edge weight function of the heuristic library.

    Each member carries the library function name and the fixed shape of the
    score it returns for two vertex sets.
    """

    UNION = ("union", ScoreShape.SCALAR)
    DISJOINT_UNION = ("disjoint_union", ScoreShape.SCALAR)
    NEGATIVE_INTERSECTION = ("negative_intersection", ScoreShape.SCALAR)
    LEAST_DIFFERENCE = ("least_difference", ScoreShape.SCALAR)
    LEAST_DIFFERENCE_THEN_NEGATIVE_INTERSECTION = (
        "least_difference_then_negative_intersection",
        ScoreShape.PAIR,
    )
    NEGATIVE_INTERSECTION_THEN_LEAST_DIFFERENCE = (
        "negative_intersection_then_least_difference",
        ScoreShape.PAIR,
    )

    def __init__(self, function_name: str, shape: ScoreShape) -> None:
        self.function_name = function_name
        self.shape = shape

    def resolve(self, library: Any) -> Callable[..., Any]:
        """Return the scoring callable named by this member from ``library``.

        Raises:
            AttributeError: If the library does not expose the function.
        """
        fn = getattr(library, self.function_name, None)
        if fn is None or not callable(fn):
            raise AttributeError(
                f"Heuristic library {library!r} has no edge weight function "
                f"'{self.function_name}'"
            )
        return fn


@dataclass(frozen=True)
class AlgorithmConfiguration:
    """Construction method plus edge weight passed to the heuristic library."""

    method: ConstructionMethod
    edge_weight: EdgeWeight

    @property
    def shape(self) -> ScoreShape:
        return self.edge_weight.shape
