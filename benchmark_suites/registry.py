"""Mapping from heuristic identity to library configuration and display label.

All lookups read a single static table so that configuration, clique bound
and label stay consistent for every variant.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from benchmark_suites.models import (
    AlgorithmConfiguration,
    ConstructionMethod,
    EdgeWeight,
    Heuristic,
    HeuristicKind,
)

_MST = ConstructionMethod.MST_AND_USE_TREE_STRUCTURE
_FILL = ConstructionMethod.FILL_WHILST_MST
_FILL_EDGE_UPDATE = ConstructionMethod.FILL_WHILST_MST_EDGE_UPDATE
_FILL_TREE = ConstructionMethod.FILL_WHILST_MST_TREE
_FILL_BAG = ConstructionMethod.FILL_WHILST_MST_BAG_SIZE

_NI_THEN_LD = EdgeWeight.NEGATIVE_INTERSECTION_THEN_LEAST_DIFFERENCE
_LD_THEN_NI = EdgeWeight.LEAST_DIFFERENCE_THEN_NEGATIVE_INTERSECTION


class _Entry(NamedTuple):
    label: str
    configuration: AlgorithmConfiguration | None


def _cfg(method: ConstructionMethod, weight: EdgeWeight) -> AlgorithmConfiguration:
    return AlgorithmConfiguration(method=method, edge_weight=weight)


_K = HeuristicKind

REGISTRY: Mapping[HeuristicKind, _Entry] = MappingProxyType(
    {
        _K.MST_UNION: _Entry("MTrUn", _cfg(_MST, EdgeWeight.UNION)),
        _K.MST_DISJOINT_UNION: _Entry("MTrDU", _cfg(_MST, EdgeWeight.DISJOINT_UNION)),
        _K.MST_NEGATIVE_INTERSECTION: _Entry(
            "MTrNi", _cfg(_MST, EdgeWeight.NEGATIVE_INTERSECTION)
        ),
        _K.FILL_WHILST_NEGATIVE_INTERSECTION: _Entry(
            "FiWhNi", _cfg(_FILL, EdgeWeight.NEGATIVE_INTERSECTION)
        ),
        _K.MST_LEAST_DIFFERENCE: _Entry("MTrLd", _cfg(_MST, EdgeWeight.LEAST_DIFFERENCE)),
        _K.FILL_WHILST_LEAST_DIFFERENCE: _Entry(
            "FiWhLd", _cfg(_FILL, EdgeWeight.LEAST_DIFFERENCE)
        ),
        _K.MST_NI_THEN_LD: _Entry("MTrNiTLd", _cfg(_MST, _NI_THEN_LD)),
        _K.FILL_WHILST_NI_THEN_LD: _Entry("FiWhNiTLd", _cfg(_FILL, _NI_THEN_LD)),
        _K.FILL_WHILST_UPDATE_EDGES_NI_THEN_LD: _Entry(
            "FWUNiTLd", _cfg(_FILL_EDGE_UPDATE, _NI_THEN_LD)
        ),
        _K.MST_LD_THEN_NI: _Entry("MTrLdTNi", _cfg(_MST, _LD_THEN_NI)),
        _K.FILL_WHILST_LD_THEN_NI: _Entry("FiWhLdTNi", _cfg(_FILL, _LD_THEN_NI)),
        _K.FILL_WHILST_TREE_NI_THEN_LD: _Entry("FWTNiTLd", _cfg(_FILL_TREE, _NI_THEN_LD)),
        _K.FILL_WHILST_BAG_SIZE: _Entry("FWB", _cfg(_FILL_BAG, _NI_THEN_LD)),
        # bounded variants: label gets " <bound>" appended. FiWhLdTNiBC and FWTNiTLd
        # are the historical table headers, kept so new CSVs line up with old ones.
        _K.MST_NI_THEN_LD_BOUNDED: _Entry("MTrNiTLdBC", _cfg(_MST, _NI_THEN_LD)),
        _K.FILL_WHILST_NI_THEN_LD_BOUNDED: _Entry("FiWhLdTNiBC", _cfg(_FILL, _NI_THEN_LD)),
        _K.FILL_WHILST_TREE_NI_THEN_LD_BOUNDED: _Entry(
            "FWTNiTLd", _cfg(_FILL_TREE, _NI_THEN_LD)
        ),
        _K.GREEDY_DEGREE_FILL_IN: _Entry("GreedyDegreeFillIn", None),
    }
)

_missing = set(HeuristicKind) - set(REGISTRY)
if _missing:  # pragma: no cover
    raise RuntimeError(f"Registry is missing heuristic kinds: {sorted(k.name for k in _missing)}")


def algorithm_configuration(heuristic: Heuristic) -> AlgorithmConfiguration | None:
    """Return the (construction method, edge weight) pair for ``heuristic``.

    ``None`` means the heuristic is the external greedy degree fill-in
    baseline, which is not configured through the heuristic library.
    The clique bound of bounded variants does not change the returned pair.
    """
    return REGISTRY[heuristic.kind].configuration


def clique_bound(heuristic: Heuristic) -> int | None:
    return heuristic.clique_bound if heuristic.kind.bounded else None


def display_label(heuristic: Heuristic) -> str:
    """Short mnemonic used as column label in result tables."""
    label = REGISTRY[heuristic.kind].label
    if heuristic.kind.bounded:
        return f"{label} {heuristic.clique_bound}"
    return label


def is_baseline(heuristic: Heuristic) -> bool:
    return algorithm_configuration(heuristic) is None
