from __future__ import annotations

from types import SimpleNamespace

import pytest

from benchmark_suites.models import (
    AlgorithmConfiguration,
    ConstructionMethod,
    EdgeWeight,
    Heuristic,
    HeuristicKind,
    ScoreShape,
)
from benchmark_suites.registry import (
    REGISTRY,
    algorithm_configuration,
    clique_bound,
    display_label,
    is_baseline,
)


def _all_heuristics() -> list[Heuristic]:
    return [
        Heuristic(kind, 3) if kind.bounded else Heuristic(kind) for kind in HeuristicKind
    ]


def test_registry_covers_every_kind() -> None:
    assert set(REGISTRY) == set(HeuristicKind)


def test_only_greedy_is_baseline() -> None:
    baselines = [h for h in _all_heuristics() if algorithm_configuration(h) is None]
    assert baselines == [Heuristic(HeuristicKind.GREEDY_DEGREE_FILL_IN)]
    assert is_baseline(Heuristic(HeuristicKind.GREEDY_DEGREE_FILL_IN))
    assert not is_baseline(Heuristic(HeuristicKind.MST_UNION))


def test_bound_implies_configuration() -> None:
    for h in _all_heuristics():
        if clique_bound(h) is not None:
            assert algorithm_configuration(h) is not None
            assert clique_bound(h) == h.clique_bound


def test_bounded_variant_shares_configuration_with_unbounded() -> None:
    bounded = Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 4)
    plain = Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD)
    assert algorithm_configuration(bounded) == algorithm_configuration(plain)
    assert algorithm_configuration(bounded) == algorithm_configuration(
        Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 9)
    )
    assert clique_bound(bounded) == 4
    assert clique_bound(plain) is None


@pytest.mark.parametrize(
    "kind, method, weight",
    [
        (HeuristicKind.MST_UNION, ConstructionMethod.MST_AND_USE_TREE_STRUCTURE, EdgeWeight.UNION),
        (
            HeuristicKind.FILL_WHILST_LEAST_DIFFERENCE,
            ConstructionMethod.FILL_WHILST_MST,
            EdgeWeight.LEAST_DIFFERENCE,
        ),
        (
            HeuristicKind.FILL_WHILST_UPDATE_EDGES_NI_THEN_LD,
            ConstructionMethod.FILL_WHILST_MST_EDGE_UPDATE,
            EdgeWeight.NEGATIVE_INTERSECTION_THEN_LEAST_DIFFERENCE,
        ),
        (
            HeuristicKind.FILL_WHILST_BAG_SIZE,
            ConstructionMethod.FILL_WHILST_MST_BAG_SIZE,
            EdgeWeight.NEGATIVE_INTERSECTION_THEN_LEAST_DIFFERENCE,
        ),
        (
            HeuristicKind.MST_LD_THEN_NI,
            ConstructionMethod.MST_AND_USE_TREE_STRUCTURE,
            EdgeWeight.LEAST_DIFFERENCE_THEN_NEGATIVE_INTERSECTION,
        ),
    ],
)
def test_configuration_pairs(kind, method, weight) -> None:
    assert algorithm_configuration(Heuristic(kind)) == AlgorithmConfiguration(method, weight)


def test_score_shapes() -> None:
    assert algorithm_configuration(Heuristic(HeuristicKind.MST_UNION)).shape is ScoreShape.SCALAR
    assert (
        algorithm_configuration(Heuristic(HeuristicKind.MST_NI_THEN_LD)).shape is ScoreShape.PAIR
    )


def test_display_labels() -> None:
    assert display_label(Heuristic(HeuristicKind.MST_LEAST_DIFFERENCE)) == "MTrLd"
    assert display_label(Heuristic(HeuristicKind.FILL_WHILST_BAG_SIZE)) == "FWB"
    assert display_label(Heuristic(HeuristicKind.GREEDY_DEGREE_FILL_IN)) == "GreedyDegreeFillIn"
    assert (
        display_label(Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 5))
        == "FiWhLdTNiBC 5"
    )
    assert display_label(Heuristic(HeuristicKind.MST_NI_THEN_LD_BOUNDED, 0)) == "MTrNiTLdBC 0"


def test_bounded_labels_match_historical_headers() -> None:
    tree = HeuristicKind.FILL_WHILST_TREE_NI_THEN_LD
    assert display_label(Heuristic(HeuristicKind.FILL_WHILST_TREE_NI_THEN_LD_BOUNDED, 7)) == (
        "FWTNiTLd 7"
    )
    assert display_label(Heuristic(tree)) == "FWTNiTLd"
    assert display_label(Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 2)) == (
        "FiWhLdTNiBC 2"
    )


def test_display_labels_deterministic_and_distinct() -> None:
    heuristics = _all_heuristics()
    labels = [display_label(h) for h in heuristics]
    assert labels == [display_label(h) for h in heuristics]
    assert len(set(labels)) == len(labels)


def test_heuristic_is_hashable_value() -> None:
    a = Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 2)
    b = Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 2)
    assert a == b
    assert len({a, b}) == 1
    assert a != Heuristic(HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, 3)


def test_heuristic_str_is_plain_dataclass_repr() -> None:
    h = Heuristic(HeuristicKind.MST_NI_THEN_LD_BOUNDED, 0)
    assert str(h) == repr(h)
    assert str(h).startswith("Heuristic(kind=")


@pytest.mark.parametrize(
    "kind, bound",
    [
        (HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, None),
        (HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, -1),
        (HeuristicKind.FILL_WHILST_NI_THEN_LD_BOUNDED, True),
        (HeuristicKind.MST_UNION, 3),
    ],
)
def test_invalid_clique_bound(kind, bound) -> None:
    with pytest.raises(ValueError):
        Heuristic(kind, bound)


def test_edge_weight_resolves_from_library() -> None:
    def union(a, b):
        return len(a | b)

    library = SimpleNamespace(union=union)
    assert EdgeWeight.UNION.resolve(library) is union
    with pytest.raises(AttributeError):
        EdgeWeight.DISJOINT_UNION.resolve(library)
