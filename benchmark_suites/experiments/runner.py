from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, List, Protocol, Sequence, Tuple

from benchmark_suites.experiments.aggregate import write_to_csv
from benchmark_suites.models import ConstructionMethod, Heuristic
from benchmark_suites.registry import algorithm_configuration, clique_bound, display_label
from benchmark_suites.suites import header_labels
from benchmark_suites.tables import ResultTables

logger = logging.getLogger("tw_bench.runner")

BOUND_COLUMN = "Bound"
RUNTIME_COLUMN = "Runtime"
GRAPH_COLUMN = "Graph"


class Solver(Protocol):
    def __call__(
        self,
        graph: Any,
        method: ConstructionMethod,
        edge_weight: Callable[..., Any],
        clique_bound: int | None,
    ) -> int: ...


Baseline = Callable[[Any], int]


class SuiteRunner:
    """Runs one suite over a sequence of graphs and writes the result tables.

    Every batch gets its own timestamp directory under ``base_results_dir``;
    older batches are left untouched.
    """

    def __init__(
        self,
        library: Any,
        solver: Solver,
        baseline: Baseline,
        runs_per_graph: int,
        base_results_dir: str | Path = "results/benchmarks",
        timestamp_dir: str | Path | None = None,
    ):
        if runs_per_graph <= 0:
            raise ValueError(f"runs_per_graph must be positive, got {runs_per_graph}")
        self.library = library
        self.solver = solver
        self.baseline = baseline
        self.runs_per_graph = runs_per_graph
        if timestamp_dir is None:
            timestamp_dir = Path(base_results_dir) / datetime.now().strftime("%Y%m%d_%H%M%S")
        self.timestamp_dir = Path(timestamp_dir)
        self.timestamp_dir.mkdir(parents=True, exist_ok=True)

    def run(
        self,
        suite_name: str,
        suite: Sequence[Heuristic],
        graphs: Iterable[Tuple[str, Any]],
    ) -> dict[str, Path]:
        """Benchmark ``suite`` on ``(label, graph)`` pairs; return the table paths."""
        trials = [self._trial(h) for h in suite]
        labels = header_labels(suite, self.runs_per_graph)
        logger.info(
            "Suite %s: %s x %d runs per graph",
            suite_name,
            ", ".join(display_label(h) for h in suite),
            self.runs_per_graph,
        )
        with ResultTables.open(self.timestamp_dir, suite_name) as tables:
            write_to_csv(
                [GRAPH_COLUMN, BOUND_COLUMN] + labels,
                [GRAPH_COLUMN, RUNTIME_COLUMN] + labels,
                tables,
                self.runs_per_graph,
                header=True,
            )
            for idx, (graph_label, graph) in enumerate(graphs, start=1):
                bounds: List[str] = [graph_label, BOUND_COLUMN]
                runtimes: List[str] = [graph_label, RUNTIME_COLUMN]
                for heuristic, trial in zip(suite, trials):
                    for _ in range(self.runs_per_graph):
                        bound, runtime_ms = trial(graph)
                        bounds.append(str(bound))
                        runtimes.append(str(runtime_ms))
                    logger.debug("%s on %s done", display_label(heuristic), graph_label)
                write_to_csv(bounds, runtimes, tables, self.runs_per_graph, header=False)
                logger.info("[%s] (%d) %s written", suite_name, idx, graph_label)
        return ResultTables.paths(self.timestamp_dir, suite_name)

    def _trial(self, heuristic: Heuristic) -> Callable[[Any], Tuple[int, float]]:
        """Bind ``heuristic`` to a callable returning ``(bound, runtime_ms)``."""
        configuration = algorithm_configuration(heuristic)
        if configuration is None:

            def compute(graph: Any) -> int:
                return self.baseline(graph)

        else:
            method = configuration.method
            edge_weight = configuration.edge_weight.resolve(self.library)
            bound = clique_bound(heuristic)

            def compute(graph: Any) -> int:
                return self.solver(graph, method, edge_weight, bound)

        def timed(graph: Any) -> Tuple[int, float]:
            start = time.perf_counter()
            result = compute(graph)
            return result, (time.perf_counter() - start) * 1000.0

        return timed
