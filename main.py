#!/usr/bin/env python3


import argparse
import logging
from pathlib import Path

from benchmark_suites.config import BenchmarkConfig, import_object, load_config
from benchmark_suites.experiments.latex_export import write_average_latex
from benchmark_suites.experiments.runner import SuiteRunner
from benchmark_suites.suites import get_suite
from benchmark_suites.visualization import plot_average_table

logger = logging.getLogger("tw_bench")


def check_graph_files(config: BenchmarkConfig) -> None:
    """Fail before any suite runs if a configured graph file is missing."""
    missing = [g for g in config.graphs if not Path(g).is_file()]
    if missing:
        raise FileNotFoundError(f"Graph files not found: {', '.join(missing)}")


def load_graphs(config: BenchmarkConfig, loader):
    """Yield ``(label, graph)`` pairs; graphs are loaded lazily, one at a time."""
    for graph_path in config.graphs:
        path = Path(graph_path)
        yield path.stem, loader(str(path))


def main(config: BenchmarkConfig) -> None:
    check_graph_files(config)
    library = import_object(config.library)
    solver = import_object(config.solver)
    baseline = import_object(config.baseline)
    loader = import_object(config.graph_loader)

    runner = SuiteRunner(
        library=library,
        solver=solver,
        baseline=baseline,
        runs_per_graph=config.runs_per_graph,
        base_results_dir=config.results_dir,
    )
    for suite_name in config.suites:
        suite = get_suite(suite_name, config.clique_bounds)
        paths = runner.run(suite_name, suite, load_graphs(config, loader))
        for table in ("average_bound", "average_runtime"):
            if config.plots:
                plot_average_table(paths[table], paths[table].with_suffix(".png"))
            if config.latex:
                write_average_latex(paths[table], paths[table].with_suffix(".tex"))
    logger.info("[Main] Benchmark batch completed: %s", runner.timestamp_dir)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Treewidth heuristic benchmark suites")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the YAML configuration file",
    )
    args = parser.parse_args()

    cfg = load_config(args.config)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main(cfg)
