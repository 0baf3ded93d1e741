"""Benchmark configuration loaded from a YAML file.

Example ``config.yaml``::

    runs_per_graph: 5
    suites: [comparison_of_edge_weights, comparison_of_bounded_cliques]
    clique_bounds: [2, 3, 4]
    graphs: [data/graphs/myciel3.col]
    results_dir: results/benchmarks
    log_level: INFO
    plots: true
    latex: false
    library: treewidth_heuristic
    solver: treewidth_heuristic:compute_treewidth_upper_bound
    baseline: treewidth_heuristic:greedy_degree_fill_in
    graph_loader: treewidth_heuristic:read_dimacs
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from benchmark_suites.suites import BOUNDED_CLIQUES_SUITE, SUITES, get_suite


@dataclass(frozen=True)
class BenchmarkConfig:
    library: str
    solver: str
    baseline: str
    graph_loader: str
    graphs: List[str]
    runs_per_graph: int = 5
    suites: List[str] = field(default_factory=lambda: list(SUITES))
    clique_bounds: List[int] = field(default_factory=list)
    results_dir: str = "results/benchmarks"
    log_level: str = "INFO"
    plots: bool = False
    latex: bool = False


_REQUIRED = ("library", "solver", "baseline", "graph_loader", "graphs")


def load_config(config_file: str | Path = "config.yaml") -> BenchmarkConfig:
    """Load and validate configuration from a YAML file."""
    path = Path(config_file)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(raw).__name__}")
    return parse_config(raw)


def _as_list(raw: Dict[str, Any], key: str, default: Any) -> List[Any]:
    """Return ``raw[key]`` as a list; a single string becomes a one-item list."""
    value = raw.get(key)
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a list, got {value!r}")
    return value


def _as_bool(raw: Dict[str, Any], key: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def parse_config(raw: Dict[str, Any]) -> BenchmarkConfig:
    missing = [key for key in _REQUIRED if not raw.get(key)]
    if missing:
        raise ValueError(f"Missing config keys: {', '.join(missing)}")

    unknown = set(raw) - set(BenchmarkConfig.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    runs = raw.get("runs_per_graph", 5)
    if isinstance(runs, bool) or not isinstance(runs, int) or runs <= 0:
        raise ValueError(f"runs_per_graph must be a positive integer, got {runs!r}")

    graphs = _as_list(raw, "graphs", [])
    for g in graphs:
        if not isinstance(g, str):
            raise ValueError(f"graphs must hold file paths, got {g!r}")

    bounds = _as_list(raw, "clique_bounds", [])
    for b in bounds:
        if isinstance(b, bool) or not isinstance(b, int) or b < 0:
            raise ValueError(f"clique_bounds must hold non-negative integers, got {b!r}")

    suites = _as_list(raw, "suites", SUITES) or list(SUITES)
    for name in suites:
        if not isinstance(name, str):
            raise ValueError(f"suites must hold suite names, got {name!r}")
        if name == BOUNDED_CLIQUES_SUITE and not bounds:
            raise ValueError(f"suite '{name}' requires a non-empty clique_bounds list")
        get_suite(name, bounds)

    return BenchmarkConfig(
        library=str(raw["library"]),
        solver=str(raw["solver"]),
        baseline=str(raw["baseline"]),
        graph_loader=str(raw["graph_loader"]),
        graphs=list(graphs),
        runs_per_graph=runs,
        suites=list(suites),
        clique_bounds=list(bounds),
        results_dir=str(raw.get("results_dir", "results/benchmarks")),
        log_level=str(raw.get("log_level", "INFO")).upper(),
        plots=_as_bool(raw, "plots"),
        latex=_as_bool(raw, "latex"),
    )


def import_object(path: str) -> Any:
    """Import ``"package.module:attribute"`` (or a bare module path)."""
    module_name, _, attr = path.partition(":")
    module = importlib.import_module(module_name)
    if not attr:
        return module
    obj: Any = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    return obj
