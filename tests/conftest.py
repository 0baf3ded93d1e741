"""Pytest configuration & custom summary hook.

Also ensures the project root is on sys.path for imports.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'import benchmark_suites.*' works
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from benchmark_suites.tables import CsvTable, ResultTables  # noqa: E402


@pytest.fixture
def memory_tables() -> ResultTables:
    """Four result tables backed by in-memory buffers."""
    return ResultTables(*(CsvTable(io.StringIO()) for _ in range(4)))


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a compact custom summary at the end of test session."""
    stats = terminalreporter.stats
    collected = terminalreporter._numcollected  # type: ignore[attr-defined]
    passed = len(stats.get("passed", []))
    failed = len(stats.get("failed", []))
    errors = len(stats.get("error", []))
    skipped = len(stats.get("skipped", []))

    terminalreporter.section("Custom summary", sep="=")
    terminalreporter.write_line(
        "Collected: "
        f"{collected} | Passed: {passed} | Failed: {failed} | "
        f"Errors: {errors} | Skipped: {skipped}"
    )
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in stats["failed"]:
            terminalreporter.write_line(f"  - {rep.nodeid}")
