"""CSV output tables written by the aggregator."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Sequence


class CsvTable:
    """Comma separated table over an already opened text handle."""

    def __init__(self, handle: IO[str]):
        self.handle = handle
        self._writer = csv.writer(handle)

    def writerow(self, row: Sequence[object]) -> None:
        self._writer.writerow(row)

    def flush(self) -> None:
        self.handle.flush()


TABLE_NAMES = ("per_run_bound", "per_run_runtime", "average_bound", "average_runtime")


class ResultTables:
    """The four result tables of one suite.

    Use as a context manager; files are opened in ``directory`` as
    ``<prefix>_<table>.csv`` and closed on exit.
    """

    def __init__(
        self,
        per_run_bound: CsvTable,
        per_run_runtime: CsvTable,
        average_bound: CsvTable,
        average_runtime: CsvTable,
    ):
        self.per_run_bound = per_run_bound
        self.per_run_runtime = per_run_runtime
        self.average_bound = average_bound
        self.average_runtime = average_runtime
        self._handles: list[IO[str]] = []

    @classmethod
    def open(cls, directory: str | Path, prefix: str) -> "ResultTables":
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        handles = []
        try:
            for name in TABLE_NAMES:
                path = directory / f"{prefix}_{name}.csv"
                handles.append(open(path, "w", newline="", encoding="utf-8"))
        except OSError:
            for h in handles:
                h.close()
            raise
        tables = cls(*(CsvTable(h) for h in handles))
        tables._handles = handles
        return tables

    @staticmethod
    def paths(directory: str | Path, prefix: str) -> dict[str, Path]:
        directory = Path(directory)
        return {name: directory / f"{prefix}_{name}.csv" for name in TABLE_NAMES}

    def close(self) -> None:
        for h in self._handles:
            h.close()
        self._handles = []

    def __enter__(self) -> "ResultTables":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
