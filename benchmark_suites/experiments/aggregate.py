from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from benchmark_suites.tables import ResultTables

logger = logging.getLogger("tw_bench.aggregate")

# Positions 0 and 1 hold the row label and the column label.
PREFIX_LEN = 2


class BlockSizeError(ValueError):
    """Trailing fields do not split into whole blocks of runs."""


class RowParseError(ValueError):
    """A per-run data field is not a valid float."""

    def __init__(self, position: int, value: str):
        super().__init__(f"Field {position} is not a valid float: {value!r}")
        self.position = position
        self.value = value


@dataclass(frozen=True)
class AggregatedRows:
    per_run_bound: List[str]
    per_run_runtime: List[str]
    average_bound: List[object]
    average_runtime: List[object]


def _check_block_size(row: Sequence[str], runs_per_graph: int) -> None:
    if runs_per_graph <= 0:
        raise ValueError(f"runs_per_graph must be positive, got {runs_per_graph}")
    trailing = len(row) - PREFIX_LEN
    if trailing < 0:
        raise ValueError(f"Row needs at least {PREFIX_LEN} descriptive fields, got {len(row)}")
    if trailing % runs_per_graph:
        raise BlockSizeError(
            f"{trailing} per-run fields do not split into blocks of {runs_per_graph}"
        )


def block_labels(row: Sequence[str], runs_per_graph: int) -> List[str]:
    """Reduce a header row to one label per block.

    The two descriptive fields are kept; of every block of ``runs_per_graph``
    labels the last one is kept.
    """
    _check_block_size(row, runs_per_graph)
    reduced = list(row[:PREFIX_LEN])
    offset_counter = 1
    for label in row[PREFIX_LEN:]:
        if offset_counter == runs_per_graph:
            reduced.append(label)
            offset_counter = 1
        else:
            offset_counter += 1
    return reduced


def average_blocks(row: Sequence[str], runs_per_graph: int) -> List[object]:
    """Reduce a data row to the mean of every block of ``runs_per_graph`` values.

    Raises:
        RowParseError: If a per-run field cannot be parsed as float.
        BlockSizeError: If the per-run fields do not split into whole blocks.
    """
    _check_block_size(row, runs_per_graph)
    averaged: List[object] = list(row[:PREFIX_LEN])
    block_sum = 0.0
    offset_counter = 1
    for position in range(PREFIX_LEN, len(row)):
        raw = row[position]
        try:
            block_sum += float(raw)
        except (TypeError, ValueError):
            raise RowParseError(position, raw) from None
        if offset_counter == runs_per_graph:
            averaged.append(block_sum / runs_per_graph)
            block_sum = 0.0
            offset_counter = 1
        else:
            offset_counter += 1
    return averaged


def write_to_csv(
    per_run_bound_data: Sequence[str],
    per_run_runtime_data: Sequence[str],
    tables: ResultTables,
    runs_per_graph: int,
    header: bool,
) -> AggregatedRows:
    """Write one logical result row to the four result tables.

    Per-run header rows look like
    ``Graph <column> H1 H1 ... H1 H2 ...`` (each heuristic label repeated
    ``runs_per_graph`` times), per-run data rows like
    ``<graph> <column> H1_run1 ... H1_runN H2_run1 ...``.

    Per-run tables receive the rows unchanged. Average tables receive one
    label (``header=True``) or one mean (``header=False``) per heuristic.
    Every row is computed before anything is written, so a failing row
    leaves no output behind. All four tables are flushed afterwards.
    """
    if len(per_run_bound_data) != len(per_run_runtime_data):
        raise ValueError(
            "Bound and runtime rows differ in length: "
            f"{len(per_run_bound_data)} != {len(per_run_runtime_data)}"
        )
    if header:
        logger.debug("Per run bound data header length: %d", len(per_run_bound_data))
        average_bound_data = block_labels(per_run_bound_data, runs_per_graph)
        average_runtime_data = block_labels(per_run_runtime_data, runs_per_graph)
    else:
        average_bound_data = average_blocks(per_run_bound_data, runs_per_graph)
        average_runtime_data = average_blocks(per_run_runtime_data, runs_per_graph)

    rows = AggregatedRows(
        per_run_bound=list(per_run_bound_data),
        per_run_runtime=list(per_run_runtime_data),
        average_bound=average_bound_data,
        average_runtime=average_runtime_data,
    )
    logger.debug("Writing average bound row: %s", average_bound_data)

    tables.per_run_bound.writerow(rows.per_run_bound)
    tables.per_run_runtime.writerow(rows.per_run_runtime)
    tables.average_bound.writerow(rows.average_bound)
    tables.average_runtime.writerow(rows.average_runtime)

    tables.per_run_bound.flush()
    tables.per_run_runtime.flush()
    tables.average_bound.flush()
    tables.average_runtime.flush()
    return rows
