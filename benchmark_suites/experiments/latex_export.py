from __future__ import annotations

import csv
import logging
from pathlib import Path

logger = logging.getLogger("tw_bench.latex")


def _escape_latex(text: str) -> str:
    """Simple escaping of LaTeX special characters in short fields."""
    repl = {
        "_": "\\_",
        "%": "\\%",
        "&": "\\&",
        "$": "\\$",
        "#": "\\#",
        "{": "\\{",
        "}": "\\}",
        "~": "\\textasciitilde{}",
        "^": "\\textasciicircum{}",
        "\\": "\\textbackslash{}",
    }
    return "".join(repl.get(ch, ch) for ch in text)


def _fmt(value: str, digits: int) -> str:
    try:
        return f"{float(value):.{digits}f}"
    except ValueError:
        return _escape_latex(value)


def write_average_latex(csv_path: str | Path, latex_path: str | Path, digits: int = 2) -> Path:
    """Render an average table (header row + one row per graph) as a LaTeX tabular.

    The column label field (second column) is dropped; it is constant per table
    and goes into the caption instead.
    """
    csv_path = Path(csv_path)
    latex_path = Path(latex_path)
    with open(csv_path, "r", encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    if not rows:
        raise ValueError(f"Average table {csv_path} is empty")

    header, data = rows[0], rows[1:]
    metric = data[0][1] if data and len(data[0]) > 1 else header[1]
    columns = [header[0]] + header[2:]

    latex_path.parent.mkdir(parents=True, exist_ok=True)
    with open(latex_path, "w", encoding="utf-8") as fw:
        fw.write(f"% Auto-generated from {csv_path.name}\n")
        fw.write("\\begin{table}[ht]\\centering\n")
        caption = f"Average {metric.lower()} per heuristic ({csv_path.stem})"
        fw.write(f"\\caption{{{_escape_latex(caption)}}}\n")
        fw.write("\\small\n")
        fw.write("\\begin{tabular}{l" + "r" * (len(columns) - 1) + "}\\hline\n")
        fw.write(" & ".join(_escape_latex(c) for c in columns) + " \\\\ \\hline\n")
        for row in data:
            cells = [_escape_latex(row[0])] + [_fmt(v, digits) for v in row[2:]]
            fw.write(" & ".join(cells) + " \\\\\n")
        fw.write("\\hline\n\\end{tabular}\n")
        fw.write("\\end{table}\n")
    logger.info("[LaTeX] Written %s", latex_path)
    return latex_path
