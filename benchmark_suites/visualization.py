import csv
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

logger = logging.getLogger("tw_bench.visualization")


def plot_average_table(csv_path: str | Path, out_path: str | Path) -> Path:
    """Grouped bar chart of an average table: one group per graph, one bar per heuristic.

    Adaptive width: grows with the number of graphs, capped at 18 inches.
    """
    csv_path = Path(csv_path)
    out_path = Path(out_path)
    with open(csv_path, "r", encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    if len(rows) < 2:
        raise ValueError(f"Average table {csv_path} has no data rows")

    header, data = rows[0], rows[1:]
    heuristics = header[2:]
    graphs = [r[0] for r in data]
    values = np.array([[float(v) for v in r[2:]] for r in data], dtype=float)
    metric = data[0][1]

    x = np.arange(len(graphs))
    width = 0.8 / max(len(heuristics), 1)
    fig, ax = plt.subplots(
        figsize=(min(6 + len(graphs) * 0.6, 18), 6),
        constrained_layout=True,
    )
    cmap = plt.get_cmap("tab20")
    for i, name in enumerate(heuristics):
        ax.bar(
            x + (i - (len(heuristics) - 1) / 2) * width,
            values[:, i],
            width=width,
            label=name,
            color=cmap(i % 20),
            edgecolor="black",
            linewidth=0.5,
        )
    ax.set_xticks(x)
    ax.set_xticklabels(graphs, rotation=45, ha="right", fontsize=9)
    ax.set_ylabel(metric, fontsize=12)
    ax.set_title(f"{metric} per heuristic - {csv_path.stem}", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, axis="y", linestyle="--", linewidth=0.7)
    ax.legend(
        loc="center left",
        bbox_to_anchor=(1.02, 0.5),
        frameon=False,
        fontsize=9,
        borderaxespad=0.0,
    )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=180)
    plt.close(fig)
    logger.info("[Visualization] Saved %s", out_path)
    return out_path
