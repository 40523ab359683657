from enum import Enum
from typing import BinaryIO

import matplotlib

matplotlib.use("Agg")  # render to files only, no display needed
import matplotlib.pyplot as plt

from .exceptions import UnsupportedOperationError
from .schemas import Report


class ChartType(str, Enum):
    BAR = "BAR"
    LINE = "LINE"


def plot_report(report: Report, chart_type: ChartType, out: BinaryIO) -> None:
    """
    Draws the report's first column (x axis) against its second column
    (y axis) and writes the chart to out as a PNG.
    """
    if chart_type not in (ChartType.BAR, ChartType.LINE):
        raise UnsupportedOperationError(f"Chart type: {chart_type} not yet implemented.")
    if len(report.labels) < 2:
        raise ValueError("A chart needs a report with at least two columns.")

    x_label, y_label = report.labels[0], report.labels[1]
    x = [str(record[0]) for record in report.records]
    y = [record[1] for record in report.records]

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        if chart_type == ChartType.BAR:
            ax.bar(x, y, color="tab:blue")
        else:
            ax.plot(x, y, marker="o", color="tab:blue")
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        ax.set_title(f"{y_label} by {x_label.lower()}")
        ax.grid(True, alpha=0.3)
        fig.autofmt_xdate()
        fig.savefig(out, format="png")
    finally:
        plt.close(fig)
