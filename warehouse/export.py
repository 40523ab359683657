import json
from enum import Enum
from typing import Callable, TextIO

from .exceptions import UnsupportedOperationError
from .schemas import Report


class ExportType(str, Enum):
    CSV = "CSV"
    TXT = "TXT"
    HTML = "HTML"
    JSON = "JSON"

    @property
    def extension(self) -> str:
        return self.value.lower()


def export_csv(report: Report, out: TextIO, include_header: bool = True) -> None:
    report.to_dataframe().to_csv(out, index=False, header=include_header)


def export_txt(report: Report, out: TextIO) -> None:
    df = report.to_dataframe()
    if df.empty:
        # to_string() prints "Empty DataFrame ..." otherwise.
        out.write("  ".join(report.labels) + "\n")
        return
    out.write(df.to_string(index=False) + "\n")


def export_html(report: Report, out: TextIO) -> None:
    report.to_dataframe().to_html(out, index=False, border=1)
    out.write("\n")


def export_json(report: Report, out: TextIO) -> None:
    json_data = [dict(zip(report.labels, record)) for record in report.records]
    json.dump(json_data, out, indent=2, default=str)
    out.write("\n")


# --- Exporter Registry ---
EXPORTERS: dict[ExportType, Callable[[Report, TextIO], None]] = {
    ExportType.CSV: export_csv,
    ExportType.TXT: export_txt,
    ExportType.HTML: export_html,
    ExportType.JSON: export_json,
}


def export_report(report: Report, export_type: ExportType, out: TextIO) -> None:
    """Writes the report to out in the requested format."""
    exporter = EXPORTERS.get(export_type)
    if exporter is None:
        raise UnsupportedOperationError(f"Export type: {export_type} not yet implemented.")
    exporter(report, out)
