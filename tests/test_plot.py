import io
from datetime import date

import pytest

from warehouse.exceptions import UnsupportedOperationError
from warehouse.plot import ChartType, plot_report
from warehouse.schemas import Report

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def report():
    return Report(
        labels=["Date", "Total revenue"],
        records=[(date(2024, 1, 1), 20), (date(2024, 1, 2), 15)],
    )


class TestPlotReport:
    @pytest.mark.parametrize("chart_type", list(ChartType))
    def test_writes_png(self, report, chart_type):
        out = io.BytesIO()
        plot_report(report, chart_type, out)
        assert out.getvalue().startswith(PNG_SIGNATURE)

    def test_empty_report_still_plots(self):
        out = io.BytesIO()
        plot_report(Report(labels=["Date", "Total revenue"]), ChartType.BAR, out)
        assert out.getvalue().startswith(PNG_SIGNATURE)

    def test_unsupported_type(self, report):
        with pytest.raises(UnsupportedOperationError):
            plot_report(report, "PIE", io.BytesIO())

    def test_needs_two_columns(self):
        with pytest.raises(ValueError):
            plot_report(Report(labels=["Date"]), ChartType.LINE, io.BytesIO())
