import logging
from functools import partial
from pathlib import Path
from typing import BinaryIO, Callable, Optional, TextIO

from . import settings
from .core import Warehouse
from .dal.memory import WarehouseData, seed_memory_daos
from .delivery import (
    DirectoryReportDelivery,
    NoReportDelivery,
    ReportDelivery,
    WebhookReportDelivery,
)
from .exceptions import InvalidArgumentError
from .export import ExportType, export_report
from .parsers import load_warehouse_data
from .plot import ChartType, plot_report
from .schemas import Report

logger = logging.getLogger(__name__)

DATA_SOURCES = ("memory", "csv")


class DependencyFactory:
    """
    Builds the warehouse and its collaborators from configuration.
    Everything is handed over explicitly; nothing is a global singleton.
    """

    def __init__(
        self,
        data_source: str = settings.DATA_SOURCE,
        input_dir: Path = settings.INPUT_DIR,
        output_dir: Path = settings.OUTPUT_DIR,
        webhook_url: Optional[str] = settings.WEBHOOK_URL,
    ):
        if data_source not in DATA_SOURCES:
            raise InvalidArgumentError(
                f"Unknown data source '{data_source}', expected one of: {', '.join(DATA_SOURCES)}."
            )
        self.data_source = data_source
        self.input_dir = input_dir
        self.output_dir = output_dir
        self.webhook_url = webhook_url

    def new_warehouse_data(self) -> WarehouseData:
        if self.data_source == "csv":
            return load_warehouse_data(self.input_dir)
        logger.info("Starting from the built-in demo data.")
        return seed_memory_daos()

    def new_warehouse(self) -> Warehouse:
        data = self.new_warehouse_data()
        return Warehouse(data.products, data.customers, data.inventory, data.orders)

    def new_report_deliveries(self) -> list[ReportDelivery]:
        """The first entry is the one active when the CLI starts."""
        deliveries: list[ReportDelivery] = [
            NoReportDelivery(),
            DirectoryReportDelivery(self.output_dir),
        ]
        if self.webhook_url:
            deliveries.append(WebhookReportDelivery(self.webhook_url))
        else:
            logger.info("WEBHOOK_URL not set. Webhook delivery unavailable.")
        return deliveries

    def new_exporter(self, export_type: ExportType) -> Callable[[Report, TextIO], None]:
        return partial(_export, export_type=export_type)

    def new_plotter(self, chart_type: ChartType) -> Callable[[Report, BinaryIO], None]:
        return partial(_plot, chart_type=chart_type)


def _export(report: Report, out: TextIO, export_type: ExportType) -> None:
    export_report(report, export_type, out)


def _plot(report: Report, out: BinaryIO, chart_type: ChartType) -> None:
    plot_report(report, chart_type, out)
