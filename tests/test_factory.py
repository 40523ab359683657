import io
from datetime import date

import pytest

from warehouse.core import Warehouse
from warehouse.delivery import DirectoryReportDelivery, NoReportDelivery, WebhookReportDelivery
from warehouse.exceptions import InvalidArgumentError, LoadError
from warehouse.export import ExportType
from warehouse.factory import DependencyFactory
from warehouse.plot import ChartType
from warehouse.schemas import Report


class TestDependencyFactory:
    def test_memory_source(self, tmp_path):
        warehouse = DependencyFactory("memory", input_dir=tmp_path).new_warehouse()

        assert isinstance(warehouse, Warehouse)
        assert len(warehouse.get_products()) == 5

    def test_csv_source(self, write_data_files):
        warehouse = DependencyFactory("csv", input_dir=write_data_files()).new_warehouse()
        assert [c.name for c in warehouse.get_customers()] == ["Alice", "Bob"]

    def test_csv_source_propagates_load_errors(self, write_data_files):
        factory = DependencyFactory("csv", input_dir=write_data_files(products="1,A,x\n"))
        with pytest.raises(LoadError):
            factory.new_warehouse()

    def test_unknown_source(self):
        with pytest.raises(InvalidArgumentError, match="Unknown data source"):
            DependencyFactory("database")

    def test_each_warehouse_is_independent(self):
        factory = DependencyFactory("memory")
        factory.new_warehouse().add_product("Extra", 1)
        assert len(factory.new_warehouse().get_products()) == 5

    def test_deliveries_without_webhook(self, tmp_path):
        deliveries = DependencyFactory("memory", output_dir=tmp_path, webhook_url=None).new_report_deliveries()

        assert isinstance(deliveries[0], NoReportDelivery)
        assert isinstance(deliveries[1], DirectoryReportDelivery)
        assert deliveries[1].output_dir == tmp_path
        assert len(deliveries) == 2

    def test_deliveries_with_webhook(self, tmp_path):
        deliveries = DependencyFactory(
            "memory", output_dir=tmp_path, webhook_url="https://example.test/hook"
        ).new_report_deliveries()

        assert isinstance(deliveries[-1], WebhookReportDelivery)
        assert deliveries[-1].url == "https://example.test/hook"

    def test_exporter_and_plotter(self):
        factory = DependencyFactory("memory")
        report = Report(labels=["Date", "Total revenue"], records=[(date(2024, 1, 1), 20)])

        text = io.StringIO()
        factory.new_exporter(ExportType.CSV)(report, text)
        assert text.getvalue().splitlines()[1] == "2024-01-01,20"

        image = io.BytesIO()
        factory.new_plotter(ChartType.LINE)(report, image)
        assert image.getvalue()[:4] == b"\x89PNG"
