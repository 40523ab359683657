import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import requests

from . import settings, utils
from .exceptions import ReportDeliveryError
from .export import ExportType
from .schemas import ReportType

logger = logging.getLogger(__name__)


class ReportDelivery(ABC):
    """Somewhere an exported report can be sent after it has been printed."""

    name: str = ""

    @abstractmethod
    def deliver(self, report_type: ReportType, export_type: ExportType, content: bytes) -> None:
        pass


class NoReportDelivery(ReportDelivery):
    name = "No delivery"

    def deliver(self, report_type: ReportType, export_type: ExportType, content: bytes) -> None:
        logger.debug(f"Delivery disabled, dropping {len(content)} bytes of {report_type.value}.")


class DirectoryReportDelivery(ReportDelivery):
    """Saves each delivered report as a dated file in a directory."""

    name = "Save to directory"

    def __init__(self, output_dir: Path = settings.OUTPUT_DIR):
        self.output_dir = output_dir

    def deliver(self, report_type: ReportType, export_type: ExportType, content: bytes) -> None:
        date_suffix = utils.get_date_suffix_for_filename()
        path = self.output_dir / f"{report_type.value.lower()}_{date_suffix}.{export_type.extension}"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise ReportDeliveryError(f"Could not save report to {path}: {e}") from e
        logger.info(f"✅ Report saved to: {path}")


class WebhookReportDelivery(ReportDelivery):
    """Posts each delivered report to a webhook as JSON."""

    name = "Post to webhook"

    def __init__(self, url: Optional[str] = settings.WEBHOOK_URL, timeout: int = settings.WEBHOOK_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def deliver(self, report_type: ReportType, export_type: ExportType, content: bytes) -> None:
        if not self.url:
            raise ReportDeliveryError("WEBHOOK_URL not set, cannot post the report.")

        logger.info(f"🚀 Posting {report_type.value} report to webhook: {self.url}")
        payload = {
            "reportType": report_type.value,
            "exportType": export_type.value,
            "content": content.decode("utf-8"),
        }
        try:
            response = requests.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ReportDeliveryError(f"Error posting report to webhook: {e}") from e
        logger.info("✅ Report successfully posted to webhook.")
