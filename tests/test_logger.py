import logging
from logging.handlers import RotatingFileHandler

from warehouse.logger import setup_logger


class TestSetupLogger:
    def test_console_and_file_handlers(self, tmp_path):
        logger = setup_logger("warehouse.test_setup", logging.DEBUG, log_dir=tmp_path / "logs")
        try:
            file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
            assert len(file_handlers) == 1
            assert len(logger.handlers) == 2

            logger.info("hello from the test")
            file_handlers[0].flush()
            assert "hello from the test" in (tmp_path / "logs" / "warehouse.log").read_text()
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_second_call_adds_no_handlers(self, tmp_path):
        logger = setup_logger("warehouse.test_twice", log_dir=tmp_path)
        try:
            setup_logger("warehouse.test_twice", log_dir=tmp_path)
            assert len(logger.handlers) == 2
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
