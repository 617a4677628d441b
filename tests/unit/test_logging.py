"""
Unit tests for structlog configuration.
"""

import json
import logging

import structlog
from pageclip.config import MonitoringConfig
from pageclip.observability import configure_logging


class TestConfigureLogging:
    """Test logging setup."""

    def test_file_output_is_json(self, tmp_path):
        log_file = tmp_path / "logs" / "pageclip.log"
        configure_logging(MonitoringConfig(log_level="INFO", log_file=str(log_file)))

        structlog.get_logger("pageclip.test").info("Extraction completed", image_count=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        record = records[-1]
        assert record["event"] == "Extraction completed"
        assert record["image_count"] == 3
        assert record["level"] == "info"
        assert record["logger"] == "pageclip.test"
        assert "timestamp" in record

    def test_level_filters_records(self, tmp_path):
        log_file = tmp_path / "pageclip.log"
        configure_logging(MonitoringConfig(log_level="WARNING", log_file=str(log_file)))

        logger = structlog.get_logger("pageclip.test")
        logger.info("hidden")
        logger.warning("shown")
        for handler in logging.getLogger().handlers:
            handler.flush()

        events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert events == ["shown"]

    def test_console_output(self, capsys):
        configure_logging(MonitoringConfig(log_level="INFO"))

        structlog.get_logger("pageclip.test").warning("No posts found", url="https://x.com/")

        captured = capsys.readouterr()
        assert "No posts found" in captured.err
        assert captured.out == ""
