"""Тести setup_logging."""

import logging

from rg3d.logging_config import setup_logging


class TestSetupLogging:
    def test_single_console_handler(self, rg3d_logger):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert len(rg3d_logger.handlers) == 1
        assert rg3d_logger.level == logging.DEBUG

    def test_file_handler(self, rg3d_logger, tmp_path):
        log_file = tmp_path / "rg3d.log"
        setup_logging(logging.INFO, str(log_file))
        assert len(rg3d_logger.handlers) == 2
        logging.getLogger("rg3d.plane").info("hello from plane")
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "rg3d.plane - INFO - hello from plane" in text

    def test_console_output(self, rg3d_logger, capsys):
        setup_logging(logging.INFO)
        rg3d_logger.info("to stdout")
        assert "to stdout" in capsys.readouterr().out
