"""Tests for logging setup."""

import logging

from milhao_app.utils.logging_config import configure_logging


def test_returns_package_logger_and_quietens_access_log(tmp_path):
    logger = configure_logging(log_file=tmp_path / "logs" / "milhao.log")
    assert logger.name == "milhao_app"
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
    assert (tmp_path / "logs").is_dir()
