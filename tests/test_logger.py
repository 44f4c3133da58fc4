"""
tests/test_logger.py

Unit tests for the per-run logger setup.
"""
import logging

from supergrid.logs.logger import get_logger


def test_logger_creates_log_file(tmp_path):
    logger = get_logger(run_name="testrun", scenario="testscen", log_dir=str(tmp_path))
    logger.info("Test log entry")
    log_files = list(tmp_path.glob("*.log"))
    assert len(log_files) == 1
    assert log_files[0].name == "testscen_testrun.log"
    with open(log_files[0], "r") as f:
        content = f.read()
    assert "Test log entry" in content


def test_logger_reused_without_duplicate_handlers(tmp_path):
    first = get_logger(run_name="again", log_dir=str(tmp_path))
    second = get_logger(run_name="again", log_dir=str(tmp_path), level="debug")
    assert first is second
    assert len(second.handlers) == 2
    assert second.level == logging.DEBUG


def test_logger_without_directory():
    logger = get_logger(run_name="console")
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
