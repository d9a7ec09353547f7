import logging
from pathlib import Path
from unittest.mock import patch

from tailconf.utils.logging import setup_logging


def _console_handlers(log: logging.Logger):
    return [h for h in log.handlers if type(h) is logging.StreamHandler]


def test_setup_logging_writes_file(tmp_path: Path):
    logger, summary_logger = setup_logging(log_dir=str(tmp_path), console=False, level="INFO")

    assert logger.name == "tailconf"
    assert summary_logger.name == "tailconf.summary"
    assert logger.propagate is False

    logger.info("hello from test")
    for handler in logger.handlers + summary_logger.handlers:
        handler.flush()

    log_files = list(tmp_path.glob("tailconf_*.log"))
    assert len(log_files) == 1
    content = log_files[0].read_text(encoding="utf-8")
    assert "Logging initialised" in content
    assert "hello from test" in content


def test_setup_logging_console_handler(tmp_path: Path):
    logger, summary_logger = setup_logging(log_dir=str(tmp_path), level="DEBUG", console_level="ERROR")

    console = _console_handlers(logger)
    assert len(console) == 1
    assert console[0].level == logging.ERROR
    assert console[0] in summary_logger.handlers


def test_setup_logging_quiet_console_keeps_errors(tmp_path: Path):
    logger, summary_logger = setup_logging(log_dir=str(tmp_path), quiet_console=True)

    console = _console_handlers(logger)
    assert len(console) == 1
    assert console[0].level == logging.ERROR
    assert _console_handlers(summary_logger) == console


def test_setup_logging_without_file_output(tmp_path: Path):
    target = tmp_path / "never-created"
    logger, summary_logger = setup_logging(log_dir=str(target), file_output=False)

    assert not target.exists()
    for log in (logger, summary_logger):
        assert not any(isinstance(h, logging.FileHandler) for h in log.handlers)
    assert len(_console_handlers(logger)) == 1


def test_setup_logging_is_repeatable(tmp_path: Path):
    setup_logging(log_dir=str(tmp_path), console=False)
    _, summary_logger = setup_logging(log_dir=str(tmp_path), console=False)

    assert len(summary_logger.handlers) == 1


def test_setup_logging_defaults_to_platform_log_dir(tmp_path: Path):
    target = tmp_path / "platform-logs"
    with patch("tailconf.utils.logging.user_log_dir", return_value=str(target)):
        setup_logging(console=False)

    assert target.is_dir()
    assert list(target.glob("tailconf_*.log"))
