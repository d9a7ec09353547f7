"""Logging setup for the tailconf package and CLI."""
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from platformdirs import user_log_dir

APP = "tailconf"

def default_log_dir() -> Path:
    return Path(user_log_dir(APP))

def setup_logging(
    log_dir: Optional[str] = None,
    console: bool = True,
    level: str = "WARNING",
    quiet_console: bool = False,
    console_level: Optional[str] = None,
    file_output: bool = True,
) -> Tuple[logging.Logger, logging.Logger]:
    """
    Setup logging with file and optional console handlers.

    Args:
        log_dir: Directory for log files (defaults to the platform log dir)
        console: Whether to enable console logging on stderr
        level: Level of the ``tailconf`` logger
        quiet_console: If True, only errors reach the console
        console_level: Separate level for console (defaults to level)
        file_output: If False, no log file is created or opened

    Returns:
        The package logger and the ``tailconf.summary`` logger.

    Raises:
        OSError: The log directory or file cannot be created.
    """
    name = APP

    log_path = None
    if file_output:
        log_path_dir = Path(log_dir) if log_dir else default_log_dir()
        log_path_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = str(log_path_dir / f"{name}_{ts}.log")

    handlers = {}
    if log_path:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": log_path,
            "encoding": "utf-8",
            "mode": "w",
            "level": "DEBUG",   # capture everything in file
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "{asctime} {levelname:<7} {name} - {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "loggers": {
            name: {
                "level": level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
        "root": {"handlers": []},  # keep root empty
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    logger = logging.getLogger(name)
    console_formatter = logging.Formatter("{levelname:<7} {message}", style="{")

    summary_logger = logging.getLogger(f"{name}.summary")
    summary_logger.setLevel(logging.INFO)
    summary_logger.propagate = False
    for handler in list(summary_logger.handlers):
        summary_logger.removeHandler(handler)
        handler.close()

    if log_path:
        fh_summary = logging.FileHandler(log_path, encoding="utf-8", mode="a")
        fh_summary.setLevel(logging.INFO)
        fh_summary.setFormatter(logging.Formatter("{asctime} SUMMARY - {message}", style="{"))
        summary_logger.addHandler(fh_summary)

    if console:
        console_handler = logging.StreamHandler()
        if quiet_console:
            console_handler.setLevel(logging.ERROR)
        else:
            console_handler.setLevel(getattr(logging, (console_level or level).upper()))
        console_handler.setFormatter(console_formatter)

        logger.addHandler(console_handler)
        summary_logger.addHandler(console_handler)

    logger.info("Logging initialised. File: %s", log_path or "<none>")
    return logger, summary_logger
