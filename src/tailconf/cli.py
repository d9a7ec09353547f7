"""Command-line wrapper: read one observation, print its confidence."""

import argparse
import logging
import math
import sys
from typing import List, Optional, TextIO

from tailconf.config.loader import ConfigurationLoader
from tailconf.domain.exceptions import ConfigurationError, InputParseError, TailconfError
from tailconf.scoring.reference import confidence
from tailconf.utils.logging import setup_logging
from tailconf.utils.timing import section_timer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the tailconf CLI."""
    return argparse.ArgumentParser(
        prog="tailconf",
        description=(
            "Read one number from standard input and print its two-sided "
            "confidence level under the reference normal distribution."
        ),
    )


def read_observation(stream: TextIO) -> float:
    """Read the first whitespace-delimited token of ``stream`` as a float."""
    tokens = stream.read().split()
    if not tokens:
        raise InputParseError(None)
    try:
        value = float(tokens[0])
    except ValueError as e:
        raise InputParseError(tokens[0]) from e
    if math.isnan(value):
        raise InputParseError(tokens[0])
    return value


def format_confidence(value: float) -> str:
    """Format like a default C++ output stream (6 significant digits)."""
    return f"{value:g}"


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the tailconf CLI."""
    build_parser().parse_args(argv)

    try:
        log_settings = ConfigurationLoader().load_logging_from_env()
        log_settings.validate()
        log_kwargs = dict(
            console=log_settings.console_output,
            level=log_settings.level.value,
            quiet_console=log_settings.quiet_console,
        )
        try:
            logger, summary_logger = setup_logging(
                log_dir=str(log_settings.log_dir) if log_settings.log_dir else None,
                **log_kwargs,
            )
        except OSError as e:
            logger, summary_logger = setup_logging(file_output=False, **log_kwargs)
            logger.warning("Cannot write log file (%s); logging to console only", e)

        x = read_observation(sys.stdin)
        logger.debug("Observation: %r", x)

        with section_timer("confidence query", logger):
            result = confidence(x)

        summary_logger.info("confidence(%r) = %r", x, result)
        sys.stdout.write(format_confidence(result) + "\n")
        sys.stdout.flush()
        sys.exit(0)

    except ConfigurationError as e:
        logging.error("Configuration error: %s", e.message)
        if getattr(e, "suggestions", None):
            logging.error("Suggestions:")
            for suggestion in e.suggestions:
                logging.error("  - %s", suggestion)
        sys.exit(1)

    except InputParseError as e:
        logging.getLogger("tailconf").error("Invalid input: %s", e.message)
        sys.exit(1)

    except TailconfError as e:
        logging.getLogger("tailconf").error("tailconf failed: %s", e)
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
