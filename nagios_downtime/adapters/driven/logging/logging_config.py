"""Console logging setup for the downtime tool."""

import logging
import sys

__all__ = ["configure_logs"]


def configure_logs(debug: bool = False) -> None:
    """Configure console logging.

    Sets up:
    - Root logger at WARNING level, writing to stderr (stdout carries the result line).
    - Framework loggers (aiohttp, asyncio) at WARNING level.
    - Application loggers (nagios_downtime) at DEBUG with debug, INFO otherwise.
    - Structured format with timestamp, level, module, and line number.

    Args:
        debug: Enable debug output for the application loggers.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
    date_format = "%d/%m/%y %H:%M:%S"

    formatter = logging.Formatter(log_format, date_format)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Root logger
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    root.addHandler(handler)

    # Suppress verbose framework loggers
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    # Application loggers
    logging.getLogger("nagios_downtime").setLevel(logging.DEBUG if debug else logging.INFO)
