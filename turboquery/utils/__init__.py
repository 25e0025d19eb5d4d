"""Utility helpers shared across TurboQuery (logging, row mapping)."""

from turboquery.utils.logging import JsonFormatter, configure_logging, get_logger
from turboquery.utils.mapping import get_value

__all__ = ["JsonFormatter", "configure_logging", "get_logger", "get_value"]
