"""Observability – structured logging configuration and helpers."""
from listerkit.observability.logging.factory import ListerLoggerFactory, configure_logging
from listerkit.observability.logging.processors import ListContextProcessor, get_logger

__all__ = [
    "ListContextProcessor",
    "ListerLoggerFactory",
    "configure_logging",
    "get_logger",
]
