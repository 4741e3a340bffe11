"""Request-level logging for API calls."""

from .logger import RequestLogger, configure_console_logging

__all__ = ["RequestLogger", "configure_console_logging"]
