"""Observability module for b64url.

Provides structured logging:
- JSON log lines for machine consumption
- Console log lines for interactive use
"""

from b64url.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "ConsoleFormatter",
]
