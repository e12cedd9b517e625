"""
Utilities package for recordkit.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package free of domain-specific logic.
"""

from recordkit.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "JsonFormatter",
]
