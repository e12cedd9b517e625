"""
recordkit - a small demonstration of value-object construction.

A `Record` pairs a text name with an integer value and can be built three
ways:

- default construction (name "null", value -1)
- construction from explicit values
- copy of an existing record

Each record renders itself as a fixed two-line text block.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from recordkit.config import Settings, get_settings
from recordkit.domain.models import DEFAULT_NAME, DEFAULT_VALUE, Record
from recordkit.driver import build_demo_records, run_demo
from recordkit.reporter import print_records
from recordkit.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "DEFAULT_NAME",
    "DEFAULT_VALUE",
    # Driver
    "build_demo_records",
    "run_demo",
    # Reporting
    "print_records",
    # Logging
    "configure_logging",
    "get_logger",
]
