"""
Domain package for recordkit.

Exports the record model used by the driver, reporter, and CLI.
Keep this package focused on data definitions.
"""

from recordkit.domain.models import DEFAULT_NAME, DEFAULT_VALUE, Record

__all__ = [
    "Record",
    "DEFAULT_NAME",
    "DEFAULT_VALUE",
]
