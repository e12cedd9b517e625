"""
Canonical demonstration of the three record construction paths.
"""
from __future__ import annotations

from typing import List, Optional, TextIO

from recordkit.domain.models import Record
from recordkit.utils.logging import get_logger

DEMO_NAME = "sumeet"
DEMO_VALUE = 2

log = get_logger(__name__)


def build_demo_records() -> List[Record]:
    """
    Construct the default, explicit-value, and copied records, in that order.
    """
    return list(_iter_demo_records())


def _iter_demo_records():
    default = Record()
    log.debug("default construction", extra={"record_name": default.name})
    yield default

    explicit = Record.of(DEMO_NAME, DEMO_VALUE)
    log.debug("explicit construction", extra={"record_name": explicit.name})
    yield explicit

    copied = Record.copy_of(explicit)
    log.debug("copy construction", extra={"record_name": copied.name})
    yield copied


def run_demo(file: Optional[TextIO] = None) -> List[Record]:
    """
    Build each demo record and render it immediately after construction.

    Returns the records in construction order.
    """
    records: List[Record] = []
    for record in _iter_demo_records():
        record.render(file=file)
        records.append(record)
    return records


__all__ = ["DEMO_NAME", "DEMO_VALUE", "build_demo_records", "run_demo"]
