"""
Domain models for recordkit.

Defines the `Record` value entity and its three construction paths: default,
explicit values, and copy of an existing instance.
"""
from __future__ import annotations

from typing import Optional, TextIO

from pydantic import BaseModel, Field

from recordkit.utils.logging import get_logger

DEFAULT_NAME = "null"
DEFAULT_VALUE = -1

log = get_logger(__name__)


class Record(BaseModel):
    """
    A (name, value) pair with a fixed two-line text rendering.

    Instances are frozen; deriving a changed record produces a new instance.
    """

    name: str = Field(DEFAULT_NAME, description="Text identifier.")
    value: int = Field(DEFAULT_VALUE, description="Associated integer, any range.")

    model_config = {
        "frozen": True,
        "strict": True,
    }

    @classmethod
    def of(cls, name: str, value: int) -> Record:
        """Build a record holding exactly `name` and `value`."""
        return cls(name=name, value=value)

    @classmethod
    def copy_of(cls, source: Record) -> Record:
        """
        Build an independent record with the same fields as `source`.
        """
        log.debug("copying record", extra={"record_name": source.name})
        return cls(name=source.name, value=source.value)

    def to_text(self) -> str:
        return f"key {self.name}\n value {self.value}\n"

    def render(self, file: Optional[TextIO] = None) -> None:
        """
        Write the two-line rendering to `file` (standard output by default).
        """
        print(self.to_text(), end="", file=file)


__all__ = ["Record", "DEFAULT_NAME", "DEFAULT_VALUE"]
