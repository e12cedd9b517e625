"""
Pytest configuration for recordkit.

Provides fixtures for:
- Settings isolation (cache reset and env cleanup)
- CLI invocation through Typer's test runner
- Canonical demo output
"""

from __future__ import annotations

from typing import Generator

import pytest
from typer.testing import CliRunner

from recordkit.config import get_settings

CANONICAL_OUTPUT = (
    "key null\n"
    " value -1\n"
    "key sumeet\n"
    " value 2\n"
    "key sumeet\n"
    " value 2\n"
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop cached settings and diagnostics env vars around every test.
    """
    for var in ("APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(scope="session")
def canonical_output() -> str:
    """Exact stdout of the canonical demo run."""
    return CANONICAL_OUTPUT
