"""Shared pytest fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from repeat_math.utils.logger import configure_logging
from repeat_math.utils.settings import (
    LoggingSettings,
    reset_arithmetic_settings,
    reset_settings,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


def _quiet_logging() -> None:
    configure_logging(LoggingSettings(log_level="CRITICAL", log_file_path=None))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset settings singletons and silence logging around each test."""
    for variable in (
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_FILE_PATH",
        "REPEAT_MATH_ZERO_COUNT_RETURNS_ZERO",
    ):
        monkeypatch.delenv(variable, raising=False)
    reset_settings()
    reset_arithmetic_settings()
    _quiet_logging()
    yield
    reset_settings()
    reset_arithmetic_settings()
    _quiet_logging()
