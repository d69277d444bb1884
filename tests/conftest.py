"""
Pytest configuration for Interview Analytics.

Provides fixtures for:
- A fixed reference date so completed/upcoming classification is stable
- The built-in sample schedule and its analysis result
- Settings isolation (environment + cached settings reset per test)
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Generator

import pytest

from interview_analytics.config import get_settings
from interview_analytics.domain.results import AnalysisResult
from interview_analytics.pipeline import analyze
from interview_analytics.sample import SAMPLE_SCHEDULE

# Reference date the sample expectations are written against.
SAMPLE_TODAY = date(2025, 10, 17)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Keep tests independent of the developer's environment and `.env` file.
    """
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "REFERENCE_DATE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    return SAMPLE_TODAY


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_SCHEDULE


@pytest.fixture
def sample_result(sample_text: str, today: date) -> AnalysisResult:
    return analyze(sample_text, today=today)


@pytest.fixture
def block() -> Callable[..., str]:
    """
    Build one record block in the input format.

    block("C1", "2025-07-19", "11:00 - 12:00 IST", cancelled=True)
    """

    def _block(
        candidate: str,
        day: str,
        time_range: str = "10:00 - 11:00 IST",
        cancelled: bool = False,
    ) -> str:
        lines = [f"Candidate ID: {candidate}", f"Date: {day}", f"Time: {time_range}"]
        if cancelled:
            lines.append("Cancelled")
        return "\n".join(lines)

    return _block
