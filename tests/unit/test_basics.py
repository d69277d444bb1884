from datetime import date

import interview_analytics
from interview_analytics import config
from interview_analytics.sample import SAMPLE_SCHEDULE


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.reference_date is None


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("REFERENCE_DATE", "2025-10-17")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.Settings()

    assert settings.reference_date == date(2025, 10, 17)
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_resolve_today_precedence():
    pinned = config.Settings(reference_date=date(2025, 1, 1))

    assert pinned.resolve_today(date(2030, 5, 5)) == date(2030, 5, 5)
    assert pinned.resolve_today() == date(2025, 1, 1)
    assert config.Settings().resolve_today() == date.today()


def test_sample_schedule_is_parseable():
    records = interview_analytics.parse_records(SAMPLE_SCHEDULE)
    assert len(records) == 13


def test_public_api_exports():
    for name in interview_analytics.__all__:
        assert hasattr(interview_analytics, name), name
