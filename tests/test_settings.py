import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestVacationPolicySettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.VACATION_BASE_DAYS == 15
        assert settings.VACATION_MAX_DAYS == 30
        assert settings.VACATION_SENIORITY_BONUS_DAYS == 1

    def test_base_may_equal_max(self):
        settings = Settings(VACATION_BASE_DAYS=20, VACATION_MAX_DAYS=20)
        assert settings.VACATION_BASE_DAYS == settings.VACATION_MAX_DAYS

    def test_base_above_max_rejected(self):
        with pytest.raises(ValidationError, match="VACATION_BASE_DAYS must not exceed"):
            Settings(VACATION_BASE_DAYS=31, VACATION_MAX_DAYS=30)

    def test_base_above_max_rejected_from_environment(self, monkeypatch):
        monkeypatch.setenv("VACATION_BASE_DAYS", "40")
        monkeypatch.setenv("VACATION_MAX_DAYS", "30")
        with pytest.raises(ValidationError, match="40 > 30"):
            Settings()


class TestOtherSettings:
    def test_cors_origins_from_comma_string(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        assert Settings().CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_log_format_validated(self):
        with pytest.raises(ValidationError, match="LOG_FORMAT"):
            Settings(LOG_FORMAT="xml")
