"""Tests for environment-driven configuration."""

import pytest

from core.config import (
    DEFAULT_NOTIFICATION_CONCURRENCY,
    DEFAULT_NOTIFICATION_CRON,
    check_required_env_vars,
    get_notification_concurrency,
    get_notification_cron,
    is_scheduler_enabled,
)


class TestSchedulerSettings:
    def test_scheduler_enabled_by_default(self, monkeypatch):
        monkeypatch.delenv("SCHEDULER_ENABLED", raising=False)
        assert is_scheduler_enabled() is True

    @pytest.mark.parametrize("value", ["false", "0", "no"])
    def test_scheduler_can_be_disabled(self, monkeypatch, value):
        monkeypatch.setenv("SCHEDULER_ENABLED", value)
        assert is_scheduler_enabled() is False

    def test_default_cron_is_hourly(self, monkeypatch):
        monkeypatch.delenv("NOTIFICATION_CRON", raising=False)
        assert get_notification_cron() == DEFAULT_NOTIFICATION_CRON == "0 * * * *"

    def test_cron_override(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_CRON", "*/5 * * * *")
        assert get_notification_cron() == "*/5 * * * *"

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_bad_concurrency_uses_default(self, monkeypatch, value):
        monkeypatch.setenv("NOTIFICATION_CONCURRENCY", value)
        assert get_notification_concurrency() == DEFAULT_NOTIFICATION_CONCURRENCY

    def test_concurrency_override(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_CONCURRENCY", "4")
        assert get_notification_concurrency() == 4


class TestCheckRequiredEnvVars:
    def test_production_fails_without_database_url(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("DATABASE_URL", raising=False)

        ok, _ = check_required_env_vars()

        assert ok is False

    def test_development_only_warns(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("DEV_MODE", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)

        ok, warnings = check_required_env_vars()

        assert ok is True
        assert any("DATABASE_URL" in warning for warning in warnings)
