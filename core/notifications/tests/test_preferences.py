"""Tests for notification preference parsing."""

import logging

import pytest

from core.notifications.preferences import (
    DEFAULT_MESSAGE_TEMPLATE,
    DEFAULT_PREFERRED_HOUR,
    InvalidLeadDaysError,
    NotificationPreferences,
    canonicalize_lead_days,
    format_lead_days,
    parse_lead_days,
    parse_preferred_hour,
    validate_lead_days,
)


class TestParsePreferredHour:
    def test_parses_hh_mm(self):
        assert parse_preferred_hour("08:00") == 8
        assert parse_preferred_hour("17:30") == 17
        assert parse_preferred_hour("00:00") == 0
        assert parse_preferred_hour("23:59") == 23

    def test_accepts_seconds(self):
        assert parse_preferred_hour("07:15:00") == 7

    def test_default_hour_is_eight(self):
        assert DEFAULT_PREFERRED_HOUR == 8

    def test_malformed_falls_back_to_default(self):
        assert parse_preferred_hour("not-a-time") == 8
        assert parse_preferred_hour("25:00") == 8
        assert parse_preferred_hour("8 AM") == 8

    def test_missing_falls_back_to_default(self):
        assert parse_preferred_hour(None) == 8
        assert parse_preferred_hour("") == 8

    def test_logs_warning_on_malformed(self, caplog):
        with caplog.at_level(logging.WARNING):
            parse_preferred_hour("garbage")

        assert any("garbage" in record.message for record in caplog.records)


class TestLeadDays:
    def test_canonicalize_sorts_and_dedupes(self):
        assert canonicalize_lead_days([3, 1, 7, 1]) == [1, 3, 7]

    def test_canonicalize_empty_gives_single_default(self):
        assert canonicalize_lead_days([]) == [1]
        assert canonicalize_lead_days(None) == [1]

    def test_validate_accepts_bounds(self):
        assert validate_lead_days([30, 0]) == [0, 30]

    @pytest.mark.parametrize("bad", [[31], [-1], [7, 3, 45]])
    def test_validate_rejects_out_of_range(self, bad):
        with pytest.raises(InvalidLeadDaysError):
            validate_lead_days(bad)

    def test_invalid_lead_days_is_value_error(self):
        assert issubclass(InvalidLeadDaysError, ValueError)

    def test_parse_stored_text(self):
        assert parse_lead_days("7,3,1") == [1, 3, 7]
        assert parse_lead_days(" 14 , 0 ") == [0, 14]

    def test_parse_skips_malformed_tokens(self):
        assert parse_lead_days("7,,x,3") == [3, 7]

    def test_parse_empty_gives_default(self):
        assert parse_lead_days("") == [1]
        assert parse_lead_days(None) == [1]
        assert parse_lead_days("x,y") == [1]

    def test_format_is_ascending(self):
        assert format_lead_days([7, 3, 1, 3]) == "1,3,7"


class TestNotificationPreferences:
    def test_default(self):
        prefs = NotificationPreferences.default(user_id=5)

        assert prefs.user_id == 5
        assert prefs.lead_days == frozenset({1, 3, 7})
        assert prefs.email_enabled is True
        assert prefs.preferred_hour == 8
        assert prefs.notification_time == "08:00"
        assert prefs.message_template == DEFAULT_MESSAGE_TEMPLATE

    def test_from_row(self):
        row = {
            "user_id": 1,
            "notification_days": "14,7",
            "email_enabled": False,
            "email_template": "Hi {friendName}",
            "notification_time": "19:45",
        }

        prefs = NotificationPreferences.from_row(row)

        assert prefs.lead_days == frozenset({7, 14})
        assert prefs.sorted_lead_days == [7, 14]
        assert prefs.email_enabled is False
        assert prefs.preferred_hour == 19
        assert prefs.message_template == "Hi {friendName}"

    def test_from_row_with_bad_values_uses_defaults(self):
        row = {
            "user_id": 1,
            "notification_days": "",
            "email_enabled": None,
            "email_template": None,
            "notification_time": "not-a-time",
        }

        prefs = NotificationPreferences.from_row(row)

        assert prefs.lead_days == frozenset({1})
        assert prefs.email_enabled is True
        assert prefs.preferred_hour == 8
        assert prefs.message_template == DEFAULT_MESSAGE_TEMPLATE
