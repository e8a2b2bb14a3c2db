"""Tests for the notification gate and preference parsing."""

from __future__ import annotations

import pytest

from helpdesk.application.use_cases.notifications.gate import any_enabled, is_enabled
from helpdesk.domain.entities import NOTIFICATION_KEYS, NotificationPreferences
from helpdesk.infrastructure.repositories import parse_notification_preferences


def test_missing_key_is_disabled() -> None:
    assert is_enabled(NotificationPreferences({}), "new_user") is False


@pytest.mark.parametrize(
    ("stored", "expected"),
    [
        (True, True),
        (1, True),
        ("1", True),
        ("on", True),
        (False, False),
        (0, False),
        ("0", False),
        ("false", False),
        ("", False),
        (None, False),
    ],
)
def test_stored_values_are_read_as_flags(stored, expected) -> None:
    preferences = NotificationPreferences({"user_assigned": stored})

    assert is_enabled(preferences, "user_assigned") is expected


def test_any_enabled_accepts_an_alternate_key() -> None:
    preferences = NotificationPreferences({"comment_reply": False, "first_comment": True})

    assert any_enabled(preferences, ("comment_reply", "first_comment")) is True
    assert any_enabled(preferences, ("comment_reply",)) is False


def test_defaults_disable_every_known_notification() -> None:
    defaults = NotificationPreferences.defaults()

    assert set(defaults) == set(NOTIFICATION_KEYS)
    assert not any(defaults.values())


def test_parse_valid_json_object() -> None:
    preferences = parse_notification_preferences('{"new_user": true, "ticket_resolved": "0"}')

    assert preferences["new_user"] is True
    assert preferences["ticket_resolved"] is False


@pytest.mark.parametrize("raw", ["{not json", "[1, 2]", '"text"'])
def test_unusable_setting_falls_back_to_defaults(raw, caplog) -> None:
    """Broken configuration must disable notifications rather than crash."""

    with caplog.at_level("WARNING"):
        preferences = parse_notification_preferences(raw)

    assert preferences == NotificationPreferences.defaults()
    assert "email_notifications" in caplog.text
