"""Persistence helpers for name/value settings."""

from __future__ import annotations

import json
import logging

from sqlalchemy.orm import Session

from helpdesk.domain.entities import NotificationPreferences
from helpdesk.infrastructure.models import SettingModel

logger = logging.getLogger(__name__)

EMAIL_NOTIFICATIONS_SETTING = "email_notifications"


class SettingRepository:
    """Read and write settings stored in the ``settings`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, name: str, default: str | None = None) -> str | None:
        model = self.session.query(SettingModel).filter_by(name=name).first()
        if model is None or model.value is None:
            return default
        return model.value

    def set(self, name: str, value: str | None) -> None:
        model = self.session.query(SettingModel).filter_by(name=name).first()
        if model is None:
            model = SettingModel(name=name)
        model.value = value
        self.session.add(model)
        self.session.commit()

    def get_notification_preferences(self) -> NotificationPreferences:
        """Return the email notification toggles, or defaults when unusable."""

        raw = self.get(EMAIL_NOTIFICATIONS_SETTING)
        if raw is None:
            return NotificationPreferences.defaults()
        return parse_notification_preferences(raw)


def parse_notification_preferences(raw: str) -> NotificationPreferences:
    """Decode the JSON object stored in the ``email_notifications`` setting."""

    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Setting '%s' does not contain valid JSON", EMAIL_NOTIFICATIONS_SETTING)
        return NotificationPreferences.defaults()
    if not isinstance(data, dict):
        logger.warning("Setting '%s' is not a JSON object", EMAIL_NOTIFICATIONS_SETTING)
        return NotificationPreferences.defaults()
    return NotificationPreferences(data)


__all__ = [
    "EMAIL_NOTIFICATIONS_SETTING",
    "SettingRepository",
    "parse_notification_preferences",
]
