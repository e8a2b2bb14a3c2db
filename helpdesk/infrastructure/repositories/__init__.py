"""Repository implementations for infrastructure layer."""

from .email_template_repository import EmailTemplateRepository
from .front_page_repository import FrontPageRepository
from .role_repository import RoleRepository
from .setting_repository import (
    EMAIL_NOTIFICATIONS_SETTING,
    SettingRepository,
    parse_notification_preferences,
)
from .ticket_repository import TicketRepository
from .user_repository import UserRepository

__all__ = [
    "EMAIL_NOTIFICATIONS_SETTING",
    "EmailTemplateRepository",
    "FrontPageRepository",
    "RoleRepository",
    "SettingRepository",
    "TicketRepository",
    "UserRepository",
    "parse_notification_preferences",
]
