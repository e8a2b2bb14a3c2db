from .event import DispatchReportRead, EventCreate
from .notification import NotificationPreferencesRead

__all__ = [
    "DispatchReportRead",
    "EventCreate",
    "NotificationPreferencesRead",
]
