"""Read-only view of the email notification toggles."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from helpdesk.infrastructure.database import get_db
from helpdesk.infrastructure.repositories import SettingRepository
from helpdesk.interfaces.api.schemas import NotificationPreferencesRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/preferences", response_model=NotificationPreferencesRead)
def read_preferences(db: Session = Depends(get_db)) -> NotificationPreferencesRead:
    preferences = SettingRepository(db).get_notification_preferences()
    return NotificationPreferencesRead(preferences=dict(preferences))
