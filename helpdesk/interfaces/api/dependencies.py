"""FastAPI dependency utilities."""

from fastapi import Depends
from sqlalchemy.orm import Session

from helpdesk.application.use_cases.notifications import (
    DispatchContext,
    build_dispatch_context,
)
from helpdesk.infrastructure.database import get_db


def get_dispatch_context(db: Session = Depends(get_db)) -> DispatchContext:
    """Return the collaborators used to dispatch notification emails."""

    return build_dispatch_context(db)
