"""Ingress endpoint turning domain events into notification emails."""

from fastapi import APIRouter, Depends, status

from helpdesk.application.use_cases.notifications import (
    DispatchContext,
    DispatchReport,
    dispatch_event,
)
from helpdesk.domain.entities import DomainEvent
from helpdesk.interfaces.api.dependencies import get_dispatch_context
from helpdesk.interfaces.api.schemas import DispatchReportRead, EventCreate

router = APIRouter(prefix="/events", tags=["events"])


def _report_to_read_model(report: DispatchReport) -> DispatchReportRead:
    return DispatchReportRead(
        notification=report.notification,
        sent=[recipient.email for recipient in report.sent],
        failed=[recipient.email for recipient in report.failed],
        skipped_reason=report.skipped_reason,
    )


@router.post("", response_model=DispatchReportRead, status_code=status.HTTP_202_ACCEPTED)
def raise_event(
    event_in: EventCreate,
    ctx: DispatchContext = Depends(get_dispatch_context),
) -> DispatchReportRead:
    """Dispatch the notifications for a committed business operation.

    Failures are reported in the body; the request itself only fails when the
    event cannot be parsed.
    """

    report = dispatch_event(ctx, DomainEvent(event_in.kind, event_in.payload))
    return _report_to_read_model(report)
