"""Exceptions raised inside the notification dispatch pipeline."""

from __future__ import annotations

from helpdesk.domain.entities import Recipient


class DeliveryError(Exception):
    """A message could not be handed to the transport or the mail queue."""

    def __init__(self, message: str, *, recipient: Recipient, mode: str) -> None:
        super().__init__(message)
        self.recipient = recipient
        self.mode = mode


__all__ = ["DeliveryError"]
