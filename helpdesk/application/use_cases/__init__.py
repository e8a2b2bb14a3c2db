"""Aggregate application use cases."""

from .notifications import build_dispatch_context, dispatch_event

__all__ = [
    "build_dispatch_context",
    "dispatch_event",
]
