"""Feature toggles deciding whether a notification type is sent at all."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def is_enabled(preferences: Mapping[str, bool], key: str) -> bool:
    """Return ``True`` only when ``key`` is present and truthy."""

    return bool(preferences.get(key, False))


def any_enabled(preferences: Mapping[str, bool], keys: Iterable[str]) -> bool:
    """Return ``True`` when at least one of ``keys`` is enabled."""

    return any(is_enabled(preferences, key) for key in keys)


__all__ = ["any_enabled", "is_enabled"]
