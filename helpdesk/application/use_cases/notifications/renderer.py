"""Flat ``{placeholder}`` substitution for stored email templates.

Every ``{...}`` run is a token, whatever it contains: ``{first name}`` and
``{a.b}`` are looked up verbatim. Tokens missing from the variable set render
as an empty string, so a template may reference fields that a particular
notification does not provide.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from helpdesk.domain.entities import EmailTemplate, RenderedMessage

TOKEN_PATTERN = re.compile(r"{(.*?)}")


def find_tokens(body: str | None) -> list[str]:
    """Return the distinct token identifiers of ``body`` in order of appearance."""

    identifiers: list[str] = []
    for identifier in TOKEN_PATTERN.findall(body or ""):
        if identifier not in identifiers:
            identifiers.append(identifier)
    return identifiers


def render_body(body: str | None, variables: Mapping[str, object]) -> str:
    """Replace every token of ``body`` with its value from ``variables``."""

    if not body:
        return ""

    def _substitute(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return "" if value is None else str(value)

    # A single pass keeps substituted values from being scanned again.
    return TOKEN_PATTERN.sub(_substitute, body)


def render(
    template: EmailTemplate, variables: Mapping[str, object], *, subject: str
) -> RenderedMessage:
    """Build the message for one recipient from ``template``."""

    return RenderedMessage(html=render_body(template.body, variables), subject=subject)


__all__ = ["TOKEN_PATTERN", "find_tokens", "render", "render_body"]
