"""Tests for the ``{placeholder}`` renderer."""

from __future__ import annotations

import pytest

from helpdesk.application.use_cases.notifications.renderer import (
    find_tokens,
    render,
    render_body,
)
from helpdesk.domain.entities import EmailTemplate


def test_replaces_every_occurrence_of_a_token() -> None:
    body = "<p>{name}</p><p>Bye {name}</p>"

    assert render_body(body, {"name": "Ana"}) == "<p>Ana</p><p>Bye Ana</p>"


def test_unknown_tokens_render_as_empty_string() -> None:
    """Tokens with no variable disappear instead of leaking into the email."""

    assert render_body("Hi {name}, see {url}", {"name": "Ana"}) == "Hi Ana, see "


def test_rendering_ignores_variable_order() -> None:
    body = "{a}-{b}-{a}"
    forward = {"a": "1", "b": "2"}
    backward = dict(reversed(list(forward.items())))

    assert render_body(body, forward) == render_body(body, backward) == "1-2-1"


def test_rendering_twice_gives_identical_output() -> None:
    body = "{name} <{email}>"
    variables = {"name": "Ana", "email": "ana@example.com"}

    assert render_body(body, variables) == render_body(body, variables)


def test_substituted_values_are_not_rescanned() -> None:
    """A value that itself looks like a token is inserted literally."""

    assert render_body("{comment}", {"comment": "{password}", "password": "s3cret"}) == "{password}"


@pytest.mark.parametrize("body", ["", None])
def test_empty_body_renders_empty(body) -> None:
    assert render_body(body, {"name": "Ana"}) == ""


def test_body_without_tokens_is_unchanged() -> None:
    assert render_body("<p>Plain</p>", {"name": "Ana"}) == "<p>Plain</p>"


def test_identifiers_are_taken_verbatim() -> None:
    """Anything between braces is the identifier, spaces and dots included."""

    assert find_tokens("{first name} {a.b} {first name}") == ["first name", "a.b"]
    assert render_body("{first name}", {"first name": "Ana"}) == "Ana"


def test_none_values_render_as_empty_string() -> None:
    assert render_body("[{type}]", {"type": None}) == "[]"


def test_render_keeps_the_given_subject() -> None:
    template = EmailTemplate(id=1, slug="s", body="<b>{uid}</b>", subject="ignored {uid}")

    message = render(template, {"uid": "100007"}, subject="[Ticket#100007] - Hello")

    assert message.html == "<b>100007</b>"
    assert message.subject == "[Ticket#100007] - Hello"
