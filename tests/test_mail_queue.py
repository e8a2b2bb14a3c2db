"""Tests for the Celery mail queue and its worker task."""

from __future__ import annotations

import types

import pytest

from helpdesk.domain.entities import MailJob
from helpdesk.infrastructure.email import TransportError
from helpdesk.infrastructure.queue import MAIL_QUEUE, CeleryMailQueue, celery_app
from helpdesk.infrastructure.queue import tasks as tasks_module


class RecordingTask:
    def __init__(self):
        self.calls = []

    def delay(self, **kwargs):
        self.calls.append(kwargs)
        return types.SimpleNamespace(id="job-1")


def test_enqueue_submits_the_job_payload() -> None:
    task = RecordingTask()

    CeleryMailQueue(task).enqueue(MailJob(to="ana@example.com", subject="Hi", html="<p>x</p>"))

    assert task.calls == [{"to": "ana@example.com", "subject": "Hi", "html": "<p>x</p>"}]


def test_celery_app_uses_the_mail_queue() -> None:
    assert celery_app.conf.task_default_queue == MAIL_QUEUE
    assert celery_app.conf.task_serializer == "json"
    assert "helpdesk.send_mail_job" in celery_app.tasks


class _Transport:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, to, subject, html):
        if self.error:
            raise self.error
        self.sent.append((to, subject, html))


def test_worker_task_sends_through_sendgrid(monkeypatch: pytest.MonkeyPatch) -> None:
    transport = _Transport()
    monkeypatch.setattr(
        tasks_module.SendGridTransport, "from_settings", classmethod(lambda cls, settings=None: transport)
    )

    assert tasks_module.send_mail_job.run("ana@example.com", "Hi", "<p>x</p>") is True
    assert transport.sent == [("ana@example.com", "Hi", "<p>x</p>")]


def test_worker_task_logs_transport_failures(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    transport = _Transport(TransportError("SendGrid API responded with status 500"))
    monkeypatch.setattr(
        tasks_module.SendGridTransport, "from_settings", classmethod(lambda cls, settings=None: transport)
    )

    with caplog.at_level("ERROR"):
        result = tasks_module.send_mail_job.run("ana@example.com", "Hi", "<p>x</p>")

    assert result is False
    assert "Queued email to ana@example.com failed" in caplog.text
