"""Smoke tests for the demo walkthroughs and the driver."""
from __future__ import annotations

import logging

import pytest

import main
from demos.observer_demo import ConcreteObserver, run_observer_demo
from demos.state_demo import run_state_demo
from publishing.enum.workflow_state import WorkflowState


def test_observer_demo_logs_both_then_one(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="demos.observer_demo"):
        subject = run_observer_demo()
    messages = [r.getMessage() for r in caplog.records if r.name == "demos.observer_demo"]
    assert messages == [
        "Observer id:1 received event!",
        "Observer id:2 received event!",
        "Observer id:1 received event!",
    ]
    assert subject.observers == [ConcreteObserver(id=1)]


def test_state_demo_ends_published_with_late_edit() -> None:
    doc = run_state_demo()
    assert doc.state is WorkflowState.PUBLISHED
    assert doc.visible_content() == "hello world"


def test_main_returns_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    configured: list[bool] = []
    monkeypatch.setattr(main, "configure_logging", lambda: configured.append(True))
    assert main.main() == 0
    assert configured == [True]
