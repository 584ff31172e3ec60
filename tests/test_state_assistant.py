"""Tests for the research assistant chat state."""

from __future__ import annotations

import pytest

from manuscript_pilot.state import AssistantState, assistant_state
from manuscript_pilot.state.assistant import CHAT_ERROR, CLEARED, GREETING


def test_first_use_creates_session_and_greets(chat_factory):
    state = assistant_state({})

    state.ensure_session(chat_factory)
    state.ensure_session(chat_factory)

    assert len(chat_factory.calls) == 1
    assert [m.text for m in state.messages] == [GREETING]


def test_send_streams_reply(chat_factory):
    state = AssistantState()
    updates = []

    assert state.send("What controls do I need?", on_update=lambda m: updates.append(m.text),
                      factory=chat_factory)

    assert [m.role for m in state.messages] == ["model", "user", "model"]
    assert state.messages[-1].text == "Hello world"
    assert updates == ["Hello", "Hello world"]
    assert not state.is_loading


def test_send_blank_or_loading_is_noop(chat_factory):
    state = AssistantState()

    assert not state.send("   ", factory=chat_factory)
    state.is_loading = True
    assert not state.send("question", factory=chat_factory)
    assert state.messages == []


def test_send_failure_appends_apology(failing_chat_factory):
    state = AssistantState()

    assert not state.send("question", factory=failing_chat_factory)

    assert state.messages[-1].text == CHAT_ERROR
    assert state.messages[-2].text == "question"
    assert not state.is_loading


def test_partial_reply_is_kept_before_error(partial_chat_factory):
    state = AssistantState()

    state.send("question", factory=partial_chat_factory)

    assert [m.text for m in state.messages[-2:]] == ["Partial", CHAT_ERROR]
    assert not state.messages[-2].is_streaming


def test_clear_starts_new_session(chat_factory):
    state = AssistantState()
    state.send("question", factory=chat_factory)
    first_session = state.session

    state.clear(chat_factory)

    assert state.session is not first_session
    assert [m.text for m in state.messages] == [CLEARED]


class ScriptInterrupted(BaseException):
    """Stands in for Streamlit's rerun/stop signals, which bypass ``except Exception``."""


def test_interrupted_stream_stops_streaming_flag(chat_factory):
    state = AssistantState()

    def interrupt(message):
        raise ScriptInterrupted()

    with pytest.raises(ScriptInterrupted):
        state.send("question", on_update=interrupt, factory=chat_factory)

    assert state.messages[-1].text == "Hello"
    assert not state.messages[-1].is_streaming
    assert not state.is_loading
