from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

import pytest

from manuscript_pilot import config as app_config
from manuscript_pilot.llm import ChatSession, LLMError


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path) -> Iterator[None]:
    """No secrets file, a temp analytics CSV and a fresh settings cache."""
    monkeypatch.setattr(app_config.st, "secrets", {}, raising=False)
    for name in (
        "GEMINI_API_KEY",
        "OLLAMA_HOST",
        "OLLAMA_MODEL",
        "MANUSCRIPT_PILOT_TEXT_MODEL",
        "MANUSCRIPT_PILOT_FLASH_IMAGE_MODEL",
        "MANUSCRIPT_PILOT_PRO_IMAGE_MODEL",
        "MANUSCRIPT_PILOT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MANUSCRIPT_PILOT_ANALYTICS_FILE", str(tmp_path / "analytics.csv"))
    app_config.get_settings.cache_clear()
    yield
    app_config.get_settings.cache_clear()


@pytest.fixture
def gemini_key(monkeypatch) -> str:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    app_config.get_settings.cache_clear()
    return "test-key"


class FakeChatSession(ChatSession):
    """Replays canned chunks; raises after them when ``fail`` is set."""

    def __init__(self, chunks: Iterable[str] = ("Hello", " world"), fail: bool = False):
        self.chunks = list(chunks)
        self.fail = fail
        self.sent: List[str] = []

    def send_message_stream(self, text: str) -> Iterator[str]:
        self.sent.append(text)
        for chunk in self.chunks:
            yield chunk
        if self.fail:
            raise LLMError("stream dropped")


class ChatFactory:
    """Records every session it creates."""

    def __init__(self, chunks: Iterable[str] = ("Hello", " world"), fail: bool = False):
        self.chunks = list(chunks)
        self.fail = fail
        self.calls: List[tuple] = []
        self.sessions: List[FakeChatSession] = []

    def __call__(self, *args) -> FakeChatSession:
        self.calls.append(args)
        session = FakeChatSession(self.chunks, self.fail)
        self.sessions.append(session)
        return session

    @property
    def last(self) -> Optional[FakeChatSession]:
        return self.sessions[-1] if self.sessions else None


@pytest.fixture
def chat_factory() -> ChatFactory:
    return ChatFactory()


@pytest.fixture
def failing_chat_factory() -> ChatFactory:
    return ChatFactory(chunks=(), fail=True)


@pytest.fixture
def partial_chat_factory() -> ChatFactory:
    return ChatFactory(chunks=("Partial",), fail=True)
