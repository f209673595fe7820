"""Pytest configuration and shared fixtures."""
import threading
from typing import List, Optional

import pytest

from health_advisor.core.ids import MessageIdGenerator
from health_advisor.core.request_orchestrator import RequestOrchestrator
from health_advisor.core.session_store import SessionStore
from health_advisor.storage.kv_store import MemoryStore
from health_advisor.tools.advisor_client import AdvisorReply


class FakeAdvisorClient:
    """Stands in for AdvisorClient; records questions and returns a canned reply."""

    def __init__(self, reply: Optional[AdvisorReply] = None, error: Optional[Exception] = None):
        self.reply = reply or AdvisorReply(ok=True, answer="60-100 bpm")
        self.error = error
        self.questions: List[str] = []

    def ask(self, question: str) -> AdvisorReply:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.reply


class BlockingAdvisorClient(FakeAdvisorClient):
    """Holds every call open until release is set, so tests can act while a request is in flight."""

    def __init__(self, reply: Optional[AdvisorReply] = None):
        super().__init__(reply)
        self.started = threading.Event()
        self.release = threading.Event()

    def ask(self, question: str) -> AdvisorReply:
        self.questions.append(question)
        self.started.set()
        assert self.release.wait(5), "test never released the advisor call"
        return self.reply


class ClearingSessionStore(SessionStore):
    """Runs clear() just before the n-th append, like a clear_history() from another thread."""

    def __init__(self, storage, clear_before_append: int):
        super().__init__(storage=storage)
        self._countdown = clear_before_append

    def append(self, message, generation=None):
        self._countdown -= 1
        if self._countdown == 0:
            self.clear()
        return super().append(message, generation=generation)


@pytest.fixture
def memory_store():
    """Return an empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def session_store(memory_store):
    """Return a SessionStore backed by memory_store."""
    return SessionStore(storage=memory_store)


@pytest.fixture
def advisor():
    """Return a fake advisor answering "60-100 bpm"."""
    return FakeAdvisorClient()


@pytest.fixture
def orchestrator(session_store, advisor):
    """Return an orchestrator wired to the in-memory store and the fake advisor."""
    return RequestOrchestrator(
        session_store=session_store,
        advisor_client=advisor,
        id_generator=MessageIdGenerator(),
    )
