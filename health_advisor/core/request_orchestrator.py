# Role: Orchestrator for one question/answer exchange. It owns the busy flag (single-flight),
# appends the user message, calls the advisor, and always settles with exactly one advisor message.

from __future__ import annotations

import threading
from typing import Callable, Optional

import health_advisor.config as config
from health_advisor.core.fallback_handler import FALLBACK_REQUEST_FAILED, answer_text
from health_advisor.core.ids import MessageIdGenerator
from health_advisor.core.session_store import SessionStore
from health_advisor.models.conversation import ConversationLog
from health_advisor.models.message import Message, Origin
from health_advisor.tools.advisor_client import AdvisorClient


class RequestOrchestrator:
    def __init__(
        self,
        session_store: Optional[SessionStore] = None,
        advisor_client: Optional[AdvisorClient] = None,
        id_generator: Optional[MessageIdGenerator] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.session_store = session_store or SessionStore()
        self.advisor_client = advisor_client or AdvisorClient()
        self.id_generator = id_generator or MessageIdGenerator()
        self._busy = False
        self._busy_lock = threading.Lock()

        self.id_generator.observe(self.session_store.log.messages)

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def log(self) -> ConversationLog:
        return self.session_store.log

    def start(self) -> ConversationLog:
        # Role: startup. Adopt the persisted conversation and keep new ids above the restored ones.
        log = self.session_store.load()
        self.id_generator.observe(log.messages)
        return log

    def submit(self, question: str, on_accepted: Optional[Callable[[], None]] = None) -> Optional[Message]:
        # 1) Reject blank input or a second call while one is outstanding (no-op, returns None)
        # 2) Append the user message; let the caller clear its input
        # 3) Call the advisor (the only blocking step)
        # 4) Append exactly one advisor message (answer, apology, or error text)
        # 5) Always release busy
        if not question or not question.strip():
            return None

        with self._busy_lock:
            if self._busy:
                if config.DEBUG:
                    print("[ORCHESTRATOR] submit ignored: a request is already in flight")
                return None
            self._busy = True

        try:
            generation = self.session_store.generation
            user_message = self._new_message(question, Origin.USER)
            # Key line: a clear_history() between reading the generation and this append must not leave
            # a lone user message in the fresh conversation.
            if self.session_store.append(user_message, generation=generation) is None:
                return None

            if on_accepted is not None:
                on_accepted()

            try:
                reply = self.advisor_client.ask(question)
                text = answer_text(reply)
                if config.DEBUG and not reply.ok:
                    print("[ORCHESTRATOR] advisor call failed:", reply.error)
            except Exception as e:
                # Key line: nothing from the remote side may escape; the session must stay usable.
                if config.DEBUG:
                    print("\n!!! ADVISOR ERROR !!!")
                    print(repr(e))
                    print("!!! END ERROR !!!\n")
                text = FALLBACK_REQUEST_FAILED

            advisor_message = self._new_message(text, Origin.ADVISOR)
            # Key line: a clear_history() during the call makes this settlement stale; it is dropped.
            if self.session_store.append(advisor_message, generation=generation) is None:
                return None
            return advisor_message
        finally:
            with self._busy_lock:
                self._busy = False

    def clear_history(self) -> ConversationLog:
        # Not blocked by busy: an outstanding call still settles, but its answer is discarded.
        return self.session_store.clear()

    def _new_message(self, text: str, origin: Origin) -> Message:
        return Message(id=self.id_generator.next_id(), text=text, origin=origin)
