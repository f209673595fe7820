# Role: Owner of the conversation log. Restores it at startup, appends messages (value semantics),
# persists every non-empty change, and clears both memory and storage on request.

from __future__ import annotations

import threading
from typing import Optional

import health_advisor.config as config
from health_advisor.models.conversation import ConversationLog
from health_advisor.models.message import Message
from health_advisor.storage.kv_store import JsonFileStore, KeyValueStore


class SessionStore:
    def __init__(self, storage: Optional[KeyValueStore] = None, key: str = config.STORAGE_KEY) -> None:
        self.storage = storage if storage is not None else JsonFileStore()
        self.key = key
        self._log = ConversationLog()
        # Key line: bumped by clear(); lets callers detect that "their" conversation is gone.
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def log(self) -> ConversationLog:
        return self._log

    @property
    def generation(self) -> int:
        return self._generation

    def restore(self) -> ConversationLog:
        """Read the persisted conversation. Missing or malformed data means "no history"."""
        raw = self.storage.get_item(self.key)
        if not raw:
            return ConversationLog()

        try:
            return ConversationLog.from_json(raw)
        except Exception as e:
            # Any failure (bad JSON, bad record, timestamp out of range, nesting too deep) means "no history".
            if config.DEBUG:
                print(f"[SESSION_STORE] discarding unreadable history: {e!r}")
            return ConversationLog()

    def load(self) -> ConversationLog:
        # Role: startup path. restore() is read-only; load() also adopts the result as the current log.
        with self._lock:
            self._log = self.restore()
            return self._log

    def append(self, message: Message, generation: Optional[int] = None) -> Optional[ConversationLog]:
        # 1) Optionally check the caller still targets the current generation (stale -> dropped, returns None)
        # 2) Build the new log value
        # 3) Persist it
        with self._lock:
            if generation is not None and generation != self._generation:
                if config.DEBUG:
                    print(f"[SESSION_STORE] dropping stale message {message.id} (gen {generation} != {self._generation})")
                return None

            self._log = self._log.appended(message)
            self.persist(self._log)
            return self._log

    def clear(self) -> ConversationLog:
        with self._lock:
            self._log = ConversationLog()
            self._generation += 1
            # Key line: remove the slot, not write "[]"; a later restore must find nothing at all.
            self.storage.remove_item(self.key)
            return self._log

    def persist(self, log: ConversationLog) -> None:
        # Key line: never write an empty log (startup must not overwrite a saved session).
        if log.is_empty:
            return
        self.storage.set_item(self.key, log.to_json())
