# Role: Message id source. Ids look like millisecond timestamps but are bumped so they strictly increase:
# two messages created in the same millisecond (or after the clock steps back) still get distinct, ordered ids.

from __future__ import annotations

import threading
import time
from typing import Callable, Iterable, Optional

from health_advisor.models.message import Message


class MessageIdGenerator:
    def __init__(self, clock: Optional[Callable[[], float]] = None, last_issued: int = 0) -> None:
        self._clock = clock or time.time
        self._last = last_issued
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            self._last = max(now_ms, self._last + 1)
            return str(self._last)

    def observe(self, messages: Iterable[Message]) -> None:
        # Key line: after a restore, continue above the highest id already on disk.
        highest = max((int(m.id) for m in messages if m.id.isascii() and m.id.isdigit()), default=0)
        with self._lock:
            self._last = max(self._last, highest)
