# Role: Process-wide singletons for the HTTP layer. One orchestrator = one conversation (no multi-session).
# Built on first request, so importing the app does not touch the storage file.

from __future__ import annotations

import threading
from typing import Optional

from health_advisor.core.request_orchestrator import RequestOrchestrator

_orchestrator: Optional[RequestOrchestrator] = None
_lock = threading.Lock()


def get_orchestrator() -> RequestOrchestrator:
    global _orchestrator
    with _lock:
        if _orchestrator is None:
            _orchestrator = RequestOrchestrator()
            _orchestrator.start()
        return _orchestrator
