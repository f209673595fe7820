# Role: Read/clear endpoints for the transcript. Exposes the persisted record shape plus the busy flag.

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from health_advisor.api.deps import get_orchestrator
from health_advisor.core.request_orchestrator import RequestOrchestrator

router = APIRouter(tags=["history"])


class HistorySnapshot(BaseModel):
    busy: bool
    messages: List[Dict[str, Any]]


@router.get("/history", response_model=HistorySnapshot)
def get_history(orchestrator: RequestOrchestrator = Depends(get_orchestrator)) -> HistorySnapshot:
    return HistorySnapshot(
        busy=orchestrator.busy,
        messages=[m.to_record() for m in orchestrator.log.messages],
    )


@router.delete("/history", response_model=HistorySnapshot)
def clear_history(orchestrator: RequestOrchestrator = Depends(get_orchestrator)) -> HistorySnapshot:
    orchestrator.clear_history()
    return HistorySnapshot(busy=orchestrator.busy, messages=[])
