# Role: Thin HTTP adapter for submitting a question. Validates request/response shapes and delegates the
# whole exchange to RequestOrchestrator (business logic lives in core, not in the API layer).

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from health_advisor.api.deps import get_orchestrator
from health_advisor.core.request_orchestrator import RequestOrchestrator

router = APIRouter(tags=["ask"])


class AskRequest(BaseModel):
    question: str


class AskResponse(BaseModel):
    accepted: bool
    busy: bool
    answer: Optional[str] = None


@router.post("/ask", response_model=AskResponse)
def ask(req: AskRequest, orchestrator: RequestOrchestrator = Depends(get_orchestrator)) -> AskResponse:
    # 1) Forward the question; on_accepted fires only once the user message is in the log
    # 2) Return the advisor text in a stable schema for clients
    #    (accepted=True with answer=None: the history was cleared before the answer arrived)
    accepted = []
    advisor_message = orchestrator.submit(req.question, on_accepted=lambda: accepted.append(True))
    return AskResponse(
        accepted=bool(accepted),
        busy=orchestrator.busy,
        answer=advisor_message.text if advisor_message else None,
    )
