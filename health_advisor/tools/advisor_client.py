# Role: Adapter for the remote advisory webhook. One POST per question, bounded by a timeout.
# Returns a small result object instead of raising, so the orchestrator only has to look at .ok.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import requests

import health_advisor.config as config

ANSWER_FIELD = "Format Réponse"


@dataclass(frozen=True)
class AdvisorReply:
    ok: bool
    answer: Optional[str] = None
    error: Optional[str] = None


class AdvisorClient:
    def __init__(
        self,
        url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or config.advisor_url()
        self.timeout_seconds = timeout_seconds or config.advisor_timeout_seconds()
        self._session = session

    def ask(self, question: str) -> AdvisorReply:
        # 1) POST {"question": ...}
        # 2) Non-2xx / transport error / timeout -> ok=False
        # 3) Body must be JSON; extract the answer field (anything else -> answer=None)
        post = self._session.post if self._session is not None else requests.post

        try:
            r = post(self.url, json={"question": question}, timeout=self.timeout_seconds)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            return AdvisorReply(ok=False, error=f"Advisor request failed: {e}")
        except ValueError as e:
            # Key line: non-JSON body is a failed call, not an empty answer.
            return AdvisorReply(ok=False, error=f"Bad advisor payload: {e}")

        if config.DEBUG:
            print("\n--- ADVISOR CALL ---")
            print("URL:", self.url)
            print("STATUS:", r.status_code)
            print("PAYLOAD:", payload)
            print("--------------------\n")

        return AdvisorReply(ok=True, answer=extract_answer(payload))


def extract_answer(payload: Any) -> Optional[str]:
    # Role: the only response shape we understand is {"Format Réponse": "<text>"}.
    if not isinstance(payload, dict):
        return None
    answer = payload.get(ANSWER_FIELD)
    if not isinstance(answer, str):
        return None
    answer = answer.strip()
    return answer or None
