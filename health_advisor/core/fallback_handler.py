# Role: Fixed user-facing texts for the two ways an answer can go missing, and the mapping from an
# AdvisorReply to the text the advisor bubble shows.

from __future__ import annotations

from typing import Optional

from health_advisor.tools.advisor_client import AdvisorReply

# The endpoint answered, but without usable text.
FALLBACK_EMPTY_ANSWER = "⚠️ Désolé, je n’ai pas pu récupérer la réponse. Réessayez plus tard."

# The call itself failed (network, timeout, non-2xx, unreadable body).
FALLBACK_REQUEST_FAILED = (
    "⚠️ Je n'ai pas pu traiter votre demande. Réessayez plus tard. "
    "Pour les cas graves, consultez un médecin."
)


def answer_text(reply: Optional[AdvisorReply]) -> str:
    if reply is None or not reply.ok:
        return FALLBACK_REQUEST_FAILED
    answer = (reply.answer or "").strip()
    return answer or FALLBACK_EMPTY_ANSWER
