# Role: Streamlit chat UI.
# - The orchestrator is authoritative (transcript + busy flag); this file only renders and forwards input.
# - One orchestrator per server process, restored from disk on first use.

from __future__ import annotations

import streamlit as st

import health_advisor.config
health_advisor.config.load_env()

from health_advisor.core.request_orchestrator import RequestOrchestrator
from health_advisor.models.message import Message
from health_advisor.utils.formatting import format_time


# ----------------------------
# Session helpers
# ----------------------------
@st.cache_resource
def get_orchestrator() -> RequestOrchestrator:
    orchestrator = RequestOrchestrator()
    orchestrator.start()
    return orchestrator


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 900px; padding-top: 2rem; padding-bottom: 2rem; }

.ha-subtitle { text-align: center; opacity: 0.75; margin-top: -0.5rem; }

.ha-empty {
  text-align: center;
  opacity: 0.55;
  padding: 3rem 1rem;
}

.ha-time {
  font-size: 0.75rem;
  opacity: 0.55;
  margin-top: 2px;
}

div[data-testid="stChatInput"] textarea { min-height: 44px; }
</style>
""",
        unsafe_allow_html=True,
    )


# ----------------------------
# Header
# ----------------------------
def render_header(orchestrator: RequestOrchestrator) -> None:
    st.title("💚 Conseiller Santé AI")
    st.markdown(
        '<p class="ha-subtitle">Posez vos questions bien-être 🌿 Je vous écoute avec bienveillance.</p>',
        unsafe_allow_html=True,
    )

    # Key line: only offer "clear" when there is something to clear.
    if not orchestrator.log.is_empty:
        if st.button("Effacer l'historique", disabled=orchestrator.busy):
            orchestrator.clear_history()
            st.rerun()


# ----------------------------
# Chat
# ----------------------------
def render_message(message: Message) -> None:
    role = "user" if message.is_user else "assistant"
    with st.chat_message(role):
        st.write(message.text)
        st.markdown(f'<div class="ha-time">{format_time(message.created_at)}</div>', unsafe_allow_html=True)


def render_chat(orchestrator: RequestOrchestrator) -> None:
    if orchestrator.log.is_empty:
        st.markdown(
            '<div class="ha-empty">Commencez en posant une question sur la santé, '
            "le bien-être ou la nutrition 🌱</div>",
            unsafe_allow_html=True,
        )
        return

    for message in orchestrator.log.messages:
        render_message(message)


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Conseiller Santé AI", page_icon="💚")
    inject_css()

    orchestrator = get_orchestrator()
    render_header(orchestrator)
    render_chat(orchestrator)

    question = st.chat_input("Posez votre question...", disabled=orchestrator.busy)
    if not question or not question.strip():
        return

    # Echo user message immediately; the orchestrator appends it before the call goes out.
    with st.chat_message("user"):
        st.write(question)

    with st.spinner("..."):
        orchestrator.submit(question)

    # Re-render from the log, which is the source of truth (also covers a submit ignored as busy).
    st.rerun()


if __name__ == "__main__":
    main()
