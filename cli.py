# Role: Local developer CLI to talk to the advisor without the web UI.
# Shares the same persisted conversation as the Streamlit app (same storage file, same key).

from __future__ import annotations

import health_advisor.config
health_advisor.config.load_env()

from health_advisor.core.request_orchestrator import RequestOrchestrator
from health_advisor.models.message import Message
from health_advisor.utils.formatting import format_time


def _print_message(message: Message) -> None:
    who = "Vous" if message.is_user else "Conseiller"
    print(f"[{format_time(message.created_at)}] {who}: {message.text}")


def main() -> None:
    # 1) Restore the saved conversation
    # 2) Route user input -> RequestOrchestrator -> print advisor output
    print("Conseiller Santé AI (CLI)")
    print("Commands: /history (show transcript), /clear (erase history), /exit")
    print("-" * 50)

    orchestrator = RequestOrchestrator()
    log = orchestrator.start()
    if not log.is_empty:
        print(f"{len(log)} message(s) restored. Type /history to see them.")

    while True:
        try:
            question = input("\nVous: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nAu revoir !")
            return

        if not question:
            continue

        cmd = question.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Au revoir !")
            return

        if cmd in {"/clear", "clear"}:
            orchestrator.clear_history()
            print("Historique effacé.")
            continue

        if cmd in {"/history", "history"}:
            if orchestrator.log.is_empty:
                print("(aucun message)")
            for message in orchestrator.log.messages:
                _print_message(message)
            continue

        advisor_message = orchestrator.submit(question)
        if advisor_message is not None:
            print(f"\nConseiller: {advisor_message.text}")


if __name__ == "__main__":
    main()
