# Role: Central configuration module. Loads .env into environment variables and computes runtime flags (DEBUG).
# Importers read health_advisor.config.DEBUG to control debug output without threading flags through every call.

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

DEBUG: bool = False

DEFAULT_ADVISOR_URL = "http://localhost:5678/webhook-test/health-agent/ask"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_STORAGE_PATH = Path.home() / ".health_advisor" / "storage.json"

# Key line: the single key-value slot holding the whole conversation.
STORAGE_KEY = "healthAdvisorMessages"


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}


def advisor_url() -> str:
    return os.getenv("ADVISOR_URL") or DEFAULT_ADVISOR_URL


def advisor_timeout_seconds() -> float:
    raw = os.getenv("ADVISOR_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_TIMEOUT_SECONDS


def storage_path() -> Path:
    raw = os.getenv("HEALTH_ADVISOR_STORAGE_PATH")
    return Path(raw).expanduser() if raw else DEFAULT_STORAGE_PATH
