# Role: Timestamp helpers shared by the models (storage format) and the outer surfaces (display format).

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    # Key line: truncate to the precision we store, so a restored message compares equal to the original.
    return truncate_to_millis(datetime.now(timezone.utc))


def truncate_to_millis(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def to_iso_timestamp(value: datetime) -> str:
    # Same shape as JavaScript's Date.toISOString(): 2024-05-01T09:30:00.123Z
    value = truncate_to_millis(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso_timestamp(raw: str) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError("timestamp must be a non-empty string")
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return truncate_to_millis(datetime.fromisoformat(text))


def format_time(value: datetime) -> str:
    """HH:MM in the machine's local timezone (what the chat bubbles show)."""
    return value.astimezone().strftime("%H:%M")
