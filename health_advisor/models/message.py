# Role: Single transcript entry. Immutable once created; origin decides which side of the chat it renders on.
# to_record()/from_record() define the persisted shape (same keys the browser front-end stored).

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from health_advisor.utils.formatting import parse_iso_timestamp, to_iso_timestamp, truncate_to_millis, utc_now


class Origin(str, Enum):
    USER = "user"
    ADVISOR = "advisor"


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    text: str
    origin: Origin
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value: datetime) -> datetime:
        return truncate_to_millis(value)

    @property
    def is_user(self) -> bool:
        return self.origin == Origin.USER

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "isUser": self.is_user,
            "timestamp": to_iso_timestamp(self.created_at),
        }

    @classmethod
    def from_record(cls, record: Any) -> "Message":
        # Raises ValueError on any shape problem; the caller decides how to recover.
        if not isinstance(record, dict):
            raise ValueError(f"message record must be an object, got {type(record).__name__}")

        missing = [k for k in ("id", "text", "isUser", "timestamp") if k not in record]
        if missing:
            raise ValueError(f"message record is missing {missing}")

        is_user = record["isUser"]
        if not isinstance(is_user, bool):
            raise ValueError("isUser must be a boolean")

        return cls(
            id=record["id"],
            text=record["text"],
            origin=Origin.USER if is_user else Origin.ADVISOR,
            created_at=parse_iso_timestamp(record["timestamp"]),
        )
