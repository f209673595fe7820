# Role: The ordered transcript as a value. appended() returns a new log, so a log handed to the UI or to
# persistence can never change underneath it. The only way to shrink a conversation is to replace it.

from __future__ import annotations

import json
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from health_advisor.models.message import Message


class ConversationLog(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: Tuple[Message, ...] = ()

    def __len__(self) -> int:
        return len(self.messages)

    @property
    def is_empty(self) -> bool:
        return not self.messages

    @property
    def last(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def appended(self, message: Message) -> "ConversationLog":
        return ConversationLog(messages=self.messages + (message,))

    def to_json(self) -> str:
        return json.dumps([m.to_record() for m in self.messages], ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str) -> "ConversationLog":
        # 1) Decode the blob (must be a JSON array)
        # 2) Rebuild each message, keeping stored order
        # Any failure raises ValueError.
        payload = json.loads(raw)
        if not isinstance(payload, list):
            raise ValueError("persisted conversation must be a JSON array")
        return cls(messages=tuple(Message.from_record(item) for item in payload))
