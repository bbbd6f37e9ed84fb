"""In‑memory message store used when no MongoDB URI is configured."""

from __future__ import annotations

import threading
import uuid
from typing import Dict, List, Optional

from .base import ListFilter, Message, MessageNotFound, MessagePayload, MessageStore, utc_timestamp


class InMemoryMessageStore(MessageStore):
    """Keep messages in a dictionary keyed by id.

    Store calls are dispatched to the threadpool, so every access to the
    dictionary happens under ``self._lock``.  Contents are lost when the
    process exits.
    """

    def __init__(self) -> None:
        self._messages: Dict[str, Message] = {}
        self._lock = threading.Lock()

    def create(self, payload: MessagePayload) -> Message:
        message = Message(
            id=str(uuid.uuid4()),
            text=payload.text,
            palindrome=payload.palindrome,
            created_at=utc_timestamp(),
        )
        with self._lock:
            self._messages[message.id] = message
        return message

    def read(self, message_id: str) -> Message:
        with self._lock:
            message = self._messages.get(message_id)
        if message is None:
            raise MessageNotFound(message_id)
        return message

    def list(self, criteria: Optional[ListFilter] = None) -> List[Message]:
        criteria = criteria or ListFilter()
        with self._lock:
            messages = list(self._messages.values())
        return [m for m in messages if criteria.matches(m)]

    def delete(self, message_id: str) -> None:
        with self._lock:
            if self._messages.pop(message_id, None) is None:
                raise MessageNotFound(message_id)
