"""
Storage contract shared by all message backends.

Records are immutable once created: a message is inserted, read,
listed and deleted but never updated in place.  The ``created_at``
timestamp is kept as an RFC3339 string so that a record read back from
any backend is identical to the one returned on creation.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


class MessageStoreError(Exception):
    """Raised when a storage backend fails."""


class MessageNotFound(MessageStoreError):
    """Raised when no message exists for the requested id."""

    def __init__(self, message_id: str) -> None:
        super().__init__(f"message {message_id!r} not found")
        self.message_id = message_id


@dataclass(frozen=True)
class Message:
    """A stored string together with its palindrome classification."""

    id: str
    text: str
    palindrome: bool
    created_at: str


@dataclass(frozen=True)
class MessagePayload:
    """Values used to create a ``Message``."""

    text: str
    palindrome: bool


@dataclass(frozen=True)
class ListFilter:
    """Criteria for listing messages.  ``None`` matches everything."""

    palindrome: Optional[bool] = None

    def matches(self, message: Message) -> bool:
        return self.palindrome is None or message.palindrome == self.palindrome


def utc_timestamp() -> str:
    """Return the current UTC time as an RFC3339 string ending in ``Z``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class MessageStore(abc.ABC):
    """Create, read, list and delete operations on messages."""

    @abc.abstractmethod
    def create(self, payload: MessagePayload) -> Message:
        """Persist a new message and return it with its id and timestamp."""

    @abc.abstractmethod
    def read(self, message_id: str) -> Message:
        """Return the message with ``message_id`` or raise ``MessageNotFound``."""

    @abc.abstractmethod
    def list(self, criteria: Optional[ListFilter] = None) -> List[Message]:
        """Return all messages matching ``criteria`` in no particular order."""

    @abc.abstractmethod
    def delete(self, message_id: str) -> None:
        """Remove the message with ``message_id`` or raise ``MessageNotFound``."""

    def close(self) -> None:
        """Release any resources held by the backend."""
