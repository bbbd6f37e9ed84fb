"""
Service layer for palindrome messages.

``MessageService`` classifies incoming text and hands it to the
configured ``MessageStore``.  The palindrome mode (strict or
normalized) is fixed when the service is created, and the
classification is stored with the message: switching modes later does
not change messages that already exist.

Store calls may block on network I/O, so they run on the threadpool.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from palindrome_api.app.core.palindrome import classify
from palindrome_api.app.store import ListFilter, Message, MessageNotFound, MessagePayload, MessageStore


logger = logging.getLogger(__name__)


class MessageNotFoundError(Exception):
    """Raised when a requested message does not exist."""

    def __init__(self, message_id: str) -> None:
        super().__init__(f"message {message_id!r} not found")
        self.message_id = message_id


class MessageService:
    """Create, read, list and delete palindrome messages."""

    def __init__(self, store: MessageStore, strict_palindrome: bool = True) -> None:
        self.store = store
        self.strict_palindrome = strict_palindrome

    async def create(self, text: str) -> Message:
        """Classify ``text`` and persist it as a new message."""
        payload = MessagePayload(text=text, palindrome=classify(text, self.strict_palindrome))
        message = await run_in_threadpool(self.store.create, payload)
        logger.info("Created message %s (palindrome=%s)", message.id, message.palindrome)
        return message

    async def read(self, message_id: str) -> Message:
        """Return a single message or raise ``MessageNotFoundError``."""
        try:
            return await run_in_threadpool(self.store.read, message_id)
        except MessageNotFound:
            raise MessageNotFoundError(message_id) from None

    async def list(self, palindrome: Optional[bool] = None) -> List[Message]:
        """Return all messages, optionally only those with the given classification."""
        return await run_in_threadpool(self.store.list, ListFilter(palindrome=palindrome))

    async def delete(self, message_id: str) -> None:
        """Delete a message.  Deleting an unknown id is not an error."""
        try:
            await run_in_threadpool(self.store.delete, message_id)
        except MessageNotFound:
            logger.debug("Delete of unknown message %s ignored", message_id)
            return
        logger.info("Deleted message %s", message_id)
