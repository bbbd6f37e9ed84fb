"""
MongoDB message store.

Each message is one document in a collection.  The document ``_id`` is
a freshly generated ``ObjectId`` rendered as a hex string, so the ids
handed out by the API are plain strings for both backends.  A lookup
that matches no document is reported as ``MessageNotFound``; any other
driver failure is wrapped in ``MessageStoreError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .base import ListFilter, Message, MessageNotFound, MessagePayload, MessageStore, MessageStoreError, utc_timestamp


logger = logging.getLogger(__name__)


class MongoMessageStore(MessageStore):
    """Persist messages in a MongoDB collection."""

    def __init__(self, collection: Collection, client: Any = None) -> None:
        self._collection = collection
        # Owned client, closed together with the store.
        self._client = client

    def create(self, payload: MessagePayload) -> Message:
        message = Message(
            id=str(ObjectId()),
            text=payload.text,
            palindrome=payload.palindrome,
            created_at=utc_timestamp(),
        )
        try:
            self._collection.insert_one(self._to_document(message))
        except PyMongoError as exc:
            raise MessageStoreError(f"insert failed: {exc}") from exc
        return message

    def read(self, message_id: str) -> Message:
        try:
            document = self._collection.find_one({"_id": message_id})
        except PyMongoError as exc:
            raise MessageStoreError(f"find failed: {exc}") from exc
        if document is None:
            raise MessageNotFound(message_id)
        return self._from_document(document)

    def list(self, criteria: Optional[ListFilter] = None) -> List[Message]:
        query: Dict[str, Any] = {}
        if criteria is not None and criteria.palindrome is not None:
            query["palindrome"] = criteria.palindrome
        try:
            with self._collection.find(query) as cursor:
                return [self._from_document(document) for document in cursor]
        except PyMongoError as exc:
            raise MessageStoreError(f"find failed: {exc}") from exc

    def delete(self, message_id: str) -> None:
        try:
            document = self._collection.find_one_and_delete({"_id": message_id})
        except PyMongoError as exc:
            raise MessageStoreError(f"delete failed: {exc}") from exc
        if document is None:
            raise MessageNotFound(message_id)

    def close(self) -> None:
        if self._client is not None:
            logger.info("Closing MongoDB client")
            self._client.close()
            self._client = None

    @staticmethod
    def _to_document(message: Message) -> Dict[str, Any]:
        return {
            "_id": message.id,
            "text": message.text,
            "palindrome": message.palindrome,
            "createdAt": message.created_at,
        }

    @staticmethod
    def _from_document(document: Dict[str, Any]) -> Message:
        return Message(
            id=str(document["_id"]),
            text=document["text"],
            palindrome=bool(document["palindrome"]),
            created_at=document["createdAt"],
        )
