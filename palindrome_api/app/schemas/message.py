"""
Pydantic schemas for messages.

``MessageCreate`` is the request body for ``POST /messages``.  Its
``text`` field is optional at the schema level so that a missing value
can be answered with 400 by the endpoint rather than a validation
error.  ``MessageRead`` is the response shape; ``created_at`` is
exposed as ``createdAt``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from palindrome_api.app.store import Message


class MessageCreate(BaseModel):
    """Schema for creating a message."""

    text: Optional[str] = Field(None, examples=["racecar"])


class MessageRead(BaseModel):
    """Schema for reading a message from the API."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    text: str
    palindrome: bool
    created_at: str = Field(..., alias="createdAt", examples=["2026-10-16T09:12:33.123456Z"])

    @classmethod
    def from_message(cls, message: Message) -> "MessageRead":
        return cls(
            id=message.id,
            text=message.text,
            palindrome=message.palindrome,
            created_at=message.created_at,
        )
