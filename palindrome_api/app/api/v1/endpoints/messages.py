"""
Message endpoints for API v1.

These routes create, read, list and delete palindrome messages.  Each
route is also reachable with a trailing slash, without a redirect.
Domain errors are translated to HTTP status codes here: an unknown id
is 404, a missing ``text`` or an unrecognised ``palindrome`` filter is
400, and deleting is always 204.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from palindrome_api.app.schemas.message import MessageCreate, MessageRead
from palindrome_api.app.services.message_service import MessageNotFoundError, MessageService


router = APIRouter()


def get_message_service(request: Request) -> MessageService:
    """Return the service attached to the running application."""
    return request.app.state.message_service


def parse_palindrome_filter(raw: Optional[str]) -> Optional[bool]:
    """Interpret the ``palindrome`` query parameter.

    Missing or empty means no filter; otherwise only ``true`` and
    ``false`` (any case, no surrounding whitespace) are accepted.
    """
    if raw is None:
        return None
    value = raw.lower()
    if value == "":
        return None
    if value == "true":
        return True
    if value == "false":
        return False
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="palindrome must be 'true' or 'false'",
    )


@router.post("", response_model=MessageRead)
@router.post("/", response_model=MessageRead, include_in_schema=False)
async def create_message(
    body: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Store a message and report whether it is a palindrome."""
    if body.text is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="text is required")
    message = await service.create(body.text)
    return MessageRead.from_message(message)


@router.get("", response_model=List[MessageRead])
@router.get("/", response_model=List[MessageRead], include_in_schema=False)
async def list_messages(
    palindrome: Optional[str] = Query(None, description="Filter by classification: true or false"),
    service: MessageService = Depends(get_message_service),
) -> List[MessageRead]:
    """List stored messages, optionally filtered by classification."""
    messages = await service.list(parse_palindrome_filter(palindrome))
    return [MessageRead.from_message(m) for m in messages]


@router.get("/{message_id}", response_model=MessageRead)
@router.get("/{message_id}/", response_model=MessageRead, include_in_schema=False)
async def get_message(
    message_id: str,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Retrieve a single message by id."""
    try:
        message = await service.read(message_id)
    except MessageNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageRead.from_message(message)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@router.delete("/{message_id}/", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, include_in_schema=False)
async def delete_message(
    message_id: str,
    service: MessageService = Depends(get_message_service),
) -> Response:
    """Delete a message.  Unknown ids are treated as already deleted."""
    await service.delete(message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
