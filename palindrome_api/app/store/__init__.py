"""
Storage backends for messages.

``MessageStore`` describes the create/read/list/delete contract.  Two
implementations are provided: ``InMemoryMessageStore`` keeps messages
in a process‑local dictionary and ``MongoMessageStore`` persists them
in a MongoDB collection.  The backend is chosen at startup by
``core.db.build_store`` and injected into the service layer.
"""

from .base import (  # noqa: F401
    ListFilter,
    Message,
    MessageNotFound,
    MessagePayload,
    MessageStore,
    MessageStoreError,
    utc_timestamp,
)
from .memory import InMemoryMessageStore  # noqa: F401
from .mongo import MongoMessageStore  # noqa: F401
