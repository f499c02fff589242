"""Injected key-value storage for chat state.

Chat identifiers, message history and view flags live in a store passed
in by the caller rather than in module globals. ``MemoryStore`` is the
in-process implementation; anything with the ``KeyValueStore`` shape
(a browser-storage bridge, a cache client) can replace it.
"""

import logging
import secrets
import threading
import time
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from tern.errors import StoreError

logger = logging.getLogger("tern.store")

# -- Keys --

CHAT_ID_KEY = "chatId"
MESSAGES_KEY = "tern-messages"
FORM_DATA_KEY = "tern-form-data"
IS_FIRST_MESSAGE_KEY = "tern-is-first-message"
CHAT_VIEW_ACTIVE_KEY = "tern-chat-view-active"

_SESSION_KEYS = (
    CHAT_ID_KEY,
    MESSAGES_KEY,
    FORM_DATA_KEY,
    IS_FIRST_MESSAGE_KEY,
    CHAT_VIEW_ACTIVE_KEY,
)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_key(key: object) -> None:
    if not isinstance(key, str) or not key:
        msg = f"Store keys must be non-empty strings, got {key!r}"
        raise StoreError(msg)


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal storage interface used by ``ChatSession``."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self) -> None: ...


class MemoryStore:
    """Thread-safe dict-backed ``KeyValueStore``."""

    __slots__ = ("_data", "_lock")

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        _check_key(key)
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        _check_key(key)
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        _check_key(key)
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data


def generate_chat_id() -> str:
    """Return a new id of the form ``chat-<epoch ms>-<9 base-36 chars>``."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"chat-{int(time.time() * 1000)}-{suffix}"


class ChatSession:
    """Chat state bound to one injected store.

    The chat id is created on first access and then stays stable until
    ``reset()`` clears the session.
    """

    __slots__ = ("_store",)

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def chat_id(self) -> str:
        chat_id = self._store.get(CHAT_ID_KEY)
        if not chat_id:
            chat_id = generate_chat_id()
            self._store.set(CHAT_ID_KEY, chat_id)
            logger.debug("Created chat id %s", chat_id)
        return chat_id

    def save_messages(self, messages: list[dict[str, Any]]) -> None:
        self._store.set(MESSAGES_KEY, [dict(m) for m in messages])

    def load_messages(self) -> list[dict[str, Any]]:
        """Return stored messages, or ``[]`` when missing or malformed."""
        stored = self._store.get(MESSAGES_KEY)
        if stored is None:
            return []
        if not isinstance(stored, list) or not all(isinstance(m, Mapping) for m in stored):
            logger.warning("Discarding malformed message history of type %s", type(stored).__name__)
            return []
        return [dict(m) for m in stored]

    def save_form_data(self, form_data: Mapping[str, Any] | None) -> None:
        self._store.set(FORM_DATA_KEY, None if form_data is None else dict(form_data))

    def load_form_data(self) -> dict[str, Any] | None:
        stored = self._store.get(FORM_DATA_KEY)
        return dict(stored) if isinstance(stored, Mapping) else None

    @property
    def is_first_message(self) -> bool:
        stored = self._store.get(IS_FIRST_MESSAGE_KEY)
        return True if stored is None else bool(stored)

    @is_first_message.setter
    def is_first_message(self, value: bool) -> None:
        self._store.set(IS_FIRST_MESSAGE_KEY, bool(value))

    @property
    def chat_view_active(self) -> bool:
        return bool(self._store.get(CHAT_VIEW_ACTIVE_KEY))

    @chat_view_active.setter
    def chat_view_active(self, value: bool) -> None:
        self._store.set(CHAT_VIEW_ACTIVE_KEY, bool(value))

    def reset(self) -> None:
        """Drop the chat id, history, form data and view flags."""
        for key in _SESSION_KEYS:
            self._store.delete(key)
        logger.debug("Chat session cleared")
