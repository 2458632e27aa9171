"""FIFO queue of user-facing messages with content-based duplicate suppression."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from ..errors import EmptyQueueError
from .models.core import GenericMessageInfo

LOGGER = logging.getLogger(__name__)


class MessageQueue:
    """Immutable ordered collection of :class:`GenericMessageInfo` records.

    Insertion order is display order.  No two queued records share a
    ``content_key``; ids are ignored when checking for duplicates.  Every
    operation that would change the queue returns a new instance, so a queue
    held by a published snapshot never changes.
    """

    __slots__ = ("_messages",)

    def __init__(self, messages: Iterable[GenericMessageInfo] = ()) -> None:
        unique: list[GenericMessageInfo] = []
        seen: set = set()
        for message in messages:
            if message.content_key not in seen:
                seen.add(message.content_key)
                unique.append(message)
        self._messages: Tuple[GenericMessageInfo, ...] = tuple(unique)

    @property
    def messages(self) -> Tuple[GenericMessageInfo, ...]:
        return self._messages

    def contains_content(self, candidate: GenericMessageInfo) -> bool:
        key = candidate.content_key
        return any(existing.content_key == key for existing in self._messages)

    def enqueue_if_new(self, candidate: GenericMessageInfo) -> Tuple[MessageQueue, bool]:
        """Return the queue with *candidate* appended and whether it was added.

        A content-duplicate leaves the queue unchanged and returns ``self``.
        """
        if self.contains_content(candidate):
            LOGGER.debug("Dropping duplicate message %r", candidate.title)
            return self, False
        return self._with_messages(self._messages + (candidate,)), True

    def remove_head(self) -> Tuple[GenericMessageInfo, MessageQueue]:
        """Return the earliest queued message and the queue without it."""
        if not self._messages:
            raise EmptyQueueError("Nothing to remove from the message queue")
        return self._messages[0], self._with_messages(self._messages[1:])

    def peek_head(self) -> Optional[GenericMessageInfo]:
        return self._messages[0] if self._messages else None

    def is_empty(self) -> bool:
        return not self._messages

    @classmethod
    def _with_messages(cls, messages: Tuple[GenericMessageInfo, ...]) -> MessageQueue:
        queue = cls.__new__(cls)
        queue._messages = messages
        return queue

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[GenericMessageInfo]:
        return iter(self._messages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageQueue):
            return NotImplemented
        return self._messages == other._messages

    def __hash__(self) -> int:
        return hash(self._messages)

    def __repr__(self) -> str:
        titles = ", ".join(repr(m.title) for m in self._messages)
        return f"MessageQueue([{titles}])"
