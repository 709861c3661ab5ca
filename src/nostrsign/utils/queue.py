"""FIFO queue of string messages.

Buffers serialized events or relay messages until a consumer is ready for
them. Not thread-safe; use ``queue.Queue`` when producers and consumers run
in different threads.
"""

from __future__ import annotations

from collections import deque


class MessageQueue:
    """First-in, first-out queue of strings.

    Examples:
        ```python
        q = MessageQueue()
        q.enqueue('["EVENT", {...}]')
        q.size          # 1
        q.dequeue()     # '["EVENT", {...}]'
        q.dequeue()     # None
        ```
    """

    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: deque[str] = deque()

    @property
    def size(self) -> int:
        return len(self._messages)

    @property
    def first(self) -> str | None:
        """Oldest message, without removing it."""
        return self._messages[0] if self._messages else None

    @property
    def last(self) -> str | None:
        """Newest message, without removing it."""
        return self._messages[-1] if self._messages else None

    def enqueue(self, message: str) -> bool:
        self._messages.append(message)
        return True

    def dequeue(self) -> str | None:
        """Remove and return the oldest message, or ``None`` when empty."""
        return self._messages.popleft() if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)
