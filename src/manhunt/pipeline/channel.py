"""Bounded, closable queue connecting pipeline stages.

``queue.Queue`` has no notion of being closed, which leaves consumers to
guess when producers are done. ``Channel`` adds an explicit closed state:
after ``close()`` producers fail fast and consumers drain what is buffered,
then stop.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

from manhunt.errors import ChannelClosed

T = TypeVar("T")


class Channel(Generic[T]):
    """Thread-safe bounded FIFO with blocking put/get and a closed state.

    Args:
        maxsize: Maximum number of buffered items, at least 1.
    """

    def __init__(self, maxsize: int) -> None:
        if maxsize < 1:
            raise ValueError("Channel capacity must be at least 1")
        self._maxsize = maxsize
        self._items: Deque[T] = deque()
        self._closed = False
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def put(self, item: T) -> None:
        """Put an item, blocking while the channel is full.

        Raises:
            ChannelClosed: if the channel is, or becomes, closed.
        """
        with self._not_full:
            while len(self._items) >= self._maxsize and not self._closed:
                self._not_full.wait()
            if self._closed:
                raise ChannelClosed("put on closed channel")
            self._items.append(item)
            self._not_empty.notify()

    def get(self) -> T:
        """Take the oldest item, blocking while the channel is empty and open.

        Raises:
            ChannelClosed: once the channel is closed and fully drained.
        """
        with self._not_empty:
            while not self._items and not self._closed:
                self._not_empty.wait()
            if not self._items:
                raise ChannelClosed("channel closed and drained")
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def close(self) -> None:
        """Mark the channel closed and wake every waiting thread. Idempotent."""
        with self._lock:
            self._closed = True
            self._not_empty.notify_all()
            self._not_full.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except ChannelClosed:
                return

    @property
    def maxsize(self) -> int:
        return self._maxsize
