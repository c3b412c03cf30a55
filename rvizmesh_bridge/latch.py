from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from .interfaces import GeometryRequest

T = TypeVar("T")


class MessageLatch(Generic[T]):
    """
    Thread-safe holder for the newest message of one subscription.

    Subscriber callbacks call update() from their own thread; the render loop
    checks is_new() and acknowledges with set_old(), or uses take().
    None is reserved for "nothing new" and cannot be stored.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._msg: Optional[T] = None
        self._is_new = False

    def update(self, msg: T) -> None:
        if msg is None:
            raise ValueError("MessageLatch cannot hold None")
        with self._lock:
            self._msg = msg
            self._is_new = True

    def latest(self) -> Optional[T]:
        with self._lock:
            return self._msg

    def is_new(self) -> bool:
        with self._lock:
            return self._is_new

    def set_old(self) -> None:
        with self._lock:
            self._is_new = False

    def take(self) -> Optional[T]:
        """Return the message if unseen (marking it seen), else None."""
        with self._lock:
            if not self._is_new:
                return None
            self._is_new = False
            return self._msg


Converter = Callable[[Any], Union[GeometryRequest, Iterable[GeometryRequest], None]]


class LatchedGeometrySource:
    """
    GeometrySource over a set of latches.

    Each latch is paired with a converter turning a raw message into zero or
    more GeometryRequests. Only latches holding an unseen message are polled.
    """
    def __init__(self):
        self._entries: Dict[str, Tuple[MessageLatch, Converter]] = {}

    def add(self, name: str, converter: Converter) -> MessageLatch:
        if name in self._entries:
            raise ValueError(f"Latch '{name}' already registered")
        latch: MessageLatch = MessageLatch()
        self._entries[name] = (latch, converter)
        return latch

    def latch(self, name: str) -> MessageLatch:
        return self._entries[name][0]

    def poll(self) -> List[GeometryRequest]:
        out: List[GeometryRequest] = []
        for latch, converter in self._entries.values():
            msg = latch.take()
            if msg is None:
                continue
            out.extend(_as_requests(converter(msg)))
        return out


def _as_requests(res: Any) -> Iterator[GeometryRequest]:
    if res is None:
        return
    if isinstance(res, GeometryRequest):
        yield res
        return
    for r in res:
        if not isinstance(r, GeometryRequest):
            raise TypeError(f"Converter must produce GeometryRequest, got {type(r).__name__}")
        yield r
