# randints/core/stream.py
import asyncio
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class ValueStream(Generic[T]):
    """Single-producer/single-consumer async channel.

    The producer calls ``emit`` from plain code, the consumer awaits ``next``
    or iterates with ``async for``. Values come out in the order they went
    in, each exactly once. There is no end-of-stream: iteration runs until
    the consuming task is cancelled.

    Not thread-safe. Producers on another thread should go through
    ``loop.call_soon_threadsafe(stream.emit, value)``.
    """

    def __init__(self):
        self._values: Deque[T] = deque()
        self._waiters: Deque[asyncio.Future] = deque()

    def __len__(self) -> int:
        return len(self._values)

    @property
    def waiting(self) -> bool:
        return any(not w.done() for w in self._waiters)

    def emit(self, value: T) -> None:
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(value)
                return
        self._values.append(value)

    async def next(self) -> T:
        if self._values:
            return self._values.popleft()
        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        try:
            return await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                # handed over but never resumed: put it back at the head
                self._values.appendleft(waiter.result())
            else:
                waiter.cancel()
                try:
                    self._waiters.remove(waiter)
                except ValueError:
                    pass
            raise

    def __aiter__(self) -> "ValueStream[T]":
        return self

    async def __anext__(self) -> T:
        return await self.next()
