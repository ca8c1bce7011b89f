import asyncio
from typing import Any, Optional

from py_sage.exceptions.exceptions import ChannelClosedError

_CLOSED = object()


class Channel(object):
    """
    Unbounded FIFO channel between one producer side and one consumer side.

    Either side may close it. After close, `send` raises ChannelClosedError and
    `recv` drains what is already buffered, then returns None.
    """

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, item: Any):
        if item is None:
            raise ValueError("None is reserved for end of stream")
        if self._closed:
            raise ChannelClosedError("Channel is closed")
        self._queue.put_nowait(item)

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSED)

    async def recv(self) -> Optional[Any]:
        item = await self._queue.get()
        if item is _CLOSED:
            # keep the marker for the next receiver
            self._queue.put_nowait(_CLOSED)
            return None
        return item

    def __aiter__(self):
        return self

    async def __anext__(self):
        item = await self.recv()
        if item is None:
            raise StopAsyncIteration
        return item
