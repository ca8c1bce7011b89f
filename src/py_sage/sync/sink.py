from typing import Callable

from py_sage.constants import SYNC_EVENT_NAME
from py_sage.exceptions.exceptions import ChannelClosedError
from py_sage.sync.channel import Channel
from py_sage.sync.events import SyncEventModel


class EventSink:
    async def emit(self, event: SyncEventModel) -> None:
        """
        Deliver a notification to the UI.

        Raises:
            ChannelClosedError: If nobody is listening anymore
        """
        raise NotImplementedError("emit method not implemented")


class ChannelSink(EventSink):
    """Sink forwarding notifications into a channel read by the UI side."""

    def __init__(self, channel: Channel):
        self.channel = channel

    async def emit(self, event: SyncEventModel) -> None:
        await self.channel.send(event)


class CallbackSink(EventSink):
    """
    Sink for UI event emitters.

    The callback receives the event name and a JSON payload and returns False
    once the UI window is gone.
    """

    def __init__(
        self,
        callback: Callable[[str, dict], bool],
        event_name: str = SYNC_EVENT_NAME,
    ):
        self.callback = callback
        self.event_name = event_name

    async def emit(self, event: SyncEventModel) -> None:
        if not self.callback(self.event_name, event.to_payload()):
            raise ChannelClosedError(f"No listener for {self.event_name}")
