import asyncio
from enum import Enum

from loguru import logger

from py_sage.exceptions.exceptions import ChannelClosedError, RelayStateError
from py_sage.sync.channel import Channel
from py_sage.sync.sink import EventSink
from py_sage.sync.translator import translate_event


class RelayState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class NotificationRelay(object):
    """
    Background task forwarding sync events to the UI.

    Events are translated and emitted one by one in arrival order. The relay
    stops when the event channel is closed by the engine or when the sink
    reports that nobody is listening. Either way the event channel is closed,
    so later engine sends raise ChannelClosedError. A stopped relay is never
    restarted.
    """

    def __init__(self, receiver: Channel, sink: EventSink):
        """
        Initialize relay.

        Args:
            receiver: Channel the sync engine writes internal events to
            sink: Destination for UI notifications
        """
        self._receiver = receiver
        self._sink = sink
        self._state = RelayState.IDLE
        self._task: asyncio.Task = None

    @property
    def state(self) -> RelayState:
        return self._state

    @property
    def task(self) -> asyncio.Task:
        return self._task

    def start(self) -> asyncio.Task:
        """
        Spawn the relay task. Must be called from a running event loop.

        Raises:
            RelayStateError: If the relay was already started
        """
        if self._state != RelayState.IDLE:
            raise RelayStateError(f"Relay can't be started from state {self._state.value}")
        self._state = RelayState.RUNNING
        self._task = asyncio.create_task(self._run())
        return self._task

    async def join(self):
        """Wait until the relay task finishes."""
        if self._task is not None:
            await self._task

    async def _run(self):
        logger.debug("Sync event relay started")
        try:
            while True:
                event = await self._receiver.recv()
                if event is None:
                    logger.debug("Sync event channel closed, relay stopped")
                    break
                try:
                    await self._sink.emit(translate_event(event))
                except ChannelClosedError:
                    logger.debug("Sync event sink closed, relay stopped")
                    break
        finally:
            # engine sends fail from now on
            self._receiver.close()
            self._state = RelayState.STOPPED
