import asyncio
from enum import Enum
from typing import Optional

from loguru import logger

from py_sage.sync.channel import Channel
from py_sage.sync.relay import NotificationRelay
from py_sage.sync.sink import EventSink


class SyncEngine:
    async def initialize(self) -> Channel:
        """
        Start wallet sync.

        Returns:
            Channel the engine writes sync events to
        """
        raise NotImplementedError("initialize method not implemented")


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    STARTING = "starting"
    STARTED = "started"


class WalletSession(object):
    """
    Starts the sync engine and its notification relay once per session.

    `initialize` is safe to call concurrently and repeatedly. A failed engine
    startup leaves the session not started so the next call retries.
    """

    def __init__(self, engine: SyncEngine, sink: EventSink):
        """
        Initialize wallet session.

        Args:
            engine: Wallet sync engine
            sink: Destination for UI sync notifications
        """
        self._engine = engine
        self._sink = sink
        self._state = SessionState.NOT_STARTED
        self._lock = asyncio.Lock()
        self._relay: Optional[NotificationRelay] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def relay(self) -> Optional[NotificationRelay]:
        return self._relay

    async def initialize(self) -> bool:
        """
        Start the sync engine and the relay if not started yet.

        Returns:
            True if the session was already initialized, False if this call started it
        """
        async with self._lock:
            if self._state == SessionState.STARTED:
                return True

            self._state = SessionState.STARTING
            try:
                receiver = await self._engine.initialize()
            except BaseException:
                self._state = SessionState.NOT_STARTED
                raise

            self._relay = NotificationRelay(receiver, self._sink)
            self._relay.start()
            self._state = SessionState.STARTED
            logger.info("Wallet session initialized")
            return False
