"""
Example of running a wallet session with a toy sync engine.
The engine emits a few events, the UI side prints the notifications it receives.
"""
import asyncio

from py_sage import SyncEngine, WalletSession
from py_sage.sync import Channel, ChannelSink
from py_sage.sync.events import CoinsUpdatedEvent, StartEvent, SubscribedEvent


class DemoEngine(SyncEngine):
    """Engine that connects to a single peer and reports one coin update."""

    async def initialize(self) -> Channel:
        events = Channel()
        self._task = asyncio.create_task(self._sync(events))
        return events

    async def _sync(self, events: Channel):
        await events.send(StartEvent(ip="127.0.0.1:8444"))
        await events.send(SubscribedEvent())
        await asyncio.sleep(0.1)
        await events.send(CoinsUpdatedEvent())
        events.close()


async def main():
    ui = Channel()
    session = WalletSession(DemoEngine(), ChannelSink(ui))
    await session.initialize()
    await session.initialize()  # no-op

    reader = asyncio.create_task(_print_notifications(ui))
    await session.relay.join()
    ui.close()
    await reader


async def _print_notifications(ui: Channel):
    async for notification in ui:
        print(notification.to_payload())


if __name__ == "__main__":
    asyncio.run(main())
