import pytest

from py_sage.exceptions.exceptions import ChannelClosedError
from py_sage.sync.channel import Channel


@pytest.mark.asyncio
async def test_channel_fifo():
    channel = Channel()
    for i in range(5):
        await channel.send(i)
    assert [await channel.recv() for _ in range(5)] == [0, 1, 2, 3, 4]


@pytest.mark.asyncio
async def test_channel_close_drains_buffer():
    channel = Channel()
    await channel.send("a")
    await channel.send("b")
    channel.close()
    assert channel.closed
    assert [item async for item in channel] == ["a", "b"]
    assert await channel.recv() is None
    assert await channel.recv() is None


@pytest.mark.asyncio
async def test_channel_send_after_close():
    channel = Channel()
    channel.close()
    channel.close()
    with pytest.raises(ChannelClosedError):
        await channel.send("a")


@pytest.mark.asyncio
async def test_channel_rejects_none():
    with pytest.raises(ValueError):
        await Channel().send(None)
