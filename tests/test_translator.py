import typing

import pytest

from py_sage.sync.events import (
    CatInfoEvent,
    CoinsUpdatedEvent,
    DerivationIndexEvent,
    DidInfoEvent,
    NftDataEvent,
    OfferUpdatedEvent,
    PuzzleBatchSyncedEvent,
    StartEvent,
    StopEvent,
    SubscribedEvent,
    SyncEvent,
    SyncEventModel,
    SyncEventType,
    TransactionEndedEvent,
    TransactionUpdatedEvent,
)
from py_sage.sync.translator import EVENT_TYPE_BY_SYNC_EVENT, translate_event


def test_every_sync_event_is_mapped():
    assert set(typing.get_args(SyncEvent)) == set(EVENT_TYPE_BY_SYNC_EVENT)


def test_every_notification_type_is_reachable():
    assert set(EVENT_TYPE_BY_SYNC_EVENT.values()) == set(SyncEventType)


@pytest.mark.parametrize(
    "event, expected",
    [
        (StopEvent(), SyncEventType.STOP),
        (SubscribedEvent(), SyncEventType.SUBSCRIBED),
        (DerivationIndexEvent(next_index=500), SyncEventType.DERIVATION),
        (CoinsUpdatedEvent(coin_states=[]), SyncEventType.COIN_STATE),
        (TransactionUpdatedEvent(transaction_id=b"\x01" * 32), SyncEventType.COIN_STATE),
        (TransactionEndedEvent(transaction_id=b"\x01" * 32, success=True), SyncEventType.COIN_STATE),
        (OfferUpdatedEvent(offer_id=b"\x02" * 32, status="completed"), SyncEventType.COIN_STATE),
        (PuzzleBatchSyncedEvent(), SyncEventType.PUZZLE_BATCH_SYNCED),
        (CatInfoEvent(), SyncEventType.CAT_INFO),
        (DidInfoEvent(), SyncEventType.DID_INFO),
        (NftDataEvent(), SyncEventType.NFT_INFO),
    ],
)
def test_translate_event(event, expected):
    notification = translate_event(event)
    assert notification.type == expected
    assert notification.ip is None


def test_translate_start_event():
    notification = translate_event(StartEvent(ip="203.0.113.7:8444"))
    assert notification == SyncEventModel(type=SyncEventType.START, ip="203.0.113.7:8444")
    assert notification.to_payload() == {"type": "start", "ip": "203.0.113.7:8444"}


def test_payload_without_ip():
    assert translate_event(CoinsUpdatedEvent()).to_payload() == {"type": "coin_state"}


def test_translate_unknown_event():
    with pytest.raises(TypeError):
        translate_event(object())
