from typing import Dict, Type

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

# Coin, transaction and offer updates collapse into COIN_STATE: the UI re-queries
# wallet state instead of applying deltas.
EVENT_TYPE_BY_SYNC_EVENT: Dict[Type, SyncEventType] = {
    StartEvent: SyncEventType.START,
    StopEvent: SyncEventType.STOP,
    SubscribedEvent: SyncEventType.SUBSCRIBED,
    DerivationIndexEvent: SyncEventType.DERIVATION,
    CoinsUpdatedEvent: SyncEventType.COIN_STATE,
    TransactionUpdatedEvent: SyncEventType.COIN_STATE,
    TransactionEndedEvent: SyncEventType.COIN_STATE,
    OfferUpdatedEvent: SyncEventType.COIN_STATE,
    PuzzleBatchSyncedEvent: SyncEventType.PUZZLE_BATCH_SYNCED,
    CatInfoEvent: SyncEventType.CAT_INFO,
    DidInfoEvent: SyncEventType.DID_INFO,
    NftDataEvent: SyncEventType.NFT_INFO,
}


def translate_event(event: SyncEvent) -> SyncEventModel:
    """
    Map an internal sync event to a UI notification.

    Raises:
        TypeError: If the event type has no notification mapping
    """
    event_type = EVENT_TYPE_BY_SYNC_EVENT.get(type(event))
    if event_type is None:
        raise TypeError(f"Unknown sync event: {type(event).__name__}")
    if isinstance(event, StartEvent):
        return SyncEventModel(type=event_type, ip=str(event.ip))
    return SyncEventModel(type=event_type)
