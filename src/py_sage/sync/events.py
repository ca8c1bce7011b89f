"""Sync events emitted by the wallet sync engine and notifications sent to the UI."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel


@dataclass(frozen=True)
class StartEvent:
    """Connected to a peer."""

    ip: str


@dataclass(frozen=True)
class StopEvent:
    pass


@dataclass(frozen=True)
class SubscribedEvent:
    pass


@dataclass(frozen=True)
class DerivationIndexEvent:
    next_index: int


@dataclass(frozen=True)
class CoinsUpdatedEvent:
    coin_states: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class TransactionUpdatedEvent:
    transaction_id: bytes


@dataclass(frozen=True)
class TransactionEndedEvent:
    transaction_id: bytes
    success: bool


@dataclass(frozen=True)
class OfferUpdatedEvent:
    offer_id: bytes
    status: str


@dataclass(frozen=True)
class PuzzleBatchSyncedEvent:
    pass


@dataclass(frozen=True)
class CatInfoEvent:
    pass


@dataclass(frozen=True)
class DidInfoEvent:
    pass


@dataclass(frozen=True)
class NftDataEvent:
    pass


SyncEvent = Union[
    StartEvent,
    StopEvent,
    SubscribedEvent,
    DerivationIndexEvent,
    CoinsUpdatedEvent,
    TransactionUpdatedEvent,
    TransactionEndedEvent,
    OfferUpdatedEvent,
    PuzzleBatchSyncedEvent,
    CatInfoEvent,
    DidInfoEvent,
    NftDataEvent,
]


class SyncEventType(str, Enum):
    """Notification types visible to the UI."""

    START = "start"
    STOP = "stop"
    SUBSCRIBED = "subscribed"
    DERIVATION = "derivation"
    COIN_STATE = "coin_state"
    PUZZLE_BATCH_SYNCED = "puzzle_batch_synced"
    CAT_INFO = "cat_info"
    DID_INFO = "did_info"
    NFT_INFO = "nft_info"


class SyncEventModel(BaseModel):
    """
    Sync notification sent to the UI.

    Attributes:
        type: Notification type.
        ip: Peer address, only set for `start`.
    """

    type: SyncEventType
    ip: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
