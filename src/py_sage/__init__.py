"""Metadata resolution and sync notifications for a Chia light wallet."""

from py_sage.nft.metadata import calculate_collection_id, compute_nft_info, parse_metadata
from py_sage.nft.models import CollectionRecord, ComputedNftInfo
from py_sage.session import SyncEngine, WalletSession
from py_sage.sync.events import SyncEventModel, SyncEventType
from py_sage.sync.translator import translate_event

__all__ = [
    "calculate_collection_id",
    "compute_nft_info",
    "parse_metadata",
    "CollectionRecord",
    "ComputedNftInfo",
    "SyncEngine",
    "WalletSession",
    "SyncEventModel",
    "SyncEventType",
    "translate_event",
]
