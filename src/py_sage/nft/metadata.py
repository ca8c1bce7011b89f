"""Resolving off-chain NFT metadata into locally trusted NFT info."""

from hashlib import sha256
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from py_sage.exceptions.exceptions import MetadataParseError
from py_sage.nft.models import Chip0007Metadata, CollectionRecord, ComputedNftInfo
from py_sage.utils import to_bytes32


def parse_metadata(blob: bytes) -> Chip0007Metadata:
    """
    Parse an untrusted metadata blob.

    Args:
        blob: Raw bytes as fetched from a metadata URI

    Returns:
        Parsed CHIP-0007 document

    Raises:
        MetadataParseError: If the blob is not UTF-8 JSON matching the schema
    """
    try:
        return Chip0007Metadata.model_validate_json(blob)
    except ValidationError as e:
        raise MetadataParseError(
            f"Invalid off-chain metadata: {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e


def calculate_collection_id(owner_identity: bytes, external_collection_id: str) -> bytes:
    """
    Derive the local collection id.

    The id is sha256(owner_identity || utf8(external_collection_id)), so collections
    with the same declared id but different owners never collide. Changing the input
    order or encoding breaks every previously stored id.
    """
    hasher = sha256()
    hasher.update(owner_identity)
    hasher.update(external_collection_id.encode("utf-8"))
    return hasher.digest()


def compute_nft_info(
    owner_identity: Optional[bytes], blob: Optional[bytes]
) -> ComputedNftInfo:
    """
    Build NFT info from an owner DID and an optional metadata blob.

    Missing or malformed metadata is routine and yields the default info.
    A collection record is only built when both the owner and a collection
    declaration are present.

    Args:
        owner_identity: 32-byte DID id of the NFT owner, if any
        blob: Off-chain metadata blob, if fetched

    Returns:
        ComputedNftInfo

    Raises:
        ValueError: If owner_identity is not exactly 32 bytes
    """
    if owner_identity is not None:
        owner_identity = to_bytes32(owner_identity)

    if blob is None:
        return ComputedNftInfo()

    try:
        metadata = parse_metadata(blob)
    except MetadataParseError as e:
        logger.debug(f"Skip off-chain metadata: {e.message}")
        return ComputedNftInfo()

    collection = None
    if owner_identity is not None and metadata.collection is not None:
        declared = metadata.collection
        collection = CollectionRecord(
            collection_id=calculate_collection_id(owner_identity, declared.id),
            owner_identity=owner_identity,
            external_collection_id=declared.id,
            name=declared.name,
            icon=declared.icon(),
            visible=True,
        )

    return ComputedNftInfo(
        name=metadata.name,
        sensitive_content=metadata.is_sensitive(),
        collection=collection,
    )
