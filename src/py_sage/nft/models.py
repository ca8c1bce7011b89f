"""Models for off-chain NFT metadata and resolved NFT info."""

import uuid
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from py_sage.constants import CHIP_0007_FORMAT, ICON_ATTRIBUTE_KIND
from py_sage.utils import to_bytes32

# Hex strings are decoded before pydantic would take them as UTF-8 bytes
Bytes32 = Annotated[bytes, BeforeValidator(to_bytes32)]


class NftAttribute(BaseModel):
    """Single NFT trait (CHIP-0007 `attributes` entry)."""

    model_config = ConfigDict(strict=True)

    trait_type: Any = None
    value: Any = None
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None


class CollectionAttribute(BaseModel):
    """
    Collection attribute, e.g. icon, banner or website.

    Attributes:
        kind: Attribute type (`type` in JSON). Any JSON value.
        value: Attribute value. Any JSON value.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True)

    kind: Any = Field(default=None, alias="type")
    value: Any = None


class Collection(BaseModel):
    """Collection declared by the metadata author."""

    model_config = ConfigDict(strict=True)

    id: str
    name: str
    attributes: Optional[List[CollectionAttribute]] = None

    @field_validator("id", mode="after")
    def canonical_id(cls, v):
        """Normalize UUID spellings to the lowercase hyphenated form."""
        try:
            return str(uuid.UUID(v))
        except ValueError:
            return v

    def icon(self) -> Optional[str]:
        """First string value of an attribute with kind `icon`."""
        for attribute in self.attributes or []:
            if attribute.kind == ICON_ATTRIBUTE_KIND and isinstance(
                attribute.value, str
            ):
                return attribute.value
        return None


class Chip0007Metadata(BaseModel):
    """Off-chain NFT metadata document (CHIP-0007)."""

    # untrusted input, no type coercion
    model_config = ConfigDict(strict=True)

    format: str = CHIP_0007_FORMAT
    name: str
    description: Optional[str] = None
    minting_tool: Optional[str] = None
    sensitive_content: Optional[Union[bool, List[str]]] = None
    series_number: Optional[int] = None
    series_total: Optional[int] = None
    attributes: Optional[List[NftAttribute]] = None
    collection: Optional[Collection] = None
    data: Optional[Dict[str, Any]] = None

    def is_sensitive(self) -> bool:
        if isinstance(self.sensitive_content, bool):
            return self.sensitive_content
        return bool(self.sensitive_content)


class CollectionRecord(BaseModel):
    """
    Locally trusted NFT collection.

    Attributes:
        collection_id: sha256(owner_identity + external_collection_id), local primary key.
        owner_identity: DID that curates the collection.
        external_collection_id: Collection id as declared in the metadata.
        name: Collection display name.
        icon: Collection icon URI.
        visible: Whether the collection is shown to the user.
    """

    collection_id: Bytes32
    owner_identity: Bytes32
    external_collection_id: str
    name: Optional[str] = None
    icon: Optional[str] = None
    visible: bool = True


class ComputedNftInfo(BaseModel):
    """NFT info derived from off-chain metadata. Recomputed, never updated in place."""

    name: Optional[str] = None
    sensitive_content: bool = False
    collection: Optional[CollectionRecord] = None
