"""Request and response models of the wallet operation API."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

# Mojo amount, as a number or a decimal string
Amount = Union[int, str]


class CoinJson(BaseModel):
    parent_coin_info: str
    puzzle_hash: str
    amount: Amount


class CoinSpendJson(BaseModel):
    coin: CoinJson
    puzzle_reveal: str
    solution: str


class SpendBundleJson(BaseModel):
    coin_spends: List[CoinSpendJson]
    aggregated_signature: str


class SendXch(BaseModel):
    address: str
    amount: Amount
    fee: Amount
    auto_submit: bool = False


class CombineXch(BaseModel):
    coin_ids: List[str]
    fee: Amount
    auto_submit: bool = False


class SplitXch(BaseModel):
    coin_ids: List[str]
    output_count: int
    fee: Amount
    auto_submit: bool = False


class CombineCat(BaseModel):
    coin_ids: List[str]
    fee: Amount
    auto_submit: bool = False


class SplitCat(BaseModel):
    coin_ids: List[str]
    output_count: int
    fee: Amount
    auto_submit: bool = False


class IssueCat(BaseModel):
    name: str
    ticker: str
    amount: Amount
    fee: Amount
    auto_submit: bool = False


class SendCat(BaseModel):
    asset_id: str
    address: str
    amount: Amount
    fee: Amount
    auto_submit: bool = False


class CreateDid(BaseModel):
    name: str
    fee: Amount
    auto_submit: bool = False


class NftMint(BaseModel):
    """
    Single NFT to mint.

    Attributes:
        edition_number: Edition number within the series.
        edition_total: Total editions in the series.
        data_uris: URIs of the NFT content.
        metadata_uris: URIs of the off-chain metadata.
        license_uris: URIs of the license.
        royalty_address: Address receiving royalties, defaults to the minter.
        royalty_percent: Royalty in basis points.
    """

    edition_number: Optional[int] = None
    edition_total: Optional[int] = None
    data_uris: List[str]
    metadata_uris: List[str]
    license_uris: List[str]
    royalty_address: Optional[str] = None
    royalty_percent: Amount


class BulkMintNfts(BaseModel):
    mints: List[NftMint]
    did_id: str
    fee: Amount
    auto_submit: bool = False


class TransferNfts(BaseModel):
    nft_ids: List[str]
    address: str
    fee: Amount
    auto_submit: bool = False


class NftUriKind(str, Enum):
    DATA = "data"
    METADATA = "metadata"
    LICENSE = "license"


class AddNftUri(BaseModel):
    nft_id: str
    uri: str
    fee: Amount
    kind: NftUriKind
    auto_submit: bool = False


class AssignNftsToDid(BaseModel):
    """Assign NFTs to a DID profile, or unassign them when `did_id` is None."""

    nft_ids: List[str]
    did_id: Optional[str] = None
    fee: Amount
    auto_submit: bool = False


class TransferDids(BaseModel):
    did_ids: List[str]
    address: str
    fee: Amount
    auto_submit: bool = False


class SignCoinSpends(BaseModel):
    coin_spends: List[CoinSpendJson]
    auto_submit: bool = False


class SignCoinSpendsResponse(BaseModel):
    spend_bundle: SpendBundleJson


class SubmitTransaction(BaseModel):
    spend_bundle: SpendBundleJson


class SubmitTransactionResponse(BaseModel):
    pass


class TransactionResponse(BaseModel):
    summary: Dict[str, Any]
    coin_spends: List[CoinSpendJson]
