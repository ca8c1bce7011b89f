import pytest
from pydantic import ValidationError

from py_sage.api.requests import (
    AddNftUri,
    AssignNftsToDid,
    BulkMintNfts,
    NftUriKind,
    SendXch,
    SignCoinSpends,
    TransferNfts,
)


def test_auto_submit_defaults_to_false():
    request = SendXch.model_validate({"address": "xch1abc", "amount": "1000", "fee": 0})
    assert request.auto_submit is False
    request = TransferNfts.model_validate(
        {"nft_ids": ["nft1a", "nft1b"], "address": "xch1abc", "fee": 100, "auto_submit": True}
    )
    assert request.auto_submit is True


def test_add_nft_uri_kind():
    request = AddNftUri.model_validate(
        {"nft_id": "nft1a", "uri": "https://example.com/m.json", "fee": 0, "kind": "metadata"}
    )
    assert request.kind == NftUriKind.METADATA
    assert request.model_dump(mode="json")["kind"] == "metadata"
    with pytest.raises(ValidationError):
        AddNftUri.model_validate({"nft_id": "nft1a", "uri": "u", "fee": 0, "kind": "Data"})


def test_assign_nfts_to_no_did():
    request = AssignNftsToDid.model_validate({"nft_ids": ["nft1a"], "fee": 0})
    assert request.did_id is None


def test_bulk_mint():
    request = BulkMintNfts.model_validate(
        {
            "did_id": "did:chia:1abc",
            "fee": 0,
            "mints": [
                {
                    "data_uris": ["https://example.com/a.png"],
                    "metadata_uris": [],
                    "license_uris": [],
                    "royalty_percent": 300,
                }
            ],
        }
    )
    assert request.mints[0].edition_number is None
    assert request.mints[0].royalty_address is None


def test_sign_coin_spends():
    request = SignCoinSpends.model_validate(
        {
            "coin_spends": [
                {
                    "coin": {"parent_coin_info": "0x00", "puzzle_hash": "0x01", "amount": 1},
                    "puzzle_reveal": "ff01",
                    "solution": "80",
                }
            ]
        }
    )
    assert request.coin_spends[0].coin.amount == 1
    assert request.auto_submit is False
