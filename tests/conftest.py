import json

import pytest


@pytest.fixture
def owner_id() -> bytes:
    return bytes.fromhex("a1" * 32)


@pytest.fixture
def other_owner_id() -> bytes:
    return bytes.fromhex("b2" * 32)


@pytest.fixture
def metadata_json() -> dict:
    return {
        "format": "CHIP-0007",
        "name": "Pikachu #1",
        "description": "Electric mouse",
        "sensitive_content": False,
        "attributes": [{"trait_type": "Type", "value": "Electric"}],
        "collection": {
            "id": "c1",
            "name": "Pokemon",
            "attributes": [
                {"type": "other", "value": "x"},
                {"type": "icon", "value": "u1"},
                {"type": "icon", "value": "u2"},
            ],
        },
    }


@pytest.fixture
def metadata_blob(metadata_json) -> bytes:
    return json.dumps(metadata_json).encode()
