from typing import Union

from py_sage.constants import BYTES32_LENGTH


def to_bytes32(value: Union[str, bytes]) -> bytes:
    """
    Convert a hex string or raw bytes to a 32-byte identifier.

    Args:
        value: Hex string (with or without 0x prefix) or raw bytes

    Returns:
        32 raw bytes

    Raises:
        ValueError: If the value is not valid hex or not exactly 32 bytes long
    """
    if isinstance(value, str):
        value = bytes.fromhex(value[2:] if value.startswith("0x") else value)
    elif not isinstance(value, (bytes, bytearray)):
        raise ValueError(f"Expected hex string or bytes, got {type(value).__name__}")
    if len(value) != BYTES32_LENGTH:
        raise ValueError(f"Expected {BYTES32_LENGTH} bytes, got {len(value)}")
    return bytes(value)
