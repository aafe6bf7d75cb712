"""
Input validation utilities.

Validates addresses, private keys and uint256 values before encoding or
signing.
"""

import re
from typing import Any

from web3 import Web3

from ..exceptions import ValidationError, SigningKeyInvalid


UINT256_MAX = 2**256 - 1

# secp256k1 group order
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def parse_int(value: Any) -> int:
    """
    Parse an integer from int, decimal string or 0x-prefixed hex string.

    Args:
        value: Integer input

    Returns:
        Parsed int

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, bool):
        raise ValidationError("Integer expected, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        # int() would accept digit separators
        if "_" in text:
            raise ValidationError(f"Invalid integer format: {value}")
        try:
            if text.lower().startswith("0x"):
                return int(text, 16)
            return int(text, 10)
        except ValueError as e:
            raise ValidationError(f"Invalid integer format: {value}") from e
    raise ValidationError(f"Integer expected, got {type(value)}")


def validate_uint256(value: Any, field_name: str = "value") -> int:
    """
    Validate an unsigned 256-bit integer.

    Args:
        value: int, decimal string or hex string
        field_name: Name used in error messages

    Returns:
        Parsed int

    Raises:
        ValidationError: If value is not an integer in [0, 2**256 - 1]
    """
    number = parse_int(value)
    if not 0 <= number <= UINT256_MAX:
        raise ValidationError(f"{field_name} must be a uint256, got {number}")
    return number


def validate_address(address: str) -> str:
    """
    Validate Ethereum address.

    Args:
        address: Ethereum address

    Returns:
        Checksummed address

    Raises:
        ValidationError: If address is invalid
    """
    if not isinstance(address, str):
        raise ValidationError(f"Address must be string, got {type(address)}")

    # Remove 0x prefix if present
    addr = address[2:] if address.startswith(("0x", "0X")) else address

    # Validate hex format and length (20 bytes = 40 hex chars)
    if not re.match(r"^[0-9a-fA-F]{40}$", addr):
        raise ValidationError(f"Invalid Ethereum address: {address}")

    return Web3.to_checksum_address(f"0x{addr}")


def validate_private_key(private_key: Any) -> str:
    """
    Validate private key format.

    SECURITY: error messages never include the key itself.

    Args:
        private_key: Private key hex string or 32 raw bytes

    Returns:
        Normalized 0x-prefixed lowercase key

    Raises:
        SigningKeyInvalid: If the key is not a valid secp256k1 scalar
    """
    if isinstance(private_key, (bytes, bytearray)):
        private_key = bytes(private_key).hex()

    if not isinstance(private_key, str):
        raise SigningKeyInvalid(f"Private key must be string or bytes, got {type(private_key)}")

    # Remove 0x prefix if present
    key = private_key[2:] if private_key.startswith("0x") else private_key

    # Validate hex format and length (32 bytes = 64 hex chars)
    if not re.match(r"^[0-9a-fA-F]{64}$", key):
        raise SigningKeyInvalid("Invalid private key format")

    if not 0 < int(key, 16) < SECP256K1_N:
        raise SigningKeyInvalid("Private key out of range for secp256k1")

    return f"0x{key.lower()}"
