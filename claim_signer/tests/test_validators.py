"""Tests for validators."""

import pytest

from claim_signer.utils.validators import (
    parse_int,
    validate_address,
    validate_private_key,
    validate_uint256,
    UINT256_MAX,
)
from claim_signer.exceptions import ValidationError, SigningKeyInvalid


def test_parse_int():
    """Test decimal and hex integer parsing."""
    assert parse_int(42) == 42
    assert parse_int("42") == 42
    assert parse_int("0x2a") == 42
    assert parse_int(" 7 ") == 7

    with pytest.raises(ValidationError):
        parse_int("forty")

    with pytest.raises(ValidationError):
        parse_int(True)

    with pytest.raises(ValidationError):
        parse_int(1.5)

    with pytest.raises(ValidationError):
        parse_int("1_000")

    with pytest.raises(ValidationError):
        validate_uint256("0x_ff")


def test_validate_uint256():
    """Test uint256 range checks."""
    assert validate_uint256(0) == 0
    assert validate_uint256(str(UINT256_MAX)) == UINT256_MAX

    with pytest.raises(ValidationError):
        validate_uint256(-1)

    with pytest.raises(ValidationError):
        validate_uint256(UINT256_MAX + 1)


def test_validate_address():
    """Test address validation and checksumming."""
    assert validate_address(
        "0xfbfb48044fd7b6cd33a40f4f3d80c0755e8da20e"
    ) == "0xFBfb48044fd7b6Cd33a40F4f3D80c0755E8Da20E"
    assert validate_address(
        "fbfb48044fd7b6cd33a40f4f3d80c0755e8da20e"
    ) == "0xFBfb48044fd7b6Cd33a40F4f3D80c0755E8Da20E"
    assert validate_address(
        "0XFBFB48044FD7B6CD33A40F4F3D80C0755E8DA20E"
    ) == "0xFBfb48044fd7b6Cd33a40F4f3D80c0755E8Da20E"

    with pytest.raises(ValidationError):
        validate_address("0x1234")

    with pytest.raises(ValidationError):
        validate_address(1234)


def test_validate_private_key():
    """Test private key normalization."""
    key = "AB" * 32
    assert validate_private_key(key) == "0x" + "ab" * 32
    assert validate_private_key("0x" + key) == "0x" + "ab" * 32
    assert validate_private_key(bytes.fromhex(key)) == "0x" + "ab" * 32

    with pytest.raises(SigningKeyInvalid):
        validate_private_key("0x" + "ab" * 31)

    with pytest.raises(SigningKeyInvalid):
        validate_private_key("0x" + "00" * 32)
