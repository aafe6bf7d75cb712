"""
ABI type codec.

Public contract: ``parse``, ``packed`` and ``standard``, plus keccak
helpers over both encodings. There is no module level configuration.
"""

from typing import Any, Sequence

from eth_utils import keccak

from .types import (
    TypeTag,
    Address,
    Bool,
    String,
    DynamicBytes,
    FixedBytes,
    UnsignedInt,
    SignedInt,
    DynamicArray,
    FixedArray,
    parse_type,
)
from .values import TypedValue
from .packed import encode_packed, pack_value
from .standard import encode_standard, encode_value, word

parse = parse_type
packed = encode_packed
standard = encode_standard


def keccak_packed(types: Sequence[Any], values: Sequence[Any]) -> bytes:
    """keccak256(abi.encodePacked(...))"""
    return keccak(encode_packed(types, values))


def keccak_standard(types: Sequence[Any], values: Sequence[Any]) -> bytes:
    """keccak256(abi.encode(...))"""
    return keccak(encode_standard(types, values))


__all__ = [
    "parse",
    "packed",
    "standard",
    "keccak_packed",
    "keccak_standard",
    "parse_type",
    "encode_packed",
    "encode_standard",
    "pack_value",
    "encode_value",
    "word",
    "TypedValue",
    "TypeTag",
    "Address",
    "Bool",
    "String",
    "DynamicBytes",
    "FixedBytes",
    "UnsignedInt",
    "SignedInt",
    "DynamicArray",
    "FixedArray",
]
