"""
Tightly packed ABI encoding.

Mirrors Solidity's abi.encodePacked for value arrays: no padding beyond an
integer's declared width, no length prefixes, array elements concatenated.
"""

from typing import Any, Sequence

from .types import (
    TypeLike,
    Address,
    Bool,
    String,
    DynamicBytes,
    FixedBytes,
    UnsignedInt,
    SignedInt,
    DynamicArray,
    FixedArray,
)
from .values import TypedValue, typed_values
from ..exceptions import ArityMismatch, EncodingOverflow, ShapeMismatch


def encode_uint(value: int, tag: UnsignedInt) -> bytes:
    """Big-endian magnitude, left-padded to the declared width."""
    if value < 0 or value.bit_length() > tag.bits:
        raise EncodingOverflow(
            f"Value {value} does not fit in {tag}",
            type_str=str(tag),
            value=value
        )
    return value.to_bytes(tag.byte_width, "big")


def encode_int(value: int, tag: SignedInt, width: int) -> bytes:
    """Two's complement, sign-extended to ``width`` bytes."""
    bound = 1 << (tag.bits - 1)
    if not -bound <= value < bound:
        raise EncodingOverflow(
            f"Value {value} does not fit in {tag}",
            type_str=str(tag),
            value=value
        )
    return value.to_bytes(width, "big", signed=True)


def pack_value(typed: TypedValue) -> bytes:
    """
    Encode a single typed value in packed form.

    Raises:
        EncodingOverflow: If an integer exceeds its declared width
        ShapeMismatch: If the value shape does not match the tag
    """
    tag, value = typed.tag, typed.value

    if isinstance(tag, (Address, DynamicBytes, FixedBytes)):
        return value
    if isinstance(tag, String):
        return value.encode("utf-8")
    if isinstance(tag, Bool):
        return b"\x01" if value else b"\x00"
    if isinstance(tag, UnsignedInt):
        return encode_uint(value, tag)
    if isinstance(tag, SignedInt):
        return encode_int(value, tag, tag.byte_width)
    if isinstance(tag, (DynamicArray, FixedArray)):
        return b"".join(pack_value(item) for item in value)

    raise ShapeMismatch(f"Cannot pack value of type {tag!r}", type_str=str(tag))


def encode_packed(types: Sequence[TypeLike], values: Sequence[Any]) -> bytes:
    """
    Encode values in tightly packed form, in argument order.

    Args:
        types: Type names (or parsed TypeTags)
        values: Values matching ``types`` one to one

    Returns:
        Concatenated packed encodings

    Raises:
        ArityMismatch: If the number of types and values differ
        InvalidTypeDescriptor: If a type name is not supported
        EncodingOverflow: If an integer exceeds its declared width
        ShapeMismatch: If a value does not match its type

    Example:
        >>> encode_packed(["uint8[]"], [[1, 2, 3]]).hex()
        '010203'
    """
    if len(types) != len(values):
        raise ArityMismatch(
            f"Wrong number of values; expected {len(types)}, got {len(values)}",
            expected=len(types),
            actual=len(values)
        )
    return b"".join(pack_value(typed) for typed in typed_values(types, values))
