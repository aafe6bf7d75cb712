"""
Standard (32-byte word aligned) ABI encoding.

Equivalent to Solidity's abi.encode. Static values occupy whole words:
numbers and addresses right-aligned, bytesN left-aligned. Dynamic values
(string, bytes, T[]) are referenced by offset from the head and stored in
the tail as length followed by word-padded data.
"""

from typing import Any, Sequence

from .types import (
    TypeTag,
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
from .packed import encode_uint, encode_int
from ..exceptions import ArityMismatch, ShapeMismatch

WORD_SIZE = 32

_UINT256 = UnsignedInt(256)


def word(value: int) -> bytes:
    """Encode a non-negative int as a single uint256 word."""
    return encode_uint(value, _UINT256)


def _pad_right(data: bytes) -> bytes:
    remainder = len(data) % WORD_SIZE
    if remainder:
        return data + b"\x00" * (WORD_SIZE - remainder)
    return data


def head_size(tag: TypeTag) -> int:
    """Bytes a value of ``tag`` occupies in the head of a tuple."""
    if tag.is_dynamic:
        return WORD_SIZE
    if isinstance(tag, FixedArray):
        return tag.length * head_size(tag.inner)
    return WORD_SIZE


def _encode_sequence(items: Sequence[TypedValue]) -> bytes:
    heads = []
    tails = []
    offset = sum(head_size(item.tag) for item in items)

    for item in items:
        if item.tag.is_dynamic:
            heads.append(word(offset))
            tail = encode_value(item)
            tails.append(tail)
            offset += len(tail)
        else:
            heads.append(encode_value(item))

    return b"".join(heads) + b"".join(tails)


def encode_value(typed: TypedValue) -> bytes:
    """
    Encode a single typed value in standard form.

    For dynamic types this is the tail content (length plus data); the
    enclosing sequence writes the offset.

    Raises:
        EncodingOverflow: If an integer exceeds its declared width
        ShapeMismatch: If the value shape does not match the tag
    """
    tag, value = typed.tag, typed.value

    if isinstance(tag, Address):
        return value.rjust(WORD_SIZE, b"\x00")
    if isinstance(tag, Bool):
        return word(1 if value else 0)
    if isinstance(tag, UnsignedInt):
        return encode_uint(value, tag).rjust(WORD_SIZE, b"\x00")
    if isinstance(tag, SignedInt):
        return encode_int(value, tag, WORD_SIZE)
    if isinstance(tag, FixedBytes):
        return value.ljust(WORD_SIZE, b"\x00")
    if isinstance(tag, (String, DynamicBytes)):
        data = value.encode("utf-8") if isinstance(tag, String) else value
        return word(len(data)) + _pad_right(data)
    if isinstance(tag, DynamicArray):
        return word(len(value)) + _encode_sequence(value)
    if isinstance(tag, FixedArray):
        return _encode_sequence(value)

    raise ShapeMismatch(f"Cannot encode value of type {tag!r}", type_str=str(tag))


def encode_standard(types: Sequence[TypeLike], values: Sequence[Any]) -> bytes:
    """
    Encode values as an ABI tuple.

    For all-static inputs the result is one 32-byte word per field (fixed
    arrays contribute one word per element).

    Raises:
        ArityMismatch: If the number of types and values differ
        InvalidTypeDescriptor: If a type name is not supported
        EncodingOverflow: If an integer exceeds its declared width
        ShapeMismatch: If a value does not match its type
    """
    if len(types) != len(values):
        raise ArityMismatch(
            f"Wrong number of values; expected {len(types)}, got {len(values)}",
            expected=len(types),
            actual=len(values)
        )
    return _encode_sequence(typed_values(types, values))
