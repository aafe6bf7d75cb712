"""
Typed ABI values.

A TypedValue pairs a TypeTag with a normalized Python value. Normalization
happens in the constructor, so the encoders only ever see ints, bytes,
str, bool or tuples of TypedValue, whichever way the value was built.
"""

from dataclasses import dataclass
from typing import Any, Union

from eth_utils import is_hex, to_bytes

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
    parse_type,
)
from ..exceptions import ShapeMismatch

ADDRESS_SIZE = 20

Normalized = Union[int, bytes, str, bool, tuple]


@dataclass(frozen=True)
class TypedValue:
    """ABI type paired with a value of matching shape."""

    tag: TypeTag
    value: Normalized

    def __post_init__(self):
        # Frozen: normalized fields are written through object.__setattr__
        tag = parse_type(self.tag)
        object.__setattr__(self, "tag", tag)
        object.__setattr__(self, "value", _normalize(tag, self.value))

    @classmethod
    def of(cls, type_str: TypeLike, value: Any) -> "TypedValue":
        """
        Build a typed value, normalizing common input forms.

        Accepted inputs:
            address / bytes / bytesN: bytes, bytearray or 0x-prefixed hex
            uintN / intN: int, decimal string or 0x-prefixed hex string
            string: str
            bool: bool
            arrays: list or tuple of element inputs (or TypedValue)

        Raises:
            InvalidTypeDescriptor: If type_str is not a supported type
            ShapeMismatch: If value does not fit the type's shape
        """
        tag = parse_type(type_str)
        if isinstance(value, TypedValue):
            if value.tag != tag:
                raise ShapeMismatch(
                    f"Value typed as {value.tag} cannot be used as {tag}",
                    type_str=str(tag)
                )
            return value
        return cls(tag, value)


def _normalize(tag: TypeTag, value: Any) -> Normalized:
    if isinstance(tag, Address):
        raw = _to_raw_bytes(tag, value)
        if len(raw) != ADDRESS_SIZE:
            raise ShapeMismatch(
                f"Address must be {ADDRESS_SIZE} bytes, got {len(raw)}",
                type_str=str(tag)
            )
        return raw

    if isinstance(tag, Bool):
        if not isinstance(value, bool):
            raise ShapeMismatch(
                f"bool value must be True or False, got {type(value).__name__}",
                type_str=str(tag)
            )
        return value

    if isinstance(tag, String):
        if not isinstance(value, str):
            raise ShapeMismatch(
                f"string value must be str, got {type(value).__name__}",
                type_str=str(tag)
            )
        return value

    if isinstance(tag, DynamicBytes):
        return _to_raw_bytes(tag, value)

    if isinstance(tag, FixedBytes):
        raw = _to_raw_bytes(tag, value)
        if len(raw) != tag.size:
            raise ShapeMismatch(
                f"{tag} value must be exactly {tag.size} bytes, got {len(raw)}",
                type_str=str(tag)
            )
        return raw

    if isinstance(tag, (UnsignedInt, SignedInt)):
        return _to_int(tag, value)

    if isinstance(tag, (DynamicArray, FixedArray)):
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, (list, tuple)):
            raise ShapeMismatch(
                f"{tag} value must be a list or tuple, got {type(value).__name__}",
                type_str=str(tag)
            )
        if isinstance(tag, FixedArray) and len(value) != tag.length:
            raise ShapeMismatch(
                f"{tag} expects {tag.length} elements, got {len(value)}",
                type_str=str(tag)
            )
        return tuple(TypedValue.of(tag.inner, item) for item in value)

    raise ShapeMismatch(f"Unsupported type tag: {tag!r}", type_str=str(tag))


def _to_raw_bytes(tag: TypeTag, value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str) and value.startswith(("0x", "0X")) and is_hex(value):
        if len(value) % 2:
            raise ShapeMismatch(
                f"{tag} hex value has odd length: {value}",
                type_str=str(tag)
            )
        return to_bytes(hexstr=value)
    raise ShapeMismatch(
        f"{tag} value must be bytes or 0x-prefixed hex, got {type(value).__name__}",
        type_str=str(tag)
    )


def _to_int(tag: TypeTag, value: Any) -> int:
    # bool is an int subclass but never a valid integer input
    if isinstance(value, bool):
        raise ShapeMismatch(f"{tag} value must be an integer, got bool", type_str=str(tag))
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            raise ShapeMismatch(
                f"{tag} value is not a decimal or hex integer: {value}",
                type_str=str(tag)
            )
        try:
            if text.startswith(("0x", "0X")):
                return int(text, 16)
            return int(text, 10)
        except ValueError as e:
            raise ShapeMismatch(
                f"{tag} value is not a decimal or hex integer: {value}",
                type_str=str(tag)
            ) from e
    raise ShapeMismatch(
        f"{tag} value must be an integer, got {type(value).__name__}",
        type_str=str(tag)
    )


def typed_values(types: list, values: list) -> list[TypedValue]:
    """Pair types with values. Lengths are checked by the caller."""
    return [TypedValue.of(t, v) for t, v in zip(types, values)]
