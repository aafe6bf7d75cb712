"""
ABI type descriptors.

Parses Solidity type names ("uint256", "bytes32", "address[]") into an
immutable TypeTag tree. Encoders dispatch on the tag, never on the string.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Union

from ..exceptions import InvalidTypeDescriptor


class TypeTag:
    """Base class for parsed ABI types."""

    __slots__ = ()

    @property
    def is_dynamic(self) -> bool:
        """True if the standard encoding places this type in the tail."""
        return False


@dataclass(frozen=True)
class Address(TypeTag):
    def __str__(self) -> str:
        return "address"


@dataclass(frozen=True)
class Bool(TypeTag):
    def __str__(self) -> str:
        return "bool"


@dataclass(frozen=True)
class String(TypeTag):
    @property
    def is_dynamic(self) -> bool:
        return True

    def __str__(self) -> str:
        return "string"


@dataclass(frozen=True)
class DynamicBytes(TypeTag):
    @property
    def is_dynamic(self) -> bool:
        return True

    def __str__(self) -> str:
        return "bytes"


@dataclass(frozen=True)
class FixedBytes(TypeTag):
    size: int

    def __str__(self) -> str:
        return f"bytes{self.size}"


@dataclass(frozen=True)
class UnsignedInt(TypeTag):
    bits: int

    @property
    def byte_width(self) -> int:
        return self.bits // 8

    def __str__(self) -> str:
        return f"uint{self.bits}"


@dataclass(frozen=True)
class SignedInt(TypeTag):
    bits: int

    @property
    def byte_width(self) -> int:
        return self.bits // 8

    def __str__(self) -> str:
        return f"int{self.bits}"


@dataclass(frozen=True)
class DynamicArray(TypeTag):
    inner: TypeTag

    @property
    def is_dynamic(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.inner}[]"


@dataclass(frozen=True)
class FixedArray(TypeTag):
    inner: TypeTag
    length: int

    @property
    def is_dynamic(self) -> bool:
        return self.inner.is_dynamic

    def __str__(self) -> str:
        return f"{self.inner}[{self.length}]"


TypeLike = Union[str, TypeTag]

_LITERALS = {
    "address": Address(),
    "bool": Bool(),
    "string": String(),
    "bytes": DynamicBytes(),
}

FIXED_BYTES_PATTERN = re.compile(r"^bytes([1-9][0-9]*)$")
INTEGER_PATTERN = re.compile(r"^(u?int)([0-9]*)$")
ARRAY_PATTERN = re.compile(r"^(.+)\[([0-9]*)\]$")


@lru_cache(maxsize=256)
def _parse(type_str: str) -> TypeTag:
    literal = _LITERALS.get(type_str)
    if literal is not None:
        return literal

    match = FIXED_BYTES_PATTERN.fullmatch(type_str)
    if match:
        size = int(match.group(1))
        if size > 32:
            raise InvalidTypeDescriptor(
                f"Fixed bytes size must be between 1 and 32, got {type_str}",
                type_str=type_str
            )
        return FixedBytes(size)

    match = INTEGER_PATTERN.fullmatch(type_str)
    if match:
        bits = int(match.group(2)) if match.group(2) else 256
        if bits == 0 or bits % 8 != 0 or bits > 256:
            raise InvalidTypeDescriptor(
                f"Integer size must be a multiple of 8 between 8 and 256, got {type_str}",
                type_str=type_str
            )
        if match.group(1) == "uint":
            return UnsignedInt(bits)
        return SignedInt(bits)

    match = ARRAY_PATTERN.fullmatch(type_str)
    if match:
        inner = _parse(match.group(1))
        if not match.group(2):
            return DynamicArray(inner)
        length = int(match.group(2))
        if length == 0:
            raise InvalidTypeDescriptor(
                f"Fixed array length must be positive, got {type_str}",
                type_str=type_str
            )
        return FixedArray(inner, length)

    raise InvalidTypeDescriptor(f"Invalid type: {type_str}", type_str=type_str)


def parse_type(type_str: TypeLike) -> TypeTag:
    """
    Parse an ABI type name.

    Args:
        type_str: Solidity type name, or an already parsed TypeTag

    Returns:
        Parsed TypeTag

    Raises:
        InvalidTypeDescriptor: If the name matches no supported type
    """
    if isinstance(type_str, TypeTag):
        return type_str
    if not isinstance(type_str, str):
        raise InvalidTypeDescriptor(
            f"Type must be a string, got {type(type_str).__name__}",
            type_str=repr(type_str)
        )
    return _parse(type_str)
