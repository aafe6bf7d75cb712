"""Utility modules for the claim signer."""

from .validators import parse_int, validate_address, validate_private_key, validate_uint256
from .structured_logging import (
    CredentialRedactionFilter,
    StructuredLogger,
    get_logger,
)

__all__ = [
    "parse_int",
    "validate_address",
    "validate_private_key",
    "validate_uint256",
    "CredentialRedactionFilter",
    "StructuredLogger",
    "get_logger",
]
