"""
Custom exceptions for the claim signer.

Provides typed exceptions for encoding, validation and signing failures.
"""

from typing import Optional, Any


class ClaimSignerError(Exception):
    """Base exception for all claim signer errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ClaimSignerError):
    """Input validation failed."""
    pass


class ConfigurationError(ClaimSignerError):
    """Settings are missing or inconsistent."""
    pass


# ABI encoding exceptions
class EncodingError(ClaimSignerError):
    """Base exception for ABI encoding failures."""
    pass


class InvalidTypeDescriptor(EncodingError):
    """Type string matches none of the supported ABI types."""

    def __init__(self, message: str, type_str: Optional[str] = None):
        super().__init__(message, {"type_str": type_str})
        self.type_str = type_str


class ArityMismatch(EncodingError):
    """Number of types and values differ."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None):
        super().__init__(message, {"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class EncodingOverflow(EncodingError):
    """Integer does not fit the declared bit width."""

    def __init__(self, message: str, type_str: Optional[str] = None,
                 value: Optional[int] = None):
        super().__init__(message, {"type_str": type_str, "value": value})
        self.type_str = type_str
        self.value = value


class ShapeMismatch(EncodingError):
    """Runtime value shape does not match its declared type."""

    def __init__(self, message: str, type_str: Optional[str] = None):
        super().__init__(message, {"type_str": type_str})
        self.type_str = type_str


# Signing exceptions
class SigningError(ClaimSignerError):
    """Base exception for signing operations."""
    pass


class SigningKeyInvalid(SigningError):
    """Private key is malformed or rejected by the signing primitive."""
    pass
