"""
Claim Signer

EIP-712 digests and secp256k1 signatures for claimToken messages, byte
compatible with the on-chain verifier.

Includes a standalone ABI codec (packed and standard encodings) used to
build the domain separator, struct hash and signing digest.
"""

from .models import ClaimRequest, ClaimSignature, DomainParams, Signature
from .config import ClaimSignerSettings, get_settings
from .eip712 import (
    CLAIM_TOKEN_TYPE,
    EIP712_DOMAIN_TYPE,
    build_domain_separator,
    hash_claim,
    assemble_digest,
    claim_digest,
)
from .signing import ClaimSigner, sign_digest, recover_signer
from .exceptions import (
    ClaimSignerError,
    ValidationError,
    ConfigurationError,
    EncodingError,
    InvalidTypeDescriptor,
    ArityMismatch,
    EncodingOverflow,
    ShapeMismatch,
    SigningError,
    SigningKeyInvalid,
)

__version__ = "1.0.0"

__all__ = [
    # Main service
    "ClaimSigner",

    # Types
    "ClaimRequest",
    "ClaimSignature",
    "DomainParams",
    "Signature",

    # Configuration
    "ClaimSignerSettings",
    "get_settings",

    # EIP-712 pipeline
    "CLAIM_TOKEN_TYPE",
    "EIP712_DOMAIN_TYPE",
    "build_domain_separator",
    "hash_claim",
    "assemble_digest",
    "claim_digest",
    "sign_digest",
    "recover_signer",

    # Exceptions
    "ClaimSignerError",
    "ValidationError",
    "ConfigurationError",
    "EncodingError",
    "InvalidTypeDescriptor",
    "ArityMismatch",
    "EncodingOverflow",
    "ShapeMismatch",
    "SigningError",
    "SigningKeyInvalid",
]
