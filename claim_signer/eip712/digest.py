"""
EIP-712 signing digest.

digest = keccak256(0x19 || 0x01 || domainSeparator || structHash)
"""

from eth_utils import keccak

from ..abi import encode_packed
from ..models import ClaimRequest, DomainParams
from .claim import hash_claim
from .domain import build_domain_separator

# EIP-191 version byte 0x01: structured data
EIP191_PREFIX = b"\x19"
EIP712_VERSION = b"\x01"

DIGEST_FIELD_TYPES = ["bytes1", "bytes1", "bytes32", "bytes32"]


def signable_bytes(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """
    Build the 66-byte pre-image of the digest.

    Raises:
        ShapeMismatch: If either hash is not 32 bytes
    """
    return encode_packed(
        DIGEST_FIELD_TYPES,
        [EIP191_PREFIX, EIP712_VERSION, domain_separator, struct_hash]
    )


def assemble_digest(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """
    Hash the EIP-191 prefixed pre-image.

    Args:
        domain_separator: 32-byte domain separator
        struct_hash: 32-byte struct hash

    Returns:
        32-byte digest to sign
    """
    return keccak(signable_bytes(domain_separator, struct_hash))


def claim_digest(request: ClaimRequest, domain: DomainParams) -> bytes:
    """Full pipeline: domain separator, struct hash, digest."""
    return assemble_digest(build_domain_separator(domain), hash_claim(request))
