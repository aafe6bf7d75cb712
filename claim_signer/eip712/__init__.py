"""EIP-712 hashing for claimToken messages."""

from .domain import EIP712_DOMAIN_TYPE, EIP712_DOMAIN_TYPEHASH, build_domain_separator
from .claim import CLAIM_TOKEN_TYPE, CLAIM_TOKEN_TYPEHASH, encode_claim, hash_claim
from .digest import assemble_digest, claim_digest, signable_bytes

__all__ = [
    "EIP712_DOMAIN_TYPE",
    "EIP712_DOMAIN_TYPEHASH",
    "build_domain_separator",
    "CLAIM_TOKEN_TYPE",
    "CLAIM_TOKEN_TYPEHASH",
    "encode_claim",
    "hash_claim",
    "assemble_digest",
    "claim_digest",
    "signable_bytes",
]
