"""
secp256k1 signing facade.

Delegates to eth_account, which uses RFC 6979 deterministic nonces and
returns Ethereum style recovery IDs (v = 27 or 28).
"""

import logging
from typing import Any

from eth_account import Account

from ..exceptions import SigningKeyInvalid, ShapeMismatch
from ..models import Signature
from ..utils.validators import validate_private_key

logger = logging.getLogger(__name__)

DIGEST_SIZE = 32


def _check_digest(digest: bytes) -> None:
    if not isinstance(digest, (bytes, bytearray)) or len(digest) != DIGEST_SIZE:
        raise ShapeMismatch(f"Digest must be {DIGEST_SIZE} bytes", type_str="bytes32")


def sign_digest(digest: bytes, private_key: Any) -> Signature:
    """
    Sign a 32-byte digest.

    Args:
        digest: EIP-712 digest
        private_key: Hex string or 32 raw bytes

    Returns:
        Signature(r, s, v) with v in {27, 28}

    Raises:
        ShapeMismatch: If digest is not 32 bytes
        SigningKeyInvalid: If the key is malformed or rejected
    """
    _check_digest(digest)
    key = validate_private_key(private_key)

    try:
        signed = Account.unsafe_sign_hash(bytes(digest), key)
    except Exception as e:
        # SECURITY: Sanitize error message to prevent credential leakage
        error_type = type(e).__name__
        logger.error(f"Failed to sign digest: {error_type}")
        raise SigningKeyInvalid(f"Signing failed: {error_type}. Check private key format.") from None

    return Signature(
        r=signed.r.to_bytes(32, "big"),
        s=signed.s.to_bytes(32, "big"),
        v=signed.v,
    )


def recover_signer(digest: bytes, signature: Signature) -> str:
    """
    Recover the checksummed address that produced ``signature``.

    Raises:
        ShapeMismatch: If digest is not 32 bytes
    """
    _check_digest(digest)
    return Account._recover_hash(
        bytes(digest),
        vrs=(
            signature.v,
            int.from_bytes(signature.r, "big"),
            int.from_bytes(signature.s, "big"),
        )
    )


def address_from_key(private_key: Any) -> str:
    """Derive the checksummed signer address from a private key."""
    key = validate_private_key(private_key)
    return Account.from_key(key).address
