"""Signing for claimToken messages."""

from .signer import sign_digest, recover_signer, address_from_key
from .claim_signer import ClaimSigner

__all__ = ["sign_digest", "recover_signer", "address_from_key", "ClaimSigner"]
