"""
Struct hash for the claimToken message.
"""

from eth_utils import keccak

from ..abi import encode_standard
from ..models import ClaimRequest

# Must stay byte-identical to the string hashed by the deployed contract,
# including the spaces after commas and the bare "uint".
CLAIM_TOKEN_TYPE = (
    "claimToken(uint256 uuid, uint256 amount, address userAddress, uint256 nonce, uint deadline)"
)
CLAIM_TOKEN_TYPEHASH = keccak(text=CLAIM_TOKEN_TYPE)

CLAIM_FIELD_TYPES = ["bytes32", "uint256", "uint256", "address", "uint256", "uint256"]


def encode_claim(request: ClaimRequest) -> bytes:
    """abi.encode(typeHash, uuid, amount, userAddress, nonce, deadline)"""
    return encode_standard(
        CLAIM_FIELD_TYPES,
        [
            CLAIM_TOKEN_TYPEHASH,
            request.uuid,
            request.amount,
            request.user_address,
            request.nonce,
            request.deadline,
        ]
    )


def hash_claim(request: ClaimRequest) -> bytes:
    """
    Compute the claimToken struct hash.

    Args:
        request: Claim to hash

    Returns:
        32-byte struct hash
    """
    return keccak(encode_claim(request))
