"""
EIP-712 domain separator.

Binds signatures to one contract name, version, chain and address so they
cannot be replayed elsewhere.
"""

import logging

from eth_utils import keccak

from ..abi import encode_standard
from ..models import DomainParams

logger = logging.getLogger(__name__)

EIP712_DOMAIN_TYPE = (
    "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)
EIP712_DOMAIN_TYPEHASH = keccak(text=EIP712_DOMAIN_TYPE)

DOMAIN_FIELD_TYPES = ["bytes32", "bytes32", "bytes32", "uint256", "address"]


def build_domain_separator(params: DomainParams) -> bytes:
    """
    Compute the EIP-712 domain separator.

    keccak256(abi.encode(typeHash, keccak256(name), keccak256(version),
    chainId, verifyingContract))

    Args:
        params: Domain parameters

    Returns:
        32-byte domain separator
    """
    encoded = encode_standard(
        DOMAIN_FIELD_TYPES,
        [
            EIP712_DOMAIN_TYPEHASH,
            keccak(text=params.name),
            keccak(text=params.version),
            params.chain_id,
            params.verifying_contract,
        ]
    )
    separator = keccak(encoded)
    logger.debug(
        f"Domain separator for {params.name} v{params.version} "
        f"on chain {params.chain_id} at {params.verifying_contract}: 0x{separator.hex()}"
    )
    return separator
