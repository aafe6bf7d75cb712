"""
Claim signer service.

Wires the EIP-712 pipeline to the signing facade for one verifying
contract and one signer key.
"""

from typing import Any, Optional

from ..config import ClaimSignerSettings, get_settings
from ..eip712 import assemble_digest, build_domain_separator, hash_claim
from ..exceptions import ConfigurationError
from ..metrics import Metrics, get_metrics
from ..models import ClaimRequest, ClaimSignature, DomainParams, Signature
from ..utils.structured_logging import get_logger
from .signer import address_from_key, recover_signer, sign_digest

logger = get_logger(__name__)


class ClaimSigner:
    """
    Signs claimToken messages for a verifying contract.

    Immutable after construction; safe to share across threads.

    Example:
        >>> signer = ClaimSigner(
        ...     DomainParams(name="ClaimToken", verifying_contract=contract),
        ...     private_key=key
        ... )
        >>> signed = signer.sign_claim(ClaimRequest(
        ...     uuid=1, amount=10**9, user_address=user, nonce=0, deadline=1699629459
        ... ))
    """

    def __init__(
        self,
        domain: DomainParams,
        private_key: Any,
        metrics: Optional[Metrics] = None
    ):
        """
        Initialize claim signer.

        Args:
            domain: EIP-712 domain of the verifying contract
            private_key: Signer private key (hex string or 32 bytes)
            metrics: Metrics collector (disabled if None)

        Raises:
            SigningKeyInvalid: If the private key is malformed
        """
        self.domain = domain
        self._private_key = private_key
        self.signer_address = address_from_key(private_key)
        self.domain_separator = build_domain_separator(domain)
        self.metrics = metrics or Metrics(enabled=False)

        logger.info(
            "claim_signer_ready",
            contract=domain.verifying_contract,
            chain_id=domain.chain_id,
            signer=self.signer_address
        )

    @classmethod
    def from_settings(cls, settings: Optional[ClaimSignerSettings] = None) -> "ClaimSigner":
        """
        Build a signer from environment settings.

        Raises:
            ConfigurationError: If contract address or private key is missing
        """
        settings = settings or get_settings()
        if not settings.private_key:
            raise ConfigurationError("CLAIM_SIGNER_PRIVATE_KEY is not set")

        if settings.enable_metrics:
            metrics = get_metrics(port=settings.metrics_port)
        else:
            metrics = None

        return cls(settings.domain_params(), settings.private_key, metrics=metrics)

    def __repr__(self) -> str:
        return (
            f"ClaimSigner(contract={self.domain.verifying_contract}, "
            f"chain_id={self.domain.chain_id}, signer={self.signer_address})"
        )

    def digest(self, request: ClaimRequest) -> bytes:
        """EIP-712 digest of ``request`` under this signer's domain."""
        return assemble_digest(self.domain_separator, hash_claim(request))

    def sign_claim(self, request: ClaimRequest) -> ClaimSignature:
        """
        Sign a claim.

        Args:
            request: Claim to sign

        Returns:
            Claim fields with signature components

        Raises:
            SigningKeyInvalid: If the signing primitive rejects the key
        """
        with self.metrics.time_signing():
            digest = self.digest(request)
            signature = sign_digest(digest, self._private_key)

        logger.info(
            "claim_signed",
            uuid=str(request.uuid),
            user_address=request.user_address,
            nonce=str(request.nonce),
            deadline=str(request.deadline),
            digest="0x" + digest.hex()
        )
        return ClaimSignature.from_signature(request, digest, signature)

    def recover(self, request: ClaimRequest, signature: Signature) -> str:
        """Address that signed ``request`` with ``signature``."""
        return recover_signer(self.digest(request), signature)

    def verify(self, request: ClaimRequest, signed: ClaimSignature) -> bool:
        """
        Check that ``signed`` was produced by this signer for ``request``.

        Returns:
            True if the recovered address matches the signer address
        """
        signature = Signature(
            r=bytes.fromhex(signed.r[2:]),
            s=bytes.fromhex(signed.s[2:]),
            v=signed.v,
        )
        recovered = self.recover(request, signature)
        if recovered != self.signer_address:
            logger.warning(
                "claim_signature_mismatch",
                uuid=str(request.uuid),
                recovered=recovered,
                signer=self.signer_address
            )
            return False
        return True
