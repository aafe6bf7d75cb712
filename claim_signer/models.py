"""
Type definitions for the claim signer.

Uses Pydantic for runtime validation. All models are frozen value objects
scoped to a single signing request.
"""

from typing import Any, NamedTuple

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .utils.validators import validate_address, validate_uint256


class Signature(NamedTuple):
    """Raw secp256k1 signature components."""
    r: bytes
    s: bytes
    v: int

    def to_bytes(self) -> bytes:
        """65-byte r || s || v encoding."""
        return self.r + self.s + bytes([self.v])


class DomainParams(BaseModel):
    """EIP-712 domain binding a signature to one contract on one chain."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Contract name")
    version: str = Field(default="1", description="Contract version")
    chain_id: int = Field(default=97, ge=1, description="Target chain ID")
    verifying_contract: str = Field(..., description="Verifying contract address")

    @field_validator("verifying_contract", mode="before")
    @classmethod
    def validate_contract(cls, v: Any) -> str:
        """Checksum the contract address."""
        return validate_address(v)


class ClaimRequest(BaseModel):
    """claimToken message to be signed."""
    model_config = ConfigDict(frozen=True)

    uuid: int = Field(..., description="Claim transaction ID")
    amount: int = Field(..., description="Token amount (smallest unit)")
    user_address: str = Field(..., description="Claiming user's address")
    nonce: int = Field(..., description="On-chain nonce of the user")
    deadline: int = Field(..., description="Signature expiry (unix timestamp)")

    @field_validator("uuid", "amount", "nonce", "deadline", mode="before")
    @classmethod
    def validate_uint(cls, v: Any, info) -> int:
        """Accept ints or decimal/hex strings in uint256 range."""
        return validate_uint256(v, info.field_name)

    @field_validator("user_address", mode="before")
    @classmethod
    def validate_user_address(cls, v: Any) -> str:
        """Checksum the user address."""
        return validate_address(v)


class ClaimSignature(BaseModel):
    """Signed claim returned to the caller."""
    model_config = ConfigDict(frozen=True)

    uuid: str = Field(..., description="Claim ID (decimal)")
    amount: str = Field(..., description="Token amount (decimal)")
    user_address: str = Field(..., description="Checksummed user address")
    nonce: str = Field(..., description="Nonce (decimal)")
    deadline: str = Field(..., description="Deadline timestamp (decimal)")
    v: int = Field(..., description="Recovery ID (27 or 28)")
    r: str = Field(..., description="Signature r (0x-prefixed 32-byte hex)")
    s: str = Field(..., description="Signature s (0x-prefixed 32-byte hex)")
    digest: str = Field(..., description="Signed EIP-712 digest (0x hex)")
    signature: str = Field(..., description="65-byte r || s || v (0x hex)")

    @classmethod
    def from_signature(
        cls,
        request: ClaimRequest,
        digest: bytes,
        signature: Signature
    ) -> "ClaimSignature":
        """Map signature components and claim fields into the output record."""
        return cls(
            uuid=str(request.uuid),
            amount=str(request.amount),
            user_address=request.user_address,
            nonce=str(request.nonce),
            deadline=str(request.deadline),
            v=signature.v,
            r="0x" + signature.r.hex(),
            s="0x" + signature.s.hex(),
            digest="0x" + digest.hex(),
            signature="0x" + signature.to_bytes().hex(),
        )
