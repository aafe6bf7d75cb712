"""
Configuration management for the claim signer.

Loads settings from environment variables with validation.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import DomainParams


class ClaimSignerSettings(BaseSettings):
    """
    Claim signer settings.

    Loads from environment variables with CLAIM_SIGNER_ prefix.
    """
    model_config = SettingsConfigDict(
        env_prefix="CLAIM_SIGNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # EIP-712 domain
    contract_name: str = Field(default="ClaimToken", description="Verifying contract name")
    contract_version: str = Field(default="1", description="Verifying contract version")
    contract_address: Optional[str] = Field(None, description="Verifying contract address")
    chain_id: int = Field(default=97, ge=1, description="Target chain ID")

    # Signing key
    private_key: Optional[str] = Field(None, repr=False, description="Signer private key (hex)")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Emit JSON logs")

    # Metrics
    enable_metrics: bool = Field(default=False, description="Enable Prometheus metrics")
    metrics_port: int = Field(default=9090, ge=1024, le=65535, description="Metrics server port")

    def domain_params(self) -> DomainParams:
        """
        Build the EIP-712 domain from settings.

        Raises:
            ConfigurationError: If no contract address is configured
        """
        if not self.contract_address:
            raise ConfigurationError("CLAIM_SIGNER_CONTRACT_ADDRESS is not set")
        return DomainParams(
            name=self.contract_name,
            version=self.contract_version,
            chain_id=self.chain_id,
            verifying_contract=self.contract_address,
        )

    def __repr__(self) -> str:
        """Safe repr without sensitive data."""
        return (
            f"ClaimSignerSettings("
            f"contract_name={self.contract_name}, "
            f"contract_address={self.contract_address}, "
            f"chain_id={self.chain_id}"
            ")"
        )


def get_settings() -> ClaimSignerSettings:
    """
    Get claim signer settings.

    Returns:
        Validated settings instance
    """
    return ClaimSignerSettings()
