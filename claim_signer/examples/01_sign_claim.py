"""
Example 1: Sign a claimToken message

Reads the domain and signer key from the environment:

    CLAIM_SIGNER_CONTRACT_ADDRESS=0xFBfb48044fd7b6Cd33a40F4f3D80c0755E8Da20E
    CLAIM_SIGNER_PRIVATE_KEY=0x...
    CLAIM_SIGNER_CHAIN_ID=97            (optional, default 97)

This example shows:
- Loading settings
- Signing a claim
- Verifying the signature locally before handing it to the user
"""

import json
import time

from claim_signer import ClaimSigner, ClaimRequest, get_settings
from claim_signer.logging_config import setup_logging


def main():
    """Sign one claim and print the result as JSON."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    # 1. Build signer from settings
    signer = ClaimSigner.from_settings(settings)
    print(f"Signer: {signer.signer_address}")

    # 2. Claim to sign (deadline one hour from now)
    request = ClaimRequest(
        uuid=123456789,
        amount=1000000000,
        user_address="0x10e3a183db48d854870feda31630bc1eb0ddd52a",
        nonce=0,
        deadline=int(time.time()) + 3600,
    )

    # 3. Sign
    signed = signer.sign_claim(request)

    # 4. Verify before returning it
    if not signer.verify(request, signed):
        raise RuntimeError("Signature does not recover to the signer address")

    print(json.dumps(signed.model_dump(), indent=2))


if __name__ == "__main__":
    main()
