"""Tests for the signing facade and ClaimSigner service."""

import logging

import pytest
from eth_account import Account
from prometheus_client import CollectorRegistry
from web3 import Web3

from claim_signer import (
    ClaimRequest,
    ClaimSignature,
    ClaimSigner,
    ClaimSignerSettings,
    DomainParams,
    claim_digest,
)
from claim_signer.exceptions import ConfigurationError, ShapeMismatch, SigningKeyInvalid
from claim_signer.metrics import Metrics
from claim_signer.signing import recover_signer, sign_digest

# Test key (DO NOT USE IN PRODUCTION)
PRIVATE_KEY = "0x" + "11" * 32
CONTRACT = "0xFBfb48044fd7b6Cd33a40F4f3D80c0755E8Da20E"
USER = "0x10e3a183db48d854870feda31630bc1eb0ddd52a"


@pytest.fixture
def domain():
    return DomainParams(name="ClaimToken", verifying_contract=CONTRACT)


@pytest.fixture
def claim():
    return ClaimRequest(
        uuid=123456789,
        amount=1000000000,
        user_address=USER,
        nonce=0,
        deadline=1699629459,
    )


@pytest.fixture
def signer(domain):
    return ClaimSigner(domain, PRIVATE_KEY)


class TestSignDigest:
    def test_recovers_signer(self, domain, claim):
        digest = claim_digest(claim, domain)
        signature = sign_digest(digest, PRIVATE_KEY)

        assert len(signature.r) == 32
        assert len(signature.s) == 32
        assert signature.v in (27, 28)
        assert recover_signer(digest, signature) == Account.from_key(PRIVATE_KEY).address

    def test_deterministic(self, domain, claim):
        digest = claim_digest(claim, domain)
        assert sign_digest(digest, PRIVATE_KEY) == sign_digest(digest, PRIVATE_KEY)

    def test_accepts_raw_key_bytes(self, domain, claim):
        digest = claim_digest(claim, domain)
        assert sign_digest(digest, bytes.fromhex("11" * 32)) == sign_digest(digest, PRIVATE_KEY)

    def test_signature_bytes(self, domain, claim):
        digest = claim_digest(claim, domain)
        signature = sign_digest(digest, PRIVATE_KEY)
        raw = signature.to_bytes()
        assert len(raw) == 65
        assert raw[64] == signature.v

    @pytest.mark.parametrize("bad_key", [
        "0x1234",
        "not a key",
        "0x" + "00" * 32,
        "0x" + "ff" * 32,
        12345,
    ])
    def test_invalid_key(self, bad_key):
        with pytest.raises(SigningKeyInvalid) as exc:
            sign_digest(b"\x00" * 32, bad_key)
        assert "ff" * 32 not in str(exc.value)

    def test_digest_length(self):
        with pytest.raises(ShapeMismatch):
            sign_digest(b"\x00" * 31, PRIVATE_KEY)


class TestClaimSigner:
    def test_sign_claim_output(self, signer, claim):
        signed = signer.sign_claim(claim)

        assert isinstance(signed, ClaimSignature)
        assert signed.uuid == "123456789"
        assert signed.amount == "1000000000"
        assert signed.nonce == "0"
        assert signed.deadline == "1699629459"
        assert signed.user_address == Web3.to_checksum_address(USER)
        assert signed.v in (27, 28)
        assert signed.r.startswith("0x") and len(signed.r) == 66
        assert signed.s.startswith("0x") and len(signed.s) == 66
        assert len(signed.signature) == 2 + 130

    def test_digest_matches_pipeline(self, signer, claim, domain):
        assert signer.digest(claim) == claim_digest(claim, domain)
        assert signer.sign_claim(claim).digest == "0x" + claim_digest(claim, domain).hex()

    def test_verify(self, signer, claim):
        signed = signer.sign_claim(claim)
        assert signer.verify(claim, signed)

        other = claim.model_copy(update={"amount": 1})
        assert not signer.verify(other, signed)

    def test_signer_address(self, signer):
        assert signer.signer_address == Account.from_key(PRIVATE_KEY).address

    def test_repr_hides_key(self, signer):
        assert "11" * 32 not in repr(signer)

    def test_invalid_key(self, domain):
        with pytest.raises(SigningKeyInvalid):
            ClaimSigner(domain, "0xdeadbeef")

    def test_logs_claim_signed(self, signer, claim, caplog):
        with caplog.at_level(logging.INFO, logger="claim_signer"):
            signer.sign_claim(claim)

        records = [r for r in caplog.records if r.getMessage() == "claim_signed"]
        assert len(records) == 1
        assert records[0].extra_fields["uuid"] == "123456789"
        assert "11" * 32 not in caplog.text

    def test_metrics(self, domain, claim):
        registry = CollectorRegistry()
        signer = ClaimSigner(domain, PRIVATE_KEY, metrics=Metrics(registry=registry))

        signer.sign_claim(claim)
        signer.sign_claim(claim)

        assert registry.get_sample_value(
            "claim_signer_signatures_total", {"status": "success"}
        ) == 2.0
        assert registry.get_sample_value("claim_signer_signing_latency_seconds_count") == 2.0

    def test_metrics_on_failure(self, domain, claim, monkeypatch):
        registry = CollectorRegistry()
        signer = ClaimSigner(domain, PRIVATE_KEY, metrics=Metrics(registry=registry))

        def failing_sign(digest, key):
            raise SigningKeyInvalid("Failed to sign digest: ValueError")

        monkeypatch.setattr("claim_signer.signing.claim_signer.sign_digest", failing_sign)

        with pytest.raises(SigningKeyInvalid):
            signer.sign_claim(claim)

        assert registry.get_sample_value(
            "claim_signer_signatures_total", {"status": "error"}
        ) == 1.0
        assert registry.get_sample_value(
            "claim_signer_signatures_total", {"status": "success"}
        ) is None
        assert registry.get_sample_value("claim_signer_signing_latency_seconds_count") == 1.0

    def test_disabled_metrics(self, domain, claim):
        metrics = Metrics(enabled=False)
        signer = ClaimSigner(domain, PRIVATE_KEY, metrics=metrics)

        assert signer.verify(claim, signer.sign_claim(claim))
        assert not hasattr(metrics, "signatures")
        metrics.track_signature("success")

    def test_verify_mismatch_logged(self, signer, claim, caplog):
        signed = signer.sign_claim(claim)
        other = claim.model_copy(update={"nonce": 7})

        with caplog.at_level(logging.WARNING, logger="claim_signer"):
            assert not signer.verify(other, signed)

        [record] = [r for r in caplog.records if r.getMessage() == "claim_signature_mismatch"]
        assert record.levelno == logging.WARNING
        assert record.extra_fields["signer"] == signer.signer_address
        assert record.extra_fields["recovered"] != signer.signer_address


class TestFromSettings:
    def test_builds_signer(self, claim):
        settings = ClaimSignerSettings(
            contract_address=CONTRACT,
            private_key=PRIVATE_KEY,
            chain_id=97,
        )
        signer = ClaimSigner.from_settings(settings)
        assert signer.domain.verifying_contract == CONTRACT
        assert signer.verify(claim, signer.sign_claim(claim))

    def test_missing_key(self):
        settings = ClaimSignerSettings(contract_address=CONTRACT, private_key=None)
        with pytest.raises(ConfigurationError):
            ClaimSigner.from_settings(settings)

    def test_missing_contract(self):
        settings = ClaimSignerSettings(contract_address=None, private_key=PRIVATE_KEY)
        with pytest.raises(ConfigurationError):
            ClaimSigner.from_settings(settings)
