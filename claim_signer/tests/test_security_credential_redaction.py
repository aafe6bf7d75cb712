"""
Test credential redaction in logs.

Private keys must never reach log output, while digests and signature
components (same 32-byte hex shape) stay readable.
"""

import json
import logging
from io import StringIO

import pytest

from claim_signer.utils.structured_logging import (
    CredentialRedactionFilter,
    StructuredFormatter,
    StructuredLogger,
    clear_correlation_id,
    set_correlation_id,
)


@pytest.fixture
def capture():
    """Logger with a redacting handler writing to a buffer."""
    logger = logging.getLogger("test_redaction")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    log_stream = StringIO()
    handler = logging.StreamHandler(log_stream)
    handler.setFormatter(logging.Formatter('%(message)s'))
    handler.addFilter(CredentialRedactionFilter())
    logger.addHandler(handler)

    yield logger, log_stream, handler

    logger.removeHandler(handler)
    logger.propagate = True


class TestCredentialRedactionFilter:
    """Test credential redaction in logging."""

    def test_redacts_labelled_private_key(self, capture):
        logger, log_stream, _ = capture
        private_key = "0x" + "a" * 64

        logger.info(f"Loaded signer with private_key={private_key}")

        output = log_stream.getvalue()
        assert private_key not in output
        assert "private_key=[REDACTED]" in output

    def test_redacts_key_in_args(self, capture):
        logger, log_stream, _ = capture
        private_key = "b" * 64

        logger.info("config %s", f"key: {private_key}")

        assert private_key not in log_stream.getvalue()

    def test_keeps_digests(self, capture):
        logger, log_stream, _ = capture
        digest = "0x" + "c" * 64

        logger.info(f"claim_signed digest={digest}")

        assert digest in log_stream.getvalue()

    def test_redacts_structured_fields(self, capture):
        logger, log_stream, handler = capture
        handler.setFormatter(StructuredFormatter("%(message)s"))
        private_key = "0x" + "d" * 64

        StructuredLogger("test_redaction").warning(
            "bad_config", detail=f"private_key={private_key}"
        )

        record = json.loads(log_stream.getvalue())
        assert private_key not in record["detail"]
        assert record["event"] == "bad_config"


def test_structured_formatter_fields(capture):
    logger, log_stream, handler = capture
    handler.setFormatter(StructuredFormatter("%(message)s"))

    set_correlation_id("req_test")
    try:
        StructuredLogger("test_redaction").info("claim_signed", uuid="42")
    finally:
        clear_correlation_id()

    record = json.loads(log_stream.getvalue())
    assert record["message"] == "claim_signed"
    assert record["level"] == "INFO"
    assert record["correlation_id"] == "req_test"
    assert record["uuid"] == "42"
