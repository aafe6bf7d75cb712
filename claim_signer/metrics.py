"""
Prometheus metrics for signing operations.
"""

import time
from contextlib import contextmanager
from typing import Iterator, Optional
import logging

from prometheus_client import CollectorRegistry, Counter, Histogram, REGISTRY, start_http_server

logger = logging.getLogger(__name__)


class Metrics:
    """
    Prometheus metrics collector.

    Tracks:
    - Signatures produced / failed
    - Signing latency
    """

    def __init__(
        self,
        enabled: bool = True,
        port: Optional[int] = None,
        registry: Optional[CollectorRegistry] = None
    ):
        """
        Initialize metrics.

        Args:
            enabled: Enable metrics collection
            port: Metrics HTTP server port (no server if None)
            registry: Collector registry (default: global registry)
        """
        self.enabled = enabled

        if not self.enabled:
            return

        registry = registry if registry is not None else REGISTRY

        self.signatures = Counter(
            'claim_signer_signatures_total',
            'Total claim signing attempts',
            ['status'],
            registry=registry
        )

        self.signing_latency = Histogram(
            'claim_signer_signing_latency_seconds',
            'Claim signing latency',
            registry=registry
        )

        if port is not None:
            try:
                start_http_server(port, registry=registry)
                logger.info(f"Metrics server started on port {port}")
            except OSError as e:
                logger.error(f"Failed to start metrics server: {e}")

    def track_signature(self, status: str) -> None:
        """Record a signing attempt."""
        if self.enabled:
            self.signatures.labels(status=status).inc()

    @contextmanager
    def time_signing(self) -> Iterator[None]:
        """Record signing latency and outcome for the enclosed block."""
        if not self.enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        except Exception:
            self.track_signature("error")
            raise
        else:
            self.track_signature("success")
        finally:
            self.signing_latency.observe(time.perf_counter() - start)


# Global metrics instance
_metrics: Optional[Metrics] = None


def get_metrics(enabled: bool = True, port: Optional[int] = None) -> Metrics:
    """Get or create the process-wide metrics instance."""
    global _metrics
    if _metrics is None:
        _metrics = Metrics(enabled=enabled, port=port)
    return _metrics
