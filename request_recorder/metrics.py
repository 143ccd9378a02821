"""
Prometheus metrics for the request recorder.
"""
from prometheus_client import Counter, Histogram, Gauge, Info, CollectorRegistry

from . import __version__
from .logging import SERVICE_NAME


class Metrics:
    """
    Centralized metrics for the request recorder.
    """

    def __init__(self, service_name: str = SERVICE_NAME, version: str = __version__, registry=None):
        self.service_name = service_name
        self.version = version
        self.registry = registry or CollectorRegistry()

        # HTTP Metrics (local invocation app)
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["service", "method", "path", "status"],
            registry=self.registry,
        )

        self.http_request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["service", "method", "path"],
            registry=self.registry,
        )

        # Application Info
        self.app_info = Info(
            "app",
            "Application information",
            registry=self.registry,
        )
        self.app_info.info({"service": service_name, "version": version})

        self.app_up = Gauge(
            "app_up",
            "Application up status (1=up, 0=down)",
            ["service", "version"],
            registry=self.registry,
        )
        self.app_up.labels(service=service_name, version=version).set(1)

        # Store writes
        self.writes_total = Counter(
            "recorder_writes_total",
            "Record writes by backend and outcome",
            ["backend", "outcome"],
            registry=self.registry,
        )

        self.write_duration = Histogram(
            "recorder_write_duration_seconds",
            "Store write duration in seconds",
            ["backend"],
            registry=self.registry,
        )

    def record_write(self, backend: str, ok: bool, duration: float):
        """Record the outcome of one store write."""
        self.writes_total.labels(backend=backend, outcome="stored" if ok else "failed").inc()
        self.write_duration.labels(backend=backend).observe(duration)


# Process-wide metrics instance
metrics = Metrics()
