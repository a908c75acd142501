"""Metrics collection for client requests."""

from dataclasses import dataclass, field
from typing import ClassVar

from verbclient.errors import ClientErrorClass


@dataclass
class ClientMetrics:
    """Metrics for client requests.

    Singleton class that tracks request counts by status code,
    failures by error class, and transferred bytes.
    """

    requests_total: dict[int, int] = field(default_factory=dict)
    failures_total: dict[str, int] = field(default_factory=dict)
    bytes_sent_total: int = 0
    bytes_received_total: int = 0
    duration_ms_total: float = 0.0
    request_count: int = 0

    _instance: ClassVar["ClientMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "ClientMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_sent(self, bytes_sent: int) -> None:
        """Record a request body written to the wire."""
        self.bytes_sent_total += bytes_sent

    def record_response(
        self, status_code: int, bytes_received: int, duration_ms: float
    ) -> None:
        """Record a fully received response.

        Args:
            status_code: HTTP status code.
            bytes_received: Size of the buffered body.
            duration_ms: Time from dispatch to end of stream.
        """
        self.requests_total[status_code] = self.requests_total.get(status_code, 0) + 1
        self.bytes_received_total += bytes_received
        self.duration_ms_total += duration_ms
        self.request_count += 1

    def record_failure(self, error_class: ClientErrorClass) -> None:
        """Record a failed call.

        Args:
            error_class: Classification of the failure.
        """
        key = error_class.value
        self.failures_total[key] = self.failures_total.get(key, 0) + 1

    @property
    def avg_duration_ms(self) -> float:
        """Average duration of completed responses in milliseconds."""
        if self.request_count == 0:
            return 0.0
        return self.duration_ms_total / self.request_count

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "requests_total": dict(self.requests_total),
            "failures_total": dict(self.failures_total),
            "bytes_sent_total": self.bytes_sent_total,
            "bytes_received_total": self.bytes_received_total,
            "duration_ms_total": self.duration_ms_total,
            "request_count": self.request_count,
        }
