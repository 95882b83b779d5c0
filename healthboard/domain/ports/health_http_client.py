"""Transport abstraction used by the health check engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class HealthHttpResponse:
    """Raw HTTP response captured by a probe."""

    status_code: int
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299


class HealthTransportError(Exception):
    """The request failed before an HTTP response was received."""


class HealthConnectionError(HealthTransportError):
    """The target could not be resolved or connected to."""


class HealthTimeoutError(HealthTransportError):
    """The request did not complete within its timeout."""


class IHealthHttpClient(Protocol):
    """Performs a bounded-timeout GET against a health endpoint."""

    async def get(self, url: str, timeout: float) -> HealthHttpResponse:
        """
        Send a GET request to ``url``.

        Raises:
            HealthTimeoutError: If ``timeout`` seconds elapse first.
            HealthConnectionError: On DNS or connection failures.
            HealthTransportError: On any other transport failure.
        """
        ...
