"""Domain ports package."""

from .configuration_store import IConfigurationStore
from .health_check import IHealthCheckService
from .health_http_client import (
    HealthConnectionError,
    HealthHttpResponse,
    HealthTimeoutError,
    HealthTransportError,
    IHealthHttpClient,
)

__all__ = [
    "IConfigurationStore",
    "IHealthCheckService",
    "IHealthHttpClient",
    "HealthHttpResponse",
    "HealthTransportError",
    "HealthConnectionError",
    "HealthTimeoutError",
]
