"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .configuration import DashboardConfiguration
from .errors import (
    ConfigurationValidationError,
    DomainError,
    EmptyResponseBodyError,
    HealthMetadataParseError,
    InvalidHealthMetadataError,
    ServiceAlreadyExistsError,
    ServiceNotFoundError,
)
from .health import HealthCheckResult, HealthMetadata, HealthStatus
from .service_endpoint import ServiceEndpoint

__all__ = [
    "ServiceEndpoint",
    "DashboardConfiguration",
    "HealthStatus",
    "HealthMetadata",
    "HealthCheckResult",
    "DomainError",
    "ServiceNotFoundError",
    "ServiceAlreadyExistsError",
    "ConfigurationValidationError",
    "HealthMetadataParseError",
    "EmptyResponseBodyError",
    "InvalidHealthMetadataError",
]
