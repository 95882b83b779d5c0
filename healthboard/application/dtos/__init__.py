"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .base import CamelModel
from .configuration_dto import (
    ConfigurationUpdatedDTO,
    DashboardConfigurationDTO,
    ServiceChangedDTO,
    ServiceEndpointDTO,
)
from .health_dto import (
    HealthCheckResultDTO,
    HealthMetadataDTO,
    HealthOverviewDTO,
    format_timespan,
)

__all__ = [
    "CamelModel",
    "ServiceEndpointDTO",
    "DashboardConfigurationDTO",
    "ConfigurationUpdatedDTO",
    "ServiceChangedDTO",
    "HealthMetadataDTO",
    "HealthCheckResultDTO",
    "HealthOverviewDTO",
    "format_timespan",
]
