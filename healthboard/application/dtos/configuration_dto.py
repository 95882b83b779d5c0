"""DTOs for the dashboard configuration API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from healthboard.application.dtos.base import CamelModel
from healthboard.domain.entities.configuration import (
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    DashboardConfiguration,
)
from healthboard.domain.entities.service_endpoint import ServiceEndpoint


class ServiceEndpointDTO(CamelModel):
    """Serializable representation of a monitored service."""

    name: str = Field(default="", description="Service name")
    environment: str = Field(default="", description="Deployment environment")
    health_check_url: str = Field(default="", description="Health endpoint URL")
    enabled: bool = Field(default=True, description="Whether the service is polled")
    timeout_seconds: Optional[int] = Field(
        default=None, description="Per-service timeout overriding the default"
    )
    description: Optional[str] = Field(default=None, description="Free text note")

    @classmethod
    def from_domain(cls, endpoint: ServiceEndpoint) -> "ServiceEndpointDTO":
        return cls(
            name=endpoint.name,
            environment=endpoint.environment,
            health_check_url=endpoint.health_check_url,
            enabled=endpoint.enabled,
            timeout_seconds=endpoint.timeout_seconds,
            description=endpoint.description,
        )

    def to_domain(self) -> ServiceEndpoint:
        return ServiceEndpoint(
            name=self.name,
            environment=self.environment,
            health_check_url=self.health_check_url,
            enabled=self.enabled,
            timeout_seconds=self.timeout_seconds,
            description=self.description,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Payment API",
                "environment": "PROD",
                "healthCheckUrl": "https://payments.example.com/healthz",
                "enabled": True,
                "timeoutSeconds": 10,
            }
        }
    }


class DashboardConfigurationDTO(CamelModel):
    """Dashboard configuration as exchanged over ``/api/config``."""

    services: List[ServiceEndpointDTO] = Field(
        default_factory=list, description="Monitored services"
    )
    timeout_seconds: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS, description="Default probe timeout"
    )
    refresh_interval_seconds: int = Field(
        default=DEFAULT_REFRESH_INTERVAL_SECONDS,
        description="Dashboard refresh interval",
    )
    environment_order: Optional[List[str]] = Field(
        default=None, description="User-defined environment display order"
    )
    environments: Optional[List[str]] = Field(
        default=None,
        description="Computed environment order; ignored on input",
    )

    @classmethod
    def from_domain(cls, config: DashboardConfiguration) -> "DashboardConfigurationDTO":
        return cls(
            services=[ServiceEndpointDTO.from_domain(s) for s in config.services],
            timeout_seconds=config.timeout_seconds,
            refresh_interval_seconds=config.refresh_interval_seconds,
            environment_order=(
                list(config.environment_order)
                if config.environment_order is not None
                else None
            ),
            environments=config.environments,
        )

    def to_domain(self) -> DashboardConfiguration:
        return DashboardConfiguration(
            services=tuple(service.to_domain() for service in self.services),
            timeout_seconds=self.timeout_seconds,
            refresh_interval_seconds=self.refresh_interval_seconds,
            environment_order=(
                tuple(self.environment_order)
                if self.environment_order is not None
                else None
            ),
        )


class ConfigurationUpdatedDTO(CamelModel):
    """Response returned after replacing the configuration."""

    message: str
    config: DashboardConfigurationDTO


class ServiceChangedDTO(CamelModel):
    """Response returned after adding, updating or deleting a service."""

    message: str
    service: Optional[ServiceEndpointDTO] = None
