"""DTOs for health check responses."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from pydantic import Field, field_serializer

from healthboard.application.dtos.base import CamelModel
from healthboard.application.dtos.configuration_dto import ServiceEndpointDTO
from healthboard.domain.entities.health import (
    HealthCheckResult,
    HealthMetadata,
    HealthStatus,
)


def format_timespan(value: timedelta) -> str:
    """Render a duration as ``[-][d.]hh:mm:ss[.fffffff]``."""

    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.days:
        text = f"{value.days}.{text}"
    if value.microseconds:
        text = f"{text}.{value.microseconds * 10:07d}"
    return f"{sign}{text}"


class HealthMetadataDTO(CamelModel):
    """Serializable health metadata reported by a service."""

    service_name: str = Field(description="Name the service reports")
    version: str = Field(description="Opaque version label")
    environment: Optional[str] = Field(default=None)
    status: HealthStatus = Field(default=HealthStatus.HEALTHY)
    timestamp: Optional[datetime] = Field(default=None)
    description: Optional[str] = Field(default=None)
    host_name: Optional[str] = Field(default=None)
    uptime: Optional[timedelta] = Field(default=None)
    additional_metadata: Optional[Dict[str, str]] = Field(default=None)

    @field_serializer("uptime")
    def _serialize_uptime(self, uptime: Optional[timedelta]) -> Optional[str]:
        return format_timespan(uptime) if uptime is not None else None

    @classmethod
    def from_domain(cls, metadata: HealthMetadata) -> "HealthMetadataDTO":
        return cls(
            service_name=metadata.service_name,
            version=metadata.version,
            environment=metadata.environment,
            status=metadata.status,
            timestamp=metadata.timestamp,
            description=metadata.description,
            host_name=metadata.host_name,
            uptime=metadata.uptime,
            additional_metadata=metadata.additional_metadata,
        )


class HealthCheckResultDTO(CamelModel):
    """Serializable outcome of a single probe."""

    service_endpoint: ServiceEndpointDTO = Field(description="Endpoint checked")
    is_success: bool = Field(description="Whether the probe succeeded")
    health_metadata: Optional[HealthMetadataDTO] = Field(default=None)
    error_message: Optional[str] = Field(default=None)
    status_code: Optional[int] = Field(default=None)
    checked_at: datetime = Field(description="UTC time of the probe")
    is_disabled: bool = Field(default=False)

    @classmethod
    def from_domain(cls, result: HealthCheckResult) -> "HealthCheckResultDTO":
        return cls(
            service_endpoint=ServiceEndpointDTO.from_domain(result.service_endpoint),
            is_success=result.is_success,
            health_metadata=(
                HealthMetadataDTO.from_domain(result.health_metadata)
                if result.health_metadata is not None
                else None
            ),
            error_message=result.error_message,
            status_code=result.status_code,
            checked_at=result.checked_at,
            is_disabled=result.is_disabled,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "serviceEndpoint": {
                    "name": "Payment API",
                    "environment": "PROD",
                    "healthCheckUrl": "https://payments.example.com/healthz",
                    "enabled": True,
                },
                "isSuccess": True,
                "healthMetadata": {
                    "serviceName": "Payment API",
                    "version": "1.2.3",
                    "status": "Healthy",
                    "uptime": "1.02:30:00",
                },
                "statusCode": 200,
                "checkedAt": "2024-01-15T10:30:00Z",
                "isDisabled": False,
            }
        }
    }


class HealthOverviewDTO(CamelModel):
    """DTO representing the ``/api/health`` response payload."""

    environments: List[str] = Field(default_factory=list)
    services: List[ServiceEndpointDTO] = Field(default_factory=list)
    results: Dict[str, HealthCheckResultDTO] = Field(
        default_factory=dict, description="Results keyed by name|environment"
    )
    refresh_interval_seconds: int = Field(description="Dashboard refresh interval")
    timestamp: datetime = Field(description="UTC time the overview was built")
