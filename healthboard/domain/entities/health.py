"""
Health domain entities.

This module defines the value objects reported by monitored services
and the per-probe result produced by the health check engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, Optional

from healthboard.domain.entities.service_endpoint import ServiceEndpoint


class HealthStatus(str, Enum):
    """Status a service reports about itself.

    Values are the member names; ordinals follow declaration order.
    """

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    UNHEALTHY = "Unhealthy"

    @property
    def ordinal(self) -> int:
        return list(HealthStatus).index(self)

    @classmethod
    def from_ordinal(cls, value: int) -> "HealthStatus":
        members = list(cls)
        if 0 <= value < len(members):
            return members[value]
        raise ValueError(f"Unknown health status ordinal: {value}")

    @classmethod
    def from_name(cls, value: str) -> "HealthStatus":
        for member in cls:
            if member.value.casefold() == value.strip().casefold():
                return member
        raise ValueError(f"Unknown health status: {value!r}")


@dataclass(frozen=True, slots=True)
class HealthMetadata:
    """Health metadata returned by a monitored service."""

    service_name: str
    version: str
    environment: Optional[str] = None
    status: HealthStatus = HealthStatus.HEALTHY
    timestamp: Optional[datetime] = None
    description: Optional[str] = None
    host_name: Optional[str] = None
    uptime: Optional[timedelta] = None
    additional_metadata: Optional[Dict[str, str]] = None


@dataclass(frozen=True, slots=True)
class HealthCheckResult:
    """Outcome of one probe against one service endpoint."""

    service_endpoint: ServiceEndpoint
    is_success: bool
    health_metadata: Optional[HealthMetadata] = None
    error_message: Optional[str] = None
    status_code: Optional[int] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_disabled: bool = False

    @classmethod
    def success(
        cls,
        service_endpoint: ServiceEndpoint,
        health_metadata: HealthMetadata,
        status_code: int,
    ) -> "HealthCheckResult":
        return cls(
            service_endpoint=service_endpoint,
            is_success=True,
            health_metadata=health_metadata,
            status_code=status_code,
        )

    @classmethod
    def failure(
        cls,
        service_endpoint: ServiceEndpoint,
        error_message: str,
        status_code: Optional[int] = None,
    ) -> "HealthCheckResult":
        return cls(
            service_endpoint=service_endpoint,
            is_success=False,
            error_message=error_message,
            status_code=status_code,
        )

    @classmethod
    def disabled(cls, service_endpoint: ServiceEndpoint) -> "HealthCheckResult":
        return cls(
            service_endpoint=service_endpoint,
            is_success=False,
            error_message="Service is disabled",
            is_disabled=True,
        )
