"""Domain service abstraction for health checks."""

from __future__ import annotations

import asyncio
from typing import Dict, Iterable, Optional, Protocol

from healthboard.domain.entities.health import HealthCheckResult
from healthboard.domain.entities.service_endpoint import ServiceEndpoint


class IHealthCheckService(Protocol):
    """Interface for probing monitored services."""

    async def check_health(
        self,
        service_endpoint: ServiceEndpoint,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> HealthCheckResult:
        """Probe a single service endpoint."""
        ...

    async def check_all_health(
        self, cancel_event: Optional[asyncio.Event] = None
    ) -> Dict[str, HealthCheckResult]:
        """Probe every configured endpoint, keyed by ``name|environment``."""
        ...

    async def check_endpoints(
        self,
        endpoints: Iterable[ServiceEndpoint],
        default_timeout: float,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Dict[str, HealthCheckResult]:
        """Probe ``endpoints`` concurrently, keyed by ``name|environment``."""
        ...
