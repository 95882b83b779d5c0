"""Use cases for the health endpoints."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from healthboard.application.dtos.configuration_dto import ServiceEndpointDTO
from healthboard.application.dtos.health_dto import (
    HealthCheckResultDTO,
    HealthOverviewDTO,
)
from healthboard.domain.entities.errors import ServiceNotFoundError
from healthboard.domain.ports.configuration_store import IConfigurationStore
from healthboard.domain.ports.health_check import IHealthCheckService


class GetAllHealthUseCase:
    """Use case responsible for the fleet-wide health overview."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        configuration_store: IConfigurationStore,
    ) -> None:
        self._health_check_service = health_check_service
        self._configuration_store = configuration_store

    async def execute(
        self, cancel_event: Optional[asyncio.Event] = None
    ) -> HealthOverviewDTO:
        # Results and the service listing come from the same snapshot.
        config = self._configuration_store.config
        results = await self._health_check_service.check_endpoints(
            config.services, config.timeout_seconds, cancel_event
        )

        return HealthOverviewDTO(
            environments=config.environments,
            services=[ServiceEndpointDTO.from_domain(s) for s in config.services],
            results={
                key: HealthCheckResultDTO.from_domain(result)
                for key, result in results.items()
            },
            refresh_interval_seconds=config.refresh_interval_seconds,
            timestamp=datetime.now(timezone.utc),
        )


class GetServiceHealthUseCase:
    """Use case responsible for probing a single service by name."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        configuration_store: IConfigurationStore,
    ) -> None:
        self._health_check_service = health_check_service
        self._configuration_store = configuration_store

    async def execute(
        self,
        service_name: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> HealthCheckResultDTO:
        service = self._configuration_store.config.find_service(service_name)
        if service is None:
            raise ServiceNotFoundError(service_name)

        result = await self._health_check_service.check_health(service, cancel_event)
        return HealthCheckResultDTO.from_domain(result)
