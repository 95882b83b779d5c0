"""
Configuration Use Cases - Application Layer

Read and mutate the in-memory dashboard configuration. Every change
builds a new snapshot and swaps it into the configuration store; nothing
is written back to disk.
"""

from typing import List

from healthboard.application.dtos.configuration_dto import (
    ConfigurationUpdatedDTO,
    DashboardConfigurationDTO,
    ServiceChangedDTO,
    ServiceEndpointDTO,
)
from healthboard.domain.entities.configuration import DashboardConfiguration
from healthboard.domain.entities.errors import (
    ConfigurationValidationError,
    ServiceAlreadyExistsError,
    ServiceNotFoundError,
)
from healthboard.domain.entities.service_endpoint import ServiceEndpoint
from healthboard.domain.ports.configuration_store import IConfigurationStore
from healthboard.shared import get_logger

logger = get_logger(__name__)


def _validate_service(service: ServiceEndpointDTO) -> None:
    if not service.name or not service.name.strip():
        raise ConfigurationValidationError("Service name is required")
    if not service.environment or not service.environment.strip():
        raise ConfigurationValidationError("Environment is required")
    if not service.health_check_url or not service.health_check_url.strip():
        raise ConfigurationValidationError("Health check URL is required")
    if service.timeout_seconds is not None and service.timeout_seconds <= 0:
        raise ConfigurationValidationError(
            "Service TimeoutSeconds must be greater than 0",
            {"service": service.name, "timeout_seconds": service.timeout_seconds},
        )


def _without(
    services: List[ServiceEndpoint], service_name: str, environment: str
) -> List[ServiceEndpoint]:
    return [s for s in services if not s.matches(service_name, environment)]


class GetConfigurationUseCase:
    """Return the current configuration snapshot."""

    def __init__(self, configuration_store: IConfigurationStore) -> None:
        self._configuration_store = configuration_store

    async def execute(self) -> DashboardConfigurationDTO:
        config = self._configuration_store.config
        logger.info(
            "configuration.retrieved",
            services=len(config.services),
            refresh_interval_seconds=config.refresh_interval_seconds,
            timeout_seconds=config.timeout_seconds,
            environment_order=config.environment_order,
        )
        return DashboardConfigurationDTO.from_domain(config)


class UpdateConfigurationUseCase:
    """Replace the whole configuration after validating it."""

    def __init__(self, configuration_store: IConfigurationStore) -> None:
        self._configuration_store = configuration_store

    async def execute(
        self, configuration_dto: DashboardConfigurationDTO
    ) -> ConfigurationUpdatedDTO:
        if not configuration_dto.services:
            raise ConfigurationValidationError("Services list cannot be empty")
        if configuration_dto.timeout_seconds <= 0:
            raise ConfigurationValidationError("TimeoutSeconds must be greater than 0")
        if configuration_dto.refresh_interval_seconds <= 0:
            raise ConfigurationValidationError(
                "RefreshIntervalSeconds must be greater than 0"
            )
        for service in configuration_dto.services:
            _validate_service(service)

        updated = self._configuration_store.replace(configuration_dto.to_domain())

        logger.info(
            "configuration.updated",
            services=len(updated.services),
            environment_order=updated.environment_order,
        )
        return ConfigurationUpdatedDTO(
            message="Configuration updated successfully (in-memory only)",
            config=DashboardConfigurationDTO.from_domain(updated),
        )


class AddServiceUseCase:
    """Append a new service to the configuration."""

    def __init__(self, configuration_store: IConfigurationStore) -> None:
        self._configuration_store = configuration_store

    async def execute(self, service_dto: ServiceEndpointDTO) -> ServiceChangedDTO:
        _validate_service(service_dto)
        new_service = service_dto.to_domain()

        def _add(config: DashboardConfiguration) -> DashboardConfiguration:
            if config.find_service(new_service.name, new_service.environment):
                raise ServiceAlreadyExistsError(
                    new_service.name, new_service.environment
                )
            return config.with_services([*config.services, new_service])

        self._configuration_store.update(_add)

        logger.info(
            "configuration.service.added",
            service=new_service.name,
            environment=new_service.environment,
        )
        return ServiceChangedDTO(
            message="Service added successfully",
            service=ServiceEndpointDTO.from_domain(new_service),
        )


class UpdateServiceUseCase:
    """Replace an existing service identified by name and environment."""

    def __init__(self, configuration_store: IConfigurationStore) -> None:
        self._configuration_store = configuration_store

    async def execute(
        self,
        service_name: str,
        environment: str,
        service_dto: ServiceEndpointDTO,
    ) -> ServiceChangedDTO:
        _validate_service(service_dto)
        updated_service = service_dto.to_domain()

        def _update(config: DashboardConfiguration) -> DashboardConfiguration:
            if config.find_service(service_name, environment) is None:
                raise ServiceNotFoundError(service_name, environment)
            remaining = _without(list(config.services), service_name, environment)
            return config.with_services([*remaining, updated_service])

        self._configuration_store.update(_update)

        logger.info(
            "configuration.service.updated",
            service=service_name,
            environment=environment,
        )
        return ServiceChangedDTO(
            message="Service updated successfully",
            service=ServiceEndpointDTO.from_domain(updated_service),
        )


class DeleteServiceUseCase:
    """Remove a service identified by name and environment."""

    def __init__(self, configuration_store: IConfigurationStore) -> None:
        self._configuration_store = configuration_store

    async def execute(self, service_name: str, environment: str) -> ServiceChangedDTO:
        def _delete(config: DashboardConfiguration) -> DashboardConfiguration:
            if config.find_service(service_name, environment) is None:
                raise ServiceNotFoundError(service_name, environment)
            return config.with_services(
                _without(list(config.services), service_name, environment)
            )

        self._configuration_store.update(_delete)

        logger.info(
            "configuration.service.deleted",
            service=service_name,
            environment=environment,
        )
        return ServiceChangedDTO(message="Service deleted successfully")
