"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from healthboard.application.use_cases.configuration_use_cases import (
    AddServiceUseCase,
    DeleteServiceUseCase,
    GetConfigurationUseCase,
    UpdateConfigurationUseCase,
    UpdateServiceUseCase,
)
from healthboard.application.use_cases.health_use_cases import (
    GetAllHealthUseCase,
    GetServiceHealthUseCase,
)
from healthboard.infrastructure.configuration import (
    ConfigurationHolder,
    load_dashboard_configuration,
)
from healthboard.infrastructure.gateways import HttpxHealthHttpClient
from healthboard.infrastructure.services import HealthCheckService
from healthboard.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    configuration_holder = providers.Singleton(
        ConfigurationHolder,
        config=providers.Callable(
            load_dashboard_configuration,
            config.dashboard.settings_file,
            timeout_seconds=config.dashboard.timeout_seconds,
            refresh_interval_seconds=config.dashboard.refresh_interval_seconds,
        ),
    )

    health_http_client = providers.Singleton(
        HttpxHealthHttpClient,
        user_agent=config.dashboard.user_agent,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        http_client=health_http_client,
        configuration_holder=configuration_holder,
    )

    # Application (use cases)
    get_all_health_use_case = providers.Factory(
        GetAllHealthUseCase,
        health_check_service=health_check_service,
        configuration_store=configuration_holder,
    )

    get_service_health_use_case = providers.Factory(
        GetServiceHealthUseCase,
        health_check_service=health_check_service,
        configuration_store=configuration_holder,
    )

    get_configuration_use_case = providers.Factory(
        GetConfigurationUseCase,
        configuration_store=configuration_holder,
    )

    update_configuration_use_case = providers.Factory(
        UpdateConfigurationUseCase,
        configuration_store=configuration_holder,
    )

    add_service_use_case = providers.Factory(
        AddServiceUseCase,
        configuration_store=configuration_holder,
    )

    update_service_use_case = providers.Factory(
        UpdateServiceUseCase,
        configuration_store=configuration_holder,
    )

    delete_service_use_case = providers.Factory(
        DeleteServiceUseCase,
        configuration_store=configuration_holder,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Loads the dashboard configuration eagerly so that a broken settings
    file fails at startup, and closes the shared HTTP client on shutdown.
    """
    container = get_container()

    configuration_holder = container.configuration_holder()
    health_http_client = container.health_http_client()

    try:
        logger.info(
            "container.resources.initialized",
            services=len(configuration_holder.config.services),
        )
        yield container

    finally:
        logger.info("container.http_client.close")
        await health_http_client.aclose()

        logger.info("container.resources.shutdown")
