"""
Configuration Router - Presentation Layer

This module defines the FastAPI router for reading and editing the
in-memory dashboard configuration.
"""

from typing import NoReturn

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from healthboard.application.dtos.configuration_dto import (
    ConfigurationUpdatedDTO,
    DashboardConfigurationDTO,
    ServiceChangedDTO,
    ServiceEndpointDTO,
)
from healthboard.application.use_cases.configuration_use_cases import (
    AddServiceUseCase,
    DeleteServiceUseCase,
    GetConfigurationUseCase,
    UpdateConfigurationUseCase,
    UpdateServiceUseCase,
)
from healthboard.domain.entities.errors import (
    ConfigurationValidationError,
    ServiceAlreadyExistsError,
    ServiceNotFoundError,
)
from healthboard.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/config", tags=["Configuration"])


def _raise_http_error(exc: Exception, event: str, **context: str) -> NoReturn:
    if isinstance(exc, ConfigurationValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message
        ) from exc
    if isinstance(exc, ServiceNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    if isinstance(exc, ServiceAlreadyExistsError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=exc.message
        ) from exc

    logger.error(event, error=str(exc), exc_info=exc, **context)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    ) from exc


@router.get(
    "", response_model=DashboardConfigurationDTO, response_model_exclude_none=True
)
@inject
async def get_configuration(
    get_configuration_use_case: GetConfigurationUseCase = Depends(
        Provide["get_configuration_use_case"]
    ),
) -> DashboardConfigurationDTO:
    """Return the current dashboard configuration."""
    try:
        return await get_configuration_use_case.execute()
    except Exception as exc:
        _raise_http_error(exc, "configuration.get.failure")


@router.put(
    "", response_model=ConfigurationUpdatedDTO, response_model_exclude_none=True
)
@inject
async def update_configuration(
    configuration_dto: DashboardConfigurationDTO,
    update_configuration_use_case: UpdateConfigurationUseCase = Depends(
        Provide["update_configuration_use_case"]
    ),
) -> ConfigurationUpdatedDTO:
    """
    Replace the whole configuration in memory.

    The services list must not be empty and both ``timeoutSeconds`` and
    ``refreshIntervalSeconds`` must be positive.
    """
    try:
        return await update_configuration_use_case.execute(configuration_dto)
    except Exception as exc:
        _raise_http_error(exc, "configuration.update.failure")


@router.post(
    "/services",
    response_model=ServiceChangedDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_service(
    service_dto: ServiceEndpointDTO,
    response: Response,
    add_service_use_case: AddServiceUseCase = Depends(
        Provide["add_service_use_case"]
    ),
) -> ServiceChangedDTO:
    """Add a service; its name and environment must not already exist."""
    try:
        result = await add_service_use_case.execute(service_dto)
    except Exception as exc:
        _raise_http_error(exc, "configuration.service.add_failure")

    response.headers["Location"] = f"{router.prefix}/services/{service_dto.name}"
    return result


@router.put(
    "/services/{service_name}/{environment}",
    response_model=ServiceChangedDTO,
    response_model_exclude_none=True,
)
@inject
async def update_service(
    service_name: str,
    environment: str,
    service_dto: ServiceEndpointDTO,
    update_service_use_case: UpdateServiceUseCase = Depends(
        Provide["update_service_use_case"]
    ),
) -> ServiceChangedDTO:
    """Replace the service identified by ``service_name`` and ``environment``."""
    try:
        return await update_service_use_case.execute(
            service_name, environment, service_dto
        )
    except Exception as exc:
        _raise_http_error(
            exc,
            "configuration.service.update_failure",
            service=service_name,
            environment=environment,
        )


@router.delete(
    "/services/{service_name}/{environment}",
    response_model=ServiceChangedDTO,
    response_model_exclude_none=True,
)
@inject
async def delete_service(
    service_name: str,
    environment: str,
    delete_service_use_case: DeleteServiceUseCase = Depends(
        Provide["delete_service_use_case"]
    ),
) -> ServiceChangedDTO:
    """Remove the service identified by ``service_name`` and ``environment``."""
    try:
        return await delete_service_use_case.execute(service_name, environment)
    except Exception as exc:
        _raise_http_error(
            exc,
            "configuration.service.delete_failure",
            service=service_name,
            environment=environment,
        )
