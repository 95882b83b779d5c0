"""Health endpoints exposing probe results."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from healthboard.application.dtos.health_dto import (
    HealthCheckResultDTO,
    HealthOverviewDTO,
)
from healthboard.application.use_cases.health_use_cases import (
    GetAllHealthUseCase,
    GetServiceHealthUseCase,
)
from healthboard.domain.entities.errors import ServiceNotFoundError
from healthboard.presentation.cancellation import cancel_on_disconnect
from healthboard.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["Health"])


@router.get("", response_model=HealthOverviewDTO, response_model_exclude_none=True)
@inject
async def get_all_health(
    request: Request,
    get_all_health_use_case: GetAllHealthUseCase = Depends(
        Provide["get_all_health_use_case"]
    ),
) -> HealthOverviewDTO:
    """
    Probe every configured service and return the aggregated results.

    Probes still running when the client disconnects are reported as
    cancelled.
    """
    try:
        async with cancel_on_disconnect(request) as cancel_event:
            overview = await get_all_health_use_case.execute(cancel_event)
        logger.debug("health.overview.success", results=len(overview.results))
        return overview
    except Exception as exc:
        logger.error("health.overview.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve health status",
        ) from exc


@router.get(
    "/{service_name}",
    response_model=HealthCheckResultDTO,
    response_model_exclude_none=True,
)
@inject
async def get_service_health(
    service_name: str,
    request: Request,
    get_service_health_use_case: GetServiceHealthUseCase = Depends(
        Provide["get_service_health_use_case"]
    ),
) -> HealthCheckResultDTO:
    """
    Probe the first configured service whose name matches ``service_name``.

    The name is compared case-insensitively across all environments.
    """
    try:
        async with cancel_on_disconnect(request) as cancel_event:
            return await get_service_health_use_case.execute(
                service_name, cancel_event
            )
    except ServiceNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    except Exception as exc:
        logger.error(
            "health.service.failure",
            service=service_name,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve service health",
        ) from exc
