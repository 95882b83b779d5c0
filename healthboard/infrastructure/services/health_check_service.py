"""Infrastructure implementation of the health check engine."""

from __future__ import annotations

import asyncio
from typing import Dict, Iterable, Optional, Tuple

from healthboard.domain.entities.errors import (
    EmptyResponseBodyError,
    HealthMetadataParseError,
)
from healthboard.domain.entities.health import HealthCheckResult
from healthboard.domain.entities.service_endpoint import ServiceEndpoint
from healthboard.domain.ports.configuration_store import IConfigurationStore
from healthboard.domain.ports.health_check import IHealthCheckService
from healthboard.domain.ports.health_http_client import (
    HealthConnectionError,
    HealthHttpResponse,
    HealthTimeoutError,
    HealthTransportError,
    IHealthHttpClient,
)
from healthboard.domain.services.health_metadata_parser import parse_health_metadata
from healthboard.shared import get_logger

logger = get_logger(__name__)

_CONTENT_PREVIEW_LENGTH = 100


class ProbeCancelledError(Exception):
    """The caller's cancel event fired before the probe completed."""


def _preview(content: bytes) -> str:
    text = content.decode("utf-8", errors="replace")
    if len(text) > _CONTENT_PREVIEW_LENGTH:
        return f"{text[:_CONTENT_PREVIEW_LENGTH]}..."
    return text


class HealthCheckService(IHealthCheckService):
    """Probe monitored services and aggregate their health."""

    def __init__(
        self,
        http_client: IHealthHttpClient,
        configuration_holder: IConfigurationStore,
    ) -> None:
        if http_client is None:
            raise ValueError("http_client is required")
        if configuration_holder is None:
            raise ValueError("configuration_holder is required")

        self._http_client = http_client
        self._configuration_holder = configuration_holder

    async def check_health(
        self,
        service_endpoint: ServiceEndpoint,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> HealthCheckResult:
        """Probe one endpoint using the current default timeout."""

        if service_endpoint is None:
            raise ValueError("service_endpoint is required")

        default_timeout = self._configuration_holder.config.timeout_seconds
        return await self._probe(service_endpoint, default_timeout, cancel_event)

    async def check_all_health(
        self, cancel_event: Optional[asyncio.Event] = None
    ) -> Dict[str, HealthCheckResult]:
        """Probe every endpoint of the current configuration snapshot."""

        config = self._configuration_holder.config
        return await self.check_endpoints(
            config.services, config.timeout_seconds, cancel_event
        )

    async def check_endpoints(
        self,
        endpoints: Iterable[ServiceEndpoint],
        default_timeout: float,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Dict[str, HealthCheckResult]:
        """
        Probe all ``endpoints`` concurrently and key results by
        ``name|environment``.

        Results are merged only after every probe has finished; on a key
        collision the endpoint that comes later in ``endpoints`` wins.
        """

        snapshot: Tuple[ServiceEndpoint, ...] = tuple(endpoints)
        if not snapshot:
            return {}

        outcomes = await asyncio.gather(
            *(
                self._probe(endpoint, default_timeout, cancel_event)
                for endpoint in snapshot
            ),
            return_exceptions=True,
        )

        results: Dict[str, HealthCheckResult] = {}
        for endpoint, outcome in zip(snapshot, outcomes):
            if isinstance(outcome, Exception):  # pragma: no cover
                outcome = HealthCheckResult.failure(endpoint, f"Error: {outcome}")
            elif isinstance(outcome, BaseException):
                raise outcome
            results[endpoint.composite_key] = outcome

        logger.debug(
            "health_check.aggregate.completed",
            endpoints=len(snapshot),
            results=len(results),
            failures=self._count_failures(results.values()),
        )
        return results

    @staticmethod
    def _count_failures(results: Iterable[HealthCheckResult]) -> int:
        return sum(1 for result in results if not result.is_success)

    async def _probe(
        self,
        service_endpoint: ServiceEndpoint,
        default_timeout: float,
        cancel_event: Optional[asyncio.Event],
    ) -> HealthCheckResult:
        if not service_endpoint.enabled:
            logger.debug(
                "health_check.disabled",
                service=service_endpoint.name,
                environment=service_endpoint.environment,
            )
            return HealthCheckResult.disabled(service_endpoint)

        timeout = service_endpoint.effective_timeout(default_timeout)
        url = service_endpoint.health_check_url

        try:
            logger.debug(
                "health_check.request",
                service=service_endpoint.name,
                url=url,
                timeout_seconds=timeout,
            )
            response = await self._fetch(url, timeout, cancel_event)
        except (asyncio.TimeoutError, HealthTimeoutError):
            logger.warning(
                "health_check.timeout",
                service=service_endpoint.name,
                timeout_seconds=timeout,
            )
            return HealthCheckResult.failure(service_endpoint, "Request timed out")
        except ProbeCancelledError:
            logger.info("health_check.cancelled", service=service_endpoint.name)
            return HealthCheckResult.failure(service_endpoint, "Request cancelled")
        except HealthConnectionError as exc:
            error_message = f"Connection failed: {exc}"
            logger.warning(
                "health_check.connection_failed",
                service=service_endpoint.name,
                url=url,
                error=error_message,
            )
            return HealthCheckResult.failure(service_endpoint, error_message)
        except HealthTransportError as exc:
            logger.error(
                "health_check.http_error",
                service=service_endpoint.name,
                url=url,
                error=str(exc),
                exc_info=exc,
            )
            return HealthCheckResult.failure(service_endpoint, f"HTTP Error: {exc}")
        except Exception as exc:
            logger.error(
                "health_check.unexpected_error",
                service=service_endpoint.name,
                error=str(exc),
                exc_info=exc,
            )
            return HealthCheckResult.failure(service_endpoint, f"Error: {exc}")

        try:
            return self._classify(service_endpoint, response)
        except Exception as exc:
            logger.error(
                "health_check.unexpected_error",
                service=service_endpoint.name,
                error=str(exc),
                exc_info=exc,
            )
            return HealthCheckResult.failure(
                service_endpoint, f"Error: {exc}", status_code=response.status_code
            )

    async def _fetch(
        self,
        url: str,
        timeout: float,
        cancel_event: Optional[asyncio.Event],
    ) -> HealthHttpResponse:
        """Run the request under its own deadline, racing the cancel event."""

        if cancel_event is None:
            return await asyncio.wait_for(self._http_client.get(url, timeout), timeout)

        if cancel_event.is_set():
            raise ProbeCancelledError()

        request_task = asyncio.ensure_future(
            asyncio.wait_for(self._http_client.get(url, timeout), timeout)
        )
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            cancel_task.cancel()
            if not request_task.done():
                request_task.cancel()

        if request_task in done:
            return request_task.result()
        raise ProbeCancelledError()

    def _classify(
        self, service_endpoint: ServiceEndpoint, response: HealthHttpResponse
    ) -> HealthCheckResult:
        status_code = response.status_code

        if not response.is_success:
            logger.warning(
                "health_check.unsuccessful_status",
                service=service_endpoint.name,
                status_code=status_code,
            )
            return HealthCheckResult.failure(
                service_endpoint, f"HTTP {status_code}", status_code=status_code
            )

        try:
            metadata = parse_health_metadata(response.content)
        except EmptyResponseBodyError:
            logger.warning("health_check.empty_body", service=service_endpoint.name)
            return HealthCheckResult.failure(
                service_endpoint, "Empty response body", status_code=status_code
            )
        except HealthMetadataParseError as exc:
            logger.warning(
                "health_check.invalid_body",
                service=service_endpoint.name,
                error=exc.message,
                content_preview=_preview(response.content),
            )
            return HealthCheckResult.failure(
                service_endpoint, "Invalid JSON response", status_code=status_code
            )

        logger.info(
            "health_check.succeeded",
            service=service_endpoint.name,
            version=metadata.version,
            status=metadata.status.value,
        )
        return HealthCheckResult.success(service_endpoint, metadata, status_code)
