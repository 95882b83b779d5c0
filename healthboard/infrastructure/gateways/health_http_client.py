"""httpx-backed transport for health probes - Infrastructure layer."""

from __future__ import annotations

from typing import Optional

import httpx

from healthboard.domain.ports.health_http_client import (
    HealthConnectionError,
    HealthHttpResponse,
    HealthTimeoutError,
    HealthTransportError,
    IHealthHttpClient,
)
from healthboard.shared import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "Healthboard/1.0"


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class HttpxHealthHttpClient(IHealthHttpClient):
    """Performs health probe GET requests over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the health HTTP client.

        Args:
            user_agent: Value of the ``User-Agent`` header sent with probes
            client: Optional preconfigured client; it is not closed by
                ``aclose`` when supplied by the caller
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        )

    async def get(self, url: str, timeout: float) -> HealthHttpResponse:
        try:
            response = await self._client.get(url, timeout=httpx.Timeout(timeout))
        except httpx.TimeoutException as exc:
            raise HealthTimeoutError(_describe(exc)) from exc
        except httpx.ConnectError as exc:
            raise HealthConnectionError(_describe(exc)) from exc
        except httpx.RequestError as exc:
            raise HealthTransportError(_describe(exc)) from exc

        logger.debug(
            "health_http_client.response",
            url=url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return HealthHttpResponse(
            status_code=response.status_code, content=response.content
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
