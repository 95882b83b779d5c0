from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Union

import pytest

from healthboard.domain.entities.configuration import DashboardConfiguration
from healthboard.domain.entities.service_endpoint import ServiceEndpoint
from healthboard.domain.ports.health_http_client import HealthHttpResponse
from healthboard.infrastructure.configuration import ConfigurationHolder

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def health_body(**overrides: Any) -> bytes:
    body: Dict[str, Any] = {
        "serviceName": "Payment API",
        "version": "1.2.3",
        "environment": "PROD",
        "status": "Healthy",
    }
    body.update(overrides)
    return json.dumps(body).encode("utf-8")


Reply = Union[HealthHttpResponse, BaseException, Callable[[], Any]]


class StubHealthHttpClient:
    """Transport double answering per URL, recording every call."""

    def __init__(self, replies: Dict[str, Reply] | None = None, delay: float = 0.0):
        self.replies: Dict[str, Reply] = dict(replies or {})
        self.delay = delay
        self.calls: List[Tuple[str, float]] = []
        self.closed = False

    async def get(self, url: str, timeout: float) -> HealthHttpResponse:
        self.calls.append((url, timeout))
        if self.delay:
            await asyncio.sleep(self.delay)

        reply = self.replies.get(url, HealthHttpResponse(200, health_body()))
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return await reply()
        return reply

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture()
def prod_endpoint() -> ServiceEndpoint:
    return ServiceEndpoint(
        name="Payment API",
        environment="PROD",
        health_check_url="http://payments.prod/healthz",
    )


@pytest.fixture()
def dev_endpoint() -> ServiceEndpoint:
    return ServiceEndpoint(
        name="Payment API",
        environment="DEV",
        health_check_url="http://payments.dev/healthz",
    )


@pytest.fixture()
def disabled_endpoint() -> ServiceEndpoint:
    return ServiceEndpoint(
        name="Legacy Billing",
        environment="QA",
        health_check_url="http://billing.qa/health",
        enabled=False,
    )


@pytest.fixture()
def sample_configuration(
    prod_endpoint: ServiceEndpoint,
    dev_endpoint: ServiceEndpoint,
    disabled_endpoint: ServiceEndpoint,
) -> DashboardConfiguration:
    return DashboardConfiguration(
        services=(prod_endpoint, dev_endpoint, disabled_endpoint),
        timeout_seconds=5,
        refresh_interval_seconds=30,
        environment_order=("DEV", "QA", "PROD"),
    )


@pytest.fixture()
def configuration_holder(
    sample_configuration: DashboardConfiguration,
) -> ConfigurationHolder:
    return ConfigurationHolder(sample_configuration)


@pytest.fixture()
def stub_http_client() -> StubHealthHttpClient:
    return StubHealthHttpClient()
