from __future__ import annotations

import asyncio
import time

import pytest

from healthboard.domain.entities.configuration import DashboardConfiguration
from healthboard.domain.entities.health import HealthStatus
from healthboard.domain.entities.service_endpoint import ServiceEndpoint
from healthboard.domain.ports.health_http_client import (
    HealthConnectionError,
    HealthHttpResponse,
    HealthTimeoutError,
    HealthTransportError,
)
from healthboard.infrastructure.configuration import ConfigurationHolder
from healthboard.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from tests.conftest import StubHealthHttpClient, health_body


def _make_service(
    client: StubHealthHttpClient, holder: ConfigurationHolder | None = None
) -> HealthCheckService:
    return HealthCheckService(
        http_client=client,
        configuration_holder=holder or ConfigurationHolder(),
    )


def _endpoint(name: str, environment: str = "PROD", **kwargs) -> ServiceEndpoint:
    return ServiceEndpoint(
        name=name,
        environment=environment,
        health_check_url=f"http://{name}.{environment}/health",
        **kwargs,
    )


def test_constructor_requires_collaborators() -> None:
    with pytest.raises(ValueError):
        HealthCheckService(http_client=None, configuration_holder=ConfigurationHolder())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        HealthCheckService(http_client=StubHealthHttpClient(), configuration_holder=None)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_check_health_requires_endpoint() -> None:
    service = _make_service(StubHealthHttpClient())
    with pytest.raises(ValueError):
        await service.check_health(None)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_successful_probe_returns_metadata(prod_endpoint) -> None:
    client = StubHealthHttpClient(
        {
            prod_endpoint.health_check_url: HealthHttpResponse(
                200, health_body(status=1, uptime="00:10:00")
            )
        }
    )
    service = _make_service(client)

    result = await service.check_health(prod_endpoint)

    assert result.is_success is True
    assert result.status_code == 200
    assert result.error_message is None
    assert result.health_metadata.service_name == "Payment API"
    assert result.health_metadata.status is HealthStatus.DEGRADED


@pytest.mark.asyncio
async def test_disabled_endpoint_never_calls_transport(disabled_endpoint) -> None:
    client = StubHealthHttpClient()
    service = _make_service(client)

    result = await service.check_health(disabled_endpoint)

    assert client.calls == []
    assert result.is_disabled is True
    assert result.is_success is False
    assert result.error_message == "Service is disabled"


@pytest.mark.asyncio
async def test_unsuccessful_status_code(prod_endpoint) -> None:
    client = StubHealthHttpClient(
        {prod_endpoint.health_check_url: HealthHttpResponse(503, b"down")}
    )

    result = await _make_service(client).check_health(prod_endpoint)

    assert result.is_success is False
    assert result.error_message == "HTTP 503"
    assert result.status_code == 503
    assert result.health_metadata is None


@pytest.mark.asyncio
async def test_empty_body_keeps_status_code(prod_endpoint) -> None:
    client = StubHealthHttpClient(
        {prod_endpoint.health_check_url: HealthHttpResponse(200, b"  ")}
    )

    result = await _make_service(client).check_health(prod_endpoint)

    assert result.is_success is False
    assert result.error_message == "Empty response body"
    assert result.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [
        b"<html>maintenance</html>",
        b'{"serviceName": "svc", "version": "1.0", "status": "bogus"}',
        b'{"serviceName": "svc", "version": "1.0", "status": 99}',
        b'{"version": "1.0"}',
        b'{"serviceName": "svc", "version": "1.0", "uptime": NaN}',
        b'{"serviceName": "svc", "version": "1.0", "uptime": 1e20}',
    ],
)
async def test_invalid_body_reports_invalid_json(prod_endpoint, content) -> None:
    client = StubHealthHttpClient(
        {prod_endpoint.health_check_url: HealthHttpResponse(200, content)}
    )

    result = await _make_service(client).check_health(prod_endpoint)

    assert result.is_success is False
    assert result.error_message == "Invalid JSON response"
    assert result.status_code == 200


@pytest.mark.asyncio
async def test_slow_service_times_out() -> None:
    endpoint = _endpoint("slow")
    client = StubHealthHttpClient(delay=1.0)
    service = _make_service(client)

    started = time.perf_counter()
    results = await service.check_endpoints([endpoint], default_timeout=0.05)
    elapsed = time.perf_counter() - started

    result = results[endpoint.composite_key]
    assert result.is_success is False
    assert result.error_message == "Request timed out"
    assert result.status_code is None
    assert elapsed < 0.9


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, expected",
    [
        (HealthTimeoutError("read timeout"), "Request timed out"),
        (
            HealthConnectionError("connection refused"),
            "Connection failed: connection refused",
        ),
        (HealthTransportError("protocol error"), "HTTP Error: protocol error"),
        (RuntimeError("boom"), "Error: boom"),
    ],
)
async def test_transport_failures_become_results(prod_endpoint, error, expected) -> None:
    client = StubHealthHttpClient({prod_endpoint.health_check_url: error})

    result = await _make_service(client).check_health(prod_endpoint)

    assert result.is_success is False
    assert result.error_message == expected
    assert result.status_code is None


@pytest.mark.asyncio
async def test_endpoint_timeout_overrides_default() -> None:
    overridden = _endpoint("orders", timeout_seconds=10)
    defaulted = _endpoint("billing")
    client = StubHealthHttpClient()
    service = _make_service(client)

    await service.check_endpoints([overridden, defaulted], default_timeout=5)

    timeouts = dict(client.calls)
    assert timeouts[overridden.health_check_url] == 10
    assert timeouts[defaulted.health_check_url] == 5


@pytest.mark.asyncio
async def test_check_health_uses_configured_default_timeout() -> None:
    endpoint = _endpoint("orders")
    holder = ConfigurationHolder(
        DashboardConfiguration(services=(endpoint,), timeout_seconds=7)
    )
    client = StubHealthHttpClient()

    await _make_service(client, holder).check_health(endpoint)

    assert client.calls == [(endpoint.health_check_url, 7)]


@pytest.mark.asyncio
async def test_probes_run_concurrently() -> None:
    endpoints = [_endpoint(f"svc{i}") for i in range(5)]
    client = StubHealthHttpClient(delay=0.2)
    service = _make_service(client)

    started = time.perf_counter()
    results = await service.check_endpoints(endpoints, default_timeout=5)
    elapsed = time.perf_counter() - started

    assert len(results) == 5
    assert all(result.is_success for result in results.values())
    assert elapsed < 0.8


@pytest.mark.asyncio
async def test_no_endpoints_returns_empty_mapping() -> None:
    client = StubHealthHttpClient()

    assert await _make_service(client).check_all_health() == {}
    assert client.calls == []


@pytest.mark.asyncio
async def test_check_all_health_keys_results_by_composite_key(
    configuration_holder, prod_endpoint, dev_endpoint, disabled_endpoint
) -> None:
    client = StubHealthHttpClient(
        {dev_endpoint.health_check_url: HealthHttpResponse(500)}
    )
    service = _make_service(client, configuration_holder)

    results = await service.check_all_health()

    assert set(results) == {
        "Payment API|PROD",
        "Payment API|DEV",
        "Legacy Billing|QA",
    }
    assert results["Payment API|PROD"].is_success is True
    assert results["Payment API|DEV"].error_message == "HTTP 500"
    assert results["Legacy Billing|QA"].is_disabled is True
    assert len(client.calls) == 2


@pytest.mark.asyncio
async def test_one_failure_does_not_affect_others() -> None:
    healthy = _endpoint("healthy")
    broken = _endpoint("broken")
    client = StubHealthHttpClient({broken.health_check_url: RuntimeError("boom")})

    results = await _make_service(client).check_endpoints(
        [healthy, broken], default_timeout=5
    )

    assert results[healthy.composite_key].is_success is True
    assert results[broken.composite_key].error_message == "Error: boom"


@pytest.mark.asyncio
async def test_duplicate_composite_key_keeps_last_endpoint() -> None:
    first = ServiceEndpoint("orders", "PROD", "http://first/health")
    second = ServiceEndpoint("orders", "PROD", "http://second/health")
    client = StubHealthHttpClient({first.health_check_url: HealthHttpResponse(500)})

    results = await _make_service(client).check_endpoints(
        [first, second], default_timeout=5
    )

    assert len(results) == 1
    result = results["orders|PROD"]
    assert result.service_endpoint is second
    assert result.is_success is True


@pytest.mark.asyncio
async def test_cancel_event_already_set_skips_transport(prod_endpoint) -> None:
    client = StubHealthHttpClient()
    event = asyncio.Event()
    event.set()

    result = await _make_service(client).check_health(prod_endpoint, event)

    assert result.is_success is False
    assert result.error_message == "Request cancelled"
    assert client.calls == []


@pytest.mark.asyncio
async def test_cancel_event_interrupts_in_flight_probes() -> None:
    endpoints = [_endpoint("a"), _endpoint("b")]
    client = StubHealthHttpClient(delay=5.0)
    service = _make_service(client)
    event = asyncio.Event()

    asyncio.get_running_loop().call_later(0.05, event.set)
    started = time.perf_counter()
    results = await service.check_endpoints(endpoints, 10, cancel_event=event)
    elapsed = time.perf_counter() - started

    assert elapsed < 1.0
    assert {r.error_message for r in results.values()} == {"Request cancelled"}


@pytest.mark.asyncio
async def test_cancel_event_unused_when_probe_completes(prod_endpoint) -> None:
    client = StubHealthHttpClient()
    event = asyncio.Event()

    result = await _make_service(client).check_health(prod_endpoint, event)

    assert result.is_success is True
    assert not event.is_set()
