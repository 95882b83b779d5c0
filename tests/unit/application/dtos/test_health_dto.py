from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from healthboard.application.dtos.health_dto import (
    HealthCheckResultDTO,
    HealthOverviewDTO,
    format_timespan,
)
from healthboard.domain.entities.health import (
    HealthCheckResult,
    HealthMetadata,
    HealthStatus,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(minutes=5), "00:05:00"),
        (timedelta(days=1, hours=2, minutes=30), "1.02:30:00"),
        (timedelta(seconds=1, milliseconds=500), "00:00:01.5000000"),
        (-timedelta(seconds=10), "-00:00:10"),
    ],
)
def test_format_timespan(value: timedelta, expected: str) -> None:
    assert format_timespan(value) == expected


def test_success_result_serializes_camel_case(prod_endpoint) -> None:
    metadata = HealthMetadata(
        service_name="Payment API",
        version="1.2.3",
        status=HealthStatus.DEGRADED,
        host_name="pay-01",
        uptime=timedelta(hours=1),
        additional_metadata={"region": "eu"},
    )
    result = HealthCheckResult.success(prod_endpoint, metadata, 200)

    wire = HealthCheckResultDTO.from_domain(result).to_wire()

    assert wire["isSuccess"] is True
    assert wire["statusCode"] == 200
    assert wire["isDisabled"] is False
    assert wire["serviceEndpoint"]["healthCheckUrl"] == prod_endpoint.health_check_url
    assert wire["healthMetadata"] == {
        "serviceName": "Payment API",
        "version": "1.2.3",
        "status": "Degraded",
        "hostName": "pay-01",
        "uptime": "01:00:00",
        "additionalMetadata": {"region": "eu"},
    }
    assert "errorMessage" not in wire


def test_failure_result_omits_absent_fields(prod_endpoint) -> None:
    result = HealthCheckResult.failure(prod_endpoint, "Request timed out")

    wire = HealthCheckResultDTO.from_domain(result).to_wire()

    assert wire["errorMessage"] == "Request timed out"
    assert "healthMetadata" not in wire
    assert "statusCode" not in wire
    assert "timeoutSeconds" not in wire["serviceEndpoint"]


def test_overview_serializes_results_by_key(prod_endpoint) -> None:
    result = HealthCheckResult.failure(prod_endpoint, "HTTP 500", status_code=500)
    overview = HealthOverviewDTO(
        environments=["PROD"],
        services=[],
        results={prod_endpoint.composite_key: HealthCheckResultDTO.from_domain(result)},
        refresh_interval_seconds=30,
        timestamp=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )

    wire = overview.to_wire()

    assert wire["refreshIntervalSeconds"] == 30
    assert wire["results"]["Payment API|PROD"]["statusCode"] == 500
    assert wire["environments"] == ["PROD"]
