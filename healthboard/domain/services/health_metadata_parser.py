"""Domain service turning raw health response bodies into metadata.

Monitored services are written in different stacks and disagree on
property casing (``serviceName``, ``ServiceName``, ``SERVICENAME``) and on
how the status enum is encoded (``"Healthy"``, ``"healthy"``, ``0``). The
parser lowercases every key before lookup and tries an integer ordinal
before a member name when reading ``status``.
"""

import json
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Union

from healthboard.domain.entities.errors import (
    EmptyResponseBodyError,
    InvalidHealthMetadataError,
)
from healthboard.domain.entities.health import HealthMetadata, HealthStatus

_CLOCK_DURATION = re.compile(
    r"^(?P<sign>-)?(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{2})"
    r"(?::(?P<seconds>\d{2})(?:\.(?P<fraction>\d{1,7}))?)?$"
)
_TIMESTAMP_FRACTION = re.compile(r"(?<=\d{2}:\d{2}:\d{2})\.(\d+)")
_ISO_DURATION = re.compile(
    r"^(?P<sign>-)?P(?:(?P<weeks>\d+)W)?(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$"
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _normalize_keys(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return {str(key).lower(): value for key, value in payload.items()}


def _require_text(fields: Mapping[str, Any], key: str, label: str) -> str:
    value = fields.get(key)
    if not isinstance(value, str):
        raise InvalidHealthMetadataError(
            f"Health metadata must include a '{label}' string",
            {"field": label, "value": value},
        )
    return value


def _optional_text(fields: Mapping[str, Any], key: str, label: str) -> Optional[str]:
    value = fields.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidHealthMetadataError(
            f"Health metadata '{label}' must be a string",
            {"field": label, "value": value},
        )
    return value


def parse_health_status(value: Any) -> HealthStatus:
    """Resolve a status given as an ordinal or a case-insensitive name."""

    if value is None:
        return HealthStatus.HEALTHY

    if _is_number(value):
        if isinstance(value, float) and not value.is_integer():
            raise InvalidHealthMetadataError(
                f"Invalid health status: {value!r}", {"status": value}
            )
        ordinal = int(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            ordinal = int(text)
        except ValueError:
            try:
                return HealthStatus.from_name(text)
            except ValueError as exc:
                raise InvalidHealthMetadataError(
                    f"Invalid health status: {value!r}", {"status": value}
                ) from exc
    else:
        raise InvalidHealthMetadataError(
            f"Invalid health status: {value!r}", {"status": value}
        )

    try:
        return HealthStatus.from_ordinal(ordinal)
    except ValueError as exc:
        raise InvalidHealthMetadataError(
            f"Invalid health status: {value!r}", {"status": value}
        ) from exc


def _invalid_uptime(value: Any) -> InvalidHealthMetadataError:
    return InvalidHealthMetadataError(f"Invalid uptime: {value!r}", {"uptime": value})


def _build_uptime(value: Any, negative: bool, **parts: float) -> timedelta:
    try:
        uptime = timedelta(**parts)
        return -uptime if negative else uptime
    except (OverflowError, ValueError) as exc:
        raise _invalid_uptime(value) from exc


def parse_uptime(value: Any) -> Optional[timedelta]:
    """Parse ``d.hh:mm:ss``, ISO 8601 durations or plain seconds.

    Values outside the ``timedelta`` range and non-finite numbers are
    rejected like any other malformed uptime.
    """

    if value is None:
        return None
    if _is_number(value):
        if not math.isfinite(value):
            raise _invalid_uptime(value)
        return _build_uptime(value, False, seconds=value)
    if not isinstance(value, str):
        raise _invalid_uptime(value)

    text = value.strip()
    match = _CLOCK_DURATION.match(text)
    if match:
        fraction = match.group("fraction") or "0"
        return _build_uptime(
            value,
            bool(match.group("sign")),
            days=int(match.group("days") or 0),
            hours=int(match.group("hours")),
            minutes=int(match.group("minutes")),
            seconds=int(match.group("seconds") or 0),
            microseconds=int(fraction.ljust(7, "0")) / 10,
        )

    match = _ISO_DURATION.match(text)
    if match and text.lstrip("-") not in ("P", "PT"):
        return _build_uptime(
            value,
            bool(match.group("sign")),
            weeks=int(match.group("weeks") or 0),
            days=int(match.group("days") or 0),
            hours=int(match.group("hours") or 0),
            minutes=int(match.group("minutes") or 0),
            seconds=float(match.group("seconds") or 0),
        )

    raise _invalid_uptime(value)


def _normalize_fraction(match: "re.Match[str]") -> str:
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits.
    return f".{match.group(1)[:6].ljust(6, '0')}"


def parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidHealthMetadataError(
            f"Invalid timestamp: {value!r}", {"timestamp": value}
        )

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    text = _TIMESTAMP_FRACTION.sub(_normalize_fraction, text, count=1)
    try:
        timestamp = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidHealthMetadataError(
            f"Invalid timestamp: {value!r}", {"timestamp": value}
        ) from exc

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def _parse_additional_metadata(value: Any) -> Optional[Dict[str, str]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise InvalidHealthMetadataError(
            "Health metadata 'additionalMetadata' must be an object",
            {"additionalMetadata": value},
        )

    # Keys are reported as sent; only the values are coerced to text.
    return {
        str(key): item if isinstance(item, str) else json.dumps(item)
        for key, item in value.items()
    }


def parse_health_metadata(raw_body: Union[bytes, str]) -> HealthMetadata:
    """Parse a health endpoint response body.

    Raises:
        EmptyResponseBodyError: If the body is empty or whitespace only.
        InvalidHealthMetadataError: If the body is not a JSON object with
            the expected fields, or ``status`` is not a known value.
    """

    if isinstance(raw_body, bytes):
        try:
            text = raw_body.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidHealthMetadataError(
                "Response body is not valid UTF-8", {"error": str(exc)}
            ) from exc
    else:
        text = raw_body

    if not text or not text.strip():
        raise EmptyResponseBodyError()

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidHealthMetadataError(
            f"Response body is not valid JSON: {exc.msg}",
            {"line": exc.lineno, "column": exc.colno},
        ) from exc

    if not isinstance(payload, dict):
        raise InvalidHealthMetadataError(
            "Health metadata must be a JSON object",
            {"type": type(payload).__name__},
        )

    fields = _normalize_keys(payload)

    return HealthMetadata(
        service_name=_require_text(fields, "servicename", "serviceName"),
        version=_require_text(fields, "version", "version"),
        environment=_optional_text(fields, "environment", "environment"),
        status=parse_health_status(fields.get("status")),
        timestamp=parse_timestamp(fields.get("timestamp")),
        description=_optional_text(fields, "description", "description"),
        host_name=_optional_text(fields, "hostname", "hostName"),
        uptime=parse_uptime(fields.get("uptime")),
        additional_metadata=_parse_additional_metadata(
            fields.get("additionalmetadata")
        ),
    )
