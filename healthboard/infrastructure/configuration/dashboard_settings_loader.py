"""Build the initial dashboard configuration from a JSON settings file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Set

from pydantic import ValidationError

from healthboard.application.dtos.configuration_dto import DashboardConfigurationDTO
from healthboard.domain.entities.configuration import (
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    DashboardConfiguration,
)
from healthboard.domain.entities.errors import ConfigurationValidationError
from healthboard.shared import get_logger

logger = get_logger(__name__)

# The settings file may wrap the configuration in a "Dashboard" section.
_SECTION_KEY = "dashboard"


def _unwrap_section(payload: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in payload.items():
        if key.lower() == _SECTION_KEY and isinstance(value, dict):
            return value
    return payload


def _warn_on_duplicates(config: DashboardConfiguration) -> None:
    seen: Set[str] = set()
    for service in config.services:
        key = service.composite_key.casefold()
        if key in seen:
            logger.warning(
                "dashboard_settings.duplicate_service",
                service=service.name,
                environment=service.environment,
            )
        seen.add(key)


def load_dashboard_configuration(
    settings_file: Optional[str],
    *,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS,
) -> DashboardConfiguration:
    """
    Load the dashboard configuration.

    Values missing from the file fall back to ``timeout_seconds`` and
    ``refresh_interval_seconds``. A missing file yields a configuration
    without services.

    Raises:
        ConfigurationValidationError: If the file exists but is not a valid
            dashboard configuration.
    """

    defaults: Dict[str, Any] = {
        "timeoutSeconds": timeout_seconds,
        "refreshIntervalSeconds": refresh_interval_seconds,
    }

    if not settings_file:
        logger.info("dashboard_settings.file_not_configured")
        return DashboardConfigurationDTO.model_validate(defaults).to_domain()

    path = Path(settings_file)
    if not path.is_file():
        logger.warning("dashboard_settings.file_missing", path=str(path))
        return DashboardConfigurationDTO.model_validate(defaults).to_domain()

    try:
        payload = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationValidationError(
            f"Unable to read dashboard settings file: {exc}", {"path": str(path)}
        ) from exc

    if not isinstance(payload, dict):
        raise ConfigurationValidationError(
            "Dashboard settings file must contain a JSON object",
            {"path": str(path)},
        )

    try:
        dto = DashboardConfigurationDTO.model_validate(
            {**defaults, **_unwrap_section(payload)}
        )
    except ValidationError as exc:
        raise ConfigurationValidationError(
            "Dashboard settings file is invalid",
            {"path": str(path), "errors": exc.errors(include_url=False)},
        ) from exc

    config = dto.to_domain()
    _warn_on_duplicates(config)

    logger.info(
        "dashboard_settings.loaded",
        path=str(path),
        services=len(config.services),
        timeout_seconds=config.timeout_seconds,
        refresh_interval_seconds=config.refresh_interval_seconds,
    )
    return config
