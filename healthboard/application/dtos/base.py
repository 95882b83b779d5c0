"""Shared pydantic base for the lowerCamelCase wire format."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def _casing_key(name: str) -> str:
    return name.replace("_", "").lower()


class CamelModel(BaseModel):
    """Serializes with lowerCamelCase aliases and accepts any key casing.

    Incoming keys are matched case-insensitively (``healthCheckUrl``,
    ``HealthCheckUrl``, ``health_check_url``) before field validation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize_key_casing(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        aliases = {
            _casing_key(name): field.alias or name
            for name, field in cls.model_fields.items()
        }
        normalized: Dict[Any, Any] = {}
        for key, value in data.items():
            target = aliases.get(_casing_key(key), key) if isinstance(key, str) else key
            normalized[target] = value
        return normalized

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict using aliases and omitting ``None`` values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
