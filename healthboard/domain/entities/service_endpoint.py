"""Monitored service endpoint value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

COMPOSITE_KEY_SEPARATOR = "|"


@dataclass(frozen=True, slots=True)
class ServiceEndpoint:
    """A single monitored target.

    ``(name, environment)`` identifies an endpoint within a configuration
    snapshot and is compared case-insensitively.
    """

    name: str
    environment: str
    health_check_url: str
    enabled: bool = True
    timeout_seconds: Optional[int] = None
    description: Optional[str] = None

    @property
    def composite_key(self) -> str:
        return f"{self.name}{COMPOSITE_KEY_SEPARATOR}{self.environment}"

    def matches(self, name: str, environment: Optional[str] = None) -> bool:
        if self.name.casefold() != name.casefold():
            return False
        if environment is None:
            return True
        return self.environment.casefold() == environment.casefold()

    def effective_timeout(self, default_timeout: float) -> float:
        if self.timeout_seconds is not None:
            return float(self.timeout_seconds)
        return float(default_timeout)
