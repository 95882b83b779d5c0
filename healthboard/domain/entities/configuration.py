"""Dashboard configuration snapshot."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

from healthboard.domain.entities.service_endpoint import ServiceEndpoint

DEFAULT_TIMEOUT_SECONDS = 5
DEFAULT_REFRESH_INTERVAL_SECONDS = 30


@dataclass(frozen=True, slots=True)
class DashboardConfiguration:
    """Immutable snapshot of the monitored services and polling settings.

    Snapshots are never mutated; changes produce a new instance that the
    configuration holder swaps in.
    """

    services: Tuple[ServiceEndpoint, ...] = ()
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS
    environment_order: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        # Accept any iterable from callers but always store tuples.
        object.__setattr__(self, "services", tuple(self.services))
        if self.environment_order is not None:
            object.__setattr__(
                self, "environment_order", tuple(self.environment_order)
            )

    @property
    def environments(self) -> List[str]:
        """Environments in display order.

        The configured order comes first, followed by any environment used
        by a service but missing from that order, in first-seen order.
        """
        ordered: List[str] = []
        seen = set()

        for environment in (self.environment_order or ()) + tuple(
            service.environment for service in self.services
        ):
            key = environment.casefold()
            if key in seen:
                continue
            seen.add(key)
            ordered.append(environment)

        return ordered

    def with_services(
        self, services: Iterable[ServiceEndpoint]
    ) -> "DashboardConfiguration":
        return replace(self, services=tuple(services))

    def find_service(
        self, name: str, environment: Optional[str] = None
    ) -> Optional[ServiceEndpoint]:
        for service in self.services:
            if service.matches(name, environment):
                return service
        return None
