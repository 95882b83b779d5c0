"""Domain abstraction for the current dashboard configuration."""

from __future__ import annotations

from typing import Callable, Protocol

from healthboard.domain.entities.configuration import DashboardConfiguration


class IConfigurationStore(Protocol):
    """Owner of the current configuration snapshot."""

    @property
    def config(self) -> DashboardConfiguration:
        """Current snapshot; never partially updated."""
        ...

    def replace(self, config: DashboardConfiguration) -> DashboardConfiguration:
        """Swap in a complete new snapshot."""
        ...

    def update(
        self,
        transform: Callable[[DashboardConfiguration], DashboardConfiguration],
    ) -> DashboardConfiguration:
        """Atomically derive and swap in a new snapshot."""
        ...
