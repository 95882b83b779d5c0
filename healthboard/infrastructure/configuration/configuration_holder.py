"""Copy-on-write owner of the current dashboard configuration."""

from __future__ import annotations

import threading
from typing import Callable

from healthboard.domain.entities.configuration import DashboardConfiguration
from healthboard.domain.ports.configuration_store import IConfigurationStore
from healthboard.shared import get_logger

logger = get_logger(__name__)


class ConfigurationHolder(IConfigurationStore):
    """Holds the current immutable ``DashboardConfiguration`` snapshot.

    Readers take the reference without locking and always observe a
    complete snapshot. Writers build a new snapshot and swap the
    reference; ``update`` serializes read-modify-write cycles so that
    concurrent writers never lose each other's changes.
    """

    def __init__(self, config: DashboardConfiguration | None = None) -> None:
        self._config = config or DashboardConfiguration()
        self._write_lock = threading.Lock()

    @property
    def config(self) -> DashboardConfiguration:
        return self._config

    def replace(self, config: DashboardConfiguration) -> DashboardConfiguration:
        if config is None:
            raise ValueError("config is required")
        with self._write_lock:
            self._config = config
        logger.info(
            "configuration.replaced",
            services=len(config.services),
            timeout_seconds=config.timeout_seconds,
            refresh_interval_seconds=config.refresh_interval_seconds,
        )
        return config

    def update(
        self,
        transform: Callable[[DashboardConfiguration], DashboardConfiguration],
    ) -> DashboardConfiguration:
        """Apply ``transform`` to the current snapshot and swap in the result.

        Exceptions raised by ``transform`` leave the current snapshot intact.
        """
        with self._write_lock:
            updated = transform(self._config)
            self._config = updated
        logger.debug("configuration.updated", services=len(updated.services))
        return updated
