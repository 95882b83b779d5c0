from __future__ import annotations

import threading

import pytest

from healthboard.domain.entities.configuration import DashboardConfiguration
from healthboard.domain.entities.service_endpoint import ServiceEndpoint
from healthboard.infrastructure.configuration import ConfigurationHolder


def test_defaults_to_empty_configuration() -> None:
    holder = ConfigurationHolder()

    assert holder.config.services == ()
    assert holder.config.timeout_seconds == 5
    assert holder.config.refresh_interval_seconds == 30


def test_replace_swaps_snapshot_without_touching_old_one(sample_configuration) -> None:
    holder = ConfigurationHolder(sample_configuration)
    before = holder.config

    replacement = DashboardConfiguration(timeout_seconds=9)
    holder.replace(replacement)

    assert holder.config is replacement
    assert len(before.services) == 3


def test_replace_rejects_none() -> None:
    with pytest.raises(ValueError):
        ConfigurationHolder().replace(None)  # type: ignore[arg-type]


def test_update_keeps_snapshot_when_transform_fails(sample_configuration) -> None:
    holder = ConfigurationHolder(sample_configuration)

    def _fail(config: DashboardConfiguration) -> DashboardConfiguration:
        raise RuntimeError("rejected")

    with pytest.raises(RuntimeError):
        holder.update(_fail)

    assert holder.config is sample_configuration


def test_concurrent_updates_are_not_lost() -> None:
    holder = ConfigurationHolder()

    def _add(index: int) -> None:
        endpoint = ServiceEndpoint(f"svc{index}", "PROD", f"http://svc{index}/health")
        holder.update(lambda config: config.with_services([*config.services, endpoint]))

    threads = [threading.Thread(target=_add, args=(i,)) for i in range(50)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(holder.config.services) == 50
