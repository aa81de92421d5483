from __future__ import annotations

import pytest

from cargoroute.config import RouteConfig
from cargoroute.exceptions import CargoRouteConfigError, CargoRouteError


def test_defaults() -> None:
    config = RouteConfig()

    assert config.enforce_unique_names is True
    assert config.fallback_name(3) == "Stop 3"
    assert config.capacity_per_item == 100


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGOROUTE_ENFORCE_UNIQUE_NAMES", "off")
    monkeypatch.setenv("CARGOROUTE_CAPACITY_PER_ITEM", "50")
    monkeypatch.setenv("CARGOROUTE_ARRIVAL_INTERVAL_HOURS", "0.5")
    monkeypatch.setenv("CARGOROUTE_FALLBACK_NAME_TEMPLATE", "Drop {order}")

    config = RouteConfig.from_env()

    assert config.enforce_unique_names is False
    assert config.capacity_per_item == 50
    assert config.arrival_interval_hours == 0.5
    assert config.fallback_name(2) == "Drop 2"


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGOROUTE_CAPACITY_PER_ITEM", "50")
    monkeypatch.setenv("CARGOROUTE_ENFORCE_UNIQUE_NAMES", "false")

    config = RouteConfig.from_env(capacity_per_item=7, enforce_unique_names=True)

    assert config.capacity_per_item == 7
    assert config.enforce_unique_names is True


def test_from_env_ignores_unparseable_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGOROUTE_ENFORCE_UNIQUE_NAMES", "maybe")

    assert RouteConfig.from_env().enforce_unique_names is True


def test_from_env_rejects_bad_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGOROUTE_CAPACITY_PER_ITEM", "lots")

    with pytest.raises(CargoRouteConfigError) as excinfo:
        RouteConfig.from_env()

    assert excinfo.value.env_key == "CARGOROUTE_CAPACITY_PER_ITEM"
    assert isinstance(excinfo.value, CargoRouteError)


def test_from_env_rejects_template_without_order() -> None:
    with pytest.raises(CargoRouteConfigError):
        RouteConfig.from_env(fallback_name_template="Stop")
