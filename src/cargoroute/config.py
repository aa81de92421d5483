"""Runtime configuration for cargoroute."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from cargoroute.exceptions import CargoRouteConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, kind: type[int] | type[float]) -> int | float:
    try:
        return kind(value)
    except ValueError as exc:
        raise CargoRouteConfigError(
            f"{env_key} must be a {kind.__name__}, got {value!r}",
            env_key=env_key,
        ) from exc


@dataclasses.dataclass(frozen=True)
class RouteConfig:
    """Stop registry configuration.

    Parameters
    ----------
    enforce_unique_names : bool
        Suffix colliding stop names with ``" (2)"``, ``" (3)"``...
        so every stop name stays usable as an item destination key.
    fallback_name_template : str
        Format string for the name given to a stop whose warehouse has
        no name. Receives ``order``.
    stop_id_prefix : str
        Prefix for generated stop ids.
    capacity_per_item : int
        Warehouse capacity estimate per expected item when stops are
        built from route descriptors.
    arrival_interval_hours : float
        Hours between consecutive priorities when estimating arrival
        times for stops built from route descriptors.
    """

    enforce_unique_names: bool = True
    fallback_name_template: str = "Stop {order}"
    stop_id_prefix: str = "stop"
    capacity_per_item: int = 100
    arrival_interval_hours: float = 1.0

    def fallback_name(self, order: int) -> str:
        return self.fallback_name_template.format(order=order)

    @classmethod
    def from_env(cls, **overrides: Any) -> RouteConfig:
        """Create configuration from ``CARGOROUTE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        CargoRouteConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "CARGOROUTE_FALLBACK_NAME_TEMPLATE": "fallback_name_template",
            "CARGOROUTE_STOP_ID_PREFIX": "stop_id_prefix",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = val

        capacity_env = env.get("CARGOROUTE_CAPACITY_PER_ITEM")
        if capacity_env is not None and "capacity_per_item" not in overrides:
            config_kwargs["capacity_per_item"] = _env_number("CARGOROUTE_CAPACITY_PER_ITEM", capacity_env, int)

        interval_env = env.get("CARGOROUTE_ARRIVAL_INTERVAL_HOURS")
        if interval_env is not None and "arrival_interval_hours" not in overrides:
            config_kwargs["arrival_interval_hours"] = _env_number(
                "CARGOROUTE_ARRIVAL_INTERVAL_HOURS",
                interval_env,
                float,
            )

        if "enforce_unique_names" not in overrides:
            config_kwargs["enforce_unique_names"] = _env_bool(env.get("CARGOROUTE_ENFORCE_UNIQUE_NAMES"), True)

        config_kwargs.update(overrides)

        template = config_kwargs.get("fallback_name_template", cls.fallback_name_template)
        if "{order}" not in template:
            raise CargoRouteConfigError(
                f"fallback_name_template must contain '{{order}}', got {template!r}",
                env_key="CARGOROUTE_FALLBACK_NAME_TEMPLATE",
            )

        return cls(**config_kwargs)
