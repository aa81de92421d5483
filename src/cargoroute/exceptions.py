"""Custom exception hierarchy for cargoroute.

Registry and selection bus operations do not raise for unknown ids or
empty bulk input; these exceptions cover configuration and setup problems.
"""

from __future__ import annotations


class CargoRouteError(Exception):
    """Base exception for all cargoroute errors."""


class CargoRouteConfigError(CargoRouteError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, *, env_key: str = "") -> None:
        self.env_key = env_key
        super().__init__(message)
