"""Delivery stop models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import AliasChoices, Field, field_validator

from cargoroute.models._base import CargoRouteModel
from cargoroute.models.warehouse import Coordinates, Warehouse


class ReorderDirection(StrEnum):
    UP = "up"
    DOWN = "down"


class DestinationStatus(StrEnum):
    """How an item destination resolves against the current route."""

    COMPLETED = "completed"
    PENDING = "pending"
    INVALID = "invalid"


class Stop(CargoRouteModel):
    """An ordered waypoint in a delivery route.

    Parameters
    ----------
    id : str
        Opaque identifier, stable for the stop's lifetime.
    warehouse_id : int
        Identifier of the backing facility.
    warehouse : Warehouse
        Copy of the facility at the time the stop was created.
    order : int
        1-based position in the route.
    is_completed : bool
        Delivery done. Independent of ordering.
    name : str
        Destination key. Items record this value in ``destination``;
        it never changes when the route is reordered.
    estimated_arrival : datetime or None
        Planned arrival, when known.
    """

    id: str
    warehouse_id: int
    warehouse: Warehouse
    order: int
    is_completed: bool = False
    name: str
    estimated_arrival: datetime | None = None

    @property
    def label(self) -> str:
        """Positional label, e.g. ``"Stop 2"``. Cosmetic only."""
        return f"Stop {self.order}"


class RouteDescriptor(CargoRouteModel):
    """A planned route entry used to bulk-initialize the registry."""

    id: str
    name: str = ""
    address: str = ""
    coordinates: Coordinates = Field(default_factory=Coordinates)
    priority: int = Field(ge=1)
    estimated_items: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("estimated_items", "estimatedItems", "estimatedBoxes"),
    )

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        stop_id = value.strip()
        if not stop_id:
            raise ValueError("id must be non-empty")
        return stop_id


class RouteSummary(CargoRouteModel):
    total: int = 0
    completed: int = 0
    pending: int = 0
    next_stop: Stop | None = None

    @property
    def is_finished(self) -> bool:
        return self.total > 0 and self.pending == 0
