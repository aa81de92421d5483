"""Cargo item records held by the external item collection."""

from __future__ import annotations

from pydantic import Field

from cargoroute.models._base import CargoRouteModel, Position


class Dimensions(CargoRouteModel):
    width: float = 0.0
    height: float = 0.0
    length: float = 0.0


class CargoItem(CargoRouteModel):
    """A placed cargo item.

    ``destination`` holds the name of the stop the item is assigned to, or
    an empty string when unassigned.
    """

    id: str
    name: str = ""
    destination: str = ""
    position: Position = Field(default_factory=Position)
    dimensions: Dimensions = Field(default_factory=Dimensions)
    weight: float = Field(default=0.0, ge=0.0)
    is_fragile: bool = False
    temperature_zone: str = "ambient"
    is_rotated: bool = False
