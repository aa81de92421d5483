"""Warehouse facility models."""

from __future__ import annotations

from pydantic import Field

from cargoroute.models._base import CargoRouteModel


class Coordinates(CargoRouteModel):
    """Geographic position of a facility."""

    lat: float = 0.0
    lng: float = 0.0


class Warehouse(CargoRouteModel):
    """A facility backing a delivery stop.

    Parameters
    ----------
    id : int
        Facility identifier.
    name : str
        Display name. Becomes the stop name when the facility is added to
        the route; may be empty.
    address : str
        Postal address.
    coordinates : Coordinates
        Latitude/longitude.
    capacity : int
        Storage capacity in items.
    """

    id: int
    name: str = ""
    address: str = ""
    coordinates: Coordinates = Field(default_factory=Coordinates)
    capacity: int = Field(default=0, ge=0)
