"""Seed stops used when the route is empty."""

from __future__ import annotations

from cargoroute.models.warehouse import Coordinates, Warehouse

DEFAULT_WAREHOUSES: tuple[Warehouse, ...] = (
    Warehouse(
        id=1,
        name="Stop 1: Hitech City",
        address="Mindspace IT Park, Hitech City, Hyderabad, Telangana 500081",
        coordinates=Coordinates(lat=17.4455, lng=78.3751),
        capacity=10000,
    ),
    Warehouse(
        id=2,
        name="Stop 2: Banjara Hills",
        address="GVK One Mall, Rd Number 1, Banjara Hills, Hyderabad, Telangana 500034",
        coordinates=Coordinates(lat=17.4126, lng=78.4390),
        capacity=5000,
    ),
    Warehouse(
        id=3,
        name="Stop 3: Uppal",
        address="Uppal Metro Station, Uppal, Hyderabad, Telangana 500039",
        coordinates=Coordinates(lat=17.4018, lng=78.5602),
        capacity=5000,
    ),
    Warehouse(
        id=4,
        name="Stop 4: Secunderabad",
        address="Secunderabad Railway Station, Hyderabad, Telangana 500003",
        coordinates=Coordinates(lat=17.4399, lng=78.4983),
        capacity=5000,
    ),
)
