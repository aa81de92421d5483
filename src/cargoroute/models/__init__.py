"""Data models for stops, items and selection snapshots."""

from cargoroute.models._base import CargoRouteModel, Position, SnapshotModel, Vector3
from cargoroute.models.item import CargoItem, Dimensions
from cargoroute.models.selection import HoveredItem, ScreenPosition, SelectedItem, rotation_for
from cargoroute.models.stop import DestinationStatus, ReorderDirection, RouteDescriptor, RouteSummary, Stop
from cargoroute.models.warehouse import Coordinates, Warehouse

__all__ = [
    "CargoItem",
    "CargoRouteModel",
    "Coordinates",
    "DestinationStatus",
    "Dimensions",
    "Position",
    "HoveredItem",
    "ReorderDirection",
    "RouteDescriptor",
    "RouteSummary",
    "ScreenPosition",
    "SelectedItem",
    "SnapshotModel",
    "Stop",
    "Vector3",
    "Warehouse",
    "rotation_for",
]
