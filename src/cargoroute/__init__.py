"""cargoroute - state layer for interactive 3D load planning."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cargoroute")
except PackageNotFoundError:
    __version__ = "0+local"
from cargoroute.config import RouteConfig
from cargoroute.exceptions import CargoRouteConfigError, CargoRouteError
from cargoroute.items import InMemoryItemCollection, ItemCollection
from cargoroute.models import (
    CargoItem,
    Coordinates,
    DestinationStatus,
    Dimensions,
    HoveredItem,
    Position,
    ReorderDirection,
    RouteDescriptor,
    RouteSummary,
    ScreenPosition,
    SelectedItem,
    Stop,
    Vector3,
    Warehouse,
)
from cargoroute.route.registry import StopRegistry
from cargoroute.route.sync import clear_destination, sync_destinations
from cargoroute.selection import SelectionBus, SelectionChannel, get_selection_bus

__all__ = [
    "__version__",
    "CargoItem",
    "CargoRouteConfigError",
    "CargoRouteError",
    "Coordinates",
    "DestinationStatus",
    "Dimensions",
    "HoveredItem",
    "InMemoryItemCollection",
    "ItemCollection",
    "Position",
    "ReorderDirection",
    "RouteConfig",
    "RouteDescriptor",
    "RouteSummary",
    "ScreenPosition",
    "SelectedItem",
    "SelectionBus",
    "SelectionChannel",
    "Stop",
    "StopRegistry",
    "Vector3",
    "Warehouse",
    "clear_destination",
    "get_selection_bus",
    "sync_destinations",
]
