"""Hover/selection bus shared by scene elements and UI panels."""

from cargoroute.selection.bus import SelectionBus, get_selection_bus
from cargoroute.selection.channel import SelectionChannel

__all__ = ["SelectionBus", "SelectionChannel", "get_selection_bus"]
