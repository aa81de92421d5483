"""Process-wide hover/selection bus.

Scene elements and side panels exchange pointer-interaction state through
this bus instead of a shared reactive store, so a hover on one mesh does not
re-evaluate every panel.

There are two write paths:

* **Broadcast** (``set_hovered``, ``set_selected``, ``deselect``,
  ``simulation_started``): replace the slot, then notify every subscriber.
  Every discrete transition goes through here.
* **Direct mutation** (``drag_selected``, ``set_selected_rotation``):
  edit the current selection snapshot in place and commit the change to the
  item collection only. Subscribers are *not* notified, so during a drag the
  snapshot they last received may show a stale position; anything that needs
  the live value reads :attr:`SelectionBus.selected`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cargoroute.items import ItemCollection
from cargoroute.models._base import Vector3
from cargoroute.models.item import CargoItem
from cargoroute.models.selection import HoveredItem, ScreenPosition, SelectedItem, rotation_for
from cargoroute.selection.channel import SelectionChannel

_logger = logging.getLogger(__name__)

HoverCallback = Callable[[HoveredItem | None], None]
SelectCallback = Callable[[SelectedItem | None], None]


class SelectionBus:
    """Hover and selection slots with their subscriber registries."""

    def __init__(self) -> None:
        self._hover: SelectionChannel[HoveredItem] = SelectionChannel("hover")
        self._select: SelectionChannel[SelectedItem] = SelectionChannel("select")
        self._focused_item_id: str | None = None

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe_hover(self, callback: HoverCallback) -> Callable[[], None]:
        return self._hover.subscribe(callback)

    def unsubscribe_hover(self, callback: HoverCallback) -> None:
        self._hover.unsubscribe(callback)

    def subscribe_select(self, callback: SelectCallback) -> Callable[[], None]:
        return self._select.subscribe(callback)

    def unsubscribe_select(self, callback: SelectCallback) -> None:
        self._select.unsubscribe(callback)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    @property
    def hovered(self) -> HoveredItem | None:
        return self._hover.current

    @property
    def selected(self) -> SelectedItem | None:
        return self._select.current

    @property
    def focused_item_id(self) -> str | None:
        return self._focused_item_id

    def set_focused_item_id(self, item_id: str | None) -> None:
        self._focused_item_id = item_id

    # ------------------------------------------------------------------
    # Broadcast path
    # ------------------------------------------------------------------

    def set_hovered(self, snapshot: HoveredItem | None) -> None:
        self._hover.set(snapshot)

    def set_selected(self, snapshot: SelectedItem | None) -> None:
        self._select.set(snapshot)

    def hover_item(self, item: CargoItem, screen_position: ScreenPosition | None = None) -> HoveredItem:
        """Pointer entered *item*."""
        snapshot = HoveredItem.from_item(item, screen_position)
        self.set_hovered(snapshot)
        return snapshot

    def move_hover_pointer(self, screen_position: ScreenPosition) -> None:
        """Pointer moved over the hovered item; tooltips follow it.

        Updates the screen position of the current hover snapshot in place and
        re-broadcasts it. Nothing happens when no item is hovered.
        """
        hovered = self._hover.current
        if hovered is None:
            return
        hovered.screen_position = screen_position
        self._hover.notify_current()

    def select_item(self, item: CargoItem, *, focus: bool = True) -> SelectedItem:
        """Select *item* (click on a mesh or a list entry)."""
        snapshot = SelectedItem.from_item(item)
        if focus:
            self._focused_item_id = item.id
        self.set_selected(snapshot)
        return snapshot

    def deselect(self) -> None:
        self._focused_item_id = None
        self.set_selected(None)

    def simulation_started(self) -> None:
        """Drop all pointer state: items cannot be interacted with while simulating."""
        _logger.debug("Simulation started; clearing hover and selection")
        self._focused_item_id = None
        self.set_hovered(None)
        self.set_selected(None)

    # ------------------------------------------------------------------
    # Direct-mutation path
    # ------------------------------------------------------------------

    def drag_selected(self, position: Vector3, items: ItemCollection) -> bool:
        """Move the selected item without notifying subscribers.

        Returns ``False`` when nothing is selected.
        """
        selected = self._select.current
        if selected is None:
            return False
        items.update_item_position(selected.id, position)
        selected.position = position.model_copy()
        return True

    def set_selected_rotation(self, is_rotated: bool, items: ItemCollection) -> bool:
        """Set the orientation of the selected item without notifying subscribers."""
        selected = self._select.current
        if selected is None:
            return False
        items.update_item(selected.id, {"is_rotated": is_rotated})
        selected.is_rotated = is_rotated
        selected.rotation.y = rotation_for(is_rotated)
        return True

    def toggle_selected_rotation(self, items: ItemCollection) -> bool:
        selected = self._select.current
        if selected is None:
            return False
        return self.set_selected_rotation(not selected.is_rotated, items)

    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Forget all slots and subscribers without notifying anyone."""
        self._hover.reset()
        self._select.reset()
        self._focused_item_id = None


_bus: SelectionBus | None = None


def get_selection_bus() -> SelectionBus:
    """Return the process-wide bus, creating it on first use."""
    global _bus
    if _bus is None:
        _bus = SelectionBus()
    return _bus
