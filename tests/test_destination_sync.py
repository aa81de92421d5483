from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cargoroute.items import InMemoryItemCollection
from cargoroute.models._base import Vector3
from cargoroute.models.item import CargoItem
from cargoroute.route.sync import clear_destination, sync_destinations


class _RecordingItems:
    """Item collection that records every write and rebuilds its list on update."""

    def __init__(self, *items: CargoItem) -> None:
        self._items = list(items)
        self.updates: list[tuple[str, dict[str, Any]]] = []

    def items(self) -> list[CargoItem]:
        return self._items

    def update_item(self, item_id: str, fields: Mapping[str, Any]) -> None:
        self.updates.append((item_id, dict(fields)))
        self._items = [i.model_copy(update=dict(fields)) if i.id == item_id else i for i in self._items]

    def update_item_position(self, item_id: str, position: Vector3) -> None:  # pragma: no cover
        raise AssertionError("sync must not move items")


def test_sync_clears_only_invalid_destinations() -> None:
    items = _RecordingItems(
        CargoItem(id="a", destination="North"),
        CargoItem(id="b", destination="Gone"),
        CargoItem(id="c", destination=""),
        CargoItem(id="d", destination="Also gone"),
    )

    cleared = sync_destinations(items, ["North", "South"])

    assert cleared == ["b", "d"]
    assert items.updates == [("b", {"destination": ""}), ("d", {"destination": ""})]
    assert [i.destination for i in items.items()] == ["North", "", "", ""]


def test_sync_with_no_names_clears_every_assigned_item() -> None:
    items = InMemoryItemCollection([CargoItem(id="a", destination="X"), CargoItem(id="b")])

    assert sync_destinations(items, []) == ["a"]
    assert items.get("a").destination == ""


def test_sync_is_a_noop_when_consistent() -> None:
    items = _RecordingItems(CargoItem(id="a", destination="X"))

    assert sync_destinations(items, iter(["X"])) == []
    assert items.updates == []


def test_clear_destination_matches_exact_name() -> None:
    items = _RecordingItems(
        CargoItem(id="a", destination="Stop 1"),
        CargoItem(id="b", destination="Stop 10"),
        CargoItem(id="c", destination="stop 1"),
    )

    assert clear_destination(items, "Stop 1") == ["a"]
    assert [i.destination for i in items.items()] == ["", "Stop 10", "stop 1"]


def test_clear_destination_ignores_empty_name() -> None:
    items = _RecordingItems(CargoItem(id="a"))

    assert clear_destination(items, "") == []
    assert items.updates == []
