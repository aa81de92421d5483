from __future__ import annotations

import pytest

from cargoroute.items import InMemoryItemCollection, ItemCollection
from pydantic import ValidationError

from cargoroute.models._base import Position, Vector3
from cargoroute.models.item import CargoItem


def test_in_memory_collection_satisfies_protocol() -> None:
    assert isinstance(InMemoryItemCollection(), ItemCollection)


def test_items_keep_insertion_order() -> None:
    items = InMemoryItemCollection([CargoItem(id="b"), CargoItem(id="a")])
    items.add(CargoItem(id="c"))

    assert [i.id for i in items.items()] == ["b", "a", "c"]
    assert len(items) == 3


def test_update_item_replaces_with_validated_copy() -> None:
    original = CargoItem(id="a", destination="X", weight=2.5)
    items = InMemoryItemCollection([original])

    items.update_item("a", {"destination": "", "is_rotated": True})

    updated = items.get("a")
    assert updated is not None
    assert updated is not original
    assert (updated.destination, updated.is_rotated, updated.weight) == ("", True, 2.5)
    assert original.destination == "X"


def test_update_item_rejects_unknown_fields() -> None:
    items = InMemoryItemCollection([CargoItem(id="a")])

    with pytest.raises(ValueError, match="Unknown item fields: colour"):
        items.update_item("a", {"colour": "red"})


def test_update_item_rejects_id_change() -> None:
    items = InMemoryItemCollection([CargoItem(id="a")])

    with pytest.raises(ValueError):
        items.update_item("a", {"id": "b"})


def test_updates_on_unknown_ids_are_ignored() -> None:
    items = InMemoryItemCollection()

    items.update_item("ghost", {"destination": ""})
    items.update_item_position("ghost", Vector3(x=1.0))

    assert items.items() == ()


def test_update_item_position_copies_vector() -> None:
    items = InMemoryItemCollection([CargoItem(id="a")])
    position = Vector3(x=1.0, y=2.0, z=3.0)

    items.update_item_position("a", position)
    position.x = 99.0

    moved = items.get("a")
    assert moved is not None
    assert (moved.position.x, moved.position.y, moved.position.z) == (1.0, 2.0, 3.0)


def test_stored_item_position_cannot_be_edited_in_place() -> None:
    items = InMemoryItemCollection([CargoItem(id="a", position=Position(x=1.0))])
    stored = items.items()[0]

    with pytest.raises(ValidationError):
        stored.position.x = 50.0  # type: ignore[misc]

    current = items.get("a")
    assert current is not None
    assert current.position.x == 1.0


def test_update_item_accepts_vector_for_position() -> None:
    items = InMemoryItemCollection([CargoItem(id="a")])

    items.update_item("a", {"position": Vector3(x=4.0, y=5.0, z=6.0)})

    moved = items.get("a")
    assert moved is not None
    assert isinstance(moved.position, Position)
    assert (moved.position.x, moved.position.y, moved.position.z) == (4.0, 5.0, 6.0)
