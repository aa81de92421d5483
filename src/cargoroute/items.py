"""The cargo item collection seen from the route and selection layers.

The real collection (placement, physics, weights) lives outside this
package. Only the few operations the registry and the selection bus call
are described by :class:`ItemCollection`; :class:`InMemoryItemCollection`
is a dict-backed implementation for embedding and tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from cargoroute.models._base import Position, Vector3
from cargoroute.models.item import CargoItem

_logger = logging.getLogger(__name__)


@runtime_checkable
class ItemCollection(Protocol):
    """Operations consumed from the external item collection."""

    def items(self) -> Sequence[CargoItem]:
        """Current items. Callers must not rely on the sequence staying live."""
        ...

    def update_item(self, item_id: str, fields: Mapping[str, Any]) -> None:
        """Apply a partial update. Unknown ids are ignored."""
        ...

    def update_item_position(self, item_id: str, position: Vector3) -> None:
        """Move an item. Unknown ids are ignored."""
        ...


class InMemoryItemCollection:
    """Insertion-ordered item store keyed by item id."""

    def __init__(self, items: Iterable[CargoItem] = ()) -> None:
        self._items: dict[str, CargoItem] = {}
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: CargoItem) -> None:
        self._items[item.id] = item

    def get(self, item_id: str) -> CargoItem | None:
        return self._items.get(item_id)

    def items(self) -> tuple[CargoItem, ...]:
        return tuple(self._items.values())

    def update_item(self, item_id: str, fields: Mapping[str, Any]) -> None:
        """Replace the item with a validated copy carrying *fields*.

        Raises
        ------
        ValueError
            If *fields* names something that is not a :class:`CargoItem` field.
        """
        unknown = set(fields) - set(CargoItem.model_fields)
        if unknown:
            raise ValueError(f"Unknown item fields: {', '.join(sorted(unknown))}")

        current = self._items.get(item_id)
        if current is None:
            _logger.debug("update_item ignored for unknown item id=%s", item_id)
            return
        if "id" in fields and fields["id"] != item_id:
            raise ValueError("Item id cannot be changed")

        merged = current.model_dump()
        merged.update({k: v.model_dump() if isinstance(v, BaseModel) else v for k, v in fields.items()})
        self._items[item_id] = CargoItem.model_validate(merged)

    def update_item_position(self, item_id: str, position: Vector3) -> None:
        current = self._items.get(item_id)
        if current is None:
            _logger.debug("update_item_position ignored for unknown item id=%s", item_id)
            return
        self._items[item_id] = current.model_copy(update={"position": Position.from_vector(position)})
