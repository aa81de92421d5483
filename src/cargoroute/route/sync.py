"""Destination sync between the stop registry and the item collection.

An item destination is valid when it is empty or equals the name of a
registered stop. The passes below clear invalid destinations through the
collection's own ``update_item`` so the collection stays the only writer
of its items.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cargoroute.items import ItemCollection

_logger = logging.getLogger(__name__)


def sync_destinations(items: ItemCollection, valid_names: Iterable[str]) -> list[str]:
    """Clear every non-empty destination not in *valid_names*.

    Returns the ids of the items that were cleared.
    """
    names = frozenset(valid_names)
    cleared: list[str] = []
    # Snapshot first: update_item may replace the underlying sequence.
    for item in tuple(items.items()):
        if item.destination and item.destination not in names:
            _logger.debug("Clearing destination %r from item id=%s", item.destination, item.id)
            items.update_item(item.id, {"destination": ""})
            cleared.append(item.id)
    if cleared:
        _logger.info("Destination sync cleared %d item(s)", len(cleared))
    return cleared


def clear_destination(items: ItemCollection, name: str) -> list[str]:
    """Clear the destination of every item assigned exactly to *name*."""
    if not name:
        return []
    cleared: list[str] = []
    for item in tuple(items.items()):
        if item.destination == name:
            _logger.debug("Unassigning item id=%s from %r", item.id, name)
            items.update_item(item.id, {"destination": ""})
            cleared.append(item.id)
    if cleared:
        _logger.info("Unassigned %d item(s) from removed stop %r", len(cleared), name)
    return cleared
