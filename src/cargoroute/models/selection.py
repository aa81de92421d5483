"""Pointer-interaction snapshots carried by the selection bus.

These are mutable on purpose: while an item stays selected, slider drags
and orientation toggles edit the current snapshot in place instead of
broadcasting a new one.
"""

from __future__ import annotations

import math

from pydantic import Field

from cargoroute.models._base import SnapshotModel, Vector3
from cargoroute.models.item import CargoItem, Dimensions


class ScreenPosition(SnapshotModel):
    x: float = 0.0
    y: float = 0.0


class HoveredItem(SnapshotModel):
    """The last item the pointer entered."""

    id: str
    name: str = ""
    position: Vector3 = Field(default_factory=Vector3)
    dimensions: Dimensions = Field(default_factory=Dimensions)
    weight: float = 0.0
    is_fragile: bool = False
    temperature_zone: str = "ambient"
    destination: str = ""
    screen_position: ScreenPosition = Field(default_factory=ScreenPosition)

    @classmethod
    def from_item(cls, item: CargoItem, screen_position: ScreenPosition | None = None) -> HoveredItem:
        return cls(
            id=item.id,
            name=item.name,
            position=item.position.to_vector(),
            dimensions=item.dimensions,
            weight=item.weight,
            is_fragile=item.is_fragile,
            temperature_zone=item.temperature_zone,
            destination=item.destination,
            screen_position=screen_position or ScreenPosition(),
        )


def rotation_for(is_rotated: bool) -> float:
    """Yaw in radians for the given orientation flag."""
    return math.pi / 2 if is_rotated else 0.0


class SelectedItem(SnapshotModel):
    """The last item clicked."""

    id: str
    name: str = ""
    position: Vector3 = Field(default_factory=Vector3)
    rotation: Vector3 = Field(default_factory=Vector3)
    is_rotated: bool = False

    @classmethod
    def from_item(cls, item: CargoItem) -> SelectedItem:
        return cls(
            id=item.id,
            name=item.name,
            position=item.position.to_vector(),
            rotation=Vector3(y=rotation_for(item.is_rotated)),
            is_rotated=item.is_rotated,
        )
