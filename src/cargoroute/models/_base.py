"""Base models shared by every cargoroute record.

Front-end payloads arrive in camelCase (``warehouseId``, ``isCompleted``);
``alias_generator=to_camel`` maps them onto snake_case fields while
``populate_by_name`` keeps keyword construction in Python readable.

Two flavours exist:

* :class:`CargoRouteModel` is frozen. Stops, warehouses and items are
  replaced, never edited, so a reader holding a snapshot is never
  surprised by a later mutation.
* :class:`SnapshotModel` is mutable with ``validate_assignment``. Only the
  selection snapshots and their vectors use it, because the drag path of
  the selection bus edits them in place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CargoRouteModel(BaseModel):
    """Frozen base for registry and item records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SnapshotModel(BaseModel):
    """Mutable base for selection snapshots."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        validate_assignment=True,
    )


class Vector3(SnapshotModel):
    """A point or Euler rotation in scene space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Position(CargoRouteModel):
    """Frozen point used by stored items; edited only through the collection."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vector(cls, vector: Vector3) -> Position:
        return cls(x=vector.x, y=vector.y, z=vector.z)

    def to_vector(self) -> Vector3:
        return Vector3(x=self.x, y=self.y, z=self.z)
