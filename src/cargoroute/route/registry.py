"""Ordered registry of delivery stops.

The registry is the only writer of the stop collection. Every structural
mutation installs a new tuple of stops in one step and then runs the
destination sync pass, so a reader (including one reacting to an item
update made by the sync pass) always sees the post-mutation route.

Unknown stop ids are silent no-ops throughout: panels may hold a stale id
for a frame after a stop disappears.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import ValidationError

from cargoroute.config import RouteConfig
from cargoroute.items import ItemCollection
from cargoroute.models.stop import DestinationStatus, ReorderDirection, RouteDescriptor, RouteSummary, Stop
from cargoroute.models.warehouse import Warehouse
from cargoroute.route.defaults import DEFAULT_WAREHOUSES
from cargoroute.route.policy import dedupe_ids, dedupe_names, renumber, unique_name
from cargoroute.route.sync import clear_destination, sync_destinations

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StopRegistry:
    """In-memory ordered collection of :class:`Stop` values.

    Parameters
    ----------
    items : ItemCollection
        The item collection whose destinations are kept consistent with
        the registered stop names.
    config : RouteConfig or None
        Naming and initialization settings. Defaults to ``RouteConfig()``.
    clock : callable
        Source of "now" for estimated arrival times.
    """

    def __init__(
        self,
        items: ItemCollection,
        config: RouteConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._items = items
        self._config = config or RouteConfig()
        self._clock = clock
        self._stops: tuple[Stop, ...] = ()

    @property
    def stops(self) -> tuple[Stop, ...]:
        return self._stops

    @property
    def config(self) -> RouteConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[Stop]:
        return iter(self._stops)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, stop_id: str) -> int | None:
        for index, stop in enumerate(self._stops):
            if stop.id == stop_id:
                return index
        return None

    def _new_stop_id(self, warehouse: Warehouse) -> str:
        return f"{self._config.stop_id_prefix}-{secrets.token_hex(6)}-{warehouse.id}"

    def _commit(self, stops: Iterable[Stop]) -> tuple[Stop, ...]:
        self._stops = tuple(stops)
        return self._stops

    def _sync(self) -> None:
        sync_destinations(self._items, self.available_destinations())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_stop(self, warehouse: Warehouse) -> tuple[Stop, ...]:
        """Append a stop for *warehouse* at the end of the route."""
        order = len(self._stops) + 1
        name = warehouse.name or self._config.fallback_name(order)
        if self._config.enforce_unique_names:
            name = unique_name(name, self.available_destinations())

        stop = Stop(
            id=self._new_stop_id(warehouse),
            warehouse_id=warehouse.id,
            warehouse=warehouse,
            order=order,
            name=name,
        )
        self._commit((*self._stops, stop))
        _logger.debug("Added stop id=%s name=%r order=%d", stop.id, stop.name, order)
        self._sync()
        return self._stops

    def remove_stop(self, stop_id: str) -> tuple[Stop, ...]:
        """Remove a stop, renumber the rest and unassign its items."""
        index = self._index_of(stop_id)
        if index is None:
            return self._stops

        removed = self._stops[index]
        self._commit(renumber(self._stops[:index] + self._stops[index + 1 :]))
        _logger.debug("Removed stop id=%s name=%r", removed.id, removed.name)

        clear_destination(self._items, removed.name)
        self._sync()
        return self._stops

    def reorder_stop(self, stop_id: str, direction: ReorderDirection | str) -> tuple[Stop, ...]:
        """Swap a stop with its neighbour in *direction*.

        Moving the first stop up or the last stop down leaves the route
        untouched.
        """
        try:
            direction = ReorderDirection(direction)
        except ValueError:
            _logger.warning("Ignoring reorder with unknown direction %r", direction)
            return self._stops

        index = self._index_of(stop_id)
        if index is None:
            return self._stops

        target = index - 1 if direction is ReorderDirection.UP else index + 1
        if target < 0 or target >= len(self._stops):
            return self._stops

        stops = list(self._stops)
        stops[index], stops[target] = stops[target], stops[index]
        self._commit(renumber(stops))
        self._sync()
        return self._stops

    def toggle_completion(self, stop_id: str) -> tuple[Stop, ...]:
        """Flip ``is_completed``. Names and ordering are unaffected."""
        index = self._index_of(stop_id)
        if index is None:
            return self._stops

        stop = self._stops[index]
        stops = list(self._stops)
        stops[index] = stop.model_copy(update={"is_completed": not stop.is_completed})
        return self._commit(stops)

    def replace_all(self, stops: Iterable[Stop]) -> tuple[Stop, ...]:
        """Install *stops* as the whole route.

        Later stops repeating an earlier id are dropped, and orders are
        renumbered to match list position.
        """
        new_stops = dedupe_ids(list(stops))
        if self._config.enforce_unique_names:
            new_stops = dedupe_names(new_stops)
        self._commit(renumber(new_stops))
        self._sync()
        return self._stops

    def initialize_from(self, descriptors: Sequence[RouteDescriptor | Mapping[str, Any]] | None) -> bool:
        """Rebuild the route from planned route descriptors.

        The collection is always cleared first. Each descriptor becomes one
        stop, in input order, whose ``order`` is the descriptor's declared
        priority. The destination sync pass runs whether or not the input
        was usable.

        Returns
        -------
        bool
            ``False`` when *descriptors* is empty or invalid; the route is
            then left empty.
        """
        self._commit(())
        stops = self._stops_from_descriptors(descriptors)
        self._commit(stops or ())
        self._sync()
        if stops is None:
            return False
        _logger.info("Route initialized with %d stop(s)", len(stops))
        return True

    def _stops_from_descriptors(
        self,
        descriptors: Sequence[RouteDescriptor | Mapping[str, Any]] | None,
    ) -> list[Stop] | None:
        if not descriptors:
            _logger.warning("No route descriptors provided; route left empty")
            return None

        try:
            parsed = [
                d if isinstance(d, RouteDescriptor) else RouteDescriptor.model_validate(d) for d in descriptors
            ]
        except ValidationError as exc:
            _logger.warning("Invalid route descriptors; route left empty: %s", exc)
            return None

        ids = [d.id for d in parsed]
        if len(set(ids)) != len(ids):
            _logger.warning("Duplicate route descriptor ids; route left empty")
            return None

        now = self._clock()
        interval = timedelta(hours=self._config.arrival_interval_hours)
        stops: list[Stop] = []
        names: list[str] = []
        for position, descriptor in enumerate(parsed, start=1):
            warehouse = Warehouse(
                id=position,
                name=descriptor.name,
                address=descriptor.address,
                coordinates=descriptor.coordinates,
                capacity=descriptor.estimated_items * self._config.capacity_per_item,
            )
            name = descriptor.name or self._config.fallback_name(descriptor.priority)
            if self._config.enforce_unique_names:
                name = unique_name(name, names)
            names.append(name)
            stops.append(
                Stop(
                    id=descriptor.id,
                    warehouse_id=warehouse.id,
                    warehouse=warehouse,
                    order=descriptor.priority,
                    name=name,
                    estimated_arrival=now + interval * descriptor.priority,
                )
            )
        return stops

    def ensure_defaults(self) -> tuple[Stop, ...]:
        """Seed the default stops when the route is empty."""
        if self._stops:
            return self._stops
        _logger.info("Route empty; adding %d default stop(s)", len(DEFAULT_WAREHOUSES))
        for warehouse in DEFAULT_WAREHOUSES:
            self.add_stop(warehouse)
        return self._stops

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def available_destinations(self) -> list[str]:
        """Stop names in route order."""
        return [stop.name for stop in self._stops]

    def get_stop(self, stop_id: str) -> Stop | None:
        index = self._index_of(stop_id)
        return None if index is None else self._stops[index]

    def find_by_name(self, name: str) -> Stop | None:
        for stop in self._stops:
            if stop.name == name:
                return stop
        return None

    def is_ready(self) -> bool:
        return bool(self._stops)

    def destination_index(self, destination: str) -> int | None:
        """Route position (0-based) of the stop named *destination*."""
        for index, stop in enumerate(self._stops):
            if stop.name == destination:
                return index
        return None

    def destination_status(self, destination: str) -> DestinationStatus:
        stop = self.find_by_name(destination) if destination else None
        if stop is None:
            return DestinationStatus.INVALID
        return DestinationStatus.COMPLETED if stop.is_completed else DestinationStatus.PENDING

    def route_summary(self) -> RouteSummary:
        completed = sum(1 for stop in self._stops if stop.is_completed)
        next_stop = min(
            (stop for stop in self._stops if not stop.is_completed),
            key=lambda stop: stop.order,
            default=None,
        )
        return RouteSummary(
            total=len(self._stops),
            completed=completed,
            pending=len(self._stops) - completed,
            next_stop=next_stop,
        )
