"""Stop naming and ordering policy.

Names are stable destination keys: they are chosen once when a stop is
created and never regenerated on reorder or removal. Positional labels
("Stop 3") are derived from ``order`` by :attr:`Stop.label` and carry no
meaning for destination matching.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cargoroute.models.stop import Stop


def unique_name(candidate: str, taken: Iterable[str]) -> str:
    """Return *candidate*, suffixed with ``" (n)"`` if it collides with *taken*."""
    taken_set = set(taken)
    if candidate not in taken_set:
        return candidate
    n = 2
    while f"{candidate} ({n})" in taken_set:
        n += 1
    return f"{candidate} ({n})"


def dedupe_names(stops: Sequence[Stop]) -> list[Stop]:
    """Rename later duplicates so every stop name is distinct.

    The first stop carrying a name keeps it; stops that already have a
    distinct name are returned unchanged.
    """
    seen: set[str] = set()
    result: list[Stop] = []
    for stop in stops:
        name = unique_name(stop.name, seen)
        seen.add(name)
        result.append(stop if name == stop.name else stop.model_copy(update={"name": name}))
    return result


def renumber(stops: Sequence[Stop]) -> list[Stop]:
    """Set ``order`` to the 1-based list position, copying only stops that move."""
    return [
        stop if stop.order == index else stop.model_copy(update={"order": index})
        for index, stop in enumerate(stops, start=1)
    ]


def dedupe_ids(stops: Sequence[Stop]) -> list[Stop]:
    """Drop stops whose id already appeared earlier in *stops*."""
    seen: set[str] = set()
    result: list[Stop] = []
    for stop in stops:
        if stop.id in seen:
            continue
        seen.add(stop.id)
        result.append(stop)
    return result
