from __future__ import annotations

from cargoroute.models.stop import Stop
from cargoroute.models.warehouse import Warehouse
from cargoroute.route.policy import dedupe_ids, dedupe_names, renumber, unique_name


def _stop(stop_id: str, name: str, order: int) -> Stop:
    return Stop(id=stop_id, warehouse_id=1, warehouse=Warehouse(id=1), order=order, name=name)


def test_unique_name_skips_taken_suffixes() -> None:
    assert unique_name("Hub", []) == "Hub"
    assert unique_name("Hub", ["Hub"]) == "Hub (2)"
    assert unique_name("Hub", ["Hub", "Hub (2)", "Hub (3)"]) == "Hub (4)"


def test_dedupe_names_keeps_first_and_untouched_objects() -> None:
    a = _stop("a", "Hub", 1)
    b = _stop("b", "Hub", 2)
    c = _stop("c", "Hub (2)", 3)

    result = dedupe_names([a, b, c])

    assert [s.name for s in result] == ["Hub", "Hub (2)", "Hub (2) (2)"]
    assert result[0] is a


def test_renumber_copies_only_moved_stops() -> None:
    a = _stop("a", "A", 1)
    b = _stop("b", "B", 3)

    result = renumber([a, b])

    assert [s.order for s in result] == [1, 2]
    assert result[0] is a
    assert b.order == 3


def test_dedupe_ids_keeps_first_occurrence() -> None:
    a = _stop("a", "A", 1)
    again = _stop("a", "B", 2)
    c = _stop("c", "C", 3)

    result = dedupe_ids([a, again, c])

    assert result == [a, c]
    assert result[0] is a
