from __future__ import annotations

from stableheap import ABSENT, Absent, SortOrder


def test_absent_should_be_falsy_and_unique() -> None:
    assert not ABSENT
    assert ABSENT is Absent.ABSENT
    assert ABSENT is not None
    assert ABSENT != 0
    assert ABSENT != ""
    assert repr(ABSENT) == "ABSENT"


def test_sort_order_values() -> None:
    assert SortOrder("ascending") is SortOrder.ASCENDING
    assert SortOrder.DESCENDING.value == "descending"
