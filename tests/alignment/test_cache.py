"""Tests for the alignment table cache."""

import threading

import pytest

from synset_align import EditionDescriptor
from synset_align.alignment import DirectTable, TableCache
from synset_align.alignment.cache import pair_key

WN30 = EditionDescriptor(publisher="Princeton", language="eng", number="3.0")
WN31 = EditionDescriptor(publisher="Princeton", language="eng", number="3.1")


def _linked_table() -> DirectTable:
    table = DirectTable()
    table.link_reverse(DirectTable())
    return table


def test_pair_key_format():
    assert pair_key(WN31, WN30) == "Princeton-eng-3.1 => Princeton-eng-3.0"


def test_populate_inserts_both_directions():
    cache = TableCache()
    table = _linked_table()

    cache.populate([lambda c: c.insert_pair(WN31, WN30, table)])

    assert cache.get(WN31, WN30) is table
    assert cache.get(WN30, WN31) is table.reverse
    assert len(cache) == 2
    assert pair_key(WN30, WN31) in cache


def test_populate_runs_steps_in_order():
    cache = TableCache()
    seen: list[str] = []

    cache.populate([lambda c: seen.append("first"), lambda c: seen.append("second")])

    assert seen == ["first", "second"]


def test_insert_outside_populate_is_rejected():
    cache = TableCache()

    with pytest.raises(RuntimeError):
        cache.insert_pair(WN31, WN30, _linked_table())
    assert len(cache) == 0


def test_missing_key_returns_none():
    assert TableCache().get(WN30, WN31) is None


def test_insert_from_another_thread_during_populate_is_rejected():
    cache = TableCache()
    errors: list[Exception] = []

    def insert_elsewhere(c: TableCache) -> None:
        def worker() -> None:
            try:
                c.insert_pair(WN31, WN30, _linked_table())
            except RuntimeError as exc:
                errors.append(exc)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    cache.populate([insert_elsewhere])

    assert len(errors) == 1
    assert len(cache) == 0


def test_insert_after_failed_populate_is_rejected():
    cache = TableCache()

    def fail(c: TableCache) -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError):
        cache.populate([fail])
    with pytest.raises(RuntimeError):
        cache.insert_pair(WN31, WN30, _linked_table())
