# SPDX-License-Identifier: Apache-2.0
"""Unit tests for BeamStore.

Scope:
- Seed contents and insertion order.
- Create / get / replace / delete semantics (first match, exact match).
- Not-found paths leave the store untouched.
- Returned records are copies.
"""

from __future__ import annotations

import threading

import pytest

from formandfunction.exceptions import BeamNotFoundError
from formandfunction.models import Beam
from formandfunction.store import BeamStore


def test_seeded_store_lists_two_beams_in_order(store: BeamStore) -> None:
    designations = [b.section_designation for b in store.list_all()]
    assert designations == ["UB406x178x74", "UB406x178x67"]
    assert store.count() == 2


def test_empty_store() -> None:
    assert BeamStore().list_all() == []


def test_create_then_get_returns_equal_record(store: BeamStore, ub90: Beam) -> None:
    created = store.create(ub90)
    assert created == ub90
    assert store.get("UB406x178x90") == ub90
    assert store.list_all()[-1] == ub90


def test_get_is_exact_and_case_sensitive(store: BeamStore) -> None:
    with pytest.raises(BeamNotFoundError):
        store.get("ub406x178x74")
    with pytest.raises(BeamNotFoundError):
        store.get("UB406x178x7")


def test_create_allows_duplicates_and_get_returns_first(store: BeamStore) -> None:
    store.create(Beam(section_designation="UB406x178x74", mass_per_metre=1.0))
    assert store.count() == 3
    assert store.get("UB406x178x74").mass_per_metre == 74.6


def test_replace_overwrites_whole_record(store: BeamStore) -> None:
    replacement = Beam(section_designation="UB406x178x74", mass_per_metre=80.0)
    store.replace("UB406x178x74", replacement)

    stored = store.get("UB406x178x74")
    assert stored.mass_per_metre == 80.0
    # fields absent from the replacement are zeroed, not preserved
    assert stored.depth_of_section == 0.0
    assert [b.section_designation for b in store.list_all()] == ["UB406x178x74", "UB406x178x67"]


def test_replace_can_rename(store: BeamStore, ub90: Beam) -> None:
    store.replace("UB406x178x67", ub90)
    assert [b.section_designation for b in store.list_all()] == ["UB406x178x74", "UB406x178x90"]


def test_replace_unknown_raises_and_does_not_mutate(store: BeamStore, ub90: Beam) -> None:
    before = store.list_all()
    with pytest.raises(BeamNotFoundError) as exc_info:
        store.replace("UB999", ub90)
    assert exc_info.value.designation == "UB999"
    assert store.list_all() == before


def test_delete_then_get_is_not_found(store: BeamStore) -> None:
    store.delete("UB406x178x74")
    with pytest.raises(BeamNotFoundError):
        store.get("UB406x178x74")
    assert [b.section_designation for b in store.list_all()] == ["UB406x178x67"]


def test_delete_removes_only_first_match(store: BeamStore) -> None:
    store.create(Beam(section_designation="UB406x178x74", mass_per_metre=1.0))
    store.delete("UB406x178x74")
    assert [b.section_designation for b in store.list_all()] == ["UB406x178x67", "UB406x178x74"]
    assert store.get("UB406x178x74").mass_per_metre == 1.0


def test_delete_unknown_raises(store: BeamStore) -> None:
    with pytest.raises(BeamNotFoundError):
        store.delete("nope")
    assert store.count() == 2


def test_returned_records_are_copies(store: BeamStore) -> None:
    beam = store.get("UB406x178x74")
    beam.mass_per_metre = 0.0
    assert store.get("UB406x178x74").mass_per_metre == 74.6


def test_concurrent_creates_are_not_lost() -> None:
    store = BeamStore()

    def worker(n: int) -> None:
        for i in range(200):
            store.create(Beam(section_designation=f"T{n}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.count() == 8 * 200
