"""Tests for ranking by version distance and priority partitioning."""

from __future__ import annotations

from updatescout.engines.update_checker.ranking import (
    partition_updates,
    rank_and_partition,
    rank_updates,
)
from updatescout.engines.update_checker.version import version_distance


def _distances(updates):
    return [version_distance(u.current_version, u.latest_version) for u in updates]


class TestRankUpdates:
    def test_descending_distance(self, make_update):
        updates = [
            make_update("patchy", "1.0.0", "1.0.5"),
            make_update("major", "1.0.0", "3.0.0"),
            make_update("minor", "1.0.0", "1.1.0"),
        ]
        ranked = rank_updates(updates)
        assert _distances(ranked) == [20000, 100, 5]
        assert [u.name for u in ranked] == ["major", "minor", "patchy"]

    def test_ties_keep_input_order(self, make_update):
        updates = [
            make_update("b", "1.0.0", "2.0.0"),
            make_update("a", "3.0.0", "4.0.0"),
            make_update("c", "0.1.0", "1.1.0"),
        ]
        assert [u.name for u in rank_updates(updates)] == ["b", "a", "c"]

    def test_unparseable_sorts_as_zero(self, make_update):
        updates = [
            make_update("weird", "1.x", "2.0.0"),
            make_update("patch", "1.0.0", "1.0.1"),
            make_update("downgrade", "2.0.0", "1.0.0"),
        ]
        assert [u.name for u in rank_updates(updates)] == ["patch", "weird", "downgrade"]

    def test_does_not_mutate_input(self, make_update):
        updates = [make_update("a", "1.0.0", "1.0.1"), make_update("b", "1.0.0", "2.0.0")]
        rank_updates(updates)
        assert [u.name for u in updates] == ["a", "b"]


class TestPartitionUpdates:
    def test_complete_and_disjoint(self, make_update):
        updates = [make_update(n) for n in ("react", "lodash", "axios", "jest")]
        priority, other = partition_updates(updates, {"react", "axios", "express"})
        assert [u.name for u in priority] == ["react", "axios"]
        assert [u.name for u in other] == ["lodash", "jest"]
        assert set(priority) | set(other) == set(updates)
        assert not set(priority) & set(other)

    def test_empty_priority_set(self, make_update):
        updates = [make_update("left-pad")]
        priority, other = partition_updates(updates, set())
        assert priority == []
        assert other == updates

    def test_case_sensitive(self, make_update):
        priority, other = partition_updates([make_update("React")], {"react"})
        assert priority == []
        assert len(other) == 1

    def test_empty_input(self):
        assert partition_updates([], {"react"}) == ([], [])


def test_rank_and_partition_keeps_sorted_order(make_update):
    updates = [
        make_update("react", "18.0.0", "18.0.1"),
        make_update("lodash", "3.0.0", "4.0.0"),
        make_update("axios", "0.1.0", "1.0.0"),
        make_update("jest", "29.0.0", "29.1.0"),
    ]
    priority, other = rank_and_partition(updates, ["react", "axios"])
    assert [u.name for u in priority] == ["axios", "react"]
    assert [u.name for u in other] == ["lodash", "jest"]
