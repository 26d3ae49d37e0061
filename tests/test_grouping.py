# Copyright (c) Syntropy Systems
"""Tests for the hierarchical grouping engine."""

from __future__ import annotations

import itertools

import pytest

from sift.grouping import (
    GroupNode,
    group_by,
    iter_leaves,
    palette_index,
    partition,
    unused_variables,
)
from sift.keys import MODEL
from sift.models.response import ResponseRecord


def _leaf_records(nodes: list[GroupNode]) -> list[ResponseRecord]:
    return [r for leaf in iter_leaves(nodes) for r in leaf.records or ()]


def _leaf_depths(node: GroupNode, level: int = 1) -> list[int]:
    if node.children is None:
        return [level]
    return [d for child in node.children for d in _leaf_depths(child, level + 1)]


def _records() -> list[ResponseRecord]:
    return [
        ResponseRecord(model_id="m2", variables={"topic": "x", "tone": "dry"}, responses=["1"]),
        ResponseRecord(model_id="m1", variables={"topic": "y"}, responses=["2"]),
        ResponseRecord(model_id="m1", variables={"tone": "wet"}, responses=["3"]),
        ResponseRecord(model_id="m2", variables={"topic": "x", "tone": "wet"}, responses=["4"]),
        ResponseRecord(model_id="m3", variables={}, responses=["5", "6"]),
    ]


class TestGroupByScenarios:
    """Tests for the documented grouping scenarios."""

    def test_model_then_topic(self, record_a: ResponseRecord, record_b: ResponseRecord) -> None:
        nodes = group_by([record_a, record_b], [MODEL, "topic"])

        assert len(nodes) == 1
        model_node = nodes[0]
        assert model_node.label == "m1"
        assert model_node.grouped_by is MODEL
        assert model_node.key == "topic"
        assert model_node.depth == 1
        assert model_node.children is not None

        x_node, y_node = model_node.children
        assert (x_node.label, y_node.label) == ("x", "y")
        assert x_node.records == (record_a,)
        assert y_node.records == (record_b,)
        assert x_node.depth == 2

    def test_leftover_group(
        self,
        record_a: ResponseRecord,
        record_b: ResponseRecord,
        record_c: ResponseRecord,
    ) -> None:
        nodes = group_by([record_a, record_b, record_c], ["topic"])

        assert [n.label for n in nodes] == ["x", "y", None]
        leftover = nodes[-1]
        assert leftover.unspecified
        assert leftover.records == (record_c,)
        assert leftover.header() == "unspecified topic"

    def test_leftover_comes_after_keyed_groups(
        self,
        record_a: ResponseRecord,
        record_c: ResponseRecord,
    ) -> None:
        nodes = group_by([record_c, record_a], ["topic"])

        assert [n.label for n in nodes] == ["x", None]


class TestGroupByProperties:
    """Tests for structural properties of the group tree."""

    def test_empty_records(self) -> None:
        assert group_by([], [MODEL]) == []
        assert group_by([], []) == []

    def test_no_keys_is_single_leaf(self) -> None:
        records = _records()
        nodes = group_by(records, [])

        assert len(nodes) == 1
        assert nodes[0].is_leaf
        assert nodes[0].records == tuple(records)
        assert nodes[0].depth == 0
        assert nodes[0].header() is None

    @pytest.mark.parametrize(
        "keys",
        [
            [MODEL],
            ["topic"],
            ["tone", "topic"],
            [MODEL, "topic", "tone"],
            ["missing", MODEL],
            ["topic", "topic"],
        ],
    )
    def test_every_record_in_exactly_one_leaf(self, keys: list) -> None:
        records = _records()
        grouped = _leaf_records(group_by(records, keys))

        assert len(grouped) == len(records)
        assert {id(r) for r in grouped} == {id(r) for r in records}

    @pytest.mark.parametrize("n_keys", [1, 2, 3])
    def test_leaves_at_depth_of_key_count(self, n_keys: int) -> None:
        keys = [MODEL, "topic", "tone"][:n_keys]
        nodes = group_by(_records(), keys)

        depths = [d for node in nodes for d in _leaf_depths(node)]
        assert set(depths) == {n_keys}
        assert {leaf.depth for leaf in iter_leaves(nodes)} == {n_keys}

    def test_buckets_in_first_occurrence_order(self) -> None:
        nodes = group_by(_records(), [MODEL])
        assert [n.label for n in nodes] == ["m2", "m1", "m3"]

    def test_integer_like_values_keep_order(self) -> None:
        records = [
            ResponseRecord(model_id="m", variables={"n": value}, responses=["r"])
            for value in ["10", "2", "abc", "0", "2"]
        ]
        nodes = group_by(records, ["n"])
        assert [n.label for n in nodes] == ["10", "2", "abc", "0"]

    def test_records_keep_input_order_within_leaf(self) -> None:
        records = _records()
        nodes = group_by(records, [MODEL])
        m2 = nodes[0]
        assert m2.records == (records[0], records[3])

    def test_all_key_orders_are_total(self) -> None:
        records = _records()
        for keys in itertools.permutations([MODEL, "topic", "tone"]):
            assert len(_leaf_records(group_by(records, list(keys)))) == len(records)


class TestGroupHeaders:
    """Tests for group header derivation."""

    def test_model_header_is_model_id(self, record_a: ResponseRecord) -> None:
        (node,) = group_by([record_a], [MODEL])
        assert node.header() == "m1"

    def test_variable_header_is_trimmed_and_truncated(self) -> None:
        record = ResponseRecord(
            model_id="m",
            variables={"text": "  " + "z" * 30 + "  "},
            responses=["r"],
        )
        (node,) = group_by([record], ["text"])
        assert node.header() == 'text = "' + "z" * 30 + '"'
        assert node.header(max_len=5) == 'text = "zzzzz..."'

    def test_empty_value_header_reads_unspecified(self) -> None:
        records = [
            ResponseRecord(model_id="m", variables={"t": ""}, responses=["r"]),
            ResponseRecord(model_id="m", variables={}, responses=["r"]),
        ]
        empty, leftover = group_by(records, ["t"])

        assert empty.label == ""
        assert not empty.unspecified
        assert empty.records == (records[0],)
        assert empty.header() == "unspecified t"
        assert leftover.header() == "unspecified t"

    def test_variable_named_like_model_is_a_variable(self) -> None:
        records = [
            ResponseRecord(model_id="m1", variables={"model": "a"}, responses=["r"]),
            ResponseRecord(model_id="m1", variables={"model": "b"}, responses=["r"]),
        ]
        nodes = group_by(records, ["model"])
        assert [n.label for n in nodes] == ["a", "b"]
        by_model = group_by(records, [MODEL])
        assert [n.label for n in by_model] == ["m1"]


class TestHelpers:
    """Tests for grouping helpers."""

    def test_partition_is_exclusive(self) -> None:
        records = _records()
        buckets, leftover = partition(records, "topic")

        assert list(buckets) == ["x", "y"]
        assert len(buckets["x"]) == 2
        assert leftover == [records[2], records[4]]

    def test_unused_variables(self) -> None:
        record = ResponseRecord(
            model_id="m",
            variables={"a": "1", "b": "2", "c": "3"},
            responses=[],
        )
        assert unused_variables(record, [MODEL, "b"]) == {"a": "1", "c": "3"}

    def test_leaf_unused_variables(self) -> None:
        records = _records()
        nodes = group_by(records, ["topic"])
        x_leaf = nodes[0]
        assert x_leaf.unused_variables(records[0]) == {"tone": "dry"}

    def test_palette_index_cycles(self) -> None:
        assert [palette_index(d, 3) for d in range(7)] == [0, 1, 2, 0, 1, 2, 0]
