# Copyright (c) Syntropy Systems
"""Hierarchical grouping of response records by model and variables.

Records are partitioned by the first grouping key, each partition is
grouped again by the remaining keys, and so on until no keys are left.
Records that lack the requested variable are collected into a trailing
"unspecified" partition at that level instead of being dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sift.formatting import HEADER_MAX_LEN, header_value
from sift.keys import MODEL

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from sift.keys import GroupKey
    from sift.models.response import ResponseRecord


@dataclass(frozen=True)
class GroupNode:
    """A node of the group tree.

    Interior nodes carry ``key`` (the key their children are split by)
    and ``children``. Leaves carry ``records`` in input order.
    """

    label: str | None
    depth: int
    consumed: tuple[GroupKey, ...] = ()
    grouped_by: GroupKey | None = None  # key whose value is ``label``
    unspecified: bool = False
    key: GroupKey | None = None
    children: tuple[GroupNode, ...] | None = None
    records: tuple[ResponseRecord, ...] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.records is not None

    def header(self, max_len: int = HEADER_MAX_LEN) -> str | None:
        """Display title for this group, or None for the ungrouped root."""
        if self.grouped_by is None:
            return None
        if self.unspecified or self.label is None:
            return f"unspecified {self.grouped_by}"
        if self.grouped_by is MODEL:
            return self.label
        if not self.label:
            # Empty values keep their own group but read as unspecified
            return f"unspecified {self.grouped_by}"
        return f'{self.grouped_by} = "{header_value(self.label, max_len)}"'

    def iter_leaves(self) -> Iterator[GroupNode]:
        if self.children is None:
            yield self
            return
        for child in self.children:
            yield from child.iter_leaves()

    def unused_variables(self, record: ResponseRecord) -> dict[str, str]:
        """Variables of ``record`` not consumed by this node's ancestors."""
        return unused_variables(record, self.consumed)


def group_value(record: ResponseRecord, key: GroupKey) -> str | None:
    """Value of ``key`` for ``record``, or None if the variable is absent."""
    if key is MODEL:
        return record.model_id
    return record.variables.get(key)


def partition(
    records: Iterable[ResponseRecord],
    key: GroupKey,
) -> tuple[dict[str, list[ResponseRecord]], list[ResponseRecord]]:
    """Bucket records by ``key`` in order of first occurrence.

    Returns the keyed buckets and the leftover records lacking ``key``.
    Every record ends up in exactly one of them.
    """
    buckets: dict[str, list[ResponseRecord]] = {}
    leftover: list[ResponseRecord] = []
    for record in records:
        value = group_value(record, key)
        if value is None:
            leftover.append(record)
        else:
            buckets.setdefault(value, []).append(record)
    return buckets, leftover


def group_by(
    records: Iterable[ResponseRecord],
    keys: Sequence[GroupKey],
) -> list[GroupNode]:
    """Group records into a tree, one level per key in ``keys``.

    With no keys the result is a single leaf holding every record. With
    no records the result is empty.
    """
    records = list(records)
    if not records:
        return []
    if not keys:
        return [_build_node(records, [], (), grouped_by=None, label=None)]
    return _split(records, list(keys), ())


def _split(
    records: list[ResponseRecord],
    keys: list[GroupKey],
    consumed: tuple[GroupKey, ...],
) -> list[GroupNode]:
    key, remaining = keys[0], keys[1:]
    eaten = (*consumed, key)
    buckets, leftover = partition(records, key)

    nodes = [
        _build_node(bucket, remaining, eaten, grouped_by=key, label=value)
        for value, bucket in buckets.items()
    ]
    if leftover:
        nodes.append(
            _build_node(
                leftover,
                remaining,
                eaten,
                grouped_by=key,
                label=None,
                unspecified=True,
            )
        )
    return nodes


def _build_node(
    records: list[ResponseRecord],
    keys: list[GroupKey],
    consumed: tuple[GroupKey, ...],
    *,
    grouped_by: GroupKey | None,
    label: str | None,
    unspecified: bool = False,
) -> GroupNode:
    if not keys:
        return GroupNode(
            label=label,
            depth=len(consumed),
            consumed=consumed,
            grouped_by=grouped_by,
            unspecified=unspecified,
            records=tuple(records),
        )
    return GroupNode(
        label=label,
        depth=len(consumed),
        consumed=consumed,
        grouped_by=grouped_by,
        unspecified=unspecified,
        key=keys[0],
        children=tuple(_split(records, keys, consumed)),
    )


def unused_variables(
    record: ResponseRecord,
    consumed: Iterable[GroupKey],
) -> dict[str, str]:
    """Variables of ``record`` minus the consumed grouping keys, in order."""
    eaten = {key for key in consumed if key is not MODEL}
    return {name: value for name, value in record.variables.items() if name not in eaten}


def iter_leaves(nodes: Iterable[GroupNode]) -> Iterator[GroupNode]:
    """Yield every leaf of a forest in display order."""
    for node in nodes:
        yield from node.iter_leaves()


def palette_index(depth: int, size: int) -> int:
    """Cyclic palette slot for a nesting depth."""
    return depth % size
