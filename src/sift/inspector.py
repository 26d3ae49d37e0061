# Copyright (c) Syntropy Systems
"""Response inspector state: records, selected keys and the group tree."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sift.grouping import group_by, iter_leaves
from sift.keys import default_keys, selectable_keys

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sift.grouping import GroupNode
    from sift.keys import GroupKey
    from sift.models.response import ResponseRecord

logger = logging.getLogger(__name__)


class ResponseInspector:
    """Keeps the group tree in sync with the records and the key selection.

    Changing either input rebuilds the whole tree before returning. The
    first non-empty set of records selects the first discovered key
    unless keys were chosen explicitly.
    """

    def __init__(
        self,
        records: Iterable[ResponseRecord] = (),
        keys: Iterable[GroupKey] | None = None,
    ) -> None:
        self._records: list[ResponseRecord] = []
        self._keys: list[GroupKey] = []
        self._received_once = False
        self._tree: list[GroupNode] = []

        if keys is not None:
            self._keys = list(keys)
            self._received_once = True
        self.set_records(records)

    @property
    def records(self) -> list[ResponseRecord]:
        return list(self._records)

    @property
    def keys(self) -> list[GroupKey]:
        return list(self._keys)

    @property
    def tree(self) -> list[GroupNode]:
        return self._tree

    @property
    def selectable_keys(self) -> list[GroupKey]:
        if not self._records:
            return []
        return selectable_keys(self._records)

    @property
    def leaf_count(self) -> int:
        return sum(1 for _ in iter_leaves(self._tree))

    def set_records(self, records: Iterable[ResponseRecord]) -> None:
        """Replace the records and regroup them."""
        self._records = list(records)
        if self._records and not self._received_once:
            self._keys = default_keys(self._records)
            self._received_once = True
        self._recompute()

    def set_keys(self, keys: Iterable[GroupKey]) -> None:
        """Replace the grouping keys and regroup the records."""
        self._keys = list(keys)
        self._received_once = True
        self._recompute()

    def _recompute(self) -> None:
        self._tree = group_by(self._records, self._keys)
        logger.debug(
            "Grouped %d record(s) by %s into %d leaf group(s)",
            len(self._records),
            [str(k) for k in self._keys],
            self.leaf_count,
        )
