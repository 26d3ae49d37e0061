# Copyright (c) Syntropy Systems
"""Render a group tree for the terminal with rich."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from rich.tree import Tree

from sift.colors import ColorStore
from sift.formatting import HEADER_MAX_LEN, TAG_MAX_LEN, stringify_eval, tag_value
from sift.grouping import palette_index
from sift.keys import MODEL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sift.grouping import GroupNode
    from sift.models.response import ResponseRecord

# Alternating guide shades so sibling levels stay distinguishable
GROUP_STYLES = ("grey70", "white", "grey70", "grey50", "grey70", "grey50", "grey70")


def group_style(depth: int) -> str:
    return GROUP_STYLES[palette_index(depth, len(GROUP_STYLES))]


def render_tree(
    nodes: Iterable[GroupNode],
    colors: ColorStore | None = None,
    *,
    title: str = "Responses",
    header_max_len: int = HEADER_MAX_LEN,
    tag_max_len: int = TAG_MAX_LEN,
) -> Tree:
    """Build a rich Tree from grouped nodes."""
    if colors is None:
        colors = ColorStore()

    root = Tree(Text(title, style="bold"), guide_style=group_style(0))
    for node in nodes:
        _add_node(root, node, colors, header_max_len, tag_max_len)
    return root


def _node_label(node: GroupNode, colors: ColorStore, header_max_len: int) -> Text:
    header = node.header(header_max_len)
    if header is None:
        return Text("all responses", style="dim")
    if node.unspecified or node.label is None:
        return Text(header, style="dim italic")
    if node.grouped_by is MODEL:
        return Text(header, style=f"bold {colors.color_for(node.label)}")
    return Text(header, style="bold")


def _add_node(
    parent: Tree,
    node: GroupNode,
    colors: ColorStore,
    header_max_len: int,
    tag_max_len: int,
) -> None:
    branch = parent.add(
        _node_label(node, colors, header_max_len),
        guide_style=group_style(node.depth),
    )
    if node.children is not None:
        for child in node.children:
            _add_node(branch, child, colors, header_max_len, tag_max_len)
        return

    for record in node.records or ():
        _add_record(branch, node, record, colors, tag_max_len)


def _add_record(
    branch: Tree,
    node: GroupNode,
    record: ResponseRecord,
    colors: ColorStore,
    tag_max_len: int,
) -> None:
    color = colors.color_for(record.model_id)
    label = Text()
    if MODEL not in node.consumed:
        label.append(record.model_id, style=f"bold {color}")

    for name, value in node.unused_variables(record).items():
        if label:
            label.append("  ")
        label.append(f"{name} = ", style="dim")
        label.append(tag_value(value, tag_max_len))

    if not label:
        label.append(record.model_id, style=color)

    record_branch = branch.add(label, guide_style=color)
    for idx, response in enumerate(record.responses):
        text = Text(response)
        item = record.evaluation_for(idx)
        if item is not None:
            text.append("\n")
            text.append(stringify_eval(item), style="italic dim")
        _ = record_branch.add(text)
