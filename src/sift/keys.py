# Copyright (c) Syntropy Systems
"""Grouping keys: the model sentinel and variable names."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sift.models.response import ResponseRecord

MODEL_TOKEN = "@model"
VARIABLE_PREFIX = "var:"


class ModelKey(Enum):
    """Sentinel for grouping by model id.

    An enum member never compares equal to a string, so a prompt variable
    named ``model`` (or ``@model``) is still grouped as a variable.
    """

    MODEL = "model"

    def __str__(self) -> str:
        return "LLM"


MODEL = ModelKey.MODEL

GroupKey: TypeAlias = Union[ModelKey, str]


def parse_group_key(token: str) -> GroupKey:
    """Parse a command-line token into a grouping key.

    ``@model`` selects the model sentinel and ``var:<name>`` forces a
    variable name. Any other token is taken as a variable name.
    """
    if token == MODEL_TOKEN:
        return MODEL
    if token.startswith(VARIABLE_PREFIX):
        return token[len(VARIABLE_PREFIX):]
    return token


def format_group_key(key: GroupKey) -> str:
    """Inverse of parse_group_key."""
    if key is MODEL:
        return MODEL_TOKEN
    if key == MODEL_TOKEN or key.startswith(VARIABLE_PREFIX):
        return f"{VARIABLE_PREFIX}{key}"
    return key


def selectable_keys(records: Iterable[ResponseRecord]) -> list[GroupKey]:
    """List grouping keys in discovery order, model sentinel last."""
    found: dict[str, None] = {}
    for record in records:
        for name in record.variables:
            found.setdefault(name)
    keys: list[GroupKey] = list(found)
    keys.append(MODEL)
    return keys


def default_keys(records: list[ResponseRecord]) -> list[GroupKey]:
    """Initial selection: the first discovered key, or none for no records."""
    if not records:
        return []
    return selectable_keys(records)[:1]
