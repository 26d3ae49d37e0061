# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for sift."""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, JsonValue
from typing_extensions import TypeAlias

JSONValue: TypeAlias = JsonValue
JSONObject: TypeAlias = dict[str, JSONValue]
Number: TypeAlias = Union[int, float]


class SiftBaseModel(BaseModel):
    """Base model with shared config for sift schemas."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )
