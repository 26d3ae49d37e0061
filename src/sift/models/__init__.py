# Copyright (c) Syntropy Systems
"""Pydantic models for sift."""

from sift.models.base import JSONObject, JSONValue, SiftBaseModel
from sift.models.response import (
    EvalItem,
    RawEval,
    ResponseRecord,
    Score,
    ScoreList,
    ScoreMap,
    parse_eval_item,
)

__all__ = [
    "EvalItem",
    "JSONObject",
    "JSONValue",
    "RawEval",
    "ResponseRecord",
    "Score",
    "ScoreList",
    "ScoreMap",
    "SiftBaseModel",
    "parse_eval_item",
]
