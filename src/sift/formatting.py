# Copyright (c) Syntropy Systems
"""Display formatting shared by the group tree and the export rows."""

from __future__ import annotations

import math

from pydantic import TypeAdapter

from sift.models.base import JSONValue
from sift.models.response import RawEval, Score, ScoreList, ScoreMap, parse_eval_item

ELLIPSIS = "..."
HEADER_MAX_LEN = 1024
TAG_MAX_LEN = 18
DECIMAL_PLACES = 4

_RAW_ADAPTER = TypeAdapter(JSONValue)


def truncate(s: str, max_len: int) -> str:
    """Cut ``s`` to ``max_len`` characters plus an ellipsis if it is longer."""
    if len(s) > max_len:
        return s[:max_len] + ELLIPSIS
    return s


def header_value(s: str, max_len: int = HEADER_MAX_LEN) -> str:
    """Trimmed and truncated value for a group header."""
    return truncate(s.strip(), max_len)


def tag_value(s: str, max_len: int = TAG_MAX_LEN) -> str:
    """Trimmed and truncated value for an inline variable tag."""
    return truncate(s.strip(), max_len)


def format_number(value: object) -> str:
    """Render a number in its natural form (``1.0`` renders as ``1``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def round_number(value: object) -> str:
    """Fix non-integer numbers to four decimal places, integers as-is."""
    if (
        isinstance(value, float)
        and math.isfinite(value)
        and not value.is_integer()
    ):
        return f"{value:.{DECIMAL_PLACES}f}"
    return format_number(value)


def raw_text(raw: JSONValue) -> str:
    """Direct text conversion for evaluation values of unknown shape."""
    if isinstance(raw, str):
        return raw
    return _RAW_ADAPTER.dump_json(raw).decode("utf-8")


def join_scores(values: list[int | float]) -> str:
    return ", ".join(format_number(v) for v in values)


def stringify_eval(item: object) -> str:
    """Format one evaluation entry for display under a response.

    Accepts a parsed ``EvalItem`` or the raw JSON value. A missing entry
    formats as the empty string.
    """
    match parse_eval_item(item):
        case ScoreList(values=values):
            return "scores: " + join_scores(values)
        case ScoreMap(scores=scores):
            return ", ".join(f"{key}: {round_number(val)}" for key, val in scores.items())
        case Score(value=value):
            return f"score: {format_number(value)}"
        case RawEval(raw=raw):
            return f"score: {raw_text(raw)}"
        case _:
            return ""
