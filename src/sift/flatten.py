# Copyright (c) Syntropy Systems
"""Unwind batched response records into one row per response."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias

from sift.formatting import join_scores, raw_text
from sift.models.response import RawEval, Score, ScoreList, ScoreMap

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sift.models.base import JSONValue
    from sift.models.response import EvalItem, ResponseRecord

logger = logging.getLogger(__name__)

CellValue: TypeAlias = Union[str, int, float, None]

MODEL_COLUMN = "LLM"
PROMPT_COLUMN = "Prompt"
RESPONSE_COLUMN = "Response"
BATCH_COLUMN = "Response Batch Id"
PARAM_PREFIX = "Param: "
EVAL_COLUMN = "Eval result"
EVAL_PREFIX = "Eval result: "

FIXED_COLUMNS = (MODEL_COLUMN, PROMPT_COLUMN, RESPONSE_COLUMN, BATCH_COLUMN)


@dataclass(frozen=True)
class ExportRow:
    """One response with its record's metadata.

    ``evaluation`` maps a column suffix to its value: ``None`` is the
    single ``Eval result`` column, a string is a named score (even "").
    """

    model_id: str
    prompt: str
    response: str
    batch_id: int
    variables: dict[str, str] = field(default_factory=dict)
    evaluation: dict[str | None, CellValue] = field(default_factory=dict)

    def columns(self) -> dict[str, CellValue]:
        """Header name to cell value, in column order."""
        row: dict[str, CellValue] = {
            MODEL_COLUMN: self.model_id,
            PROMPT_COLUMN: self.prompt,
            RESPONSE_COLUMN: self.response,
            BATCH_COLUMN: self.batch_id,
        }
        for name, value in self.variables.items():
            row[f"{PARAM_PREFIX}{name}"] = value
        for suffix, value in self.evaluation.items():
            row[EVAL_COLUMN if suffix is None else f"{EVAL_PREFIX}{suffix}"] = value
        return row


def _scalar_cell(value: JSONValue) -> CellValue:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return raw_text(value)


def evaluation_cells(item: EvalItem | None) -> dict[str | None, CellValue]:
    """Export cells for one evaluation entry, keyed by column suffix."""
    match item:
        case ScoreList(values=values):
            return {None: join_scores(values)}
        case ScoreMap(scores=scores):
            return {key: _scalar_cell(value) for key, value in scores.items()}
        case Score(value=value):
            return {None: value}
        case RawEval(raw=raw):
            return {None: _scalar_cell(raw)}
        case _:
            return {}


def flatten(records: Sequence[ResponseRecord] | None) -> list[ExportRow]:
    """Unwind records into one row per response.

    Rows keep record order, then response order within each record.
    ``batch_id`` is the record's position in ``records``.
    """
    if not records:
        logger.warning("No responses to flatten")
        return []

    rows: list[ExportRow] = []
    for batch_id, record in enumerate(records):
        for index, response in enumerate(record.responses):
            rows.append(
                ExportRow(
                    model_id=record.model_id,
                    prompt=record.prompt,
                    response=response,
                    batch_id=batch_id,
                    variables=dict(record.variables),
                    evaluation=evaluation_cells(record.evaluation_for(index)),
                )
            )
    return rows


def collect_headers(rows: Iterable[ExportRow]) -> list[str]:
    """Union of column names across rows, in first-seen order."""
    headers: dict[str, None] = dict.fromkeys(FIXED_COLUMNS)
    for row in rows:
        for name in row.columns():
            headers.setdefault(name)
    return list(headers)
