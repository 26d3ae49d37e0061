# Copyright (c) Syntropy Systems
"""Pydantic models for response records and their evaluation results."""

from __future__ import annotations

from typing import Union, cast

from pydantic import Field, field_validator, model_serializer, model_validator
from typing_extensions import TypeAlias

from .base import JSONValue, Number, SiftBaseModel


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Score(SiftBaseModel):
    """A single scalar evaluation score."""

    value: Number

    @model_validator(mode="before")
    @classmethod
    def _wrap_value(cls, data: object) -> object:
        if _is_number(data):
            return {"value": data}
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> JSONValue:
        return self.value


class ScoreList(SiftBaseModel):
    """An ordered sequence of evaluation scores for one response."""

    values: list[Number] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _wrap_values(cls, data: object) -> object:
        if isinstance(data, list):
            return {"values": data}
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> JSONValue:
        return cast("JSONValue", list(self.values))


class ScoreMap(SiftBaseModel):
    """Named evaluation scores for one response, in insertion order."""

    scores: dict[str, JSONValue] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _wrap_scores(cls, data: object) -> object:
        if isinstance(data, dict) and "scores" not in data:
            return {"scores": data}
        return data

    @model_serializer(mode="plain")
    def _serialize(self) -> JSONValue:
        return self.scores


class RawEval(SiftBaseModel):
    """Evaluation entry whose shape is none of the known score shapes."""

    raw: JSONValue = None

    @model_serializer(mode="plain")
    def _serialize(self) -> JSONValue:
        return self.raw


EvalItem: TypeAlias = Union[Score, ScoreList, ScoreMap, RawEval]


def parse_eval_item(raw: object) -> EvalItem | None:
    """Classify a raw evaluation entry into one of the score shapes.

    ``None`` means the response has no evaluation. Booleans, strings and
    mixed lists are kept as ``RawEval``.
    """
    match raw:
        case Score() | ScoreList() | ScoreMap() | RawEval():
            return raw
        case None:
            return None
        case bool():
            return RawEval(raw=raw)
        case int() | float():
            return Score(value=raw)
        case list() if all(_is_number(v) for v in raw):
            return ScoreList(values=raw)
        case dict() if all(isinstance(k, str) for k in raw):
            return ScoreMap(scores=raw)
        case _:
            return RawEval(raw=cast("JSONValue", raw))


class ResponseRecord(SiftBaseModel):
    """One (model, prompt, variables) combination and its batch of responses.

    Accepts the exported inspector JSON (``llm``, ``vars``, ``eval_res``)
    as well as the field names.
    """

    model_id: str = Field(alias="llm")
    prompt: str = ""
    variables: dict[str, str] = Field(default_factory=dict, alias="vars")
    responses: list[str] = Field(default_factory=list)
    evaluation: list[EvalItem | None] | None = Field(default=None, alias="eval_res")

    @field_validator("evaluation", mode="before")
    @classmethod
    def _parse_evaluation(cls, data: object) -> object:
        # Evaluator output wraps the per-response entries as {"items": [...]}
        if isinstance(data, dict) and "items" in data:
            data = data["items"]
        if isinstance(data, list):
            return [parse_eval_item(item) for item in data]
        return data

    def evaluation_for(self, index: int) -> EvalItem | None:
        """Return the evaluation aligned with response ``index``, if any."""
        if self.evaluation is None or index >= len(self.evaluation):
            return None
        return self.evaluation[index]
