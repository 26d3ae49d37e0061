# Copyright (c) Syntropy Systems
"""Read response records from JSON and JSONL files."""
from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from sift.models.response import ResponseRecord

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".jsonl")


def parse_records(items: list[object], source: str = "<input>") -> list[ResponseRecord]:
    """Validate raw record objects, skipping the ones that do not fit."""
    records: list[ResponseRecord] = []
    for idx, item in enumerate(items):
        try:
            records.append(ResponseRecord.model_validate(item))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed record %d in %s: %d validation error(s)",
                idx,
                source,
                e.error_count(),
            )
    return records


def _read_jsonl(path: Path) -> list[object]:
    items: list[object] = []
    with path.open() as f:
        for lineno, raw_line in enumerate(f, 1):
            line = raw_line.strip()
            if not line:
                continue
            try:
                items.append(json.loads(line))
            except json.JSONDecodeError as e:
                # Partial trailing lines happen when a writer is interrupted
                logger.warning("Invalid JSON at %s:%d: %s", path, lineno, e)
    return items


def _is_wrapper(data: object) -> bool:
    # A single record also has a "responses" list, but of strings
    if not isinstance(data, dict):
        return False
    responses = data.get("responses")
    return isinstance(responses, list) and all(isinstance(r, dict) for r in responses)


def load_records(path: Path) -> list[ResponseRecord]:
    """Load response records from a .json or .jsonl file.

    A .json file holds either a list of records or an object with a
    ``responses`` list. Raises FileNotFoundError for a missing file,
    ValueError for an unsupported suffix or unreadable JSON document.
    """
    if not path.exists():
        msg = f"No such file: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = f"Input must be .json or .jsonl, got '{path.suffix}'"
        raise ValueError(msg)

    if suffix == ".jsonl":
        return parse_records(_read_jsonl(path), str(path))

    try:
        data = cast("object", json.loads(path.read_text()))
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise ValueError(msg) from e

    if _is_wrapper(data):
        data = cast("dict[str, object]", data)["responses"]
    if not isinstance(data, list):
        msg = f"Expected a list of records in {path}"
        raise ValueError(msg)

    return parse_records(cast("list[object]", data), str(path))
