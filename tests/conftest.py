# Copyright (c) Syntropy Systems
"""Pytest fixtures for sift tests."""

import json
import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from sift.models.response import ResponseRecord

# Store original cwd at module load time
_original_cwd = Path.cwd()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sift_project(temp_dir: Path) -> Generator[Path, None, None]:
    """Create a temporary sift project directory and chdir into it."""
    from sift.config import write_default_config

    _ = write_default_config(temp_dir / ".sift")

    os.chdir(temp_dir)

    yield temp_dir

    # Always return to original cwd
    os.chdir(_original_cwd)


@pytest.fixture
def record_a() -> ResponseRecord:
    return ResponseRecord(
        model_id="m1",
        prompt="Tell me about x",
        variables={"topic": "x"},
        responses=["a1", "a2"],
    )


@pytest.fixture
def record_b() -> ResponseRecord:
    return ResponseRecord(
        model_id="m1",
        prompt="Tell me about y",
        variables={"topic": "y"},
        responses=["b1"],
    )


@pytest.fixture
def record_c() -> ResponseRecord:
    return ResponseRecord(
        model_id="m2",
        prompt="Tell me something",
        variables={"tone": "dry"},
        responses=["c1"],
    )


@pytest.fixture
def raw_records() -> list[dict[str, object]]:
    """Records as written by the inspector's JSON export."""
    return [
        {
            "llm": "gpt-4",
            "prompt": "Write a poem about cats",
            "vars": {"animal": "cats", "style": "haiku"},
            "responses": ["Soft paws", "Whiskers twitch"],
            "eval_res": {"items": [{"length": 9, "rating": 0.8125}, {"length": 14, "rating": 0.5}]},
        },
        {
            "llm": "claude",
            "prompt": "Write a poem about dogs",
            "vars": {"animal": "dogs", "style": "haiku"},
            "responses": ["Loyal friend"],
            "eval_res": {"items": [0.75]},
        },
        {
            "llm": "gpt-4",
            "prompt": "Write a poem",
            "vars": {"style": "sonnet"},
            "responses": ["Shall I compare", "Thee to a summer"],
            "eval_res": {"items": [[1, 0.5]]},
        },
    ]


@pytest.fixture
def records_file(temp_dir: Path, raw_records: list[dict[str, object]]) -> Path:
    """Write raw_records to a JSON file."""
    path = temp_dir / "responses.json"
    _ = path.write_text(json.dumps(raw_records))
    return path
