# Copyright (c) Syntropy Systems
"""Configuration management for sift."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import cast

import yaml

from sift.colors import DEFAULT_PALETTE
from sift.formatting import HEADER_MAX_LEN, TAG_MAX_LEN

CONFIG_DIR_NAME = ".sift"
CONFIG_FILE_NAME = "config.yaml"


@dataclass
class SiftConfig:
    """Configuration for sift."""

    # Max characters of a variable value shown in a group header
    header_max_len: int = HEADER_MAX_LEN

    # Max characters of a variable value shown as an inline tag
    tag_max_len: int = TAG_MAX_LEN

    # Output file used by `sift export` when none is given
    export_filename: str = "responses.xlsx"

    # Worksheet name for .xlsx exports
    sheet_name: str = "Sheet1"

    # Colors handed out to models in order of first appearance
    model_palette: list[str] = field(default_factory=lambda: list(DEFAULT_PALETTE))

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def find_sift_dir(start_path: Path | None = None) -> Path | None:
    """Find the nearest .sift directory by walking up from start_path.

    Returns None if no .sift directory is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        sift_dir = current / CONFIG_DIR_NAME
        if sift_dir.is_dir():
            return sift_dir
        current = current.parent

    # Check root
    sift_dir = current / CONFIG_DIR_NAME
    if sift_dir.is_dir():
        return sift_dir

    return None


def get_global_config_dir() -> Path:
    """Get the global sift config directory (~/.sift)."""
    return Path.home() / CONFIG_DIR_NAME


def load_config(sift_dir: Path | None = None) -> SiftConfig:
    """Load configuration from .sift/config.yaml or defaults.

    Looks for config in:
    1. Provided sift_dir
    2. Nearest .sift directory walking up
    3. ~/.sift/config.yaml
    4. Defaults
    """
    config = SiftConfig()

    # Find config file
    config_path = None

    if sift_dir is not None:
        config_path = sift_dir / CONFIG_FILE_NAME
    else:
        found_dir = find_sift_dir()
        if found_dir is not None:
            config_path = found_dir / CONFIG_FILE_NAME
        else:
            global_config = get_global_config_dir() / CONFIG_FILE_NAME
            if global_config.exists():
                config_path = global_config

    if config_path is not None and config_path.exists():
        with config_path.open() as f:
            data = cast("dict[str, object]", yaml.safe_load(f) or {})

        header_max_len = data.get("header_max_len")
        if isinstance(header_max_len, int) and header_max_len > 0:
            config.header_max_len = header_max_len
        tag_max_len = data.get("tag_max_len")
        if isinstance(tag_max_len, int) and tag_max_len > 0:
            config.tag_max_len = tag_max_len
        export_filename = data.get("export_filename")
        if isinstance(export_filename, str) and export_filename:
            config.export_filename = export_filename
        sheet_name = data.get("sheet_name")
        if isinstance(sheet_name, str) and sheet_name:
            config.sheet_name = sheet_name
        model_palette = data.get("model_palette")
        if isinstance(model_palette, list) and model_palette:
            config.model_palette = [str(color) for color in model_palette]

    return config


def write_default_config(sift_dir: Path) -> Path:
    """Write a config.yaml with default values into sift_dir."""
    sift_dir.mkdir(parents=True, exist_ok=True)
    config_path = sift_dir / CONFIG_FILE_NAME
    with config_path.open("w") as f:
        yaml.dump(SiftConfig().to_dict(), f, default_flow_style=False, sort_keys=False)
    return config_path
