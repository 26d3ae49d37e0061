# Copyright (c) Syntropy Systems
"""Per-model color assignment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_PALETTE = (
    "#44d044",
    "#f1b933",
    "#e46161",
    "#8888f9",
    "#33bef0",
    "#bb55f9",
    "#cf7cb8",
    "#ea9f4a",
    "#4ddaa0",
)


class ColorStore:
    """Assigns each model id a color on first request and remembers it.

    Assignments are never evicted, so repeated lookups are stable for the
    lifetime of the store. Colors are handed out in palette order and
    reused cyclically once the palette runs out.
    """

    def __init__(self, palette: Sequence[str] = DEFAULT_PALETTE) -> None:
        if not palette:
            msg = "Color palette must not be empty"
            raise ValueError(msg)
        self._palette = tuple(palette)
        self._assigned: dict[str, str] = {}

    def color_for(self, model_id: str) -> str:
        """Return the color for ``model_id``, assigning one if needed."""
        color = self._assigned.get(model_id)
        if color is None:
            color = self._palette[len(self._assigned) % len(self._palette)]
            self._assigned[model_id] = color
        return color

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._assigned

    def __len__(self) -> int:
        return len(self._assigned)
