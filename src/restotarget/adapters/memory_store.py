"""In-process targeting store for tests and demos."""

from __future__ import annotations

import copy
from typing import Any

from ..ports.targeting_store import Anchor


class InMemoryTargetingStore:
    """Keeps deep copies of saved edge lists keyed by anchor."""

    def __init__(self, initial: dict[Anchor, list[dict[str, Any]]] | None = None) -> None:
        self._data: dict[Anchor, list[dict[str, Any]]] = {
            anchor: copy.deepcopy(edges) for anchor, edges in (initial or {}).items()
        }
        self.save_count = 0

    def load(self, anchor: Anchor) -> list[dict[str, Any]]:
        return copy.deepcopy(self._data.get(anchor, []))

    def save(self, anchor: Anchor, edges: list[dict[str, Any]]) -> None:
        self._data[anchor] = copy.deepcopy(edges)
        self.save_count += 1
