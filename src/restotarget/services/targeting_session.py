"""TargetingSession: one editing session over one anchor's targeting relation."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..domain import relation_editor
from ..domain.catalog import Schedule
from ..domain.relation_editor import SelectionSummary, SlotInfo
from ..domain.schedules import merge_schedule_selection
from ..domain.targeting import TargetingRelation
from ..observability import get_logger, log_edit
from ..ports.targeting_store import Anchor, TargetingStore


class TargetingSession:
    """Owns the in-memory relation between hydrate and save/cancel.

    Edits replace the relation with the result of a pure editor operation.
    A failed save leaves the relation untouched so it can be retried.
    """

    def __init__(
        self,
        anchor: Anchor,
        store: TargetingStore,
        logger: logging.Logger | None = None,
    ) -> None:
        self._anchor = anchor
        self._store = store
        self._logger: logging.Logger = logger or get_logger()
        self._snapshot: TargetingRelation | None = None
        self._relation: TargetingRelation | None = None

    @property
    def anchor(self) -> Anchor:
        return self._anchor

    @property
    def relation(self) -> TargetingRelation:
        return self._require()

    @property
    def snapshot(self) -> TargetingRelation:
        self._require()
        return self._snapshot  # type: ignore[return-value]

    @property
    def dirty(self) -> bool:
        return self._require() != self._snapshot

    def _require(self) -> TargetingRelation:
        if self._relation is None:
            raise RuntimeError("TargetingSession used before hydrate()")
        return self._relation

    # --- lifecycle ---

    def hydrate(self) -> TargetingRelation:
        """Load the persisted relation and make it both snapshot and working copy."""
        edges = self._store.load(self._anchor)
        relation = TargetingRelation.from_wire(edges)
        self._snapshot = relation
        self._relation = relation
        self._logger.info(
            "session_hydrated",
            extra={
                "anchor_kind": self._anchor.kind,
                "anchor_id": self._anchor.id,
                "edges": len(relation.edges),
            },
        )
        return relation

    def save(self) -> TargetingRelation:
        relation = self._require()
        try:
            self._store.save(self._anchor, relation.to_wire())
        except Exception as e:
            self._logger.error(
                "session_save_failed",
                extra={
                    "anchor_kind": self._anchor.kind,
                    "anchor_id": self._anchor.id,
                    "error": str(e),
                },
            )
            raise
        self._snapshot = relation
        self._logger.info(
            "session_saved",
            extra={
                "anchor_kind": self._anchor.kind,
                "anchor_id": self._anchor.id,
                "edges": len(relation.edges),
            },
        )
        return relation

    def cancel(self) -> TargetingRelation:
        """Discard unsaved edits."""
        self._require()
        self._relation = self._snapshot
        self._logger.info(
            "session_cancelled",
            extra={"anchor_kind": self._anchor.kind, "anchor_id": self._anchor.id},
        )
        return self._relation  # type: ignore[return-value]

    # --- edits ---

    def _apply(self, operation: str, result: TargetingRelation, before: TargetingRelation, **extra: Any) -> TargetingRelation:
        self._relation = result
        log_edit(
            self._logger,
            operation,
            self._anchor.kind,
            self._anchor.id,
            edges_before=len(before.edges),
            edges_after=len(result.edges),
            extra=extra,
        )
        return result

    def toggle_entity(self, counterpart_id: int) -> TargetingRelation:
        before = self._require()
        return self._apply(
            "toggle_entity",
            relation_editor.toggle_entity(before, counterpart_id),
            before,
            counterpart_id=counterpart_id,
        )

    def toggle_slot(self, counterpart_id: int, slot_id: int, enabled: bool) -> TargetingRelation:
        before = self._require()
        return self._apply(
            "toggle_slot",
            relation_editor.toggle_slot(before, counterpart_id, slot_id, enabled),
            before,
            counterpart_id=counterpart_id,
            slot_id=slot_id,
            enabled=enabled,
        )

    def set_schedules(
        self, counterpart_id: int, slot_id: int, schedule_ids: Iterable[int]
    ) -> TargetingRelation:
        before = self._require()
        ids = frozenset(schedule_ids)
        return self._apply(
            "set_schedules",
            relation_editor.set_schedules(before, counterpart_id, slot_id, ids),
            before,
            counterpart_id=counterpart_id,
            slot_id=slot_id,
            schedule_count=len(ids),
        )

    def choose_schedules(
        self,
        counterpart_id: int,
        slot_id: int,
        selected_ids: Iterable[int],
        schedules: Sequence[Schedule],
    ) -> TargetingRelation:
        """Apply a schedule picker result, keeping soft-retained blocked schedules."""
        current = self.slot_info(counterpart_id, slot_id).schedule_ids
        merged = merge_schedule_selection(current, selected_ids, schedules)
        return self.set_schedules(counterpart_id, slot_id, merged)

    def bulk_add(self, counterpart_ids: Iterable[int]) -> TargetingRelation:
        before = self._require()
        ids = list(counterpart_ids)
        return self._apply(
            "bulk_add",
            relation_editor.bulk_add(before, ids),
            before,
            requested=len(ids),
        )

    def toggle_all(self, candidate_ids: Iterable[int]) -> TargetingRelation:
        before = self._require()
        ids = list(candidate_ids)
        return self._apply(
            "toggle_all",
            relation_editor.toggle_all(before, ids),
            before,
            candidates=len(ids),
        )

    # --- read projections ---

    def is_targeted(self, counterpart_id: int) -> bool:
        return relation_editor.is_targeted(self._require(), counterpart_id)

    def slot_info(self, counterpart_id: int, slot_id: int) -> SlotInfo:
        return relation_editor.get_slot_info(self._require(), counterpart_id, slot_id)

    def selection_summary(self, candidate_ids: Iterable[int]) -> SelectionSummary:
        return relation_editor.selection_summary(self._require(), candidate_ids)
