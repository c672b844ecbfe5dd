"""Pure edit operations and read projections over a TargetingRelation.

Each operation takes a relation and returns a new one; the input is never
modified. Slot and schedule ids are opaque: no catalog lookups happen here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .targeting import SlotAssignment, TargetEdge, TargetingRelation


@dataclass(frozen=True)
class SlotInfo:
    """Render state of one slot cell."""

    enabled: bool
    schedule_ids: frozenset[int]


@dataclass(frozen=True)
class SelectionSummary:
    """Tri-state select-all indicator for a visible candidate list."""

    all_selected: bool
    some_selected: bool


def _replace_edge(relation: TargetingRelation, edge: TargetEdge) -> TargetingRelation:
    edges = tuple(
        edge if existing.counterpart_id == edge.counterpart_id else existing
        for existing in relation.edges
    )
    return TargetingRelation(edges=edges)


def _append_edges(relation: TargetingRelation, counterpart_ids: Iterable[int]) -> TargetingRelation:
    new_edges = [TargetEdge(counterpart_id=cid) for cid in counterpart_ids]
    if not new_edges:
        return relation
    return TargetingRelation(edges=relation.edges + tuple(new_edges))


def _untargeted(relation: TargetingRelation, counterpart_ids: Iterable[int]) -> list[int]:
    """Distinct ids from counterpart_ids without an edge, first-seen order."""
    targeted = set(relation.counterpart_ids)
    result: list[int] = []
    for cid in counterpart_ids:
        if cid not in targeted:
            targeted.add(cid)
            result.append(cid)
    return result


# ---------------------------------------------------------------------------
# Edit operations
# ---------------------------------------------------------------------------


def toggle_entity(relation: TargetingRelation, counterpart_id: int) -> TargetingRelation:
    """Target an untargeted counterpart (no slots) or untarget a targeted one.

    Untargeting drops the edge's slots; toggling back on does not restore them.
    """
    if relation.edge(counterpart_id) is not None:
        return TargetingRelation(
            edges=tuple(e for e in relation.edges if e.counterpart_id != counterpart_id)
        )
    return _append_edges(relation, [counterpart_id])


def toggle_slot(
    relation: TargetingRelation,
    counterpart_id: int,
    slot_id: int,
    enabled: bool,
) -> TargetingRelation:
    """Enable or disable one slot on an edge.

    Toggling a slot for an untargeted counterpart targets it. Disabling removes
    the slot assignment together with its schedules.
    """
    edge = relation.edge(counterpart_id)
    if edge is None:
        slots = (SlotAssignment(slot_id=slot_id),) if enabled else ()
        return TargetingRelation(
            edges=relation.edges + (TargetEdge(counterpart_id=counterpart_id, slots=slots),)
        )

    present = edge.slot(slot_id) is not None
    if enabled:
        if present:
            return relation
        slots = edge.slots + (SlotAssignment(slot_id=slot_id),)
    else:
        if not present:
            return relation
        slots = tuple(s for s in edge.slots if s.slot_id != slot_id)
    return _replace_edge(relation, edge.model_copy(update={"slots": slots}))


def set_schedules(
    relation: TargetingRelation,
    counterpart_id: int,
    slot_id: int,
    schedule_ids: Iterable[int],
) -> TargetingRelation:
    """Replace the schedules of an enabled slot; no-op if the slot is not enabled."""
    edge = relation.edge(counterpart_id)
    if edge is None:
        return relation
    current = edge.slot(slot_id)
    if current is None:
        return relation
    updated = current.model_copy(update={"schedule_ids": frozenset(schedule_ids)})
    if updated == current:
        return relation
    slots = tuple(updated if s.slot_id == slot_id else s for s in edge.slots)
    return _replace_edge(relation, edge.model_copy(update={"slots": slots}))


def bulk_add(relation: TargetingRelation, counterpart_ids: Iterable[int]) -> TargetingRelation:
    """Target every given id that is not targeted yet; existing edges are kept as-is."""
    return _append_edges(relation, _untargeted(relation, counterpart_ids))


def toggle_all(relation: TargetingRelation, candidate_ids: Iterable[int]) -> TargetingRelation:
    """Select-all checkbox over the visible candidates.

    If every candidate is targeted, all of them are untargeted; otherwise the
    untargeted ones are targeted with no slots. Ids outside candidate_ids are
    never touched.
    """
    candidates = list(candidate_ids)
    missing = _untargeted(relation, candidates)
    if missing:
        return _append_edges(relation, missing)
    if not candidates:
        return relation
    drop = set(candidates)
    return TargetingRelation(edges=tuple(e for e in relation.edges if e.counterpart_id not in drop))


# ---------------------------------------------------------------------------
# Read projections
# ---------------------------------------------------------------------------


def is_targeted(relation: TargetingRelation, counterpart_id: int) -> bool:
    return relation.edge(counterpart_id) is not None


def get_slot_info(relation: TargetingRelation, counterpart_id: int, slot_id: int) -> SlotInfo:
    edge = relation.edge(counterpart_id)
    slot = edge.slot(slot_id) if edge is not None else None
    if slot is None:
        return SlotInfo(enabled=False, schedule_ids=frozenset())
    return SlotInfo(enabled=True, schedule_ids=slot.schedule_ids)


def selection_summary(relation: TargetingRelation, candidate_ids: Iterable[int]) -> SelectionSummary:
    targeted = set(relation.counterpart_ids)
    flags = [cid in targeted for cid in candidate_ids]
    all_selected = bool(flags) and all(flags)
    some_selected = any(flags) and not all_selected
    return SelectionSummary(all_selected=all_selected, some_selected=some_selected)
