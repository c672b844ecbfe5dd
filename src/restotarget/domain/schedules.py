"""Schedule selection rules applied before schedules reach the relation."""

from __future__ import annotations

from typing import Iterable, Sequence

from .catalog import Schedule


def selectable_schedules(schedules: Sequence[Schedule]) -> list[Schedule]:
    """Active schedules in catalog order; blocked ones are never offered."""
    return [s for s in schedules if not s.blocked]


def merge_schedule_selection(
    current_ids: Iterable[int],
    selected_ids: Iterable[int],
    schedules: Sequence[Schedule],
) -> frozenset[int]:
    """Combine a picker selection with what the slot already holds.

    Assigned ids the picker does not offer (blocked or unknown schedules) stay
    assigned, since the user cannot have removed them. From the selection only
    ids of active catalog schedules are taken.
    """
    active = {s.id for s in schedules if not s.blocked}
    retained = {sid for sid in current_ids if sid not in active}
    chosen = {sid for sid in selected_ids if sid in active}
    return frozenset(retained | chosen)
