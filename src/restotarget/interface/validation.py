"""Reference checks for a targeting relation against the catalogs.

The relation editor treats ids as opaque; this report is what a persistence
collaborator or an operator runs before trusting a stored relation.
"""

from __future__ import annotations

from typing import Any

from ..domain.catalog import ReferenceCatalogs, find_by_id
from ..domain.targeting import TargetingRelation
from ..ports.targeting_store import AnchorKind


class ValidationResult:
    """Result of relation validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None, warnings: list[str] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return {
            "valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }

    def add_error(self, error: str) -> ValidationResult:
        """Add an error and return self for chaining."""
        self.errors.append(error)
        self.is_valid = False
        return self

    def add_warning(self, warning: str) -> ValidationResult:
        """Add a warning and return self for chaining."""
        self.warnings.append(warning)
        return self


def validate_relation(
    relation: TargetingRelation,
    catalogs: ReferenceCatalogs,
    counterpart_kind: AnchorKind,
) -> ValidationResult:
    """Check every edge, slot and schedule id of the relation.

    Returns:
        ValidationResult with errors for unknown counterparts and placements,
        warnings for blocked items and unknown schedules
    """
    result = ValidationResult(is_valid=True)
    counterparts = catalogs.counterparts(counterpart_kind)

    for edge in relation.edges:
        label = f"{counterpart_kind} {edge.counterpart_id}"
        counterpart = find_by_id(counterparts, edge.counterpart_id)
        if counterpart is None:
            result.add_error(f"{label} is not in the catalog")
        elif counterpart.blocked:
            result.add_warning(f"{label} is blocked")

        for slot in edge.slots:
            placement = find_by_id(catalogs.placements, slot.slot_id)
            if placement is None:
                result.add_error(f"{label}: placement {slot.slot_id} is not in the catalog")
                continue
            if placement.blocked:
                result.add_warning(f"{label}: placement {slot.slot_id} is blocked")
            _check_schedules(label, slot.slot_id, slot.schedule_ids, catalogs, result)

    return result


def _check_schedules(
    label: str,
    slot_id: int,
    schedule_ids: frozenset[int],
    catalogs: ReferenceCatalogs,
    result: ValidationResult,
) -> None:
    for schedule_id in sorted(schedule_ids):
        schedule = find_by_id(catalogs.schedules, schedule_id)
        if schedule is None:
            result.add_warning(f"{label}: slot {slot_id} references unknown schedule {schedule_id}")
        elif schedule.blocked:
            result.add_warning(
                f"{label}: slot {slot_id} keeps blocked schedule {schedule_id} ({schedule.name})"
            )
