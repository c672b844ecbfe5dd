"""Targeting relation value objects and their persisted wire shape.

The wire shape exchanged with the persistence collaborator is::

    [{"counterpartId": 5, "slots": [{"id": 100, "schedules": [7, 8]}]}]

Every model here is frozen; edits go through ``relation_editor`` and always
produce new values.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


class SlotAssignment(BaseModel):
    """An enabled slot within one edge, with its schedule sub-selection."""

    model_config = _FROZEN

    slot_id: int = Field(
        ...,
        validation_alias=AliasChoices("slot_id", "id"),
        serialization_alias="id",
        description="Placement identifier",
    )
    schedule_ids: frozenset[int] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("schedule_ids", "schedules", "scheduleIds"),
        serialization_alias="schedules",
        description="Schedules applied to this slot",
    )

    @field_serializer("schedule_ids")
    def _sorted_schedules(self, value: frozenset[int]) -> list[int]:
        return sorted(value)


class TargetEdge(BaseModel):
    """One anchor/counterpart association plus its enabled slots."""

    model_config = _FROZEN

    counterpart_id: int = Field(
        ...,
        validation_alias=AliasChoices("counterpart_id", "counterpartId", "campaignId", "id"),
        serialization_alias="counterpartId",
        description="Restaurant or campaign on the other side of the edge",
    )
    slots: tuple[SlotAssignment, ...] = Field(
        default=(),
        description="Enabled slots in the order they were enabled",
    )

    @field_validator("slots")
    @classmethod
    def _unique_slots(cls, value: tuple[SlotAssignment, ...]) -> tuple[SlotAssignment, ...]:
        seen: set[int] = set()
        for slot in value:
            if slot.slot_id in seen:
                raise ValueError(f"slot {slot.slot_id} appears more than once")
            seen.add(slot.slot_id)
        return value

    def slot(self, slot_id: int) -> SlotAssignment | None:
        for slot in self.slots:
            if slot.slot_id == slot_id:
                return slot
        return None


class TargetingRelation(BaseModel):
    """All edges for one anchor entity, in insertion order."""

    model_config = _FROZEN

    edges: tuple[TargetEdge, ...] = Field(default=())

    @field_validator("edges")
    @classmethod
    def _unique_counterparts(cls, value: tuple[TargetEdge, ...]) -> tuple[TargetEdge, ...]:
        seen: set[int] = set()
        for edge in value:
            if edge.counterpart_id in seen:
                raise ValueError(f"counterpart {edge.counterpart_id} appears more than once")
            seen.add(edge.counterpart_id)
        return value

    @classmethod
    def from_wire(cls, edges: Iterable[dict[str, Any]]) -> TargetingRelation:
        """Hydrate from the persisted edge list. Raises ValidationError on bad input."""
        return cls.model_validate({"edges": list(edges)})

    def to_wire(self) -> list[dict[str, Any]]:
        return [edge.model_dump(mode="json", by_alias=True) for edge in self.edges]

    def edge(self, counterpart_id: int) -> TargetEdge | None:
        for edge in self.edges:
            if edge.counterpart_id == counterpart_id:
                return edge
        return None

    @property
    def counterpart_ids(self) -> tuple[int, ...]:
        return tuple(edge.counterpart_id for edge in self.edges)
