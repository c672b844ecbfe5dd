"""Allow/deny attribute rules and the inclusion predicate built on them."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .catalog import Campaign


class RuleMode(str, Enum):
    """How a dimension's values restrict candidates."""

    allowed = "allowed"   # entity must carry one of the values
    denied = "denied"     # entity must carry none of the values


class Dimension(str, Enum):
    """Classifiable attribute dimensions."""

    locations = "locations"
    restaurant_types = "restaurant_types"
    menu_types = "menu_types"
    price_segments = "price_segments"
    advertisers = "advertisers"


class StatusFilter(str, Enum):
    """Blocked/active status restriction."""

    all = "all"
    active = "active"
    blocked = "blocked"


class Classifiable(Protocol):
    """Anything the attribute filter can evaluate."""

    blocked: bool

    def dimension_values(self, dimension: str) -> frozenset[int]: ...


class DimensionRule(BaseModel):
    """A single (mode, values) restriction on one dimension."""

    model_config = ConfigDict(frozen=True)

    mode: RuleMode = Field(default=RuleMode.allowed, description="allowed or denied")
    values: frozenset[int] = Field(
        default_factory=frozenset,
        description="Catalog ids; empty means no restriction",
    )

    @property
    def is_empty(self) -> bool:
        return not self.values

    def admits(self, entity_values: frozenset[int]) -> bool:
        if not self.values:
            return True
        intersects = not self.values.isdisjoint(entity_values)
        if self.mode == RuleMode.allowed:
            return intersects
        return not intersects


class RuleSet(BaseModel):
    """Per-dimension allow/deny rules, combined with logical AND."""

    model_config = ConfigDict(frozen=True)

    locations: DimensionRule = Field(default_factory=DimensionRule)
    restaurant_types: DimensionRule = Field(default_factory=DimensionRule)
    menu_types: DimensionRule = Field(default_factory=DimensionRule)
    price_segments: DimensionRule = Field(default_factory=DimensionRule)
    advertisers: DimensionRule = Field(default_factory=DimensionRule)
    status: StatusFilter = Field(default=StatusFilter.all, description="Blocked/active restriction")

    @classmethod
    def from_campaign(cls, campaign: Campaign) -> RuleSet:
        """Seed a RuleSet from a campaign's own restaurant targeting rules."""
        return campaign.targeting.to_rule_set()

    def rules(self) -> list[tuple[Dimension, DimensionRule]]:
        return [(dim, getattr(self, dim.value)) for dim in Dimension]

    @property
    def is_empty(self) -> bool:
        return self.status == StatusFilter.all and all(rule.is_empty for _, rule in self.rules())


def _status_admits(status: StatusFilter, blocked: bool) -> bool:
    if status == StatusFilter.active:
        return not blocked
    if status == StatusFilter.blocked:
        return blocked
    return True


def explain(entity: Classifiable, rule_set: RuleSet) -> str:
    """Return audit reason: 'allowed' or 'denied: <dimension>'."""
    for dimension, rule in rule_set.rules():
        if not rule.admits(entity.dimension_values(dimension.value)):
            return f"denied: {dimension.value}"
    if not _status_admits(rule_set.status, entity.blocked):
        return "denied: status"
    return "allowed"


def matches(entity: Classifiable, rule_set: RuleSet) -> bool:
    """True if the entity passes every restricted dimension of the rule set."""
    for dimension, rule in rule_set.rules():
        if not rule.admits(entity.dimension_values(dimension.value)):
            return False
    return _status_admits(rule_set.status, entity.blocked)
