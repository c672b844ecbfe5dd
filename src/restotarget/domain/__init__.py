"""Domain layer for restaurant campaign targeting."""

from .candidate_selector import CandidateSelector, filter_targeted, select_candidates
from .catalog import (
    Advertiser,
    Campaign,
    CampaignTargeting,
    CatalogItem,
    District,
    Placement,
    ReferenceCatalogs,
    Restaurant,
    Schedule,
)
from .filters import Dimension, DimensionRule, RuleMode, RuleSet, StatusFilter, explain, matches
from .match_semantics import (
    RULE_ALLOWED_ANY,
    RULE_BLOCKED_SCHEDULES_RETAINED,
    RULE_DENIED_NONE,
    RULE_DIMENSIONS_AND,
    RULE_EMPTY_VALUES_UNRESTRICTED,
    RULE_EXCLUDE_TARGETED,
    RULE_SCHEDULES_REQUIRE_SLOT,
    RULE_SEARCH_SUBSTRING,
    RULE_SLOT_AUTO_TARGET,
    RULE_SLOT_DISABLE_DISCARDS,
    RULE_TOGGLE_ALL_SUBSET,
    RULE_UNKNOWN_IDS_NON_MATCHING,
)
from .relation_editor import (
    SelectionSummary,
    SlotInfo,
    bulk_add,
    get_slot_info,
    is_targeted,
    selection_summary,
    set_schedules,
    toggle_all,
    toggle_entity,
    toggle_slot,
)
from .schedules import merge_schedule_selection, selectable_schedules
from .targeting import SlotAssignment, TargetEdge, TargetingRelation

__all__ = [
    "Advertiser",
    "Campaign",
    "CampaignTargeting",
    "CandidateSelector",
    "CatalogItem",
    "Dimension",
    "DimensionRule",
    "District",
    "Placement",
    "ReferenceCatalogs",
    "Restaurant",
    "RuleMode",
    "RuleSet",
    "Schedule",
    "SelectionSummary",
    "SlotAssignment",
    "SlotInfo",
    "StatusFilter",
    "TargetEdge",
    "TargetingRelation",
    "bulk_add",
    "explain",
    "filter_targeted",
    "get_slot_info",
    "is_targeted",
    "matches",
    "merge_schedule_selection",
    "select_candidates",
    "selectable_schedules",
    "selection_summary",
    "set_schedules",
    "toggle_all",
    "toggle_entity",
    "toggle_slot",
    "RULE_ALLOWED_ANY",
    "RULE_BLOCKED_SCHEDULES_RETAINED",
    "RULE_DENIED_NONE",
    "RULE_DIMENSIONS_AND",
    "RULE_EMPTY_VALUES_UNRESTRICTED",
    "RULE_EXCLUDE_TARGETED",
    "RULE_SCHEDULES_REQUIRE_SLOT",
    "RULE_SEARCH_SUBSTRING",
    "RULE_SLOT_AUTO_TARGET",
    "RULE_SLOT_DISABLE_DISCARDS",
    "RULE_TOGGLE_ALL_SUBSET",
    "RULE_UNKNOWN_IDS_NON_MATCHING",
]
