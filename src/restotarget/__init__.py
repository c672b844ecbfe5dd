"""Restaurant campaign targeting engine."""

from .domain import (
    Campaign,
    CandidateSelector,
    ReferenceCatalogs,
    Restaurant,
    RuleSet,
    TargetingRelation,
)
from .ports import Anchor
from .services import TargetingSession

__version__ = "0.1.0"
__all__ = [
    "Anchor",
    "Campaign",
    "CandidateSelector",
    "ReferenceCatalogs",
    "Restaurant",
    "RuleSet",
    "TargetingRelation",
    "TargetingSession",
]
