"""Composition root: the one place concrete adapters are chosen."""

from __future__ import annotations

from .adapters.sqlite_store import SqliteTargetingStore
from .config.runtime import RuntimeSettings, get_settings
from .domain.candidate_selector import CandidateSelector
from .domain.catalog import ReferenceCatalogs
from .domain.filters import RuleSet
from .ports.targeting_store import Anchor
from .services.targeting_session import TargetingSession


def build_store(settings: RuntimeSettings | None = None) -> SqliteTargetingStore:
    settings = settings or get_settings()
    return SqliteTargetingStore(settings.store_db_path)


def build_session(anchor: Anchor, settings: RuntimeSettings | None = None) -> TargetingSession:
    """Construct and hydrate a TargetingSession backed by the SQLite store."""
    session = TargetingSession(anchor=anchor, store=build_store(settings))
    session.hydrate()
    return session


def build_restaurant_selector(
    catalogs: ReferenceCatalogs,
    campaign_id: int | None = None,
    settings: RuntimeSettings | None = None,
) -> CandidateSelector:
    """Restaurant picker seeded with the campaign's own targeting rules, if any."""
    settings = settings or get_settings()
    default_rules = None
    if campaign_id is not None:
        campaign = catalogs.campaign(campaign_id)
        if campaign is None:
            raise ValueError(f"Unknown campaign id: {campaign_id}")
        default_rules = RuleSet.from_campaign(campaign)
    return CandidateSelector(
        catalogs.restaurants,
        default_rules=default_rules,
        cache_size=settings.candidate_cache_size,
    )
