"""Candidate selection: exclusions, free-text search and attribute rules."""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Protocol, Sequence, TypeVar

from .filters import RuleSet, matches
from .targeting import TargetingRelation


class Candidate(Protocol):
    id: int
    name: str
    blocked: bool

    def dimension_values(self, dimension: str) -> frozenset[int]: ...


_C = TypeVar("_C", bound=Candidate)


def _normalize_term(search_term: str | None) -> str:
    return (search_term or "").lower()


def _name_matches(name: str, term: str) -> bool:
    return not term or term in name.lower()


def select_candidates(
    entities: Sequence[_C],
    rule_set: RuleSet,
    exclude_ids: Iterable[int] = (),
    search_term: str | None = "",
) -> list[_C]:
    """Entities not excluded, matching the search term and the rule set, in catalog order."""
    excluded = set(exclude_ids)
    term = _normalize_term(search_term)
    return [
        entity
        for entity in entities
        if entity.id not in excluded
        and _name_matches(entity.name, term)
        and matches(entity, rule_set)
    ]


def filter_targeted(
    entities: Sequence[_C],
    relation: TargetingRelation,
    search_term: str | None = "",
) -> list[_C]:
    """Targeted entities whose name matches the search term, in catalog order."""
    targeted = set(relation.counterpart_ids)
    term = _normalize_term(search_term)
    return [e for e in entities if e.id in targeted and _name_matches(e.name, term)]


class CandidateSelector:
    """Memoising selector over a fixed catalog.

    The active rule set starts as ``default_rules`` (for example the rules of
    the campaign being edited) and can be replaced while a dialog is open.
    """

    def __init__(
        self,
        entities: Sequence[_C],
        default_rules: RuleSet | None = None,
        cache_size: int = 64,
    ) -> None:
        if cache_size < 1:
            raise ValueError(f"cache_size must be >= 1, got {cache_size}")
        self._entities = list(entities)
        self._default_rules = default_rules or RuleSet()
        self._rules = self._default_rules
        self._cache_size = cache_size
        self._cache: OrderedDict[tuple[RuleSet, frozenset[int], str], list[_C]] = OrderedDict()

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def default_rules(self) -> RuleSet:
        return self._default_rules

    def set_rules(self, rule_set: RuleSet) -> None:
        self._rules = rule_set

    def reset(self) -> None:
        """Restore the default rules and forget cached results."""
        self._rules = self._default_rules
        self._cache.clear()

    def select(self, exclude_ids: Iterable[int] = (), search_term: str | None = "") -> list[_C]:
        key = (self._rules, frozenset(exclude_ids), _normalize_term(search_term))
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return list(cached)
        result = select_candidates(self._entities, key[0], key[1], key[2])
        self._cache[key] = result
        if len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
        return list(result)
