"""Unit tests for TargetingSession with an in-memory store.

No database required; failures are simulated with a fake store.
"""

import logging

import pytest

from restotarget.adapters.memory_store import InMemoryTargetingStore
from restotarget.domain.catalog import Schedule
from restotarget.ports.targeting_store import Anchor, TargetingStore, TargetingStoreError
from restotarget.services.targeting_session import TargetingSession

# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

ANCHOR = Anchor(kind="campaign", id=1)

PERSISTED = [
    {"counterpartId": 5, "slots": [{"id": 100, "schedules": [7, 9]}]},
    {"counterpartId": 6, "slots": []},
]

SCHEDULES = [
    Schedule(id=7, name="Weekday lunch"),
    Schedule(id=8, name="Weekend"),
    Schedule(id=9, name="Winter evenings", blocked=True),
]


class FailingStore(InMemoryTargetingStore):
    """Loads normally, refuses every save."""

    def save(self, anchor, edges):
        raise TargetingStoreError("database is locked")


def _session(store=None) -> TargetingSession:
    store = store or InMemoryTargetingStore({ANCHOR: PERSISTED})
    session = TargetingSession(anchor=ANCHOR, store=store)
    session.hydrate()
    return session


class TestLifecycle:
    """Hydrate, save, cancel."""

    def test_hydrate_reads_store(self):
        session = _session()
        assert session.relation.to_wire() == PERSISTED
        assert not session.dirty

    def test_unknown_anchor_hydrates_empty(self):
        session = TargetingSession(anchor=Anchor(kind="restaurant", id=3), store=InMemoryTargetingStore())
        assert session.hydrate().edges == ()

    def test_use_before_hydrate_raises(self):
        session = TargetingSession(anchor=ANCHOR, store=InMemoryTargetingStore())
        with pytest.raises(RuntimeError):
            session.toggle_entity(1)
        with pytest.raises(RuntimeError):
            _ = session.dirty

    def test_save_flushes_wire_shape(self):
        store = InMemoryTargetingStore({ANCHOR: PERSISTED})
        session = _session(store)
        session.toggle_slot(7, 101, True)
        assert session.dirty
        session.save()
        assert not session.dirty
        assert store.load(ANCHOR)[-1] == {"counterpartId": 7, "slots": [{"id": 101, "schedules": []}]}
        assert store.save_count == 1

    def test_cancel_discards_edits(self):
        session = _session()
        session.toggle_entity(5)
        session.bulk_add([8, 9])
        session.cancel()
        assert session.relation.to_wire() == PERSISTED
        assert not session.dirty

    def test_cancel_after_save_returns_to_saved_state(self):
        session = _session()
        session.toggle_entity(6)
        saved = session.save()
        session.toggle_entity(5)
        assert session.cancel() == saved

    def test_failed_save_keeps_relation_for_retry(self):
        session = _session(FailingStore({ANCHOR: PERSISTED}))
        session.toggle_entity(8)
        edited = session.relation
        with pytest.raises(TargetingStoreError):
            session.save()
        assert session.relation == edited
        assert session.dirty

    def test_failed_save_is_logged(self, caplog):
        session = _session(FailingStore({ANCHOR: PERSISTED}))
        with caplog.at_level(logging.ERROR, logger="restotarget.session"):
            with pytest.raises(TargetingStoreError):
                session.save()
        assert any(r.getMessage() == "session_save_failed" for r in caplog.records)

    def test_memory_store_satisfies_port(self):
        assert isinstance(InMemoryTargetingStore(), TargetingStore)


class TestEdits:
    """Edits delegate to the pure editor and replace the relation."""

    def test_toggle_slot_auto_targets(self):
        session = _session()
        session.toggle_slot(8, 100, True)
        assert session.is_targeted(8)
        assert session.slot_info(8, 100).enabled

    def test_set_schedules_requires_enabled_slot(self):
        session = _session()
        before = session.relation
        session.set_schedules(6, 100, [7])
        assert session.relation is before

    def test_choose_schedules_keeps_blocked_and_filters_new(self):
        session = _session()
        session.choose_schedules(5, 100, [8, 9], SCHEDULES)
        assert session.slot_info(5, 100).schedule_ids == frozenset({8, 9})
        session.choose_schedules(5, 100, [], SCHEDULES)
        assert session.slot_info(5, 100).schedule_ids == frozenset({9})

    def test_choose_schedules_keeps_assigned_unknown_id(self):
        session = _session()
        session.set_schedules(5, 100, [7, 42])
        session.choose_schedules(5, 100, [8], SCHEDULES)
        assert session.slot_info(5, 100).schedule_ids == frozenset({8, 42})

    def test_choose_schedules_on_new_slot_rejects_blocked(self):
        session = _session()
        session.toggle_slot(6, 101, True)
        session.choose_schedules(6, 101, [7, 9], SCHEDULES)
        assert session.slot_info(6, 101).schedule_ids == frozenset({7})

    def test_toggle_all_and_summary(self):
        session = _session()
        assert session.selection_summary([5, 6, 7]).some_selected
        session.toggle_all([5, 6, 7])
        assert session.selection_summary([5, 6, 7]).all_selected
        session.toggle_all([5, 6, 7])
        summary = session.selection_summary([5, 6, 7])
        assert not summary.all_selected and not summary.some_selected

    def test_edits_are_logged(self, caplog):
        session = _session()
        with caplog.at_level(logging.DEBUG, logger="restotarget.session"):
            session.toggle_entity(11)
        record = next(r for r in caplog.records if r.getMessage() == "relation_edit")
        assert record.operation == "toggle_entity"
        assert record.counterpart_id == 11
        assert record.edges_before == 2
        assert record.edges_after == 3

    def test_snapshot_unchanged_by_edits(self):
        session = _session()
        session.toggle_entity(5)
        assert session.snapshot.to_wire() == PERSISTED

    def test_injected_logger_receives_records(self, caplog):
        logger = logging.getLogger("restotarget.tests.session")
        session = TargetingSession(
            anchor=ANCHOR, store=InMemoryTargetingStore({ANCHOR: PERSISTED}), logger=logger
        )
        with caplog.at_level(logging.INFO, logger="restotarget.tests.session"):
            session.hydrate()
        record = next(r for r in caplog.records if r.getMessage() == "session_hydrated")
        assert record.name == "restotarget.tests.session"
        assert record.edges == 2
