"""Tests for the registry of live study sessions."""

from __future__ import annotations

from functools import partial

import pytest

from fakes import (
    InMemoryCardStore,
    InMemorySessionStore,
    ManualTimers,
    NoShuffle,
    SyncExecutor,
    ids,
    make_cards,
)
from flashdeck.core.exceptions import NotFoundError
from flashdeck.models.enums import Outcome
from flashdeck.schemas.study_session import SessionStateData, SessionStats
from flashdeck.services.session_engine import SessionEngine
from flashdeck.services.study_registry import StudyRegistry, describe_engine


@pytest.fixture
def card_store():
    return InMemoryCardStore(make_cards(4, deck_id=7))


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def timers():
    return ManualTimers()


@pytest.fixture
def registry(card_store, session_store, timers):
    return StudyRegistry(
        card_store=card_store,
        session_store=session_store,
        save_delay=0.5,
        max_requeues=2,
        engine_factory=partial(
            SessionEngine,
            executor=SyncExecutor(),
            timer_factory=timers,
            rng=NoShuffle(),
        ),
    )


def test_start_builds_engine_from_deck_cards(registry, timers):
    engine = registry.start(7)

    assert registry.get(7) is engine
    assert ids(engine.queue) == [1, 2, 3, 4]
    assert engine.max_requeues == 2
    assert timers.pending[0].interval == 0.5


def test_get_without_live_session_raises(registry):
    with pytest.raises(NotFoundError):
        registry.get(7)


def test_apply_outcome_goes_to_live_engine(registry, card_store):
    registry.start(7)

    engine = registry.apply_outcome(7, Outcome.GOOD, 1)

    assert ids(engine.queue) == [2, 3, 4]
    assert card_store.cards[1].status.value == "good"


def test_stop_writes_snapshot_and_forgets_engine(registry, session_store):
    registry.start(7)
    registry.apply_outcome(7, Outcome.AGAIN, 1)

    assert registry.stop(7) is True

    assert ids(session_store.sessions[7].queue) == [2, 3, 1, 4]
    with pytest.raises(NotFoundError):
        registry.get(7)
    assert registry.stop(7) is False


def test_restart_flushes_previous_engine_before_resuming(registry, session_store):
    registry.start(7)
    registry.apply_outcome(7, Outcome.EASY, 1)

    engine = registry.start(7, resume=True)

    assert ids(engine.queue) == [2, 3, 4]
    assert engine.stats.easy == 1


def test_restart_without_resume_discards_progress(registry, session_store):
    registry.start(7)
    registry.apply_outcome(7, Outcome.EASY, 1)

    engine = registry.start(7, resume=False)

    assert ids(engine.queue) == [1, 2, 3, 4]
    assert engine.stats.easy == 0
    assert 7 in session_store.deletes


def test_discard_writes_nothing(registry, session_store, timers):
    registry.start(7)
    registry.apply_outcome(7, Outcome.EASY, 1)

    registry.discard(7)
    timers.fire_pending()

    assert session_store.saves == []
    with pytest.raises(NotFoundError):
        registry.get(7)


def test_pending_session_reports_stored_state(registry, session_store):
    assert registry.pending_session(7) is None

    session_store.sessions[7] = SessionStateData(queue=make_cards(1, deck_id=7), stats=SessionStats(good=3))

    pending = registry.pending_session(7)
    assert pending.deck_id == 7
    assert pending.state.stats.good == 3


def test_pending_session_treats_failed_load_as_absent(card_store, timers):
    registry = StudyRegistry(
        card_store=card_store,
        session_store=InMemorySessionStore(fail_get=True),
        engine_factory=partial(SessionEngine, executor=SyncExecutor(), timer_factory=timers, rng=NoShuffle()),
    )

    assert registry.pending_session(7) is None
    engine = registry.start(7, resume=True)
    assert engine.queue_length == 4


def test_close_all_flushes_every_engine(registry, session_store):
    registry.start(7)

    registry.close_all()

    assert 7 in session_store.sessions
    with pytest.raises(NotFoundError):
        registry.get(7)


def test_describe_engine(registry):
    engine = registry.start(7)
    registry.apply_outcome(7, Outcome.AGAIN, 1)

    view = describe_engine(engine)

    assert view.deck_id == 7
    assert view.state == "active"
    assert view.queue_length == 4
    assert view.current_card.id == 2
    assert view.stats.again == 1
    assert view.is_finished is False
    assert view.warnings == []
