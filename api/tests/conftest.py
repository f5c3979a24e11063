from __future__ import annotations

import os

# Keep the application's own engine away from any real database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO_DATA", "false")

from functools import partial

import pytest
from sqlmodel import Session, create_engine

from fakes import ManualTimers, NoShuffle, SyncExecutor


@pytest.fixture
def db_engine(tmp_path):
    from flashdeck.core.database import init_db
    from flashdeck.models import models  # noqa: F401

    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def timers():
    return ManualTimers()


@pytest.fixture
def registry(db_engine, timers):
    from flashdeck.services.session_engine import SessionEngine
    from flashdeck.services.stores import DatabaseCardStore, DatabaseSessionStore
    from flashdeck.services.study_registry import StudyRegistry

    registry = StudyRegistry(
        card_store=DatabaseCardStore(db_engine),
        session_store=DatabaseSessionStore(db_engine),
        save_delay=2.0,
        engine_factory=partial(
            SessionEngine,
            executor=SyncExecutor(),
            timer_factory=timers,
            rng=NoShuffle(),
        ),
    )
    yield registry
    registry.close_all()


@pytest.fixture
def client(db_engine, registry):
    from fastapi.testclient import TestClient
    from flashdeck.core.database import get_session
    from flashdeck.main import app
    from flashdeck.services.study_registry import get_study_registry

    def override_get_session():
        with Session(db_engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_study_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()
