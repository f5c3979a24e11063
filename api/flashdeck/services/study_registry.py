"""
Registry of live study session engines, at most one per deck.
"""
import logging
import threading
from typing import Callable, Dict, Optional

from flashdeck.core.config import settings
from flashdeck.core.exceptions import NotFoundError
from flashdeck.models.enums import Outcome
from flashdeck.schemas.study import StudyStateResponse
from flashdeck.schemas.study_session import StudySessionResponse
from flashdeck.services.session_engine import (
    CardStore,
    SessionEngine,
    SessionStore,
    load_existing_session,
)
from flashdeck.services.stores import DatabaseCardStore, DatabaseSessionStore

logger = logging.getLogger(__name__)


class StudyRegistry:
    """
    Owns the live SessionEngine of every deck being studied.

    Starting a new pass on a deck tears down the deck's previous engine
    first, writing its latest snapshot so the stored session is current
    before the resume decision is applied.
    """

    def __init__(
        self,
        card_store: Optional[CardStore] = None,
        session_store: Optional[SessionStore] = None,
        save_delay: Optional[float] = None,
        max_requeues: Optional[int] = None,
        engine_factory: Optional[Callable[..., SessionEngine]] = None,
    ):
        self.card_store = card_store or DatabaseCardStore()
        self.session_store = session_store or DatabaseSessionStore()
        self.save_delay = save_delay if save_delay is not None else settings.study_save_delay_seconds
        self.max_requeues = max_requeues if max_requeues is not None else settings.study_max_requeues
        self._engine_factory = engine_factory or SessionEngine
        self._engines: Dict[int, SessionEngine] = {}
        self._lock = threading.Lock()

    def pending_session(self, deck_id: int) -> Optional[StudySessionResponse]:
        """Stored session the client may offer to resume; None if absent or unreadable."""
        try:
            return self.session_store.get_session(deck_id)
        except Exception as e:
            logger.warning(f"Could not load stored session for deck {deck_id}: {e}")
            return None

    def start(self, deck_id: int, resume: bool = False) -> SessionEngine:
        """Build or resume a study pass, replacing any live engine for the deck."""
        with self._lock:
            previous = self._engines.pop(deck_id, None)
        if previous is not None:
            logger.info(f"Replacing live study session for deck {deck_id}")
            previous.close(flush=True)

        existing = load_existing_session(self.session_store, deck_id)
        cards = self.card_store.list_cards(deck_id)

        engine = self._engine_factory(
            deck_id,
            self.card_store,
            self.session_store,
            save_delay=self.save_delay,
            max_requeues=self.max_requeues,
        )
        engine.build_or_resume(cards, existing=existing, resume=resume)

        with self._lock:
            self._engines[deck_id] = engine
        return engine

    def get(self, deck_id: int) -> SessionEngine:
        with self._lock:
            engine = self._engines.get(deck_id)
        if engine is None:
            raise NotFoundError(f"No study session in progress for deck {deck_id}")
        return engine

    def apply_outcome(self, deck_id: int, outcome: Outcome, card_id: int) -> SessionEngine:
        engine = self.get(deck_id)
        engine.apply_outcome(outcome, card_id)
        return engine

    def stop(self, deck_id: int) -> bool:
        """Tear down the deck's engine, writing its latest snapshot. Returns False if none was live."""
        with self._lock:
            engine = self._engines.pop(deck_id, None)
        if engine is None:
            return False
        engine.close(flush=True)
        return True

    def discard(self, deck_id: int) -> None:
        """Tear down the deck's engine without writing anything, e.g. when the deck is deleted."""
        with self._lock:
            engine = self._engines.pop(deck_id, None)
        if engine is not None:
            engine.close()

    def close_all(self) -> None:
        with self._lock:
            engines = list(self._engines.values())
            self._engines.clear()
        for engine in engines:
            engine.close(flush=True)
        if engines:
            logger.info(f"Closed {len(engines)} live study session(s)")


def describe_engine(engine: SessionEngine) -> StudyStateResponse:
    """What the client renders for a live engine."""
    return StudyStateResponse(
        deck_id=engine.deck_id,
        state=engine.state.value,
        queue_length=engine.queue_length,
        current_card=engine.current_card,
        stats=engine.stats.model_copy(),
        is_finished=engine.is_finished,
        warnings=list(engine.warnings),
    )


study_registry = StudyRegistry()


def get_study_registry() -> StudyRegistry:
    """Dependency for the process-wide study registry."""
    return study_registry
