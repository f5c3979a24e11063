"""
Study session queue engine.

Turns a deck's cards into a shuffled review queue, applies the learner's
outcomes one card at a time, requeues missed cards and keeps a debounced
snapshot in the session store so an interrupted pass can be resumed.

Store writes are best-effort: they run on the engine's executor, never block
or roll back the in-memory queue, and failures end up in `warnings`.
"""
import logging
import random
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Union

from flashdeck.core.exceptions import ConflictError, ValidationError
from flashdeck.models.enums import CardStatus, Outcome
from flashdeck.schemas.study_session import (
    CardSnapshot,
    SessionStats,
    SessionStateData,
    StudySessionResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_SAVE_DELAY_SECONDS = 2.0


class EngineState(str, Enum):
    """Lifecycle of one engine instance. FINISHED is terminal."""
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    FINISHED = "finished"


class CardStore(Protocol):
    def update_card_status(self, card_id: int, deck_id: int, status: CardStatus) -> Any: ...


class SessionStore(Protocol):
    def get_session(self, deck_id: int) -> Optional[StudySessionResponse]: ...

    def save_session(self, deck_id: int, state: SessionStateData) -> Any: ...

    def delete_session(self, deck_id: int) -> None: ...


def to_snapshot(card: Any) -> CardSnapshot:
    """Copy a card (table row or snapshot) into a queue entry."""
    if isinstance(card, CardSnapshot):
        return card.model_copy()
    return CardSnapshot.model_validate(card, from_attributes=True)


def build_queue(cards: Iterable[Any], rng: Optional[random.Random] = None) -> List[CardSnapshot]:
    """Uniformly shuffled copy of the cards. Status plays no part in the order."""
    queue = [to_snapshot(card) for card in cards]
    (rng or random).shuffle(queue)
    return queue


def requeue_position(remaining: int) -> int:
    """
    Index where a missed card goes back into the queue.

    `remaining` is the queue length after the card was removed from the head.
    The card lands just past the middle, so it neither comes straight back
    nor sinks to the very end of a short deck.
    """
    return min(remaining // 2 + 1, remaining)


def load_existing_session(session_store: SessionStore, deck_id: int) -> Optional[SessionStateData]:
    """
    Load the stored session state for a deck.

    An unreachable store or an unreadable record counts as no prior session.
    """
    try:
        stored = session_store.get_session(deck_id)
    except Exception as e:
        logger.warning(f"Could not load stored session for deck {deck_id}, starting fresh: {e}")
        return None
    return stored.state if stored is not None else None


class SessionEngine:
    """
    Owns the review queue and outcome counters of one study pass over a deck.

    Args:
        deck_id: Deck being studied
        card_store: Receives a status update for every outcome
        session_store: Receives debounced snapshots and the final delete
        save_delay: Quiet period in seconds before a snapshot is written
        max_requeues: Optional cap on how often one card is requeued;
            None requeues missed cards indefinitely
        rng: Random source for the fresh-build shuffle
        executor: Runs store writes; defaults to a private single worker,
            which keeps this engine's writes in dispatch order
        timer_factory: Creates the debounce timer (threading.Timer signature)
    """

    def __init__(
        self,
        deck_id: int,
        card_store: CardStore,
        session_store: SessionStore,
        save_delay: float = DEFAULT_SAVE_DELAY_SECONDS,
        max_requeues: Optional[int] = None,
        rng: Optional[random.Random] = None,
        executor: Optional[Executor] = None,
        timer_factory: Callable[..., Any] = threading.Timer,
    ):
        self.deck_id = deck_id
        self.card_store = card_store
        self.session_store = session_store
        self.save_delay = save_delay
        self.max_requeues = max_requeues
        self._rng = rng or random.Random()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix=f"study-deck-{deck_id}"
        )
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._pending_save = None
        self._save_generation = 0
        self._closed = False

        self.state = EngineState.UNINITIALIZED
        self.queue: List[CardSnapshot] = []
        self.stats = SessionStats()
        self.requeues: Dict[int, int] = {}
        self.warnings: List[str] = []

    # Observable state

    @property
    def queue_length(self) -> int:
        return len(self.queue)

    @property
    def current_card(self) -> Optional[CardSnapshot]:
        return self.queue[0] if self.queue else None

    @property
    def is_finished(self) -> bool:
        return self.state is EngineState.FINISHED

    # Operations

    def build_or_resume(
        self,
        cards: Iterable[Any],
        existing: Optional[SessionStateData] = None,
        resume: bool = False,
    ) -> None:
        """
        Initialize the queue, once per engine.

        With an existing session and `resume`, its queue and stats are adopted
        as they are. Otherwise any existing session is deleted and the cards
        are shuffled into a fresh queue. An empty queue finishes the session
        straight away.
        """
        with self._lock:
            if self.state is not EngineState.UNINITIALIZED:
                logger.debug(f"Study session for deck {self.deck_id} already initialized, ignoring")
                return

            if existing is not None and resume:
                self.queue = [card.model_copy() for card in existing.queue]
                self.stats = existing.stats.model_copy()
                self.requeues = dict(existing.requeues)
                logger.info(f"Resumed study session for deck {self.deck_id} with {len(self.queue)} card(s) left")
            else:
                if existing is not None:
                    self._dispatch("delete declined session", self.session_store.delete_session, self.deck_id)
                self.queue = build_queue(cards, self._rng)
                self.stats = SessionStats()
                self.requeues = {}
                logger.info(f"Built study queue for deck {self.deck_id} with {len(self.queue)} card(s)")

            if self.queue:
                self.state = EngineState.ACTIVE
                self._schedule_save()
            else:
                self._finish()

    def apply_outcome(self, outcome: Union[Outcome, str], card: Union[CardSnapshot, int]) -> CardStatus:
        """
        Apply the learner's outcome to the card at the head of the queue.

        'easy' and 'good' remove the card; 'again' puts it back at
        requeue_position() of the remaining queue. Returns the status written
        to the card store.

        Raises:
            ValidationError: Unknown outcome, or `card` is not the head card
            ConflictError: The session is not active
        """
        try:
            outcome = Outcome(outcome)
        except ValueError:
            raise ValidationError(f"Unknown outcome: {outcome!r}")
        card_id = card if isinstance(card, int) else card.id

        with self._lock:
            if self.state is not EngineState.ACTIVE:
                raise ConflictError(f"Study session for deck {self.deck_id} is {self.state.value}")
            head = self.queue[0]
            if head.id != card_id:
                raise ValidationError(
                    f"Card {card_id} is not at the head of the queue for deck {self.deck_id} (expected {head.id})"
                )

            self.queue.pop(0)
            status = outcome.card_status
            setattr(self.stats, outcome.value, getattr(self.stats, outcome.value) + 1)

            if outcome is Outcome.AGAIN:
                times_requeued = self.requeues.get(head.id, 0)
                if self.max_requeues is None or times_requeued < self.max_requeues:
                    position = requeue_position(len(self.queue))
                    self.queue.insert(position, head.model_copy(update={"status": status}))
                    self.requeues[head.id] = times_requeued + 1
                else:
                    logger.info(f"Card {head.id} hit the requeue cap of {self.max_requeues}, dropping it")

            self._dispatch("update card status", self.card_store.update_card_status, head.id, self.deck_id, status)

            if self.queue:
                self._schedule_save()
            else:
                self._finish()
            return status

    def snapshot(self) -> SessionStateData:
        """Copy of the current queue, stats and requeue counts."""
        with self._lock:
            return self._snapshot()

    def flush(self) -> Optional[Future]:
        """Write the snapshot now instead of waiting for the quiet period."""
        with self._lock:
            return self._flush_locked()

    def close(self, flush: bool = False) -> None:
        """
        Tear the engine down, cancelling any pending save.

        With `flush`, an active session's snapshot is written first and the
        call waits for all of the engine's outstanding writes. Without it,
        writes that have not started are dropped and the call waits only for
        the one already running, so nothing is written after close returns.
        """
        with self._lock:
            if self._closed:
                return
            if flush:
                self._flush_locked()
            self._cancel_pending_save()
            self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True, cancel_futures=not flush)

    # Internals, called with self._lock held

    def _snapshot(self) -> SessionStateData:
        return SessionStateData(
            queue=[card.model_copy() for card in self.queue],
            stats=self.stats.model_copy(),
            requeues=dict(self.requeues),
        )

    def _finish(self) -> None:
        self.state = EngineState.FINISHED
        self._cancel_pending_save()
        self._dispatch("delete finished session", self.session_store.delete_session, self.deck_id)
        logger.info(
            f"Study session for deck {self.deck_id} finished: "
            f"{self.stats.easy} easy, {self.stats.good} good, {self.stats.again} again"
        )

    def _flush_locked(self) -> Optional[Future]:
        self._cancel_pending_save()
        if self._closed or self.state is not EngineState.ACTIVE or not self.queue:
            return None
        return self._dispatch("save session", self.session_store.save_session, self.deck_id, self._snapshot())

    def _schedule_save(self) -> None:
        self._cancel_pending_save()
        self._save_generation += 1
        timer = self._timer_factory(self.save_delay, self._save_if_current, args=(self._save_generation,))
        timer.daemon = True
        self._pending_save = timer
        timer.start()

    def _cancel_pending_save(self) -> None:
        if self._pending_save is not None:
            self._pending_save.cancel()
            self._pending_save = None

    def _save_if_current(self, generation: int) -> None:
        # Runs on the timer thread
        with self._lock:
            if generation != self._save_generation or self._pending_save is None:
                return
            self._pending_save = None
            if self._closed or self.state is not EngineState.ACTIVE or not self.queue:
                return
            self._dispatch("save session", self.session_store.save_session, self.deck_id, self._snapshot())

    def _dispatch(self, description: str, fn: Callable[..., Any], *args: Any) -> Optional[Future]:
        try:
            future = self._executor.submit(fn, *args)
        except RuntimeError as e:
            # Executor already shut down
            self._report_failure(description, e)
            return None
        future.add_done_callback(lambda f: self._on_write_done(description, f))
        return future

    def _on_write_done(self, description: str, future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            self._report_failure(description, error)

    def _report_failure(self, description: str, error: BaseException) -> None:
        message = f"Failed to {description} for deck {self.deck_id}: {error}"
        logger.warning(message)
        self.warnings.append(message)
