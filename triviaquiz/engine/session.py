from __future__ import annotations

"""Quiz session engine: lifecycle, scoring, missed questions and timing.

The engine is front-end agnostic. A console loop, a Tkinter window or a test
drives it through the same commands (``start``, ``submit_answer``, ``tick``)
and renders ``current_question()`` or a :class:`SessionSnapshot`.

All commands must be issued from one control thread; nothing here locks.
"""

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from ..util.events import ANSWER_GRADED, SESSION_FINISHED, SESSION_STARTED, EventBus
from ..util.explain import trace as xtrace
from ..bank.models import QuestionBank, QuestionRecord
from .clock import ClockFn, ElapsedClock
from .grading import grade
from .summary import EMPTY_BANK_MESSAGE, IDLE_MESSAGE, format_summary


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class EmptyBankError(Exception):
    """Raised by :meth:`QuizSession.start` when there is nothing to ask."""

    def __init__(self, message: str = EMPTY_BANK_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class SessionState:
    """Mutable per-session counters, owned by exactly one engine."""

    phase: Phase = Phase.IDLE
    order: List[int] = field(default_factory=list)
    cursor: int = 0
    score: int = 0
    missed: List[QuestionRecord] = field(default_factory=list)
    elapsed_seconds: int = 0


@dataclass(frozen=True)
class SessionSnapshot:
    phase: Phase
    score: int
    total: int
    cursor: int
    elapsed_seconds: int
    missed: Tuple[QuestionRecord, ...]
    text: str


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one submission; ``missed``/``elapsed_seconds`` only once Finished."""

    correct: bool
    score: int
    total: int
    phase: Phase
    missed: Optional[Tuple[QuestionRecord, ...]] = None
    elapsed_seconds: Optional[int] = None


class QuizSession:
    def __init__(
        self,
        bank: QuestionBank,
        *,
        rng: random.Random | None = None,
        clock: ClockFn | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.bank = bank
        self.bus = bus
        self._rng = rng or random.Random()
        self._clock = ElapsedClock(clock)
        self._state = SessionState()

    # ---- observers -------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def total(self) -> int:
        return len(self.bank)

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def order(self) -> Tuple[int, ...]:
        return tuple(self._state.order)

    @property
    def missed(self) -> Tuple[QuestionRecord, ...]:
        return tuple(self._state.missed)

    @property
    def elapsed_seconds(self) -> int:
        return self._state.elapsed_seconds

    @property
    def state(self) -> SessionState:
        """A copy of the current state; mutating it has no effect."""
        s = self._state
        return replace(s, order=list(s.order), missed=list(s.missed))

    def current_record(self) -> Optional[QuestionRecord]:
        s = self._state
        if s.phase is not Phase.RUNNING:
            return None
        return self.bank[s.order[s.cursor]]

    def current_question(self) -> str:
        """Display text for the current phase."""
        s = self._state
        if s.phase is Phase.RUNNING:
            return self.bank[s.order[s.cursor]].prompt
        if s.phase is Phase.FINISHED:
            return format_summary(s.score, len(s.order), s.elapsed_seconds, s.missed)
        return IDLE_MESSAGE

    def snapshot(self) -> SessionSnapshot:
        s = self._state
        return SessionSnapshot(
            phase=s.phase,
            score=s.score,
            total=self.total,
            cursor=s.cursor,
            elapsed_seconds=s.elapsed_seconds,
            missed=tuple(s.missed),
            text=self.current_question(),
        )

    # ---- commands --------------------------------------------------------

    def start(self) -> SessionSnapshot:
        """Begin a fresh session over a new random order of the whole bank.

        Callable from any phase; a previous session's data is discarded.

        Raises:
            EmptyBankError: the bank has no records. The phase is unchanged.
        """
        if self.bank.is_empty():
            xtrace("start_rejected", {"reason": "empty_bank"})
            raise EmptyBankError()

        order = list(range(len(self.bank)))
        # Fisher-Yates: every permutation equally likely
        self._rng.shuffle(order)
        self._state = SessionState(phase=Phase.RUNNING, order=order)
        self._clock.start()

        snap = self.snapshot()
        xtrace("session_started", {"total": snap.total, "order": order})
        self._emit(SESSION_STARTED, snap)
        return snap

    def submit_answer(self, text: str) -> Optional[SubmitResult]:
        """Grade ``text`` against the current question and advance.

        Returns None, changing nothing, unless the session is Running. A wrong
        answer is final for that question.
        """
        s = self._state
        if s.phase is not Phase.RUNNING:
            return None

        rec = self.bank[s.order[s.cursor]]
        correct = grade(text, rec.answer)
        if correct:
            s.score += 1
        else:
            s.missed.append(rec)
        s.cursor += 1
        xtrace("answer_graded", {"index": s.cursor, "correct": correct, "score": s.score})

        if s.cursor == len(s.order):
            s.elapsed_seconds = self._clock.stop()
            s.phase = Phase.FINISHED
            result = SubmitResult(
                correct=correct,
                score=s.score,
                total=len(s.order),
                phase=s.phase,
                missed=tuple(s.missed),
                elapsed_seconds=s.elapsed_seconds,
            )
            snap = self.snapshot()
            self._emit(ANSWER_GRADED, snap)
            xtrace("session_finished", {"score": s.score, "total": len(s.order), "elapsed": s.elapsed_seconds})
            self._emit(SESSION_FINISHED, snap)
            return result

        self._emit(ANSWER_GRADED, self.snapshot())
        return SubmitResult(correct=correct, score=s.score, total=len(s.order), phase=s.phase)

    def tick(self) -> None:
        """Advance elapsed time; ignored unless Running."""
        if self._state.phase is not Phase.RUNNING:
            return
        self._state.elapsed_seconds = self._clock.tick()

    def _emit(self, event: str, snap: SessionSnapshot) -> None:
        if self.bus is not None:
            self.bus.emit(event, snap)
