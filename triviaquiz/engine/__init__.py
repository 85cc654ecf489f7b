from .clock import ElapsedClock
from .session import (
    EmptyBankError,
    Phase,
    QuizSession,
    SessionSnapshot,
    SessionState,
    SubmitResult,
)

__all__ = [
    "ElapsedClock",
    "EmptyBankError",
    "Phase",
    "QuizSession",
    "SessionSnapshot",
    "SessionState",
    "SubmitResult",
]
