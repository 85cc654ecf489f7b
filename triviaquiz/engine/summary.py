from __future__ import annotations

"""Display text for each session phase."""

from typing import Sequence

from ..bank.models import QuestionRecord

IDLE_MESSAGE = "Press 'Start Quiz' to begin."
EMPTY_BANK_MESSAGE = "No valid questions found. Please check your quiz file and try again."
PERFECT_MESSAGE = "Great job! You got everything right!"


def format_score(score: int, total: int) -> str:
    return f"Score: {score}/{total}"


def format_missed(missed: Sequence[QuestionRecord]) -> str:
    """Return the missed-question list, or the congratulatory line if empty."""
    if not missed:
        return PERFECT_MESSAGE
    lines = ["Missed Questions:", ""]
    for rec in missed:
        lines.append(f"Q: {rec.prompt}")
        lines.append(f"A: {rec.answer}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def format_summary(score: int, total: int, elapsed_seconds: int, missed: Sequence[QuestionRecord]) -> str:
    """Finished-phase summary: final score, elapsed time, then missed items."""
    lines = [
        f"Quiz Over! Your score: {score}/{total}",
        f"Time: {elapsed_seconds}",
        "",
        format_missed(missed),
    ]
    return "\n".join(lines)
