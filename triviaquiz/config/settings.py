from __future__ import annotations

"""Typed quiz settings using Pydantic."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class QuizSettings(BaseModel):
    """Settings consumed by the front-ends.

    - question_file: bank source; None means the packaged sample bank
    - max_questions: cap on accepted records (>0)
    - tick_interval_ms: period of the front-end's timer callback (>0)
    """

    question_file: Optional[str] = None
    max_questions: int = Field(10, gt=0)
    encoding: str = "utf-8"
    tick_interval_ms: int = Field(200, gt=0)
    title: str = "Trivia Quiz"
    width: int = Field(400, gt=0)
    height: int = Field(400, gt=0)


def settings_from_config(cfg: Dict[str, Any]) -> QuizSettings:
    """Flatten a validated config dictionary into :class:`QuizSettings`."""
    quiz = cfg.get("quiz", {})
    timer = cfg.get("timer", {})
    ui = cfg.get("ui", {})
    qf = quiz.get("question_file")
    return QuizSettings(
        question_file=str(qf) if qf is not None else None,
        max_questions=quiz.get("max_questions", 10),
        encoding=str(quiz.get("encoding", "utf-8")),
        tick_interval_ms=timer.get("tick_interval_ms", 200),
        title=str(ui.get("title", "Trivia Quiz")),
        width=ui.get("width", 400),
        height=ui.get("height", 400),
    )
