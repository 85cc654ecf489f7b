from __future__ import annotations

from triviaquiz.bank.models import QuestionBank, QuestionRecord


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


def make_bank(*pairs: tuple[str, str]) -> QuestionBank:
    return QuestionBank(records=tuple(QuestionRecord(prompt=p, answer=a) for p, a in pairs))
