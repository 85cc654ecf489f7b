from __future__ import annotations

"""Question bank dataclasses."""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class QuestionRecord:
    """One prompt/answer pair, already trimmed and validated."""

    prompt: str
    answer: str


@dataclass(frozen=True)
class QuestionBank:
    """Ordered, immutable collection of records in source-line order."""

    records: Tuple[QuestionRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[QuestionRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> QuestionRecord:
        return self.records[index]

    def is_empty(self) -> bool:
        return not self.records
