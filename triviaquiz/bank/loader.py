from __future__ import annotations

"""Question bank loader.

Parses ``PROMPT|ANSWER`` lines into a :class:`QuestionBank`. Bad input never
aborts loading: malformed lines are skipped and an unreadable source yields an
empty bank, both reported through a ``log`` callable.
"""

import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..util.explain import trace as xtrace
from .models import QuestionBank, QuestionRecord

DELIMITER = "|"
DEFAULT_MAX_QUESTIONS = 10

LogFn = Callable[[str], None]


def _default_resource_path() -> Path:
    return Path(__file__).resolve().parents[1] / "resources" / "quiz.txt"


def warn(msg: str) -> None:
    """Default log collaborator: print a warning line to stderr."""
    print(f"WARNING: {msg}", file=sys.stderr)


def parse_line(line: str) -> Optional[QuestionRecord]:
    """Return a record for a well-formed line, or None when it is malformed."""
    parts = line.split(DELIMITER)
    if len(parts) != 2:
        return None
    prompt, answer = parts[0].strip(), parts[1].strip()
    if not prompt or not answer:
        return None
    return QuestionRecord(prompt=prompt, answer=answer)


def load(raw_lines: Iterable[str], max_count: int = DEFAULT_MAX_QUESTIONS, log: LogFn | None = None) -> QuestionBank:
    """Build a bank from raw lines, keeping at most ``max_count`` records.

    Blank lines are skipped silently. Lines that do not split into exactly two
    non-empty segments on ``|`` are skipped and reported. Once ``max_count``
    records are collected the remaining lines are not read.

    Args:
        raw_lines: Source lines, with or without trailing newlines.
        max_count: Upper bound on accepted records.
        log: Diagnostic sink; defaults to :func:`warn`.

    Returns:
        A bank with 0..max_count records in source order.
    """
    if max_count < 0:
        raise ValueError(f"max_count must be >= 0, got {max_count}")
    log = log or warn

    records: List[QuestionRecord] = []
    skipped = 0
    for line in raw_lines:
        if len(records) >= max_count:
            break
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        rec = parse_line(text)
        if rec is None:
            skipped += 1
            log(f"Skipping malformed line: {text}")
            continue
        records.append(rec)

    xtrace("bank_loaded", {"accepted": len(records), "skipped": skipped, "max": max_count})
    return QuestionBank(records=tuple(records))


def load_file(
    path: str | Path,
    max_count: int = DEFAULT_MAX_QUESTIONS,
    log: LogFn | None = None,
    *,
    encoding: str = "utf-8",
) -> QuestionBank:
    """Load a bank from a text file; an unreadable file gives an empty bank."""
    log = log or warn
    p = Path(path)
    try:
        with p.open("r", encoding=encoding) as f:
            return load(f, max_count, log)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        log(f"Error loading questions from '{p}': {e}")
        xtrace("bank_unreadable", {"path": str(p), "error": str(e)})
        return QuestionBank()


def load_resource(max_count: int = DEFAULT_MAX_QUESTIONS, log: LogFn | None = None) -> QuestionBank:
    """Load the sample bank shipped with the package."""
    return load_file(_default_resource_path(), max_count, log)
