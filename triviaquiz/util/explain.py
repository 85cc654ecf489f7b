from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with the ``--explain`` CLI flag to get one line per session milestone:
bank loaded, session started, each graded answer, session finished.
"""

import json
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def format_line(event: str, payload: Dict[str, Any] | None = None) -> str:
    data = payload or {}
    try:
        return f"[EXPLAIN] {event} :: {json.dumps(data, separators=(',', ':'), ensure_ascii=False)}"
    except (TypeError, ValueError):
        return f"[EXPLAIN] {event}"


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    print(format_line(event, payload))
