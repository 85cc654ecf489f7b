from __future__ import annotations

"""Tiny pub/sub event bus used to push session snapshots to front-ends."""

from typing import Any, Callable, Dict, List

from .explain import trace as xtrace

SESSION_STARTED = "session_started"
ANSWER_GRADED = "answer_graded"
SESSION_FINISHED = "session_finished"


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._subs.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for h in list(self._subs.get(event, [])):
            try:
                h(payload)
            except Exception as e:
                # Best effort; a broken subscriber must not corrupt the session
                xtrace("handler_failed", {"event": event, "error": repr(e)})
