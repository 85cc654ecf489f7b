from __future__ import annotations

"""Configuration loading and validation for Trivia Quiz.

This module loads YAML configuration, applies defaults, and repairs values
that are out of range so the front-ends always get a usable configuration.
"""

import codecs
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_MAX_QUESTIONS = 10
DEFAULT_TICK_INTERVAL_MS = 200


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _positive_int(section: Dict[str, Any], key: str, default: int, label: str) -> None:
    value = section.get(key)
    try:
        ok = not isinstance(value, bool) and int(value) == value and int(value) > 0
    except (TypeError, ValueError):
        ok = False
    if not ok:
        print(f"WARNING: Invalid {label} '{value}', using {default}.")
        section[key] = default
    else:
        section[key] = int(value)


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing sections
    for name in ("quiz", "timer", "ui"):
        if not isinstance(cfg.get(name), dict):
            cfg[name] = {}

    quiz = cfg["quiz"]
    timer = cfg["timer"]
    ui = cfg["ui"]

    quiz.setdefault("question_file", None)
    quiz.setdefault("max_questions", DEFAULT_MAX_QUESTIONS)
    quiz.setdefault("encoding", "utf-8")

    timer.setdefault("tick_interval_ms", DEFAULT_TICK_INTERVAL_MS)

    ui.setdefault("title", "Trivia Quiz")
    ui.setdefault("width", 400)
    ui.setdefault("height", 400)

    _positive_int(quiz, "max_questions", DEFAULT_MAX_QUESTIONS, "max_questions")
    _positive_int(timer, "tick_interval_ms", DEFAULT_TICK_INTERVAL_MS, "tick_interval_ms")
    _positive_int(ui, "width", 400, "window width")
    _positive_int(ui, "height", 400, "window height")

    qf = quiz.get("question_file")
    if qf is None or not str(qf).strip():
        quiz["question_file"] = None
    else:
        quiz["question_file"] = str(qf)

    encoding = str(quiz.get("encoding") or "").strip()
    try:
        codecs.lookup(encoding)
    except LookupError:
        print(f"WARNING: Unknown encoding '{encoding}', using 'utf-8'.")
        encoding = "utf-8"
    quiz["encoding"] = encoding

    return cfg
