from __future__ import annotations

"""Free-text answer matching."""


def normalize(text: str) -> str:
    return (text or "").strip().lower()


def grade(answer: str, ground_truth: str) -> bool:
    """Case-insensitive comparison of trimmed strings."""
    return normalize(answer) == normalize(ground_truth)
