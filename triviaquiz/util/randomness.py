from __future__ import annotations

"""Randomness helpers for question order and seeding."""

import os
import random
from typing import Optional


def seed_from_env() -> Optional[int]:
    """Return the SEED env var as an int, or None if unset or invalid."""
    seed = os.environ.get("SEED")
    if seed is None:
        return None
    try:
        return int(seed)
    except ValueError:
        return None


def make_rng(seed: int | None = None) -> random.Random:
    """Private RNG for one engine; falls back to SEED, then OS entropy."""
    if seed is None:
        seed = seed_from_env()
    return random.Random(seed)
