"""Trivia Quiz package initialization.

The core lives in :mod:`triviaquiz.bank` and :mod:`triviaquiz.engine`; the
console and Tkinter front-ends under :mod:`triviaquiz.app` only drive it.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
