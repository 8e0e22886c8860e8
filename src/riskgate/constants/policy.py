"""Constants for threshold policy evaluation."""

from __future__ import annotations

# Explicit action precedence; a higher rank dominates when several domains fail.
ACTION_RANK: dict[str, int] = {"none": 0, "warn": 1, "break": 2}

MIN_CUTOFF: float = 0.0
MAX_CUTOFF: float = 1.0
