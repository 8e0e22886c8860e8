"""Constants for weight-to-impact banding and domain scoring."""

from __future__ import annotations

# Half-open lower bounds on severity weight for each impact band.
LOW_IMPACT_MIN_WEIGHT: float = 0.8
MEDIUM_IMPACT_MIN_WEIGHT: float = 0.5
HIGH_IMPACT_MIN_WEIGHT: float = 0.2

IMPACT_BANDS: tuple[str, ...] = ("low", "medium", "high", "critical")

# Domain scores reported by the analysis service are normalized to this range.
MIN_SCORE: float = 0.0
MAX_SCORE: float = 1.0

# Score of a domain with no contributing issues.
CLEAN_DOMAIN_SCORE: float = 1.0
