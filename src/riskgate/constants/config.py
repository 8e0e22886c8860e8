"""Preference file defaults and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "riskgate.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"default_label", "thresholds", "ignored_issues"})
ALLOWED_THRESHOLD_KEYS: frozenset[str] = frozenset({"action", "active", "threshold"})
ALLOWED_IGNORED_ISSUE_KEYS: frozenset[str] = frozenset({"id", "tag", "reason"})

DEFAULT_THRESHOLD_ACTION: str = "none"
DEFAULT_THRESHOLD_ACTIVE: bool = False
DEFAULT_THRESHOLD_CUTOFF: float = 0.0
