"""User settings threshold store."""

from .store import project_thresholds_for, set_threshold

__all__ = ["project_thresholds_for", "set_threshold"]
