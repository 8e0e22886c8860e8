"""Preference loading and validation for Riskgate.

This package facade re-exports the public names so callers can use
``from riskgate.config import ...``.
"""

from __future__ import annotations

from riskgate.config.loader import load_preferences
from riskgate.config.validator import _suggest_key, validate_preferences_file

__all__ = [
    "_suggest_key",
    "load_preferences",
    "validate_preferences_file",
]
