"""Configuration-related exceptions."""

from __future__ import annotations

from riskgate.exceptions.base import RiskgateError


class ConfigError(RiskgateError, ValueError):
    """Raised when a preference file is invalid."""
