"""Root exception for Riskgate."""

from __future__ import annotations


class RiskgateError(Exception):
    """Base class for all errors raised by Riskgate."""
