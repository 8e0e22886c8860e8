"""Shared exception hierarchy for Riskgate."""

from __future__ import annotations

from .base import RiskgateError
from .config import ConfigError
from .package import MalformedSubmission, UnknownEcosystem
from .taxonomy import UnknownTaxonomyLabel
from .wire import WireFormatError

__all__ = [
    "ConfigError",
    "MalformedSubmission",
    "RiskgateError",
    "UnknownEcosystem",
    "UnknownTaxonomyLabel",
    "WireFormatError",
]
