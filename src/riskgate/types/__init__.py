"""Shared type aliases for Riskgate."""

from .common import ImpactBand, JsonObject, JsonScalar, JsonValue

__all__ = [
    "ImpactBand",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
