"""Taxonomy parsing exceptions."""

from __future__ import annotations

from riskgate.exceptions.base import RiskgateError


class UnknownTaxonomyLabel(RiskgateError, ValueError):
    """Raised when a domain, type, level, action, or reason label is not recognized."""

    def __init__(self, kind: str, label: object) -> None:
        self.kind = kind
        self.label = label
        super().__init__(f"Unknown {kind} label: {label!r}")
