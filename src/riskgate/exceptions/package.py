"""Package identity exceptions."""

from __future__ import annotations

from riskgate.exceptions.base import RiskgateError


class UnknownEcosystem(RiskgateError, ValueError):
    """Raised when a registry or ecosystem label maps to no package type."""

    def __init__(self, registry: object) -> None:
        self.registry = registry
        super().__init__(f"Failed to convert registry {registry!r} to package type")


class MalformedSubmission(RiskgateError, ValueError):
    """Raised when a submission matches neither the descriptor nor the purl shape."""

    def __init__(self, payload: object) -> None:
        self.payload = payload
        super().__init__(f"Submission is neither a descriptor list nor a purl list: {payload!r}")
