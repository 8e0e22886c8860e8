"""Wire decoding exceptions."""

from __future__ import annotations

from riskgate.exceptions.base import RiskgateError


class WireFormatError(RiskgateError, ValueError):
    """Raised when a wire record is missing a field or carries the wrong type."""

    def __init__(self, record: str, field: str, message: str) -> None:
        self.record = record
        self.field = field
        super().__init__(f"{record}.{field}: {message}" if field else f"{record}: {message}")
