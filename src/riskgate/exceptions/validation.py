"""Collect-all validation problems for preference files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One preference file problem, keyed by a stable code and a dotted field path."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        location = f"{self.path}:{self.field}" if self.field else self.path
        text = f"[{self.code}] {location} {self.message}"
        return f"{text} ({self.hint})" if self.hint else text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by code, then field, so reports are stable across runs."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
