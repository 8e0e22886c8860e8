"""Shared pytest fixtures and record builders."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from riskgate.model import Issue, RiskDomain, RiskLevel


@pytest.fixture(scope="session")
def schemas_root() -> Path:
    """Return the directory holding the wire JSON Schemas."""
    return Path(__file__).resolve().parents[1] / "schemas"


@pytest.fixture(scope="session")
def load_schema(schemas_root: Path) -> Callable[[str], dict[str, Any]]:
    """Return a loader for a named JSON Schema file."""

    def _load(name: str) -> dict[str, Any]:
        return json.loads((schemas_root / f"{name}.schema.json").read_text(encoding="utf-8"))

    return _load


@pytest.fixture()
def make_issue() -> Callable[..., Issue]:
    """Return a builder for issues with sensible defaults."""

    def _make(
        severity: RiskLevel = RiskLevel.HIGH,
        domain: RiskDomain = RiskDomain.VULNERABILITIES,
        *,
        id: str | None = "CVE-2024-0001",
        tag: str | None = "HV00001",
        title: str = "Prototype pollution",
    ) -> Issue:
        return Issue(
            title=title,
            description="desc",
            severity=severity,
            domain=domain,
            tag=tag,
            id=id,
        )

    return _make
