"""Threshold, preference, and user settings records."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass, field

from riskgate.constants.config import (
    DEFAULT_THRESHOLD_ACTION,
    DEFAULT_THRESHOLD_ACTIVE,
    DEFAULT_THRESHOLD_CUTOFF,
)
from riskgate.model.issues import IgnoredIssue
from riskgate.model.taxonomy import Action, RiskType


@dataclass(frozen=True)
class Threshold:
    """Per-domain policy: fire ``action`` when an active domain scores below ``cutoff``."""

    action: Action = Action(DEFAULT_THRESHOLD_ACTION)
    active: bool = DEFAULT_THRESHOLD_ACTIVE
    cutoff: float = DEFAULT_THRESHOLD_CUTOFF

    def fires(self, score: float) -> bool:
        return self.active and score < self.cutoff


@dataclass(frozen=True)
class RiskThresholds:
    """One threshold per domain plus the total."""

    total: Threshold = Threshold()
    author: Threshold = Threshold()
    engineering: Threshold = Threshold()
    license: Threshold = Threshold()
    malicious_code: Threshold = Threshold()
    vulnerability: Threshold = Threshold()

    def for_type(self, risk_type: RiskType) -> Threshold:
        match risk_type:
            case RiskType.TOTAL:
                return self.total
            case RiskType.VULNERABILITIES:
                return self.vulnerability
            case RiskType.MALICIOUS:
                return self.malicious_code
            case RiskType.AUTHORS:
                return self.author
            case RiskType.ENGINEERING:
                return self.engineering
            case RiskType.LICENSE:
                return self.license


@dataclass(frozen=True)
class ProjectThresholds:
    """Cutoff-only view of a project's thresholds, as reported in job summaries."""

    author: float
    engineering: float
    license: float
    malicious: float
    total: float
    vulnerability: float


@dataclass(frozen=True)
class CorePreferences:
    """Resolved project preferences."""

    default_label: str | None = None
    thresholds: RiskThresholds = RiskThresholds()
    ignored_issues: tuple[IgnoredIssue, ...] = ()


@dataclass
class DefaultLabel:
    """Setting variant mapping arbitrary keys to default labels."""

    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class UserProject:
    """Setting variant holding thresholds keyed by domain name."""

    thresholds: dict[str, Threshold] = field(default_factory=dict)


Setting: TypeAlias = DefaultLabel | UserProject


@dataclass
class UserSettings:
    """Client-side settings, owned and persisted by the caller."""

    version: int
    projects: dict[str, Setting] = field(default_factory=dict)
