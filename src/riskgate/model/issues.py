"""Issue, score, and impact records."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass

from riskgate.model.taxonomy import IgnoredReason, RiskDomain, RiskLevel, RiskType

IssueKey: TypeAlias = tuple[str | None, str | None]


@dataclass(frozen=True)
class Issue:
    """A single finding about a package, produced by the analysis service."""

    title: str
    description: str
    severity: RiskLevel
    domain: RiskDomain
    tag: str | None = None
    id: str | None = None

    @property
    def key(self) -> IssueKey:
        """Identity used to match ignore overrides."""
        return (self.id, self.tag)


@dataclass(frozen=True)
class IgnoredIssue:
    """A project-scoped override excluding one issue from scoring."""

    id: str
    tag: str
    reason: IgnoredReason

    @property
    def key(self) -> IssueKey:
        return (self.id, self.tag)


@dataclass(frozen=True)
class IssueImpacts:
    """Count of issues per impact band."""

    low: int = 0
    medium: int = 0
    high: int = 0
    critical: int = 0

    @property
    def total(self) -> int:
        return self.low + self.medium + self.high + self.critical


@dataclass(frozen=True)
class RiskScores:
    """Per-domain health scores; 0.0 is worst, 1.0 is best."""

    total: float = 0.0
    vulnerability: float = 0.0
    malicious: float = 0.0
    author: float = 0.0
    engineering: float = 0.0
    license: float = 0.0

    def for_type(self, risk_type: RiskType) -> float:
        """Return the score reported for a risk type."""
        match risk_type:
            case RiskType.TOTAL:
                return self.total
            case RiskType.VULNERABILITIES:
                return self.vulnerability
            case RiskType.MALICIOUS:
                return self.malicious
            case RiskType.AUTHORS:
                return self.author
            case RiskType.ENGINEERING:
                return self.engineering
            case RiskType.LICENSE:
                return self.license


@dataclass(frozen=True)
class IssuesListItem:
    """Display projection of an issue."""

    risk_type: RiskType
    score: float
    impact: RiskLevel
    title: str
    description: str
    tag: str | None
    id: str | None
    ignored: IgnoredReason
