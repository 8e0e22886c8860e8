"""Severity weights, impact banding, and per-domain scoring."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from riskgate.constants.scoring import (
    CLEAN_DOMAIN_SCORE,
    HIGH_IMPACT_MIN_WEIGHT,
    IMPACT_BANDS,
    LOW_IMPACT_MIN_WEIGHT,
    MEDIUM_IMPACT_MIN_WEIGHT,
)
from riskgate.model import (
    IgnoredIssue,
    IgnoredReason,
    Issue,
    IssueImpacts,
    IssuesListItem,
    RiskDomain,
    RiskLevel,
    RiskScores,
)
from riskgate.scoring.ignore import ignored_index
from riskgate.types import ImpactBand


def level_weight(level: RiskLevel) -> float:
    return level.weight


def bucket(level: RiskLevel) -> ImpactBand:
    """Map a severity to its impact band using half-open weight bounds.

    Info weighs 1.0 and therefore lands in ``low``; it is counted, not dropped.
    """
    weight = level_weight(level)
    if weight >= LOW_IMPACT_MIN_WEIGHT:
        return "low"
    if weight >= MEDIUM_IMPACT_MIN_WEIGHT:
        return "medium"
    if weight >= HIGH_IMPACT_MIN_WEIGHT:
        return "high"
    return "critical"


def aggregate(issues: Iterable[Issue]) -> IssueImpacts:
    """Count issues per impact band."""
    counts = Counter(bucket(issue.severity) for issue in issues)
    return IssueImpacts(**{band: counts[band] for band in IMPACT_BANDS})


def domain_scores(issues: Iterable[Issue]) -> RiskScores:
    """Score each domain by its most severe issue.

    A domain without issues scores 1.0. The total is the lowest domain score.
    """
    lowest: dict[RiskDomain, float] = {domain: CLEAN_DOMAIN_SCORE for domain in RiskDomain}
    for issue in issues:
        lowest[issue.domain] = min(lowest[issue.domain], level_weight(issue.severity))

    return RiskScores(
        total=min(lowest.values()),
        vulnerability=lowest[RiskDomain.VULNERABILITIES],
        malicious=lowest[RiskDomain.MALICIOUS],
        author=lowest[RiskDomain.AUTHOR],
        engineering=lowest[RiskDomain.ENGINEERING],
        license=lowest[RiskDomain.LICENSE],
    )


def issues_list(issues: Iterable[Issue], ignored: Iterable[IgnoredIssue] = ()) -> list[IssuesListItem]:
    """Project issues for display, most severe first, marking ignored ones."""
    index = ignored_index(ignored)
    items = [
        IssuesListItem(
            risk_type=issue.domain.risk_type,
            score=level_weight(issue.severity),
            impact=issue.severity,
            title=issue.title,
            description=issue.description,
            tag=issue.tag,
            id=issue.id,
            ignored=index.get(issue.key, IgnoredReason.FALSE),
        )
        for issue in issues
    ]
    return sorted(items, key=lambda item: (item.score, item.risk_type, item.title))
