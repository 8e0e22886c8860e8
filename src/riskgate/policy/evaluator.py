"""Threshold policy evaluation: pass/fail and the action a caller must take."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from riskgate.model import (
    Action,
    ProjectThresholds,
    RiskDomain,
    RiskScores,
    RiskThresholds,
    RiskType,
)

logger = logging.getLogger(__name__)

EVALUATION_ORDER: tuple[RiskType, ...] = (
    RiskType.TOTAL,
    *(domain.risk_type for domain in RiskDomain),
)


@dataclass(frozen=True)
class PolicyDecision:
    """Outcome of evaluating scores against thresholds."""

    passed: bool
    action: Action = Action.NONE
    failing: tuple[RiskType, ...] = ()


def action_rank(action: Action) -> int:
    """Rank actions so that none < warn < break."""
    return action.rank


def max_action(actions: Iterable[Action]) -> Action:
    """Return the most severe action, or ``Action.NONE`` when there are none."""
    return max(actions, key=action_rank, default=Action.NONE)


def evaluate(scores: RiskScores, thresholds: RiskThresholds) -> PolicyDecision:
    """Evaluate one package's scores against a project's thresholds.

    A domain fails when its threshold is active and its score is strictly
    below the cutoff. The package passes when nothing fails; otherwise the
    action is the most severe one among the failing domains.
    """
    failing: list[RiskType] = []
    actions: list[Action] = []
    for risk_type in EVALUATION_ORDER:
        threshold = thresholds.for_type(risk_type)
        if threshold.fires(scores.for_type(risk_type)):
            failing.append(risk_type)
            actions.append(threshold.action)

    if not failing:
        return PolicyDecision(passed=True)

    action = max_action(actions)
    logger.debug("Failing domains %s, action %s", ", ".join(str(t) for t in failing), action)
    return PolicyDecision(passed=False, action=action, failing=tuple(failing))


def evaluate_job(decisions: Iterable[PolicyDecision]) -> PolicyDecision:
    """Combine package decisions: a job passes only if every package passes."""
    failed = [decision for decision in decisions if not decision.passed]
    if not failed:
        return PolicyDecision(passed=True)

    failing = {risk_type for decision in failed for risk_type in decision.failing}
    return PolicyDecision(
        passed=False,
        action=max_action(decision.action for decision in failed),
        failing=tuple(risk_type for risk_type in EVALUATION_ORDER if risk_type in failing),
    )


def project_thresholds(thresholds: RiskThresholds) -> ProjectThresholds:
    """Flatten thresholds to their cutoffs."""
    return ProjectThresholds(
        author=thresholds.author.cutoff,
        engineering=thresholds.engineering.cutoff,
        license=thresholds.license.cutoff,
        malicious=thresholds.malicious_code.cutoff,
        total=thresholds.total.cutoff,
        vulnerability=thresholds.vulnerability.cutoff,
    )
