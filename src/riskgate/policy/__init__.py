"""Threshold policy evaluation."""

from .evaluator import (
    EVALUATION_ORDER,
    PolicyDecision,
    action_rank,
    evaluate,
    evaluate_job,
    max_action,
    project_thresholds,
)

__all__ = [
    "EVALUATION_ORDER",
    "PolicyDecision",
    "action_rank",
    "evaluate",
    "evaluate_job",
    "max_action",
    "project_thresholds",
]
