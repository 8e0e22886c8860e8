"""Issue scoring, impact aggregation, and ignore filtering."""

from .ignore import filter_ignored, ignored_index, ignored_reason
from .score import aggregate, bucket, domain_scores, issues_list, level_weight

__all__ = [
    "aggregate",
    "bucket",
    "domain_scores",
    "filter_ignored",
    "ignored_index",
    "ignored_reason",
    "issues_list",
    "level_weight",
]
