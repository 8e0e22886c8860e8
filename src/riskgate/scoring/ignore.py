"""Ignore overrides: drop issues a user has excluded by (id, tag)."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from riskgate.model import IgnoredIssue, IgnoredReason, Issue, IssueKey

logger = logging.getLogger(__name__)


def ignored_index(ignored: Iterable[IgnoredIssue]) -> dict[IssueKey, IgnoredReason]:
    """Map each ignored (id, tag) pair to its reason; the first entry for a pair wins."""
    index: dict[IssueKey, IgnoredReason] = {}
    for entry in ignored:
        if entry.key in index:
            logger.warning("Duplicate ignore entry for id=%s tag=%s", entry.id, entry.tag)
            continue
        index[entry.key] = entry.reason
    return index


def ignored_reason(issue: Issue, ignored: Iterable[IgnoredIssue]) -> IgnoredReason | None:
    """Return the reason the issue is ignored, or None when no entry matches exactly."""
    for entry in ignored:
        if entry.key == issue.key:
            return entry.reason
    return None


def filter_ignored(issues: Sequence[Issue], ignored: Iterable[IgnoredIssue]) -> tuple[Issue, ...]:
    """Return the issues that no ignore entry matches.

    Both id and tag must be equal. An issue missing its id or tag never
    matches, since ignore entries always carry both.
    """
    index = ignored_index(ignored)
    if not index:
        return tuple(issues)
    kept = tuple(issue for issue in issues if issue.key not in index)
    if len(kept) != len(issues):
        logger.debug("Ignored %d of %d issues", len(issues) - len(kept), len(issues))
    return kept
