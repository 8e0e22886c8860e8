"""Tests for ignore-override filtering."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from riskgate.model import IgnoredIssue, IgnoredReason, Issue
from riskgate.scoring import filter_ignored, ignored_reason


def _ignore(id: str = "CVE-2024-0001", tag: str = "HV00001") -> IgnoredIssue:
    return IgnoredIssue(id=id, tag=tag, reason=IgnoredReason.FALSE_POSITIVE)


def test_exact_match_is_removed(make_issue: Callable[..., Issue]) -> None:
    issue = make_issue()

    assert filter_ignored([issue], [_ignore()]) == ()


@pytest.mark.parametrize(
    ("issue_id", "issue_tag"),
    [
        ("CVE-2024-9999", "HV00001"),
        ("CVE-2024-0001", "HV99999"),
        (None, "HV00001"),
        ("CVE-2024-0001", None),
        (None, None),
    ],
    ids=["other_id", "other_tag", "missing_id", "missing_tag", "missing_both"],
)
def test_partial_match_is_kept(make_issue: Callable[..., Issue], issue_id: str | None, issue_tag: str | None) -> None:
    issue = make_issue(id=issue_id, tag=issue_tag)

    assert filter_ignored([issue], [_ignore()]) == (issue,)


def test_other_fields_do_not_affect_matching(make_issue: Callable[..., Issue]) -> None:
    issues = [make_issue(title="first"), make_issue(title="second")]

    assert filter_ignored(issues, [_ignore()]) == ()


def test_inputs_are_not_mutated(make_issue: Callable[..., Issue]) -> None:
    issues = [make_issue(), make_issue(id="other")]
    ignored = [_ignore()]

    kept = filter_ignored(issues, ignored)

    assert len(issues) == 2
    assert ignored == [_ignore()]
    assert kept == (issues[1],)


def test_ignored_reason_lookup(make_issue: Callable[..., Issue]) -> None:
    assert ignored_reason(make_issue(), [_ignore()]) is IgnoredReason.FALSE_POSITIVE
    assert ignored_reason(make_issue(id=None), [_ignore()]) is None


def test_duplicate_ignore_entries_warn(make_issue: Callable[..., Issue], caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="riskgate.scoring.ignore"):
        kept = filter_ignored([make_issue()], [_ignore(), _ignore()])

    assert kept == ()
    assert "Duplicate ignore entry" in caplog.text
