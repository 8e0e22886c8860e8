"""Wire codec for JSON-compatible records."""

from .records import (
    decode_ignored_issue,
    decode_issue,
    decode_issue_impacts,
    decode_package_descriptor,
    decode_package_specifier,
    decode_project_thresholds,
    decode_risk_scores,
    decode_risk_thresholds,
    decode_setting,
    decode_threshold,
    decode_user_settings,
    encode_ignored_issue,
    encode_issue,
    encode_issue_impacts,
    encode_package_descriptor,
    encode_package_specifier,
    encode_project_thresholds,
    encode_risk_scores,
    encode_risk_thresholds,
    encode_setting,
    encode_threshold,
    encode_user_settings,
)

__all__ = [
    "decode_ignored_issue",
    "decode_issue",
    "decode_issue_impacts",
    "decode_package_descriptor",
    "decode_package_specifier",
    "decode_project_thresholds",
    "decode_risk_scores",
    "decode_risk_thresholds",
    "decode_setting",
    "decode_threshold",
    "decode_user_settings",
    "encode_ignored_issue",
    "encode_issue",
    "encode_issue_impacts",
    "encode_package_descriptor",
    "encode_package_specifier",
    "encode_project_thresholds",
    "encode_risk_scores",
    "encode_risk_thresholds",
    "encode_setting",
    "encode_threshold",
    "encode_user_settings",
]
