"""Wire labels, historical aliases, and display codes for the risk taxonomy."""

from __future__ import annotations

# Aliases are consulted only while decoding; encoders always emit the canonical label.
RISK_DOMAIN_ALIASES: dict[str, str] = {
    "author_risk": "author",
    "engineering_risk": "engineering",
    "malicious": "malicious_code",
    "vulnerabilities": "vulnerability",
    "license_risk": "license",
}

RISK_TYPE_ALIASES: dict[str, str] = {
    "maliciousRisk": "maliciousCodeRisk",
}

RISK_LEVEL_ALIASES: dict[str, str] = {}
ACTION_ALIASES: dict[str, str] = {}
IGNORED_REASON_ALIASES: dict[str, str] = {}

DOMAIN_TO_RISK_TYPE: dict[str, str] = {
    "author": "authorsRisk",
    "engineering": "engineeringRisk",
    "malicious_code": "maliciousCodeRisk",
    "vulnerability": "vulnerabilities",
    "license": "licenseRisk",
}

RISK_TYPE_CODES: dict[str, str] = {
    "totalRisk": "ALL",
    "vulnerabilities": "VLN",
    "maliciousCodeRisk": "MAL",
    "authorsRisk": "AUT",
    "engineeringRisk": "ENG",
    "licenseRisk": "LIC",
}

# Safety weights: higher severity means a lower weight.
RISK_LEVEL_WEIGHTS: dict[str, float] = {
    "info": 1.0,
    "low": 0.8,
    "medium": 0.65,
    "high": 0.35,
    "critical": 0.1,
}
