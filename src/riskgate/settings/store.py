"""In-place threshold updates on caller-owned user settings."""

from __future__ import annotations

import logging

from riskgate.model import DefaultLabel, Threshold, UserProject, UserSettings

logger = logging.getLogger(__name__)


def set_threshold(settings: UserSettings, project_id: str, domain_name: str, threshold: Threshold) -> None:
    """Set one domain threshold for a project, keeping the project's other thresholds.

    A project without a setting, or with a default-label setting, gets a fresh
    empty project setting first. The default labels are discarded.
    """
    setting = settings.projects.get(project_id)
    if not isinstance(setting, UserProject):
        if isinstance(setting, DefaultLabel):
            logger.debug("Replacing default-label setting of project %s with thresholds", project_id)
        setting = UserProject()
        settings.projects[project_id] = setting

    setting.thresholds[domain_name] = threshold


def project_thresholds_for(settings: UserSettings, project_id: str) -> dict[str, Threshold]:
    """Return a copy of the thresholds configured for a project, empty when it has none."""
    setting = settings.projects.get(project_id)
    if isinstance(setting, UserProject):
        return dict(setting.thresholds)
    return {}
