# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Status Classifier.

Maps resource outcome flags and overall run statuses onto the fixed status
taxonomy, each with a Slack attachment color and emoji icon:

    | status    | icon            | color     |
    |-----------|-----------------|-----------|
    | changed   | :balloon:       | good      |
    | failed    | :warning:       | warning   |
    | unchanged | :zzz:           | #cccccc   |
    | other     | :grey_question: | warning   |

All functions are pure.
"""

from __future__ import annotations

from puppet_report_slack.enums import EnumRunStatus
from puppet_report_slack.models import ModelResourceStatus, ModelStatusDisplay

_STATUS_ICONS: dict[str, str] = {
    EnumRunStatus.CHANGED.value: ":balloon:",
    EnumRunStatus.FAILED.value: ":warning:",
    EnumRunStatus.UNCHANGED.value: ":zzz:",
}

_STATUS_COLORS: dict[str, str] = {
    EnumRunStatus.CHANGED.value: "good",
    EnumRunStatus.FAILED.value: "warning",
    EnumRunStatus.UNCHANGED.value: "#cccccc",
}

_UNKNOWN_ICON: str = ":grey_question:"
_UNKNOWN_COLOR: str = "warning"


def status_of(resource: ModelResourceStatus) -> str:
    """Classify a resource; first match wins: failed, skipped, changed."""
    if resource.failed:
        return EnumRunStatus.FAILED.value
    if resource.skipped:
        return EnumRunStatus.SKIPPED.value
    if resource.changed:
        return EnumRunStatus.CHANGED.value
    return EnumRunStatus.UNCHANGED.value


def classify_run(status: str) -> ModelStatusDisplay:
    """Return the display for an overall run status.

    Statuses outside changed/failed/unchanged (``skipped`` or anything
    Puppet adds later) keep their name but get the unknown icon and color.
    """
    return ModelStatusDisplay(
        name=status,
        color=_STATUS_COLORS.get(status, _UNKNOWN_COLOR),
        icon=_STATUS_ICONS.get(status, _UNKNOWN_ICON),
    )


def classify_resource(resource: ModelResourceStatus) -> ModelStatusDisplay:
    """Return the display for a single resource."""
    return classify_run(status_of(resource))


__all__: list[str] = ["classify_resource", "classify_run", "status_of"]
