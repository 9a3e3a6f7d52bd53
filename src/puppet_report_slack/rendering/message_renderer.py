# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Message Renderer.

Builds the Slack attachment content for a run report:

    pretext: ``<icon> <host> *<status>* (<environment>)``
    body:    resource section followed by log section

Resource section:
    Resources that changed or failed, grouped by classified status in the
    order the groups are first encountered, one line per group::

        *changed*:  File[/etc/motd], Service[ntp]

    Unchanged resources, and skipped resources that did not fail, are never
    listed.

Log section:
    Every log entry when the run failed; otherwise only warnings, errors and
    lines reporting a value transition (``... changed to ...``). Entries are
    sorted by time (stable), flattened to one line each, capped at
    ``MAX_LOG_CHARS`` characters and wrapped in a fenced code block. When no
    entry is selected the section is omitted entirely.

Rendering is a pure function of its inputs.
"""

from __future__ import annotations

from collections.abc import Iterable

from puppet_report_slack.enums import EnumLogLevel, EnumRunStatus
from puppet_report_slack.errors import ModelErrorContext, ReportValidationError
from puppet_report_slack.models import (
    ModelLogEntry,
    ModelNotificationConfig,
    ModelRenderedMessage,
    ModelReport,
    ModelResourceStatus,
)
from puppet_report_slack.rendering.status_classifier import classify_run, status_of

MAX_LOG_CHARS: int = 6000
TRUNCATION_MARKER: str = "..."
CODE_FENCE: str = "```"

_ALERT_LEVELS: frozenset[EnumLogLevel] = frozenset(
    {EnumLogLevel.WARNING, EnumLogLevel.ERR}
)
_CHANGE_TRANSITION_MARKER: str = "changed to"
_TIME_FORMAT: str = "%Y-%m-%d %H:%M:%S %z"


def render(
    report: ModelReport,
    config: ModelNotificationConfig | None = None,
) -> ModelRenderedMessage:
    """Render a run report into a notification message.

    Args:
        report: Completed run report.
        config: Notification configuration. Accepted so callers can thread
            the per-run configuration through; rendering does not depend on it.

    Returns:
        ModelRenderedMessage with pretext, body, color and the run status.

    Raises:
        ReportValidationError: If ``report`` is not a ModelReport.
    """
    if not isinstance(report, ModelReport):
        raise ReportValidationError(
            f"Expected ModelReport, got {type(report).__name__}",
            context=ModelErrorContext(operation="render"),
        )

    display = classify_run(report.status)
    pretext = f"{display.icon} {report.host} *{report.status}* ({report.environment})"
    body = render_resources(report.resource_statuses.values()) + render_logs(report)

    return ModelRenderedMessage(
        pretext=pretext,
        body=body,
        color=display.color,
        status=report.status,
    )


def render_resources(resources: Iterable[ModelResourceStatus]) -> str:
    """Render changed and failed resources, one newline-terminated line per status."""
    groups: dict[str, list[str]] = {}
    for resource in resources:
        if not (resource.changed or resource.failed):
            continue
        groups.setdefault(status_of(resource), []).append(resource.reference)

    return "".join(
        f"*{status}*:  {', '.join(references)}\n"
        for status, references in groups.items()
    )


def select_log_entries(report: ModelReport) -> list[ModelLogEntry]:
    """Pick the log entries worth showing, sorted by time (stable)."""
    run_failed = report.status == EnumRunStatus.FAILED.value
    selected = [
        entry
        for entry in report.logs
        if run_failed
        or entry.level in _ALERT_LEVELS
        or _CHANGE_TRANSITION_MARKER in entry.message
    ]
    return sorted(selected, key=lambda entry: entry.time)


def format_log_entry(entry: ModelLogEntry) -> str:
    """Format one entry as ``<time> - <level> - <source>: <message>``."""
    message = entry.message.replace("\r", "").replace("\n", "")
    return (
        f"{entry.time.strftime(_TIME_FORMAT)} - {entry.level.value} - "
        f"{entry.source}: {message}"
    )


def truncate_log_text(text: str, limit: int = MAX_LOG_CHARS) -> str:
    """Keep the first ``limit`` characters, appending the marker on a new line."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}\n{TRUNCATION_MARKER}"


def render_logs(report: ModelReport) -> str:
    """Render the fenced log section, or an empty string when nothing is selected."""
    entries = select_log_entries(report)
    if not entries:
        return ""

    log_text = "\n".join(format_log_entry(entry) for entry in entries)
    return f"{CODE_FENCE}\n{truncate_log_text(log_text)}\n{CODE_FENCE}"


__all__: list[str] = [
    "CODE_FENCE",
    "MAX_LOG_CHARS",
    "TRUNCATION_MARKER",
    "format_log_entry",
    "render",
    "render_logs",
    "render_resources",
    "select_log_entries",
    "truncate_log_text",
]
