# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Puppet Report Loader.

Reads a Puppet run report from disk and validates it into a ModelReport.

Supported Formats:
    - YAML, as written by Puppet's ``store`` report processor. Ruby object
      tags (``!ruby/object:Puppet::Transaction::Report``,
      ``!ruby/object:Puppet::Resource::Status``, ``!ruby/sym err``) are
      resolved to plain mappings, lists and strings.
    - JSON (files ending in ``.json``), as produced by ``puppet report`` /
      PuppetDB exports.

Only ``host``, ``environment``, ``status``, ``resource_statuses`` and
``logs`` are used; all other report fields are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from puppet_report_slack.errors import ModelErrorContext, ReportValidationError
from puppet_report_slack.models import ModelReport

logger = logging.getLogger(__name__)

MAX_REPORT_SIZE_BYTES: int = 64 * 1024 * 1024


class PuppetReportLoader(yaml.SafeLoader):
    """Safe YAML loader that tolerates Ruby object tags."""


def _construct_ruby_tagged(
    loader: yaml.SafeLoader,
    tag_suffix: str,
    node: yaml.Node,
) -> object:
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_scalar(node)


PuppetReportLoader.add_multi_constructor("!ruby/", _construct_ruby_tagged)


def parse_report(raw: object, source: str = "<report>") -> ModelReport:
    """Validate an already-parsed report document.

    Raises:
        ReportValidationError: If the document is not a mapping or is missing
            required fields.
    """
    context = ModelErrorContext(operation="parse_report", target_name=source)

    if not isinstance(raw, dict):
        raise ReportValidationError(
            f"Report must be a mapping, got {type(raw).__name__}",
            context=context,
        )

    try:
        return ModelReport.model_validate(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ReportValidationError(
            f"Invalid Puppet report: {problems}",
            context=context,
        ) from e


def load_report(report_path: str | Path) -> ModelReport:
    """Load a Puppet run report from a YAML or JSON file.

    Args:
        report_path: Path to the report file.

    Returns:
        Validated ModelReport.

    Raises:
        ReportValidationError: If the file is missing, unreadable, too large,
            not valid YAML/JSON, or not a valid report.
    """
    path = Path(report_path)
    context = ModelErrorContext(operation="load_report", target_name=str(path))

    if not path.is_file():
        raise ReportValidationError("Report file not found", context=context)

    try:
        file_size = path.stat().st_size
        if file_size > MAX_REPORT_SIZE_BYTES:
            raise ReportValidationError(
                f"Report file too large: {file_size} bytes (max {MAX_REPORT_SIZE_BYTES})",
                context=context,
            )
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReportValidationError(
            f"Report file not readable: {e.strerror}",
            context=context,
        ) from e

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.load(text, Loader=PuppetReportLoader)  # noqa: S506
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ReportValidationError(
            f"Invalid report syntax: {e}",
            context=context,
        ) from e

    report = parse_report(raw, source=str(path))

    logger.debug(
        "Loaded Puppet report",
        extra={
            "report_path": str(path),
            "host": report.host,
            "status": report.status,
            "resource_count": len(report.resource_statuses),
            "log_count": len(report.logs),
        },
    )
    return report


__all__: list[str] = ["PuppetReportLoader", "load_report", "parse_report"]
