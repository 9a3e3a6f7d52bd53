# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Puppet Report Slack CLI Commands.

Provides a CLI for sending a stored Puppet run report to Slack and for
previewing the rendered message.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from puppet_report_slack.errors import PuppetSlackError
from puppet_report_slack.models import ModelDeliveryOutcome

console = Console()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
def cli() -> None:
    """Post Puppet run reports to Slack."""


@cli.command("notify")
@click.argument("report", type=click.Path(dir_okay=False))
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to slack.yaml (default: PUPPET_SLACK_CONFIG or $PUPPET_CONFDIR/slack.yaml)",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: INFO)",
)
def notify_cmd(report: str, config_path: str | None, log_level: str) -> None:
    """Send a Puppet run REPORT to the configured Slack channels."""
    from puppet_report_slack.processor import run_notification

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        outcomes = run_notification(report, config_path)
    except PuppetSlackError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e

    if not outcomes:
        console.print("[yellow]Run status not in notification filter; nothing sent[/yellow]")
        return

    _print_outcomes(outcomes)


@cli.command("render")
@click.argument("report", type=click.Path(dir_okay=False))
def render_cmd(report: str) -> None:
    """Print the message that would be sent for REPORT, without sending it."""
    from puppet_report_slack.rendering import render
    from puppet_report_slack.report import load_report

    try:
        rendered = render(load_report(report))
    except PuppetSlackError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print("[bold]Pretext:[/bold]", escape(rendered.pretext), emoji=False, highlight=False)
    console.print("[bold]Color:[/bold]", escape(rendered.color), highlight=False)
    console.print(rendered.body, markup=False, emoji=False, highlight=False)


def _print_outcomes(outcomes: list[ModelDeliveryOutcome]) -> None:
    """Print per-channel delivery outcomes as a table."""
    table = Table(title="Slack Delivery")
    table.add_column("Channel", style="cyan")
    table.add_column("Result")
    table.add_column("HTTP", justify="right")
    table.add_column("Detail")

    for outcome in outcomes:
        result = "[green]sent[/green]" if outcome.succeeded else "[red]failed[/red]"
        http_status = "" if outcome.http_status is None else str(outcome.http_status)
        table.add_row(
            escape(outcome.channel), result, http_status, escape(outcome.error_detail or "")
        )

    console.print(table)
    delivered = sum(1 for outcome in outcomes if outcome.succeeded)
    console.print(f"{delivered}/{len(outcomes)} channel(s) delivered")


def main() -> None:
    cli()


__all__: list[str] = ["cli", "main"]
