"""CLI entry point for Job Mail Tracker."""

from __future__ import annotations

from datetime import datetime, timezone

import click
from google.auth.exceptions import RefreshError
from googleapiclient.errors import HttpError

from .auth import check_auth, get_gmail_service
from .classifier import analyze_message
from .cleaner import cleanup_records, save_cleanup_log
from .constants import ACCEPT_THRESHOLD, DEFAULT_DAYS_BACK, DEFAULT_MAX_MESSAGES, DEFAULT_WORKERS
from .display import (
    configure_logging,
    confirm_delete,
    console,
    create_progress,
    display_cleanup_partition,
    display_cleanup_summary,
    display_result_detail,
    display_scan_report,
)
from .exceptions import JobMailTrackerError
from .export import export_records
from .gmail_client import load_eml
from .models import ScanConfig
from .scanner import scan_mailbox
from .store import JobStore


def _parse_now(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise click.BadParameter(f"not an ISO date: {value}", param_hint="--now") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@click.group()
@click.version_option(version="0.1.0", prog_name="job-mail-tracker")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Job Mail Tracker - find job application emails in your Gmail."""
    configure_logging(verbose)


@cli.command()
@click.option("-d", "--days", default=DEFAULT_DAYS_BACK, type=int, help="How many days back to search.")
@click.option("-m", "--max-messages", default=DEFAULT_MAX_MESSAGES, type=int, help="Maximum messages to scan.")
@click.option("-q", "--query", default=None, help="Extra Gmail search terms (e.g. 'from:acme.com').")
@click.option("-w", "--workers", default=DEFAULT_WORKERS, type=int, help="Classification worker threads.")
@click.option(
    "--min-confidence",
    default=ACCEPT_THRESHOLD,
    type=click.FloatRange(0.0, 1.0),
    help="Minimum confidence to accept a message (0.0-1.0).",
)
@click.option("--keep-confirmations", is_flag=True, help="Do not filter application confirmations.")
@click.option("--no-save", is_flag=True, help="Do not store the results.")
def scan(
    days: int,
    max_messages: int,
    query: str | None,
    workers: int,
    min_confidence: float,
    keep_confirmations: bool,
    no_save: bool,
) -> None:
    """Scan your Gmail inbox for job application emails."""
    try:
        service = get_gmail_service()
    except (FileNotFoundError, RefreshError) as e:
        raise click.ClickException(str(e)) from e

    config = ScanConfig(
        days_back=days,
        max_messages=max_messages,
        extra_query=query,
        min_confidence=min_confidence,
        workers=workers,
        keep_confirmations=keep_confirmations,
    )

    with create_progress("Fetching messages") as progress:
        task = progress.add_task("fetch", total=None)

        def on_fetch(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        try:
            report = scan_mailbox(service, config, on_fetch=on_fetch)
        except (HttpError, JobMailTrackerError) as e:
            raise click.ClickException(str(e)) from e

    display_scan_report(report)

    if not no_save:
        with JobStore() as store:
            added = store.save_scan(report)
        console.print(f"[dim]Saved {added} new records to the store.[/dim]")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--now", "now_value", default=None, help="Reference time for the ghosted rule (ISO 8601).")
@click.option(
    "--min-confidence",
    default=ACCEPT_THRESHOLD,
    type=click.FloatRange(0.0, 1.0),
    help="Threshold used for the verdict (0.0-1.0).",
)
def classify(path: str, now_value: str | None, min_confidence: float) -> None:
    """Classify a single saved email (.eml) and show the analysis."""
    now = _parse_now(now_value)
    try:
        message = load_eml(path)
    except JobMailTrackerError as e:
        raise click.ClickException(str(e)) from e

    result = analyze_message(message, now=now)
    if result is None:
        console.print("[yellow]Not a job application email (notification or unrelated).[/yellow]")
        return

    display_result_detail(result, min_confidence=min_confidence)


@cli.command()
@click.option("--execute", is_flag=True, help="Actually delete records (default is analyze only).")
def cleanup(execute: bool) -> None:
    """Re-score stored records and remove notification false positives."""
    with JobStore() as store:
        records = store.list_records()
        analysis = cleanup_records(store, records, execute=False)
        display_cleanup_partition(analysis.partition)

        if not analysis.partition.to_cleanup:
            console.print("[green]Nothing to clean up.[/green]")
            return

        if not execute:
            console.print("[dim]Dry run. Re-run with --execute to delete these records.[/dim]")
            return

        if not confirm_delete(analysis.partition.to_cleanup):
            console.print("[yellow]Aborted.[/yellow]")
            return

        report = cleanup_records(store, records, execute=True)

    save_cleanup_log(report)
    display_cleanup_summary(report)


@cli.command(name="export")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["csv", "json"]),
    default="csv",
    help="Output format.",
)
@click.option("-o", "--output", required=True, help="Output file path.")
def export_cmd(fmt: str, output: str) -> None:
    """Export stored job records to CSV or JSON."""
    with JobStore() as store:
        records = store.list_records()

    if not records:
        raise click.ClickException("No stored records. Run 'scan' first.")

    export_records(records, format=fmt, output_path=output)


@cli.command()
def auth() -> None:
    """Test Gmail authentication."""
    check_auth()


@cli.group(name="store")
def store_group() -> None:
    """Manage the local record store."""


@store_group.command(name="info")
def store_info() -> None:
    """Show store statistics."""
    with JobStore() as store:
        info = store.get_info()

    if info["last_scan_date"] is None and info["record_count"] == 0:
        console.print("[dim]Store is empty.[/dim]")
        return

    console.print(f"[bold]Database size:[/bold] {info['db_file_size'] / 1024:.1f} KB")
    console.print(f"[bold]Last scan:[/bold] {info['last_scan_date'] or '-'}")
    console.print(f"[bold]Scans:[/bold] {info['scan_count']}")
    console.print(f"[bold]Records:[/bold] {info['record_count']}")


@store_group.command(name="clear")
def store_clear() -> None:
    """Delete all stored records and scan history."""
    with JobStore() as store:
        store.clear()
    console.print("[green]Store cleared.[/green]")
