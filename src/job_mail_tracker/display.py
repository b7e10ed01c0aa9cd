"""Rich-based display functions for Job Mail Tracker."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.prompt import Prompt
from rich.table import Table

from .models import ClassificationResult, CleanupPartition, CleanupReport, QualityRecord, ScanReport, Status

console = Console()

_STATUS_COLORS = {
    Status.APPLIED: "cyan",
    Status.INTERVIEWING: "yellow",
    Status.OFFERED: "green",
    Status.REJECTED: "red",
    Status.GHOSTED: "dim",
}


def configure_logging(verbose: bool = False) -> None:
    """Send package log records to the console through rich."""
    logger = logging.getLogger("job_mail_tracker")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, rich_tracebacks=True))


def _confidence_color(confidence: float) -> str:
    if confidence >= 0.8:
        return "green"
    if confidence >= 0.5:
        return "yellow"
    return "red"


def _quality_color(quality: int) -> str:
    if quality >= 6:
        return "green"
    if quality >= 3:
        return "yellow"
    return "red"


def create_progress(description: str) -> Progress:
    """Create a configured Rich Progress bar."""
    return Progress(
        SpinnerColumn(),
        TextColumn(f"[bold blue]{description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def display_scan_report(report: ScanReport) -> None:
    """Display accepted scan results, newest first."""
    results = sorted(report.results, key=lambda r: r.date, reverse=True)

    table = Table(title="Job Emails")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date")
    table.add_column("Company")
    table.add_column("Position")
    table.add_column("Status")
    table.add_column("Confidence", justify="right")
    table.add_column("Subject", overflow="fold")

    for idx, result in enumerate(results, start=1):
        status_color = _STATUS_COLORS.get(result.status, "white")
        color = _confidence_color(result.confidence)
        table.add_row(
            str(idx),
            result.date.strftime("%Y-%m-%d"),
            escape(result.company) if result.company else "[dim]-[/dim]",
            escape(result.job_title) if result.job_title else "[dim]-[/dim]",
            f"[{status_color}]{result.status.value}[/{status_color}]",
            f"[{color}]{result.confidence:.2f}[/{color}]",
            escape(result.email_subject),
        )

    console.print(table)

    summary = (
        f"Emails scanned: {report.total_emails_scanned}  |  "
        f"Job emails found: {report.job_emails_found}  |  "
        f"Failed: {report.failed}"
    )
    if report.cancelled:
        summary += "  |  [yellow]cancelled[/yellow]"
    console.print(Panel(summary, title="Summary"))


def display_result_detail(result: ClassificationResult, min_confidence: float) -> None:
    """Display the full analysis of a single message."""
    color = _confidence_color(result.confidence)
    accepted = result.confidence >= min_confidence
    verdict = "[green]accepted[/green]" if accepted else "[red]below threshold[/red]"

    lines = [
        f"[bold]From:[/bold] {escape(result.email_from)}",
        f"[bold]Subject:[/bold] {escape(result.email_subject)}",
        f"[bold]Date:[/bold] {result.date.isoformat()}",
        f"[bold]Company:[/bold] {escape(result.company or '-')}",
        f"[bold]Position:[/bold] {escape(result.job_title or '-')}",
        f"[bold]Status:[/bold] {result.status.value}",
        f"[bold]Confidence:[/bold] [{color}]{result.confidence:.2f}[/{color}] ({verdict})",
    ]

    details = result.details
    for label, value in (
        ("Interview type", details.interview_type),
        ("Interview date", details.interview_date),
        ("Rejection reason", details.rejection_reason),
        ("Offer", details.offer_details),
    ):
        if value:
            lines.append(f"[bold]{label}:[/bold] {escape(value)}")

    if result.signals:
        lines.append("")
        lines.append("[bold]Signals:[/bold]")
        for signal in result.signals:
            lines.append(f"  - {escape(signal)}")

    console.print(Panel("\n".join(lines), title="Message Analysis"))


def _quality_table(title: str, records: list[QualityRecord]) -> Table:
    table = Table(title=title)
    table.add_column("Company")
    table.add_column("Position")
    table.add_column("From")
    table.add_column("Quality", justify="right")
    table.add_column("Reasons", overflow="fold")
    for record in records:
        color = _quality_color(record.quality)
        table.add_row(
            escape(record.company),
            escape(record.position),
            escape(record.email_from),
            f"[{color}]{record.quality}[/{color}]",
            escape(", ".join(record.reasons)),
        )
    return table


def display_cleanup_partition(partition: CleanupPartition) -> None:
    """Display how stored records were split by quality."""
    if partition.to_cleanup:
        console.print(_quality_table("To Clean Up", partition.to_cleanup))
    if partition.suspicious:
        console.print(_quality_table("Suspicious", partition.suspicious))

    console.print(
        Panel(
            f"Total records: {partition.total_records}  |  "
            f"Email imports: {partition.email_imports}  |  "
            f"[red]Cleanup: {len(partition.to_cleanup)}[/red]  |  "
            f"[yellow]Suspicious: {len(partition.suspicious)}[/yellow]  |  "
            f"[green]Good: {len(partition.good)}[/green]",
            title="Cleanup Analysis",
        )
    )


def confirm_delete(records: list[QualityRecord]) -> bool:
    """Prompt the user to confirm deleting low-quality records."""
    console.print(
        Panel(
            f"[bold]{len(records)} records will be deleted from the store.[/bold]",
            title="Confirm Delete",
        )
    )
    answer = Prompt.ask('[bold red]Type "DELETE" to confirm[/bold red]', console=console)
    return answer == "DELETE"


def display_cleanup_summary(report: CleanupReport) -> None:
    """Display the outcome of a cleanup run."""
    lines = [f"[bold green]Deleted {report.deleted} of {report.requested} records.[/bold green]"]
    if report.already_absent:
        lines.append(f"{report.already_absent} were already gone.")
    if report.failed:
        lines.append(f"[red]Failed to delete: {', '.join(report.failed)}[/red]")
    console.print(Panel("\n".join(lines), title="Done"))
