"""Cleanup workflow - re-score stored records and delete false positives."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable

from . import constants
from .models import CleanupPartition, CleanupReport, JobRecord, QualityRecord
from .scorer import quality_label, score_record

logger = logging.getLogger(__name__)


def analyze_records(records: Iterable[JobRecord]) -> CleanupPartition:
    """Partition email-imported records into cleanup, suspicious and good.

    Records without any email fields were entered by hand and are left out.
    Each analyzed record lands in exactly one bucket.
    """
    records = list(records)
    imports = [r for r in records if r.is_email_import]
    partition = CleanupPartition(total_records=len(records), email_imports=len(imports))

    buckets = {
        "cleanup": partition.to_cleanup,
        "suspicious": partition.suspicious,
        "good": partition.good,
    }
    for record in imports:
        scored = score_record(record)
        buckets[quality_label(scored)].append(scored)

    logger.info(
        "Analyzed %d email imports: %d to clean up, %d suspicious, %d good",
        partition.email_imports,
        len(partition.to_cleanup),
        len(partition.suspicious),
        len(partition.good),
    )
    return partition


def delete_records(store, scored: list[QualityRecord], report: CleanupReport) -> CleanupReport:
    """Delete each record through ``store.delete_record`` and tally the outcome.

    A record that is already gone is not an error. A delete that raises is
    logged and its id is reported in ``failed``.
    """
    report.requested = len(scored)
    for record in scored:
        try:
            removed = store.delete_record(record.id)
        except Exception:  # noqa: BLE001
            logger.warning("Failed to delete record %s", record.id, exc_info=True)
            report.failed.append(record.id)
            continue
        if removed:
            report.deleted += 1
            logger.debug("Deleted record %s - %s - %s", record.id, record.company, record.position)
        else:
            report.already_absent += 1
    return report


def cleanup_records(
    store,
    records: Iterable[JobRecord] | None = None,
    execute: bool = False,
) -> CleanupReport:
    """Analyze stored records and, when ``execute`` is set, delete the bad ones.

    ``store`` must provide ``list_records()`` (used when ``records`` is not
    given) and ``delete_record(id) -> bool``.
    """
    if records is None:
        records = store.list_records()
    partition = analyze_records(records)

    if not execute:
        return CleanupReport(partition=partition, mode="analyze")

    report = delete_records(store, partition.to_cleanup, CleanupReport(partition=partition, mode="cleanup"))
    if report.failed:
        logger.warning(
            "Deleted %d of %d records; %d failed",
            report.deleted + report.already_absent,
            report.requested,
            len(report.failed),
        )
    return report


def save_cleanup_log(report: CleanupReport, log_path: Path | None = None) -> None:
    """Append a cleanup action to the audit log."""
    log_path = Path(log_path or constants.CLEANUP_LOG_PATH)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    log: list = []
    if log_path.exists():
        with open(log_path) as f:
            try:
                log = json.load(f)
            except json.JSONDecodeError:
                log = []

    failed = set(report.failed)
    entry = {
        "date": datetime.now().isoformat(),
        "requested": report.requested,
        "deleted": report.deleted,
        "already_absent": report.already_absent,
        "failed": report.failed,
        "records": [
            {
                "id": r.id,
                "company": r.company,
                "position": r.position,
                "email_from": r.email_from,
                "quality": r.quality,
                "reasons": list(r.reasons),
            }
            for r in report.partition.to_cleanup
            if r.id not in failed
        ],
    }
    log.append(entry)

    with open(log_path, "w") as f:
        json.dump(log, f, indent=2)
