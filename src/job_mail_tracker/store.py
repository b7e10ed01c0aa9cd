"""SQLite store for imported job records and scan history."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from job_mail_tracker import constants
from job_mail_tracker.constants import UNKNOWN_COMPANY, UNKNOWN_POSITION
from job_mail_tracker.models import ClassificationResult, JobRecord, ScanReport

_CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS scan_metadata (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    query TEXT,
    total_emails INTEGER,
    job_emails_found INTEGER,
    failed INTEGER,
    scan_date TEXT
);

CREATE TABLE IF NOT EXISTS jobs (
    id TEXT PRIMARY KEY,
    company TEXT,
    position TEXT,
    email_from TEXT,
    email_subject TEXT,
    thread_id TEXT,
    status TEXT,
    date_applied TEXT,
    confidence REAL
);
"""


def record_from_result(result: ClassificationResult) -> JobRecord:
    """Turn an accepted classification into a storable record."""
    return JobRecord(
        id=result.message_id,
        company=result.company or UNKNOWN_COMPANY,
        position=result.job_title or UNKNOWN_POSITION,
        email_from=result.email_from,
        email_subject=result.email_subject,
        thread_id=result.thread_id or "",
        status=result.status.value,
        date_applied=result.date.isoformat(),
    )


class JobStore:
    """Persistent SQLite store of job records.

    Implements the record-store collaborator used by the cleanup pass:
    ``list_records`` and an idempotent ``delete_record``.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = Path(db_path or constants.STORE_DB_PATH)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self.db_path))
        self._conn.row_factory = sqlite3.Row
        self._create_tables()

    def _create_tables(self) -> None:
        self._conn.executescript(_CREATE_TABLES_SQL)

    # --- public API ---

    def add_record(self, record: JobRecord, confidence: float | None = None) -> bool:
        """Insert a record unless one with the same id exists. Returns True if inserted."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT OR IGNORE INTO jobs (id, company, position, email_from, email_subject, "
                "thread_id, status, date_applied, confidence) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    record.id,
                    record.company,
                    record.position,
                    record.email_from,
                    record.email_subject,
                    record.thread_id,
                    record.status,
                    record.date_applied,
                    confidence,
                ),
            )
        return cursor.rowcount == 1

    def save_scan(self, report: ScanReport) -> int:
        """Record a scan and store its accepted results. Returns the number of new records."""
        with self._conn:
            self._conn.execute(
                "INSERT INTO scan_metadata (query, total_emails, job_emails_found, failed, scan_date) "
                "VALUES (?, ?, ?, ?, ?)",
                (
                    report.query,
                    report.total_emails_scanned,
                    report.job_emails_found,
                    report.failed,
                    report.scan_date,
                ),
            )
        return sum(
            self.add_record(record_from_result(result), confidence=result.confidence)
            for result in report.results
        )

    def list_records(self) -> list[JobRecord]:
        rows = self._conn.execute("SELECT * FROM jobs ORDER BY date_applied DESC, id").fetchall()
        return [
            JobRecord(
                id=r["id"],
                company=r["company"] or "",
                position=r["position"] or "",
                email_from=r["email_from"] or "",
                email_subject=r["email_subject"] or "",
                thread_id=r["thread_id"] or "",
                status=r["status"] or "",
                date_applied=r["date_applied"] or "",
            )
            for r in rows
        ]

    def delete_record(self, record_id: str) -> bool:
        """Delete a record. Returns False if it was already absent."""
        with self._conn:
            cursor = self._conn.execute("DELETE FROM jobs WHERE id = ?", (record_id,))
        return cursor.rowcount > 0

    def clear(self) -> None:
        """Drop and recreate all tables."""
        self._conn.executescript(
            "DROP TABLE IF EXISTS jobs;"
            "DROP TABLE IF EXISTS scan_metadata;"
        )
        self._create_tables()

    def get_info(self) -> dict:
        """Return store statistics."""
        file_size = self.db_path.stat().st_size if self.db_path.exists() else 0

        last_scan_row = self._conn.execute(
            "SELECT scan_date FROM scan_metadata ORDER BY id DESC LIMIT 1"
        ).fetchone()
        last_scan_date = last_scan_row["scan_date"] if last_scan_row else None

        scan_count = self._conn.execute("SELECT COUNT(*) AS c FROM scan_metadata").fetchone()["c"]
        record_count = self._conn.execute("SELECT COUNT(*) AS c FROM jobs").fetchone()["c"]

        return {
            "db_file_size": file_size,
            "last_scan_date": last_scan_date,
            "scan_count": scan_count,
            "record_count": record_count,
        }

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    # --- context manager ---

    def __enter__(self) -> JobStore:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
