"""Data models for Job Mail Tracker."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .constants import (
    ACCEPT_THRESHOLD,
    DEFAULT_DAYS_BACK,
    DEFAULT_MAX_MESSAGES,
    DEFAULT_WORKERS,
    UNKNOWN_COMPANY,
    UNKNOWN_POSITION,
)


class Status(str, Enum):
    """Application pipeline stage."""

    APPLIED = "applied"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    REJECTED = "rejected"
    GHOSTED = "ghosted"


@dataclass(frozen=True)
class RawMessage:
    """A single fetched email, body already decoded to text."""

    id: str
    subject: str
    sender: str  # Full From header value
    date: datetime
    body: str
    thread_id: str | None = None
    snippet: str = ""


@dataclass(frozen=True)
class ExtractedInfo:
    """Optional hints pulled from the message for the detected status."""

    interview_type: str | None = None
    interview_date: str | None = None
    rejection_reason: str | None = None
    offer_details: str | None = None


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of running the pipeline over one message."""

    message_id: str
    thread_id: str | None
    is_job_related: bool
    company: str | None
    job_title: str | None
    status: Status
    confidence: float
    email_subject: str
    email_from: str
    date: datetime
    details: ExtractedInfo = field(default_factory=ExtractedInfo)
    signals: tuple[str, ...] = ()


@dataclass
class JobRecord:
    """A job application record as kept by the record store."""

    id: str
    company: str = UNKNOWN_COMPANY
    position: str = UNKNOWN_POSITION
    email_from: str = ""
    email_subject: str = ""
    thread_id: str = ""
    status: str = Status.APPLIED.value
    date_applied: str = ""

    @property
    def is_email_import(self) -> bool:
        return bool(self.email_from or self.email_subject or self.thread_id)


@dataclass(frozen=True)
class QualityRecord:
    """Quality re-score of a stored record."""

    id: str
    company: str
    position: str
    email_from: str
    email_subject: str
    quality: int
    should_cleanup: bool
    reasons: tuple[str, ...] = ()


@dataclass
class ScanConfig:
    """Tunable knobs for a mailbox scan."""

    days_back: int = DEFAULT_DAYS_BACK
    max_messages: int = DEFAULT_MAX_MESSAGES
    extra_query: str | None = None
    min_confidence: float = ACCEPT_THRESHOLD
    workers: int = DEFAULT_WORKERS
    keep_confirmations: bool = False


@dataclass
class ScanReport:
    """Result of a batch scan."""

    total_emails_scanned: int
    results: list[ClassificationResult] = field(default_factory=list)
    failed: int = 0
    cancelled: bool = False
    query: str = ""
    scan_date: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def job_emails_found(self) -> int:
        return len(self.results)


@dataclass
class CleanupPartition:
    """Stored records split by quality."""

    total_records: int
    email_imports: int
    to_cleanup: list[QualityRecord] = field(default_factory=list)
    suspicious: list[QualityRecord] = field(default_factory=list)
    good: list[QualityRecord] = field(default_factory=list)


@dataclass
class CleanupReport:
    """Result of an analyze or cleanup run."""

    partition: CleanupPartition
    mode: str = "analyze"
    requested: int = 0
    deleted: int = 0
    already_absent: int = 0
    failed: list[str] = field(default_factory=list)
