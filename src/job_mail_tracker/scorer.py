"""Confidence scoring for scanned messages and quality scoring for stored records."""

from __future__ import annotations

import re

from .catalogs import DENYLISTED_COMPANIES, NEGATIVE_SIGNAL_PHRASES, NOREPLY_MARKERS
from .constants import (
    CONFIDENCE_BASE,
    QUALITY_BASE,
    QUALITY_CLEANUP_BELOW,
    QUALITY_COMPANY,
    QUALITY_DENYLISTED_COMPANY,
    QUALITY_GOOD_FROM,
    QUALITY_MAX,
    QUALITY_MIN,
    QUALITY_NOTIFICATION,
    QUALITY_PERSONAL_SENDER,
    QUALITY_POSITION,
    QUALITY_UNSUBSCRIBE,
    UNKNOWN_COMPANY,
    UNKNOWN_POSITION,
    WEIGHT_COMPANY,
    WEIGHT_GENERIC_COMPANY,
    WEIGHT_JOB_TITLE,
    WEIGHT_NEGATIVE_SIGNAL,
    WEIGHT_PERSONAL_SENDER,
    WEIGHT_SUBJECT_INTERVIEW,
    WEIGHT_SUBJECT_JOB,
    WEIGHT_SUBJECT_OFFER,
    WEIGHT_SUBJECT_RECEIVED,
)
from .filters import record_notification_signal
from .models import JobRecord, QualityRecord
from .text import find_substring, parse_from_header

_CAMEL_RE = re.compile(r"[a-z][A-Z]")


def _subject_bonus(subject: str) -> tuple[float, str] | None:
    subject = subject.lower()
    if "application" in subject and "received" in subject:
        return WEIGHT_SUBJECT_RECEIVED, "subject:application-received"
    if "interview" in subject or "schedule" in subject:
        return WEIGHT_SUBJECT_INTERVIEW, "subject:interview"
    if "offer" in subject or "congratulations" in subject:
        return WEIGHT_SUBJECT_OFFER, "subject:offer"
    if "job" in subject or "position" in subject:
        return WEIGHT_SUBJECT_JOB, "subject:job"
    return None


def is_personal_sender(sender: str) -> bool:
    """True when the sender address looks like it belongs to a person."""
    if "@" not in sender:
        return False
    lowered = sender.lower()
    if any(marker in lowered for marker in NOREPLY_MARKERS):
        return False
    _, address = parse_from_header(sender)
    local_part = address.split("@")[0]
    return "." in local_part or _CAMEL_RE.search(local_part) is not None


def calculate_confidence(
    content: str,
    sender: str,
    subject: str,
    company: str | None,
    job_title: str | None,
) -> tuple[float, tuple[str, ...]]:
    """Combine extraction results and message signals into a confidence score.

    Returns the score, clamped to [0.0, 1.0], and the list of adjustments
    that produced it.
    """
    total = CONFIDENCE_BASE
    signals: list[str] = []

    if company:
        if len(company) > 2 and "team" not in company.lower():
            total += WEIGHT_COMPANY
            signals.append("company")
        else:
            total += WEIGHT_GENERIC_COMPANY
            signals.append("company:generic")

    if job_title:
        total += WEIGHT_JOB_TITLE
        signals.append("job-title")

    bonus = _subject_bonus(subject)
    if bonus:
        total += bonus[0]
        signals.append(bonus[1])

    negative = find_substring(content.lower(), NEGATIVE_SIGNAL_PHRASES)
    if negative:
        total += WEIGHT_NEGATIVE_SIGNAL
        signals.append(f"negative:{negative}")

    if is_personal_sender(sender):
        total += WEIGHT_PERSONAL_SENDER
        signals.append("personal-sender")

    return round(max(0.0, min(1.0, total)), 4), tuple(signals)


def score_record(record: JobRecord) -> QualityRecord:
    """Re-score a stored record on a 0-10 scale from the fields it kept."""
    quality = QUALITY_BASE
    reasons: list[str] = []

    company = record.company or ""
    position = record.position or ""
    sender = record.email_from or ""
    subject = record.email_subject or ""

    if company and company != UNKNOWN_COMPANY and len(company) > 2:
        quality += QUALITY_COMPANY
        reasons.append("company")

    if position and position != UNKNOWN_POSITION and len(position) > 3:
        quality += QUALITY_POSITION
        reasons.append("position")

    if sender and not any(marker in sender for marker in NOREPLY_MARKERS):
        quality += QUALITY_PERSONAL_SENDER
        reasons.append("sender")

    notification = record_notification_signal(record)
    if notification:
        quality += QUALITY_NOTIFICATION
        reasons.append(f"notification:{notification}")

    if company in DENYLISTED_COMPANIES:
        quality += QUALITY_DENYLISTED_COMPANY
        reasons.append(f"denylisted-company:{company}")

    if "unsubscribe" in subject.lower():
        quality += QUALITY_UNSUBSCRIBE
        reasons.append("unsubscribe")

    return QualityRecord(
        id=record.id,
        company=company,
        position=position,
        email_from=sender,
        email_subject=subject,
        quality=max(QUALITY_MIN, min(QUALITY_MAX, quality)),
        should_cleanup=notification is not None,
        reasons=tuple(reasons),
    )


def quality_label(scored: QualityRecord) -> str:
    """Classify a scored record as cleanup, suspicious or good."""
    if scored.should_cleanup or scored.quality < QUALITY_CLEANUP_BELOW:
        return "cleanup"
    if scored.quality < QUALITY_GOOD_FROM:
        return "suspicious"
    return "good"
