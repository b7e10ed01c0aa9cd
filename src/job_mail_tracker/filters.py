"""Notification filtering and job-relatedness detection.

Each check returns the reason it fired (``"<kind>:<matched pattern>"``) or
``None``, so every accept/reject decision can be traced back to a catalog
entry. The ``is_*`` wrappers give the boolean form.
"""

from __future__ import annotations

from .catalogs import (
    APPLICATION_CONFIRMATION_PHRASES,
    AUTOMATED_CONTENT_PHRASES,
    AUTOMATED_SUBJECT_MARKERS,
    CLEANUP_SUBJECT_PHRASES,
    GENERIC_RECORD_COMPANIES,
    INTEREST_CONTEXT,
    INTEREST_PHRASE,
    JOB_BOARD_NOTIFICATION_SENDERS,
    JOB_KEYWORDS,
    JOB_SITES,
    NOTIFICATION_PHRASES,
    NOTIFICATION_SENDERS,
    RECORD_AUTOMATED_INDICATORS,
    RECRUITER_INDICATORS,
    STRONG_CONFIRMATION_PHRASES,
)
from .models import JobRecord
from .text import find_substring


def is_application_confirmation(content: str) -> bool:
    """True for messages that plainly confirm a submitted application."""
    if find_substring(content, STRONG_CONFIRMATION_PHRASES):
        return True
    return INTEREST_PHRASE in content and any(word in content for word in INTEREST_CONTEXT)


def notification_signal(
    content: str,
    sender: str,
    subject: str,
    keep_confirmations: bool = False,
) -> str | None:
    """Return why a message is an automated job-board/marketing notification.

    ``content`` is the lowercased subject and body. With
    ``keep_confirmations`` set, application confirmations are never
    reported, even from no-reply senders.
    """
    content = content.lower()
    sender_lower = sender.lower()
    subject_lower = subject.lower()

    if keep_confirmations and is_application_confirmation(content):
        return None

    match = find_substring(sender_lower, NOTIFICATION_SENDERS)
    if match:
        return f"sender:{match}"

    for phrase in NOTIFICATION_PHRASES:
        if phrase in content or phrase in subject_lower:
            return f"phrase:{phrase}"

    match = find_substring(content, AUTOMATED_CONTENT_PHRASES)
    if match:
        return f"automated:{match}"

    match = find_substring(subject_lower, AUTOMATED_SUBJECT_MARKERS)
    if match:
        return f"automated-subject:{match}"

    return None


def is_notification(content: str, sender: str, subject: str, keep_confirmations: bool = False) -> bool:
    return notification_signal(content, sender, subject, keep_confirmations) is not None


def job_related_signal(content: str, sender: str) -> str | None:
    """Return why a (non-notification) message looks job-related."""
    content = content.lower()
    sender_lower = sender.lower()

    match = find_substring(content, JOB_KEYWORDS)
    if match:
        return f"keyword:{match}"

    match = find_substring(content, APPLICATION_CONFIRMATION_PHRASES)
    if match:
        return f"confirmation:{match}"

    match = find_substring(sender_lower, JOB_SITES)
    if match:
        return f"job-site:{match}"

    for indicator in RECRUITER_INDICATORS:
        if indicator in content or indicator in sender_lower:
            return f"recruiter:{indicator}"

    return None


def is_job_related(content: str, sender: str) -> bool:
    return job_related_signal(content, sender) is not None


def record_notification_signal(record: JobRecord) -> str | None:
    """Re-apply notification detection to the fields a stored record kept.

    Records without a sender or subject were not imported from email and are
    never flagged.
    """
    if not record.email_from and not record.email_subject:
        return None

    sender = (record.email_from or "").lower()
    subject = (record.email_subject or "").lower()
    company = (record.company or "").lower()

    match = find_substring(sender, NOTIFICATION_SENDERS + JOB_BOARD_NOTIFICATION_SENDERS)
    if match:
        return f"sender:{match}"

    match = find_substring(subject, CLEANUP_SUBJECT_PHRASES)
    if match:
        return f"subject:{match}"

    match = find_substring(company, GENERIC_RECORD_COMPANIES)
    if match:
        return f"generic-company:{match}"

    for indicator in RECORD_AUTOMATED_INDICATORS:
        if indicator in subject or indicator in sender:
            return f"automated:{indicator}"

    return None
