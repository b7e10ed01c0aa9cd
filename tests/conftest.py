"""Shared fixtures for tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from job_mail_tracker.constants import UNKNOWN_POSITION
from job_mail_tracker.models import JobRecord, RawMessage

NOW = datetime(2025, 3, 31, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def job_board_alert() -> RawMessage:
    return RawMessage(
        id="msg_alert_001",
        sender="notifications@linkedin.com",
        subject="Jobs you may be interested in",
        body="Here are some recommended jobs...",
        date=NOW - timedelta(days=1),
    )


@pytest.fixture
def interview_invitation() -> RawMessage:
    return RawMessage(
        id="msg_interview_001",
        thread_id="thread_001",
        sender='"Sarah Johnson" <sarah@startup.io>',
        subject="Interview Invitation - Full Stack Developer Role",
        body=(
            "Hi Alex,\n\n"
            "Thank you for your time so far. We would like to schedule an interview "
            "for the Full Stack Developer role at Startup Inc.\n\n"
            "Please let me know your availability.\n\n"
            "Best,\nSarah Johnson\nStartup Inc"
        ),
        date=NOW - timedelta(days=2),
    )


@pytest.fixture
def recruiting_blast() -> RawMessage:
    return RawMessage(
        id="msg_blast_001",
        sender="recruiting-team@company.com",
        subject="Exciting opportunities at Company",
        body="We have multiple positions available. Check out these roles...",
        date=NOW - timedelta(days=3),
    )


@pytest.fixture
def casual_outreach() -> RawMessage:
    """Job-related but carries almost no evidence."""
    return RawMessage(
        id="msg_casual_001",
        sender="jane@gmail.com",
        subject="Quick question",
        body="Are you open to a new role?",
        date=NOW - timedelta(days=1),
    )


@pytest.fixture
def job_board_record() -> JobRecord:
    return JobRecord(
        id="job_linkedin_001",
        company="LinkedIn",
        position=UNKNOWN_POSITION,
        email_from="jobs-noreply@linkedin.com",
        email_subject="Jobs for you",
        thread_id="thread_lk_001",
        date_applied="2025-03-01T09:00:00+00:00",
    )


@pytest.fixture
def good_record() -> JobRecord:
    return JobRecord(
        id="job_acme_001",
        company="Acme",
        position="Backend Engineer",
        email_from="Jane Doe <jane.doe@acme.com>",
        email_subject="Interview for Backend Engineer",
        thread_id="thread_acme_001",
        status="interviewing",
        date_applied="2025-03-10T09:00:00+00:00",
    )


@pytest.fixture
def manual_record() -> JobRecord:
    """Entered by hand, so it has no email fields."""
    return JobRecord(id="job_manual_001", company="Team", position="Designer")
