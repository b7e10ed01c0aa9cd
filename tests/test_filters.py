"""Tests for notification filtering and job-relatedness detection."""

from job_mail_tracker.filters import (
    is_application_confirmation,
    is_job_related,
    is_notification,
    job_related_signal,
    notification_signal,
    record_notification_signal,
)
from job_mail_tracker.models import JobRecord


def test_job_board_sender_is_notification():
    """A notifications@ sender is filtered regardless of content."""
    reason = notification_signal(
        "jobs you may be interested in here are some recommended jobs...",
        "notifications@linkedin.com",
        "Jobs you may be interested in",
    )
    assert reason == "sender:notifications@"


def test_notification_phrase_in_subject():
    """Digest-style subjects are filtered even from a personal-looking sender."""
    assert is_notification("your weekly digest", "jane@acme.com", "Your weekly digest")


def test_automated_content_is_notification():
    """Automated-message boilerplate marks a message as a notification."""
    reason = notification_signal(
        "interview this is an automated message about your interview",
        "jane@acme.com",
        "Interview",
    )
    assert reason == "automated:this is an automated"


def test_personal_message_is_not_notification():
    """A plain recruiter email passes the filter."""
    assert not is_notification(
        "interview we would like to schedule an interview",
        "Jane Doe <jane.doe@acme.com>",
        "Interview",
    )


def test_confirmation_kept_when_requested():
    """keep_confirmations lets application confirmations through no-reply senders."""
    content = "thank you for applying thank you for applying to acme"
    sender = "no-reply@acme.com"
    assert is_notification(content, sender, "Thank you for applying")
    assert not is_notification(content, sender, "Thank you for applying", keep_confirmations=True)


def test_application_confirmation_detection():
    """Strong phrases, or interest plus context, count as confirmations."""
    assert is_application_confirmation("we have received your application")
    assert is_application_confirmation("thank you for your interest in the position")
    assert not is_application_confirmation("thank you for your interest in our newsletter")


def test_job_keyword_signal():
    """The first matching job keyword is reported."""
    assert job_related_signal("let's talk about the role", "jane@acme.com") == "keyword:role"


def test_job_site_sender_signal():
    """A job-site sender makes the message job-related."""
    assert job_related_signal("hi there", "team@github.com") == "job-site:github"


def test_unrelated_message():
    """Everyday mail is not job-related."""
    assert not is_job_related("see you at lunch tomorrow", "alice@gmail.com")


def test_record_without_email_fields_never_flagged(manual_record):
    """Hand-entered records are never treated as notifications."""
    assert record_notification_signal(manual_record) is None


def test_record_from_job_board_flagged(job_board_record):
    """A stored record from a job-board no-reply address is flagged."""
    assert record_notification_signal(job_board_record) == "sender:noreply"


def test_record_generic_company_flagged():
    """A stored record whose company is a job board name is flagged."""
    record = JobRecord(
        id="r1",
        company="Indeed",
        position="Analyst",
        email_from="Jane Doe <jane.doe@example.org>",
        email_subject="Hello",
    )
    assert record_notification_signal(record) == "generic-company:indeed"


def test_record_good_not_flagged(good_record):
    """A recruiter email record passes the re-check."""
    assert record_notification_signal(good_record) is None


def test_record_company_containing_generic_word_flagged():
    """A generic word inside a longer company name still flags the record."""
    record = JobRecord(
        id="r_team",
        company="Teamwork Labs",
        position="Designer",
        email_from="Jane Doe <jane.doe@teamworklabs.com>",
        email_subject="Interview next week",
    )
    assert record_notification_signal(record) == "generic-company:team"
