"""Tests for company, title, status and detail extraction."""

from datetime import timedelta

import pytest

from job_mail_tracker.extractors import (
    company_from_domain,
    company_from_sender_name,
    company_from_text,
    determine_status,
    extract_company,
    extract_details,
    extract_job_title,
    title_case,
)
from job_mail_tracker.models import Status


@pytest.mark.parametrize(
    ("sender", "expected"),
    [
        ("Jane <jane@acmecorp.com>", "Acme"),
        ("hr@careers.globex.com", "Globex"),
        ("sarah@startup.io", "Startup"),
        ("someone@gmail.com", None),
        ("talent@greenhouse.io", None),
        ("recruiting-team@company.com", None),
        ("not an address", None),
    ],
)
def test_company_from_domain(sender, expected):
    """Domains become company names unless they are mail providers, ATSs or placeholders."""
    assert company_from_domain(sender) == expected


def test_company_from_text_applying_phrase():
    """'Thanks for applying to X' names the company."""
    assert company_from_text("Thanks for applying to Initech", "") == "Initech"


def test_company_from_text_team_signature():
    """A 'The X Talent Team' signature yields X."""
    assert company_from_text("Update", "The Hooli Talent Team\nwill be in touch") == "Hooli"


def test_company_from_text_rejects_generic():
    """Generic words are never reported as a company."""
    assert company_from_text("Exciting opportunities at Company", "We have roles.") is None


def test_company_from_sender_name():
    """Display names are used unless they look like a person or a role."""
    assert company_from_sender_name("Globex <x@gmail.com>") == "Globex"
    assert company_from_sender_name('"Jane Doe" <jane@gmail.com>') is None
    assert company_from_sender_name("Acme Robotics Careers <x@gmail.com>") is None


def test_extract_company_prefers_domain():
    """The domain strategy runs before display name and text."""
    assert extract_company("Globex <people@initech.com>", "Thanks for applying to Hooli") == "Initech"


def test_extract_title_for_the_role():
    """'for the X position' yields a title-cased X."""
    title = extract_job_title("we received your application for the data engineer position.")
    assert title == "Data Engineer"


def test_extract_title_common_title():
    """Well-known titles are found anywhere in the text."""
    assert extract_job_title("we loved meeting you, our software engineer team says hi") == "Software Engineer"


def test_extract_title_none():
    """No title is invented when nothing matches."""
    assert extract_job_title("see you at lunch tomorrow") is None


@pytest.mark.parametrize(
    "content, subject, expected",
    [
        ("we offered you the role of data engineer.", "", "Data Engineer"),
        ("i have applied for embedded engineer, please advise", "", "Embedded Engineer"),
        ("writing regarding the product designer opening", "", "Product Designer"),
        ("there is a vacancy for qa analyst.", "", "Qa Analyst"),
        ("", "Re: Application for Site Reliability Engineer - Globex", "Site Reliability Engineer"),
        ("we need another developer role filled.", "", "Developer"),
        ("meet our principal platform engineer tomorrow", "", "Principal Platform Engineer"),
        # "application" is a stoplisted capture, so the common-title pattern wins
        (
            "thanks for the application position update, we saw your data analyst experience",
            "",
            "Data Analyst",
        ),
        ("for the ab position, nothing else", "", None),
        ("thanks for the " + "very " * 10 + "long title position.", "", None),
    ],
)
def test_extract_title_patterns(content, subject, expected):
    """Each title pattern yields its capture, and rejected captures fall through."""
    assert extract_job_title(content, subject) == expected


@pytest.mark.parametrize("raw", ["senior BACKEND developer", "Ui/ux Designer", "data scientist"])
def test_title_case_idempotent(raw):
    """Title-casing an already title-cased value changes nothing."""
    once = title_case(raw)
    assert title_case(once) == once


def test_status_interviewing():
    """Interview wording maps to interviewing."""
    assert determine_status("we would like to schedule an interview") is Status.INTERVIEWING


def test_status_priority_applied_first():
    """Applied phrases outrank later statuses in the priority order."""
    content = "thank you for applying. unfortunately we are not hiring right now"
    assert determine_status(content) is Status.APPLIED


def test_status_rejected():
    """Rejection wording maps to rejected."""
    assert determine_status("unfortunately we will not be moving ahead") is Status.REJECTED


def test_status_ghosted_only_without_keywords(now):
    """Old application mail with no status keyword is ghosted."""
    content = "following up on my application"
    assert determine_status(content, now - timedelta(days=30), now=now) is Status.GHOSTED
    assert determine_status(content, now - timedelta(days=5), now=now) is Status.APPLIED


def test_status_keyword_beats_ghosted(now):
    """A keyword match wins over the date rule."""
    content = "your interview is on monday regarding your application"
    assert determine_status(content, now - timedelta(days=60), now=now) is Status.INTERVIEWING


def test_details_interview():
    """Interview type and date are picked up."""
    info = extract_details("let's set up a zoom interview on march 5th, 2025", Status.INTERVIEWING)
    assert info.interview_type == "video"
    assert info.interview_date == "march 5th, 2025"


def test_details_rejection_reason():
    """The rejection reason is captured."""
    info = extract_details("unfortunately, we decided to go with another candidate.", Status.REJECTED)
    assert info.rejection_reason == "another candidate"


def test_details_offer_salary():
    """A salary figure is captured for offers."""
    info = extract_details(
        "we are pleased to offer you the role with a salary of $120,000.", Status.OFFERED
    )
    assert info.offer_details == "Salary: $120,000"
