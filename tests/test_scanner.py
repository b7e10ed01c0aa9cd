"""Tests for the scanner module."""

import threading
from dataclasses import replace
from datetime import datetime, timezone

import job_mail_tracker.scanner as scanner_module
from job_mail_tracker.constants import SEARCH_TERMS
from job_mail_tracker.models import ScanConfig
from job_mail_tracker.scanner import build_query, scan_mailbox, scan_messages


def test_build_query_window():
    """The query covers the configured number of days back."""
    now = datetime(2025, 3, 31, tzinfo=timezone.utc)
    query = build_query(30, now=now)
    assert query.startswith("after:2025/03/01 (")
    for term in SEARCH_TERMS:
        assert term in query


def test_build_query_extra_terms():
    """Extra search terms are appended."""
    now = datetime(2025, 3, 31, tzinfo=timezone.utc)
    assert build_query(7, "from:acme.com", now=now).endswith(" from:acme.com")


def test_scan_preserves_order(interview_invitation, job_board_alert, recruiting_blast, now):
    """Accepted results come back in input order."""
    second = replace(interview_invitation, id="msg_interview_002")
    messages = [interview_invitation, job_board_alert, recruiting_blast, second]

    report = scan_messages(messages, ScanConfig(workers=4), now=now)

    assert report.total_emails_scanned == 4
    assert [r.message_id for r in report.results] == ["msg_interview_001", "msg_interview_002"]
    assert report.job_emails_found == 2
    assert report.failed == 0
    assert not report.cancelled


def test_scan_isolates_failures(interview_invitation, job_board_alert, monkeypatch, now):
    """A message that raises is counted as failed without affecting others."""
    real_classify = scanner_module.classify_message

    def flaky_classify(message, **kwargs):
        if message.id == job_board_alert.id:
            raise RuntimeError("boom")
        return real_classify(message, **kwargs)

    monkeypatch.setattr(scanner_module, "classify_message", flaky_classify)

    report = scan_messages([job_board_alert, interview_invitation], now=now)

    assert report.failed == 1
    assert [r.message_id for r in report.results] == [interview_invitation.id]


def test_scan_cancelled_before_start(interview_invitation, now):
    """Setting the cancel event skips messages that have not started."""
    cancel = threading.Event()
    cancel.set()

    report = scan_messages([interview_invitation], now=now, cancel=cancel)

    assert report.cancelled
    assert report.results == []
    assert report.failed == 0


def test_scan_not_cancelled_when_all_finished(interview_invitation, monkeypatch, now):
    """Setting the event after every message ran does not mark the scan cancelled."""
    cancel = threading.Event()
    real_classify = scanner_module.classify_message

    def classify_then_cancel(message, **kwargs):
        result = real_classify(message, **kwargs)
        cancel.set()
        return result

    monkeypatch.setattr(scanner_module, "classify_message", classify_then_cancel)

    report = scan_messages([interview_invitation], ScanConfig(workers=1), now=now, cancel=cancel)

    assert cancel.is_set()
    assert not report.cancelled
    assert [r.message_id for r in report.results] == [interview_invitation.id]


def test_scan_counts_unfetched_messages(interview_invitation, now):
    """Messages listed but never fetched count as failed."""
    report = scan_messages([interview_invitation], now=now, total=3)
    assert report.total_emails_scanned == 3
    assert report.failed == 2
    assert report.job_emails_found == 1


def test_scan_mailbox(interview_invitation, job_board_alert, monkeypatch, now):
    """scan_mailbox lists, fetches and classifies with the given service."""
    calls = {}

    def fake_list(service, query=None, max_results=None):
        calls["list"] = (service, query, max_results)
        return ["msg_alert_001", "msg_interview_001", "msg_missing"]

    def fake_fetch(service, ids, callback=None):
        calls["fetch"] = list(ids)
        if callback:
            callback(1, 1)
        return [job_board_alert, interview_invitation]

    monkeypatch.setattr(scanner_module, "list_message_ids", fake_list)
    monkeypatch.setattr(scanner_module, "fetch_messages", fake_fetch)

    progress = []
    service = object()
    report = scan_mailbox(
        service,
        ScanConfig(days_back=30, max_messages=10),
        now=now,
        on_fetch=lambda done, total: progress.append((done, total)),
    )

    assert calls["list"][0] is service
    assert calls["list"][2] == 10
    assert calls["fetch"] == ["msg_alert_001", "msg_interview_001", "msg_missing"]
    assert progress == [(1, 1)]
    assert report.query == calls["list"][1]
    assert report.total_emails_scanned == 3
    assert report.failed == 1
    assert [r.message_id for r in report.results] == ["msg_interview_001"]


def test_scan_mailbox_no_messages(monkeypatch, now):
    """An empty search returns an empty report."""
    monkeypatch.setattr(scanner_module, "list_message_ids", lambda service, query=None, max_results=None: [])

    report = scan_mailbox(object(), now=now)

    assert report.total_emails_scanned == 0
    assert report.results == []
    assert report.query.startswith("after:")
