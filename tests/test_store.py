"""Tests for the SQLite record store."""

from job_mail_tracker.classifier import classify_message
from job_mail_tracker.constants import UNKNOWN_COMPANY, UNKNOWN_POSITION
from job_mail_tracker.models import ScanReport
from job_mail_tracker.store import JobStore, record_from_result


def test_save_scan_and_list(tmp_path, interview_invitation, now):
    """Accepted results are stored as job records."""
    result = classify_message(interview_invitation, now=now)
    report = ScanReport(total_emails_scanned=1, results=[result], query="test query")

    with JobStore(db_path=tmp_path / "jobs.db") as store:
        added = store.save_scan(report)
        records = store.list_records()
        info = store.get_info()

    assert added == 1
    assert len(records) == 1
    record = records[0]
    assert record.id == "msg_interview_001"
    assert record.company == "Startup"
    assert record.position == "Full Stack Developer"
    assert record.status == "interviewing"
    assert record.thread_id == "thread_001"
    assert record.is_email_import
    assert info["scan_count"] == 1
    assert info["record_count"] == 1
    assert info["last_scan_date"] == report.scan_date


def test_save_scan_skips_known_ids(tmp_path, interview_invitation, now):
    """Re-scanning the same message does not create a duplicate."""
    result = classify_message(interview_invitation, now=now)
    report = ScanReport(total_emails_scanned=1, results=[result])

    with JobStore(db_path=tmp_path / "jobs.db") as store:
        assert store.save_scan(report) == 1
        assert store.save_scan(report) == 0
        assert len(store.list_records()) == 1


def test_record_placeholders(recruiting_blast, now):
    """Missing company and title become placeholders in the record."""
    result = classify_message(recruiting_blast, now=now, min_confidence=0.0)
    record = record_from_result(result)
    assert record.company == UNKNOWN_COMPANY
    assert record.position == UNKNOWN_POSITION


def test_delete_record(tmp_path, good_record):
    """Deleting reports whether a record was actually removed."""
    with JobStore(db_path=tmp_path / "jobs.db") as store:
        store.add_record(good_record)
        assert store.delete_record(good_record.id) is True
        assert store.delete_record(good_record.id) is False


def test_clear(tmp_path, good_record):
    """Clearing removes records and scan history."""
    db_path = tmp_path / "jobs.db"
    with JobStore(db_path=db_path) as store:
        store.add_record(good_record)
        store.save_scan(ScanReport(total_emails_scanned=0))
        store.clear()
        info = store.get_info()

    assert info["record_count"] == 0
    assert info["scan_count"] == 0
    assert info["last_scan_date"] is None


def test_info_empty(tmp_path):
    """A fresh store reports no scans."""
    with JobStore(db_path=tmp_path / "jobs.db") as store:
        info = store.get_info()
    assert info["last_scan_date"] is None
    assert info["record_count"] == 0
