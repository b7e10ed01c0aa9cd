"""Tests for pattern catalog validation."""

import pytest

import job_mail_tracker.catalogs as catalogs
from job_mail_tracker.exceptions import CatalogError
from job_mail_tracker.models import Status


def test_default_catalogs_are_valid():
    """The shipped catalogs pass validation."""
    catalogs.validate_catalogs()


def test_empty_catalog_rejected(monkeypatch):
    """An empty catalog stops the classifier from starting."""
    monkeypatch.setattr(catalogs, "JOB_KEYWORDS", ())
    with pytest.raises(CatalogError, match="JOB_KEYWORDS"):
        catalogs.validate_catalogs()


def test_empty_status_phrases_rejected(monkeypatch):
    """A status with no keywords is rejected."""
    monkeypatch.setattr(catalogs, "STATUS_KEYWORDS", ((Status.APPLIED, ()),))
    with pytest.raises(CatalogError, match="applied"):
        catalogs.validate_catalogs()
