"""Scan orchestration - fetches messages, classifies them, collects candidates."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable

from .classifier import classify_message
from .constants import SEARCH_TERMS
from .gmail_client import fetch_messages, list_message_ids
from .models import ClassificationResult, RawMessage, ScanConfig, ScanReport

logger = logging.getLogger(__name__)

# Outcome of one worker: ("ok", result-or-None), ("failed", None) or ("skipped", None)
_Outcome = tuple[str, "ClassificationResult | None"]


def build_query(days_back: int, extra_query: str | None = None, now: datetime | None = None) -> str:
    """Build the Gmail search for job mail received in the last ``days_back`` days."""
    now = now or datetime.now(timezone.utc)
    after = (now - timedelta(days=days_back)).strftime("%Y/%m/%d")
    query = f"after:{after} ({' OR '.join(SEARCH_TERMS)})"
    if extra_query:
        query = f"{query} {extra_query}"
    return query


def _classify_one(
    message: RawMessage,
    config: ScanConfig,
    now: datetime | None,
    cancel: threading.Event | None,
) -> _Outcome:
    if cancel is not None and cancel.is_set():
        return ("skipped", None)
    try:
        result = classify_message(
            message,
            now=now,
            min_confidence=config.min_confidence,
            keep_confirmations=config.keep_confirmations,
        )
    except Exception:  # noqa: BLE001
        logger.warning("Skipping message %s: classification failed", getattr(message, "id", "?"), exc_info=True)
        return ("failed", None)
    return ("ok", result)


def scan_messages(
    messages: Iterable[RawMessage],
    config: ScanConfig | None = None,
    now: datetime | None = None,
    cancel: threading.Event | None = None,
    total: int | None = None,
) -> ScanReport:
    """Classify a batch of messages concurrently.

    Results keep the input order. A message that raises is logged, counted
    in ``failed`` and does not affect the others. Once ``cancel`` is set,
    messages that have not started are skipped; the ones already running
    finish and are reported.

    ``total`` is the number of messages originally listed, when some of them
    were already lost before classification (e.g. failed to fetch).
    """
    config = config or ScanConfig()
    messages = list(messages)

    with ThreadPoolExecutor(max_workers=max(1, config.workers)) as executor:
        futures = [executor.submit(_classify_one, m, config, now, cancel) for m in messages]
        outcomes = [f.result() for f in futures]

    results = [result for kind, result in outcomes if kind == "ok" and result is not None]
    failed = sum(1 for kind, _ in outcomes if kind == "failed")
    skipped = sum(1 for kind, _ in outcomes if kind == "skipped")
    listed = total if total is not None else len(messages)

    return ScanReport(
        total_emails_scanned=listed,
        results=results,
        failed=failed + max(0, listed - len(messages)),
        cancelled=skipped > 0,
    )


def scan_mailbox(
    service,
    config: ScanConfig | None = None,
    now: datetime | None = None,
    cancel: threading.Event | None = None,
    on_fetch: Callable[[int, int], None] | None = None,
) -> ScanReport:
    """Run a full mailbox scan: list IDs, fetch messages, classify.

    ``service`` is an authenticated Gmail API handle owned by the caller.
    Listing or fetch-batch errors propagate; single bad messages do not.
    """
    config = config or ScanConfig()
    query = build_query(config.days_back, config.extra_query, now=now)
    logger.info("Searching with query: %s", query)

    ids = list_message_ids(service, query=query, max_results=config.max_messages)
    logger.info("Found %d candidate messages", len(ids))
    if not ids:
        return ScanReport(total_emails_scanned=0, query=query)

    messages = fetch_messages(service, ids, callback=on_fetch)
    if len(messages) < len(ids):
        logger.warning("Could not fetch %d of %d messages", len(ids) - len(messages), len(ids))

    report = scan_messages(messages, config, now=now, cancel=cancel, total=len(ids))
    report.query = query
    logger.info(
        "Scanned %d messages, %d job emails found, %d failed",
        report.total_emails_scanned,
        report.job_emails_found,
        report.failed,
    )
    return report
