"""Per-message classification pipeline."""

from __future__ import annotations

import logging
from datetime import datetime

from .catalogs import validate_catalogs
from .constants import ACCEPT_THRESHOLD
from .extractors import determine_status, extract_company, extract_details, extract_job_title
from .filters import job_related_signal, notification_signal
from .models import ClassificationResult, RawMessage
from .scorer import calculate_confidence
from .text import normalize_body

logger = logging.getLogger(__name__)

validate_catalogs()


def analyze_message(
    message: RawMessage,
    now: datetime | None = None,
    keep_confirmations: bool = False,
) -> ClassificationResult | None:
    """Run the full pipeline over one message without applying the threshold.

    Returns ``None`` when the message is a notification or is not about a
    job at all. No extraction runs for notifications.
    """
    body = normalize_body(message.body)
    content = f"{message.subject} {body}".lower()

    reason = notification_signal(content, message.sender, message.subject, keep_confirmations)
    if reason:
        logger.debug("Message %s filtered as notification (%s)", message.id, reason)
        return None

    related = job_related_signal(content, message.sender)
    if not related:
        logger.debug("Message %s not job related", message.id)
        return None

    company = extract_company(message.sender, body, message.subject)
    job_title = extract_job_title(content, message.subject)
    status = determine_status(content, message.date, now=now)
    confidence, signals = calculate_confidence(
        content, message.sender, message.subject, company, job_title
    )

    return ClassificationResult(
        message_id=message.id,
        thread_id=message.thread_id,
        is_job_related=True,
        company=company,
        job_title=job_title,
        status=status,
        confidence=confidence,
        email_subject=message.subject,
        email_from=message.sender,
        date=message.date,
        details=extract_details(content, status),
        signals=(related,) + signals,
    )


def classify_message(
    message: RawMessage,
    now: datetime | None = None,
    min_confidence: float = ACCEPT_THRESHOLD,
    keep_confirmations: bool = False,
) -> ClassificationResult | None:
    """Classify one message, returning a result only if it clears the threshold."""
    result = analyze_message(message, now=now, keep_confirmations=keep_confirmations)
    if result is None:
        return None
    if result.confidence < min_confidence:
        logger.debug(
            "Message %s below threshold (%.2f < %.2f)",
            message.id,
            result.confidence,
            min_confidence,
        )
        return None
    return result
