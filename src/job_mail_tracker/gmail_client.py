"""Gmail API client functions for listing and fetching messages, plus local .eml loading."""

from __future__ import annotations

import base64
import binascii
import email
import email.policy
import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Callable

from googleapiclient.errors import HttpError
from googleapiclient.http import BatchHttpRequest
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from job_mail_tracker.constants import BATCH_SIZE, PAGE_SIZE
from job_mail_tracker.exceptions import MessageParseError
from job_mail_tracker.models import RawMessage
from job_mail_tracker.text import html_to_text, normalize_body

logger = logging.getLogger(__name__)


def _is_retryable_http_error(exc: BaseException) -> bool:
    return isinstance(exc, HttpError) and exc.resp.status in (429, 500, 503)


def list_message_ids(
    service,
    query: str | None = None,
    max_results: int | None = None,
) -> list[str]:
    """List message IDs matching the query, handling pagination."""
    ids: list[str] = []
    page_token: str | None = None

    while True:
        page_size = PAGE_SIZE if not max_results else min(PAGE_SIZE, max_results - len(ids))
        kwargs: dict = {"userId": "me", "maxResults": page_size, "fields": "messages/id,nextPageToken"}
        if query:
            kwargs["q"] = query
        if page_token:
            kwargs["pageToken"] = page_token

        resp = _execute_request(service.users().messages().list(**kwargs))
        for msg in resp.get("messages", []):
            ids.append(msg["id"])
            if max_results and len(ids) >= max_results:
                return ids[:max_results]

        page_token = resp.get("nextPageToken")
        if not page_token:
            break

    return ids


def _decode_part_data(data: str) -> str:
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded).decode("utf-8", errors="replace")


def _find_part(payload: dict, mime_type: str) -> dict | None:
    if payload.get("mimeType") == mime_type and payload.get("body", {}).get("data"):
        return payload
    for part in payload.get("parts", []) or []:
        found = _find_part(part, mime_type)
        if found:
            return found
    return None


def extract_body(payload: dict) -> str:
    """Return the plain-text body of a message payload.

    Prefers a text/plain part anywhere in the MIME tree and falls back to
    text/html converted to text, then to the top-level body data.
    """
    plain = _find_part(payload, "text/plain")
    if plain:
        return normalize_body(_decode_part_data(plain["body"]["data"]))

    html_part = _find_part(payload, "text/html")
    if html_part:
        return html_to_text(_decode_part_data(html_part["body"]["data"]))

    data = payload.get("body", {}).get("data")
    if data:
        return normalize_body(_decode_part_data(data))
    return ""


def _parse_date(msg_id: str, headers: dict[str, str], internal_date: str | None) -> datetime:
    date_header = headers.get("Date")
    if date_header:
        try:
            parsed = parsedate_to_datetime(date_header)
        except (TypeError, ValueError):
            parsed = None
        if parsed is not None:
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed

    if internal_date:
        try:
            return datetime.fromtimestamp(int(internal_date) / 1000, tz=timezone.utc)
        except (TypeError, ValueError):
            pass

    raise MessageParseError(msg_id, "no usable Date header or internalDate")


def parse_message(response: dict) -> RawMessage:
    """Build a RawMessage from a ``format=full`` Gmail API response."""
    msg_id = response.get("id", "")
    payload = response.get("payload")
    if not payload:
        raise MessageParseError(msg_id, "missing payload")

    headers = {h["name"]: h.get("value", "") for h in payload.get("headers", []) if "name" in h}
    subject = headers.get("Subject", "")
    sender = headers.get("From", "")
    if not subject and not sender:
        raise MessageParseError(msg_id, "missing From and Subject headers")

    try:
        body = extract_body(payload)
    except (binascii.Error, ValueError) as exc:
        raise MessageParseError(msg_id, f"undecodable body ({exc})") from exc

    return RawMessage(
        id=msg_id,
        thread_id=response.get("threadId"),
        subject=subject,
        sender=sender,
        date=_parse_date(msg_id, headers, response.get("internalDate")),
        body=body,
        snippet=response.get("snippet", ""),
    )


@retry(
    retry=retry_if_exception(_is_retryable_http_error),
    wait=wait_exponential(multiplier=1, min=1, max=60),
    stop=stop_after_attempt(5),
    reraise=True,
)
def _execute_request(request) -> dict:
    return request.execute()


@retry(
    retry=retry_if_exception(_is_retryable_http_error),
    wait=wait_exponential(multiplier=1, min=1, max=60),
    stop=stop_after_attempt(5),
    reraise=True,
)
def _execute_batch(batch: BatchHttpRequest) -> None:
    batch.execute()


def fetch_messages(
    service,
    message_ids: list[str],
    callback: Callable[[int, int], None] | None = None,
) -> list[RawMessage]:
    """Fetch full messages in batches using BatchHttpRequest.

    Messages that fail to fetch or parse are logged and skipped. The result
    keeps the order of ``message_ids``.
    """
    fetched: dict[str, RawMessage] = {}
    total_batches = (len(message_ids) + BATCH_SIZE - 1) // BATCH_SIZE

    for batch_num in range(total_batches):
        start = batch_num * BATCH_SIZE
        end = min(start + BATCH_SIZE, len(message_ids))
        chunk = message_ids[start:end]

        batch = service.new_batch_http_request()

        def _make_callback(msg_id: str):
            def _cb(request_id, response, exception):
                if exception is not None:
                    logger.warning("Skipping message %s: fetch failed (%s)", msg_id, exception)
                    return
                try:
                    fetched[msg_id] = parse_message(response)
                except MessageParseError as exc:
                    logger.warning("Skipping malformed message: %s", exc)

            return _cb

        for msg_id in chunk:
            batch.add(
                service.users().messages().get(userId="me", id=msg_id, format="full"),
                callback=_make_callback(msg_id),
            )

        _execute_batch(batch)

        if callback:
            callback(batch_num + 1, total_batches)

    return [fetched[msg_id] for msg_id in message_ids if msg_id in fetched]


def load_eml(path: str | Path) -> RawMessage:
    """Build a RawMessage from a local RFC 822 file (e.g. a saved .eml)."""
    path = Path(path)
    with open(path, "rb") as f:
        msg = email.message_from_binary_file(f, policy=email.policy.default)

    msg_id = str(msg.get("Message-ID") or path.stem).strip("<>")
    subject = str(msg.get("Subject") or "")
    sender = str(msg.get("From") or "")
    if not subject and not sender:
        raise MessageParseError(msg_id, "missing From and Subject headers")

    body = ""
    part = msg.get_body(preferencelist=("plain", "html"))
    if part is not None:
        try:
            content = part.get_content()
        except (LookupError, ValueError) as exc:
            raise MessageParseError(msg_id, f"undecodable body ({exc})") from exc
        if part.get_content_subtype() == "html":
            body = html_to_text(content)
        else:
            body = normalize_body(content)

    headers = {"Date": str(msg.get("Date") or "")}
    return RawMessage(
        id=msg_id,
        thread_id=None,
        subject=subject,
        sender=sender,
        date=_parse_date(msg_id, headers, None),
        body=body,
    )
