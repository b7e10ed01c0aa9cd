"""Field extraction: company, job title, status and detail hints.

Extractors return ``None`` when nothing usable was found. Callers decide
what placeholder, if any, to show instead.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from .catalogs import (
    COMMON_JOB_TITLES,
    COMPANY_TRAILING_WORDS,
    DOMAIN_PREFIXES,
    EXCLUDED_COMPANY_DOMAINS,
    GENERIC_COMPANY_TERMS,
    GENERIC_TITLE_WORDS,
    GHOSTED_KEYWORD,
    INTERVIEW_TYPES,
    LEVELED_TITLE_ROLES,
    SENDER_NAME_STOPLIST,
    STATUS_KEYWORDS,
    TITLE_LEVELS,
    TITLE_STOPWORDS,
)
from .constants import (
    COMPANY_MAX_LENGTH,
    COMPANY_MIN_LENGTH,
    GHOSTED_AFTER_DAYS,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from .models import ExtractedInfo, Status
from .text import find_term, parse_from_header

# --- Company ---

_DOMAIN_RE = re.compile(r"@([\w.-]+)")
_DOMAIN_SUFFIX_RE = re.compile(r"(?:-co|-?(?:corp|inc|llc|ltd))$")

# A run of capitalized words on one line.
_NAME = r"([A-Z][\w&]*(?:[ \t]+[A-Z][\w&]*)*)"

COMPANY_PATTERNS = (
    re.compile(r"(?i:thanks for applying to|thank you for applying to)\s+" + _NAME),
    re.compile(r"(?i:thank you for your interest in)\s+" + _NAME),
    re.compile(r"\b(?i:from)\s+" + _NAME),
    re.compile(r"\b(?i:at|with|for)\s+" + _NAME),
    re.compile(r"\b" + _NAME + r"\s+(?:Inc|Corp|LLC|Ltd)\b"),
    re.compile(r"\b(?i:we are|i am with|i work at|i represent)\s+" + _NAME),
    re.compile(r"\b(?i:the)\s+" + _NAME + r"\s+(?i:talent\s+team|team)\b"),
    re.compile(r"^[ \t]*([A-Z][A-Za-z&. ]{2,30}?)[ \t]*$", re.M),
)


def _is_generic_company(name: str) -> bool:
    return find_term(name, GENERIC_COMPANY_TERMS) is not None


def company_from_domain(sender: str) -> str | None:
    """Derive a company name from the sender's address domain."""
    _, address = parse_from_header(sender)
    m = _DOMAIN_RE.search(address or "")
    if not m:
        return None

    domain = m.group(1).lower()
    for prefix in DOMAIN_PREFIXES:
        if domain.startswith(prefix):
            domain = domain[len(prefix):]
            break

    label = domain.split(".")[0]
    if not label or label in EXCLUDED_COMPANY_DOMAINS or _is_generic_company(label):
        return None

    # "acmecorp" -> "acme", but never shorter than three characters
    stripped = _DOMAIN_SUFFIX_RE.sub("", label)
    if len(stripped) >= 3:
        label = stripped

    return label[0].upper() + label[1:]


def _clean_company(raw: str) -> str | None:
    words = raw.split()
    if words and words[0].lower() == "the":
        words = words[1:]
    while words and words[-1].lower() in COMPANY_TRAILING_WORDS:
        words.pop()

    name = re.sub(r"[^\w\s&.-]", "", " ".join(words)).strip(" .-")
    if not COMPANY_MIN_LENGTH <= len(name) <= COMPANY_MAX_LENGTH:
        return None
    if name.isdigit() or _is_generic_company(name):
        return None
    return name


def company_from_text(subject: str, body: str) -> str | None:
    """Find a company name with phrase patterns over subject and body."""
    full_text = f"{subject} {body}"
    for pattern in COMPANY_PATTERNS:
        m = pattern.search(full_text)
        if not m:
            continue
        name = _clean_company(m.group(1))
        if name:
            return name
    return None


def company_from_sender_name(sender: str) -> str | None:
    """Use the From display name unless it looks like a person or a role."""
    name, _ = parse_from_header(sender)
    name = name.replace('"', "").replace("'", "").strip()
    if not COMPANY_MIN_LENGTH <= len(name) <= COMPANY_MAX_LENGTH:
        return None

    words = name.split()
    if len(words) == 2 and all(len(w) >= 2 and w[0] == w[0].upper() for w in words):
        return None
    if find_term(name, SENDER_NAME_STOPLIST):
        return None
    return name


def extract_company(sender: str, body: str = "", subject: str = "") -> str | None:
    """Extract the employer name, trying domain, text, then display name."""
    return (
        company_from_domain(sender)
        or company_from_text(subject, body)
        or company_from_sender_name(sender)
    )


# --- Job title ---

_TITLE = r"([a-z][a-z ]*?)"
_TITLE_END = r"(?:\s+(?:position|role|job)\b|\s+at\b|[,.;:!?\n]|$)"


def _literal_alternation(phrases) -> str:
    return "|".join(re.escape(p).replace(r"\ ", r"\s+") for p in phrases)


TITLE_PATTERNS = (
    re.compile(r"\b(?:for the|for an?|as an?)\s+" + _TITLE + r"\s+(?:position|role|job|at)\b", re.I),
    re.compile(r"\b(?:position|role|job|title) of\s+" + _TITLE + _TITLE_END, re.I),
    re.compile(r"\b(?:applied for|applying for|application for)\s+(?:the\s+)?" + _TITLE + _TITLE_END, re.I),
    re.compile(
        r"\b(?:interested in|regarding)\s+(?:the\s+)?"
        + _TITLE
        + r"(?:\s+(?:position|role|job|opening|opportunity)\b|\s+at\b|[,.;:!?\n]|$)",
        re.I,
    ),
    re.compile(
        r"\b(?:opening|opportunity|vacancy) for\s+(?:an?\s+)?"
        + _TITLE
        + r"(?:\s+(?:position|role)\b|\s+at\b|[,.;:!?\n]|$)",
        re.I,
    ),
    re.compile(
        r"^(?:re:\s*)?(?:application|apply|applying|interested)\b[^\n]*?\bfor\s+"
        + r"([a-z][a-z /-]*?)"
        + r"(?:\s+(?:position|role|job)\b|\s+at\b|\s+-|[,.;:!?\n]|$)",
        re.I,
    ),
    re.compile(r"\b(" + _literal_alternation(COMMON_JOB_TITLES) + r")\b", re.I),
    re.compile(r"\b(" + "|".join(GENERIC_TITLE_WORDS) + r")\s+(?:position|role)\b", re.I),
    re.compile(
        r"\b((?:" + "|".join(TITLE_LEVELS) + r")\s+[a-z ]*?(?:" + "|".join(LEVELED_TITLE_ROLES) + r"))\b",
        re.I,
    ),
)


def title_case(title: str) -> str:
    """Capitalize each word and lowercase the rest. Idempotent."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in title.split())


def _clean_title(raw: str) -> str | None:
    title = " ".join(re.sub(r"[^\w\s/-]", "", raw).split())
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        return None
    if title.lower() in TITLE_STOPWORDS or title.isdigit():
        return None
    if not re.search(r"[A-Za-z]", title):
        return None
    return title_case(title)


def extract_job_title(content: str, subject: str = "") -> str | None:
    """Extract a role title from the subject and the lowercased content."""
    full_text = f"{subject} {content}"
    for pattern in TITLE_PATTERNS:
        m = pattern.search(full_text)
        if not m:
            continue
        title = _clean_title(m.group(1))
        if title:
            return title
    return None


# --- Status ---


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def status_signal(content: str) -> tuple[Status, str] | None:
    """Return the first status (by priority) whose phrase appears in content."""
    for status, phrases in STATUS_KEYWORDS:
        for phrase in phrases:
            if phrase in content:
                return status, phrase
    return None


def determine_status(content: str, email_date: datetime | None = None, now: datetime | None = None) -> Status:
    """Map message content to a pipeline status.

    A keyword match always wins. Only when nothing matched does an
    application message older than two weeks count as ghosted.
    """
    matched = status_signal(content)
    if matched:
        return matched[0]

    if email_date is not None and GHOSTED_KEYWORD in content:
        now = _as_utc(now or datetime.now(timezone.utc))
        if _as_utc(email_date) < now - timedelta(days=GHOSTED_AFTER_DAYS):
            return Status.GHOSTED

    return Status.APPLIED


# --- Details ---

_MONTHS = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
_INTERVIEW_DATE_RE = re.compile(
    r"\b(?:on|at)\s+(" + _MONTHS + r"\s+\d{1,2}(?:st|nd|rd|th)?(?:,?\s+\d{4})?)", re.I
)
_REJECTION_REASON_RES = (
    re.compile(r"unfortunately[^.]*?because ([^.]+)", re.I),
    re.compile(r"decided to go with ([^.]+)", re.I),
    re.compile(r"other candidates ([^.]+)", re.I),
)
_SALARY_RE = re.compile(r"\$\d[\d,]*(?:\.\d{2})?(?:\s*k\b)?", re.I)


def extract_details(content: str, status: Status) -> ExtractedInfo:
    """Pull interview, rejection or offer hints for the given status."""
    if status is Status.INTERVIEWING:
        m = _INTERVIEW_DATE_RE.search(content)
        interview_type = None
        for label, words in INTERVIEW_TYPES:
            if any(word in content for word in words):
                interview_type = label
                break
        return ExtractedInfo(
            interview_type=interview_type,
            interview_date=m.group(1).strip() if m else None,
        )

    if status is Status.REJECTED:
        for pattern in _REJECTION_REASON_RES:
            m = pattern.search(content)
            if m:
                return ExtractedInfo(rejection_reason=m.group(1).strip())
        return ExtractedInfo()

    if status is Status.OFFERED and ("salary" in content or "compensation" in content):
        m = _SALARY_RE.search(content)
        if m:
            return ExtractedInfo(offer_details=f"Salary: {m.group(0)}")

    return ExtractedInfo()
