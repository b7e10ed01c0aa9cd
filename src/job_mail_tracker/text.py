"""Text helpers: HTML normalization, header parsing and term matching."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from bs4 import BeautifulSoup

_FROM_RE = re.compile(r"^(.*?)\s*<([^>]+)>$")
_TAG_RE = re.compile(r"<\s*/?\s*[a-zA-Z][a-zA-Z0-9]*(?:\s[^<>]*)?/?>")
_INLINE_WS_RE = re.compile(r"[ \t\f\v\xa0]+")


def parse_from_header(from_value: str) -> tuple[str, str]:
    """Parse a From header into (display name, email address).

    Handles formats like:
      "John Doe <john@example.com>" -> ("John Doe", "john@example.com")
      "<john@example.com>"          -> ("", "john@example.com")
      "john@example.com"            -> ("", "john@example.com")
    """
    if not from_value:
        return ("", "")
    m = _FROM_RE.match(from_value.strip())
    if m:
        name = m.group(1).strip().strip('"').strip("'")
        return (name, m.group(2).strip())
    email = from_value.strip().strip("<>")
    return ("", email)


def looks_like_html(text: str) -> bool:
    return bool(text) and _TAG_RE.search(text) is not None


def collapse_whitespace(text: str) -> str:
    """Collapse runs of spaces inside lines and drop blank lines."""
    lines = (_INLINE_WS_RE.sub(" ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def html_to_text(markup: str) -> str:
    """Convert an HTML body to plain text.

    Tags are stripped (block elements become line breaks), entities are
    decoded and whitespace is collapsed.
    """
    soup = BeautifulSoup(markup, "html.parser")
    for element in soup(["script", "style", "head"]):
        element.decompose()
    text = soup.get_text(separator="\n")
    return collapse_whitespace(text)


def normalize_body(body: str) -> str:
    """Return the body as plain text, converting HTML when detected."""
    if not body:
        return ""
    if looks_like_html(body):
        return html_to_text(body)
    return body


@lru_cache(maxsize=None)
def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(r"(?<![a-z0-9])" + re.escape(term) + r"(?![a-z0-9])")


def contains_term(text: str, term: str) -> bool:
    """True if ``term`` appears in ``text`` not glued to other letters or digits."""
    return _term_pattern(term.lower()).search(text.lower()) is not None


def find_term(text: str, terms: Iterable[str]) -> str | None:
    """Return the first of ``terms`` found as a whole term in ``text``."""
    lowered = text.lower()
    for term in terms:
        if _term_pattern(term).search(lowered):
            return term
    return None


def find_substring(text: str, phrases: Iterable[str]) -> str | None:
    """Return the first of ``phrases`` contained in ``text`` (already lowercased)."""
    for phrase in phrases:
        if phrase in text:
            return phrase
    return None
