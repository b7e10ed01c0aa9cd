"""Exceptions raised by Job Mail Tracker."""


class JobMailTrackerError(Exception):
    """Base class for all Job Mail Tracker errors."""


class MessageParseError(JobMailTrackerError):
    """A fetched message is missing the data needed to classify it."""

    def __init__(self, message_id: str, reason: str) -> None:
        super().__init__(f"Message {message_id or '<unknown>'}: {reason}")
        self.message_id = message_id
        self.reason = reason


class CatalogError(JobMailTrackerError):
    """A pattern catalog is missing or empty."""
