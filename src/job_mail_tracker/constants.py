"""Constants for Job Mail Tracker."""

from pathlib import Path

# --- Config paths ---
CONFIG_DIR = Path.home() / ".job-mail-tracker"
CREDENTIALS_PATH = CONFIG_DIR / "credentials.json"
TOKEN_PATH = CONFIG_DIR / "token.json"
STORE_DB_PATH = CONFIG_DIR / "jobs.db"
CLEANUP_LOG_PATH = CONFIG_DIR / "cleanup_log.json"

# --- Gmail API ---
SCOPES = ["https://www.googleapis.com/auth/gmail.readonly"]
BATCH_SIZE = 50  # messages per BatchHttpRequest
PAGE_SIZE = 500  # messages per list page

# --- Scan defaults ---
DEFAULT_DAYS_BACK = 30
DEFAULT_MAX_MESSAGES = 50
DEFAULT_WORKERS = 4
SEARCH_TERMS = [
    "job",
    "application",
    "interview",
    "offer",
    "position",
    "hiring",
    "recruiter",
    '"received your application"',
    '"thank you for applying"',
    '"thanks for applying"',
    '"application received"',
    '"thank you for your interest"',
    '"thank you for your application"',
]

# --- Placeholders used by the record store ---
UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_POSITION = "Unknown Position"

# --- Confidence weights ---
CONFIDENCE_BASE = 0.2
WEIGHT_COMPANY = 0.4
WEIGHT_GENERIC_COMPANY = 0.2
WEIGHT_JOB_TITLE = 0.3
WEIGHT_SUBJECT_RECEIVED = 0.3
WEIGHT_SUBJECT_INTERVIEW = 0.4
WEIGHT_SUBJECT_OFFER = 0.5
WEIGHT_SUBJECT_JOB = 0.2
WEIGHT_NEGATIVE_SIGNAL = -0.4
WEIGHT_PERSONAL_SENDER = 0.2
ACCEPT_THRESHOLD = 0.5

# --- Quality weights (cleanup) ---
QUALITY_BASE = 5
QUALITY_MIN = 0
QUALITY_MAX = 10
QUALITY_COMPANY = 2
QUALITY_POSITION = 2
QUALITY_PERSONAL_SENDER = 1
QUALITY_NOTIFICATION = -5
QUALITY_DENYLISTED_COMPANY = -3
QUALITY_UNSUBSCRIBE = -3
QUALITY_CLEANUP_BELOW = 3  # quality < 3 is deleted
QUALITY_GOOD_FROM = 6  # quality >= 6 is retained silently

# --- Status ---
GHOSTED_AFTER_DAYS = 14

# --- Text limits ---
COMPANY_MIN_LENGTH = 2
COMPANY_MAX_LENGTH = 50
TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
