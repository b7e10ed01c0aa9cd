"""Pattern catalogs used by the classifier.

Every entry is lowercase and matched as a substring of lowercased text unless
the consumer says otherwise. Changing an entry changes classification
behavior.
"""

from .exceptions import CatalogError
from .models import Status

# --- Notification filter ---
NOTIFICATION_SENDERS = (
    "noreply",
    "no-reply",
    "donotreply",
    "notifications@",
    "alerts@",
    "digest@",
    "newsletter@",
    "updates@",
    "marketing@",
    "automated@",
    "jobs@indeed",
    "jobs@linkedin",
    "alerts@glassdoor",
    "notification@",
    "bebee",
    "@bebee.com",
    "jobs@bebee",
)

NOTIFICATION_PHRASES = (
    # LinkedIn
    "jobs you may be interested in",
    "recommended for you",
    "new jobs posted",
    "job alert",
    "daily job digest",
    "weekly job digest",
    "jobs matching your preferences",
    "similar jobs to ones you",
    "jobs like",
    "jobs near you",
    "trending jobs",
    "premium job insights",
    # Indeed
    "jobs matching your search",
    "recommended jobs",
    "jobs from your search",
    "new jobs on indeed",
    "indeed job alert",
    "similar to jobs you",
    "jobs posted today",
    "more jobs like",
    # Glassdoor
    "jobs for you",
    "personalized job recommendations",
    "glassdoor job alert",
    "companies hiring",
    "salary insights",
    # ZipRecruiter
    "ziprecruiter job alert",
    "jobs posted near",
    "apply to these jobs",
    "one-click apply",
    # beBee
    "bebee job alert",
    "bebee job notification",
    "new jobs on bebee",
    "bebee professional network",
    "bebee opportunities",
    # Generic
    "newsletter",
    "weekly update",
    "digest",
    "subscription",
    "unsubscribe",
    "marketing",
    "promotional",
    "sponsored",
    "advertisement",
    "ad:",
    "jobs you might like",
    "might interest you",
    "explore opportunities",
    "browse jobs",
    "view all jobs",
    "see more jobs",
    "apply now to",
    "quick apply",
    "easy apply",
)

AUTOMATED_CONTENT_PHRASES = (
    "this is an automated",
    "do not reply to this",
    "automatically generated",
)

AUTOMATED_SUBJECT_MARKERS = (
    "[automated]",
    "auto:",
)

APPLICATION_CONFIRMATION_PHRASES = (
    "thank you for applying",
    "thanks for applying",
    "thanks for your application",
    "application received",
    "we have received your application",
    "thanks for your interest",
    "thank you for your interest",
    "application confirmation",
    "successfully submitted",
    "application status",
    "received your resume",
    "thank you for your submission",
    "we received your application",
    "your application has been received",
    "application has been received",
    "we will review your application",
    "thank you for submitting",
    "your application for",
    "application for the",
    "received your application for",
    "thank you for your application to",
    "thanks for your application to",
)

# Confirmations that survive the notification filter when keep_confirmations is on.
STRONG_CONFIRMATION_PHRASES = (
    "thank you for applying",
    "thanks for applying",
    "application received",
    "we have received your application",
    "your application has been received",
)
INTEREST_PHRASE = "thank you for your interest"
INTEREST_CONTEXT = ("application", "position", "role")

# --- Job-relatedness ---
JOB_KEYWORDS = (
    "job",
    "application",
    "position",
    "role",
    "interview",
    "hiring",
    "recruiter",
    "hr",
    "human resources",
    "talent",
    "career",
    "opportunity",
    "employment",
    "candidate",
    "resume",
    "cv",
    "screening",
    "phone screen",
)

JOB_SITES = (
    "linkedin",
    "indeed",
    "glassdoor",
    "monster",
    "ziprecruiter",
    "dice",
    "stackoverflow",
    "github",
    "angel.co",
    "wellfound",
    "hired",
)

RECRUITER_INDICATORS = (
    "recruiter",
    "recruiting",
    "talent acquisition",
    "hr specialist",
    "hiring manager",
    "people operations",
    "people team",
)

# --- Company extraction ---
FREE_MAIL_DOMAINS = (
    "gmail",
    "googlemail",
    "yahoo",
    "outlook",
    "hotmail",
    "live",
    "msn",
    "aol",
    "icloud",
    "me",
    "protonmail",
    "proton",
    "gmx",
    "zoho",
    "yandex",
)

ATS_DOMAINS = (
    "workday",
    "myworkday",
    "myworkdayjobs",
    "greenhouse",
    "lever",
    "jobvite",
    "smartrecruiters",
    "brassring",
    "icims",
    "kronos",
    "successfactors",
    "taleo",
    "bamboohr",
    "namely",
    "zenefits",
    "gusto",
    "adp",
    "ashbyhq",
)

EXCLUDED_COMPANY_DOMAINS = frozenset(
    FREE_MAIL_DOMAINS
    + JOB_SITES
    + ATS_DOMAINS
    + (
        "angel",
        "bebee",
        "noreply",
        "no-reply",
        "donotreply",
        "automated",
        "notifications",
        "notification",
        "alerts",
        "mailer",
        "company",
        "example",
        "domain",
        "email",
        "mail",
    )
)

DOMAIN_PREFIXES = ("www.", "mail.", "hr.", "jobs.", "careers.", "recruiting.")

# Matched as whole terms against candidate company names.
GENERIC_COMPANY_TERMS = (
    "team",
    "hr",
    "human resources",
    "recruiting",
    "talent",
    "hiring",
    "notification",
    "noreply",
    "no reply",
    "automated",
    "system",
    "admin",
    "support",
    "customer service",
    "help desk",
    "info",
    "sales",
    "marketing",
    "newsletter",
    "updates",
    "alerts",
    "jobs",
    "careers",
    "opportunities",
    "positions",
    "roles",
    "application",
    "applications",
    "candidate",
    "candidates",
    "recruiter",
    "recruiters",
    "staffing",
    "employment",
    "company",
)

# Trailing words dropped from a captured company ("Acme Talent Team" -> "Acme").
COMPANY_TRAILING_WORDS = ("team", "hiring", "hr", "recruiting", "talent", "careers", "jobs")

SENDER_NAME_STOPLIST = (
    "noreply",
    "no-reply",
    "donotreply",
    "automated",
    "system",
    "notification",
    "notifications",
    "alerts",
    "updates",
    "digest",
    "jobs",
    "careers",
    "recruiting",
    "hr",
    "hiring",
    "talent",
)

# --- Job-title extraction ---
TITLE_STOPWORDS = frozenset(
    (
        "application",
        "position",
        "role",
        "job",
        "opportunity",
        "opening",
        "notification",
        "alert",
        "update",
        "digest",
        "newsletter",
        "team",
        "company",
        "organization",
        "department",
        "division",
        "and",
        "or",
        "the",
        "a",
        "an",
        "of",
        "in",
        "at",
        "for",
        "with",
    )
)

COMMON_JOB_TITLES = (
    "software engineer",
    "full stack developer",
    "frontend developer",
    "backend developer",
    "web developer",
    "mobile developer",
    "data scientist",
    "data analyst",
    "product manager",
    "project manager",
    "ui/ux designer",
    "graphic designer",
    "devops engineer",
    "system administrator",
    "database administrator",
    "qa engineer",
    "test engineer",
    "business analyst",
    "technical writer",
    "sales manager",
    "marketing manager",
    "hr manager",
    "operations manager",
    "customer success manager",
    "account manager",
    "software architect",
    "solutions architect",
    "security engineer",
    "network engineer",
    "cloud engineer",
)

GENERIC_TITLE_WORDS = (
    "engineer",
    "developer",
    "programmer",
    "analyst",
    "manager",
    "designer",
    "architect",
    "specialist",
    "coordinator",
    "director",
    "lead",
    "senior",
    "junior",
)

TITLE_LEVELS = ("senior", "junior", "lead", "principal", "staff")
LEVELED_TITLE_ROLES = ("engineer", "developer", "manager", "analyst", "designer")

# --- Status, checked in this order ---
STATUS_KEYWORDS = (
    (
        Status.APPLIED,
        (
            "application received",
            "thank you for applying",
            "we have received your application",
            "application confirmation",
            "successfully submitted",
            "application status",
        ),
    ),
    (
        Status.INTERVIEWING,
        (
            "interview",
            "schedule a call",
            "phone screen",
            "technical interview",
            "onsite interview",
            "video call",
            "zoom meeting",
            "teams meeting",
            "would like to speak",
            "available for a call",
            "screening call",
            "next step",
            "move forward",
            "discuss your background",
        ),
    ),
    (
        Status.OFFERED,
        (
            "offer",
            "congratulations",
            "pleased to offer",
            "job offer",
            "offer letter",
            "compensation",
            "salary",
            "benefits package",
            "start date",
            "welcome to the team",
            "excited to have you",
            "accept the position",
        ),
    ),
    (
        Status.REJECTED,
        (
            "unfortunately",
            "not moving forward",
            "other candidates",
            "different direction",
            "not a fit",
            "decline",
            "pass on",
            "thank you for your interest but",
            "decided not to proceed",
            "will not be moving",
            "not selected",
        ),
    ),
)

GHOSTED_KEYWORD = "application"

# --- Scoring ---
NEGATIVE_SIGNAL_PHRASES = (
    "newsletter",
    "digest",
    "marketing",
    "promotional",
    "unsubscribe",
    "you may be interested",
)

NOREPLY_MARKERS = ("noreply", "no-reply")

# --- Cleanup re-check of stored records ---
JOB_BOARD_NOTIFICATION_SENDERS = (
    "noreply@linkedin.com",
    "jobs-noreply@linkedin.com",
    "notifications@linkedin.com",
    "noreply@indeed.com",
    "notifications@indeed.com",
    "noreply@glassdoor.com",
    "alerts@glassdoor.com",
    "noreply@ziprecruiter.com",
    "notifications@ziprecruiter.com",
    "noreply@monster.com",
    "jobs@dice.com",
    "noreply@dice.com",
    "notifications@angel.co",
    "noreply@wellfound.com",
    "jobs@stackoverflow.com",
    "noreply@github.com",
)

CLEANUP_SUBJECT_PHRASES = NOTIFICATION_PHRASES + (
    "check out these",
    "take a look at",
)

GENERIC_RECORD_COMPANIES = (
    "unknown company",
    "notification",
    "team",
    "hr",
    "recruiting",
    "jobs",
    "careers",
    "linkedin",
    "indeed",
    "glassdoor",
    "ziprecruiter",
    "monster",
    "dice",
    "stackoverflow",
    "github",
    "angel",
    "wellfound",
)

RECORD_AUTOMATED_INDICATORS = (
    "do not reply",
    "this is an automated",
    "automatically generated",
    "unsubscribe",
    "opt out",
    "manage preferences",
)

DENYLISTED_COMPANIES = ("Team", "HR", "Recruiting", "Notification")

# --- Detail hints ---
INTERVIEW_TYPES = (
    ("phone", ("phone",)),
    ("video", ("video", "zoom", "teams")),
    ("in-person", ("onsite", "on-site", "in person")),
)


def _all_catalogs() -> dict[str, object]:
    return {
        name: value
        for name, value in globals().items()
        if name.isupper() and isinstance(value, (tuple, frozenset, str))
    }


def validate_catalogs() -> None:
    """Raise CatalogError if any catalog is empty.

    The classifier cannot produce meaningful results without its pattern
    data, so this runs at import time of the classifier module.
    """
    for name, value in _all_catalogs().items():
        if not value:
            raise CatalogError(f"Pattern catalog {name} is empty")
    for status, phrases in STATUS_KEYWORDS:
        if not phrases:
            raise CatalogError(f"Status catalog for {status.value!r} is empty")
