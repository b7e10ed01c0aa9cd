"""Authentication helpers for Gmail API."""

from __future__ import annotations

import logging

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError
from rich.markup import escape

from job_mail_tracker.constants import CONFIG_DIR, CREDENTIALS_PATH, SCOPES, TOKEN_PATH
from job_mail_tracker.display import console

logger = logging.getLogger(__name__)


def get_gmail_service() -> Resource:
    """Return an authenticated, read-only Gmail API service object.

    Loads the cached token from TOKEN_PATH if available and refreshes it
    when expired. Without a token an OAuth browser flow is launched, which
    requires credentials.json at CREDENTIALS_PATH. The returned handle is
    passed explicitly to the scan pipeline; nothing keeps it globally.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    creds: Credentials | None = None

    if TOKEN_PATH.exists():
        creds = Credentials.from_authorized_user_file(str(TOKEN_PATH), SCOPES)

    if creds and creds.expired and creds.refresh_token:
        creds.refresh(Request())
    elif not creds or not creds.valid:
        if not CREDENTIALS_PATH.exists():
            raise FileNotFoundError(
                f"Credentials file not found at {CREDENTIALS_PATH}.\n"
                "Download your OAuth client credentials from the Google Cloud Console "
                "and save them as:\n"
                f"  {CREDENTIALS_PATH}"
            )
        flow = InstalledAppFlow.from_client_secrets_file(str(CREDENTIALS_PATH), SCOPES)
        creds = flow.run_local_server(port=0)

    TOKEN_PATH.write_text(creds.to_json())

    return build("gmail", "v1", credentials=creds)


def check_auth() -> str | None:
    """Return the authenticated Gmail address, or None if authentication fails."""
    try:
        service = get_gmail_service()
    except FileNotFoundError as exc:
        console.print(f"[red]Missing credentials:[/red] {escape(str(exc))}")
        return None
    except RefreshError as exc:
        console.print(
            f"[red]Could not refresh the saved token:[/red] {escape(str(exc))}. "
            f"Delete {TOKEN_PATH} and run auth again."
        )
        return None

    try:
        profile = service.users().getProfile(userId="me").execute()
    except HttpError as exc:
        logger.debug("getProfile failed", exc_info=True)
        console.print(f"[red]Gmail API rejected the token:[/red] {escape(str(exc.reason))}")
        return None

    address = profile["emailAddress"]
    console.print(f"[green]Authenticated as {address}[/green] (read-only access)")
    return address
