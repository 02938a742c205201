# src/ghuser_kit/github/lookup.py

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal
from urllib.parse import parse_qs, urlsplit

from pydantic import TypeAdapter

from .client import GitHubUsersClient
from .errors import UserLookupError

logger = logging.getLogger(__name__)

EMPTY_USERNAME_MESSAGE = "Please enter a username"

_DATETIME = TypeAdapter(datetime)


@dataclass(frozen=True)
class LookupOutcome:
    """Text to display for one submission, and whether it is a success."""

    text: str
    status: Literal["success", "error"]

    @property
    def ok(self) -> bool:
        return self.status == "success"


def token_from_url(url: str) -> str | None:
    """Return the first `token` query parameter of `url`, if any."""
    values = parse_qs(urlsplit(url).query, keep_blank_values=True).get("token")
    return values[0] if values else None


def format_date(created_at: str | datetime) -> str:
    """Render a timestamp as its UTC calendar date, YYYY-MM-DD."""
    value = _DATETIME.validate_python(created_at)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).date().isoformat()


async def lookup_creation_date(
    username: str,
    *,
    token: str | None = None,
    client: GitHubUsersClient | None = None,
) -> LookupOutcome:
    """Look up when `username` joined GitHub.

    Never raises for lookup failures: they come back as an error outcome
    carrying the message to show.
    """
    username = username.strip()
    if not username:
        return LookupOutcome(text=EMPTY_USERNAME_MESSAGE, status="error")

    owns_client = client is None
    if client is None:
        client = GitHubUsersClient()

    try:
        created_at = await client.fetch_user_creation_date(username, token)
    except UserLookupError as e:
        logger.debug("Lookup for %s failed: %s", username, e)
        return LookupOutcome(text=str(e), status="error")
    finally:
        if owns_client:
            await client.aclose()

    return LookupOutcome(text=format_date(created_at), status="success")
