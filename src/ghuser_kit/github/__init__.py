# src/ghuser_kit/github/__init__.py

"""GitHub user lookup for ghuser-kit.

Fetches a user's account-creation date from the public users API and
renders it, or the message for whatever went wrong.

Example:
    >>> from ghuser_kit.github import lookup_creation_date
    >>>
    >>> outcome = await lookup_creation_date("octocat")
    >>> print(outcome.text)
    2011-01-25
"""

from .client import GitHubUsersClient
from .config import GitHubConfig
from .errors import (
    GitHubAPIError,
    InvalidResponseError,
    NetworkError,
    RateLimitError,
    UserLookupError,
    UserNotFoundError,
)
from .lookup import LookupOutcome, format_date, lookup_creation_date, token_from_url
from .models import GitHubUser

__all__ = [
    # Client
    "GitHubUsersClient",
    # Config
    "GitHubConfig",
    # Submission flow
    "LookupOutcome",
    "format_date",
    "lookup_creation_date",
    "token_from_url",
    # Types
    "GitHubUser",
    # Errors
    "GitHubAPIError",
    "InvalidResponseError",
    "NetworkError",
    "RateLimitError",
    "UserLookupError",
    "UserNotFoundError",
]
