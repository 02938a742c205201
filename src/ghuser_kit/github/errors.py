"""Errors raised by the GitHub users client.

Each message is the user-facing text shown for that failure.
"""

from __future__ import annotations


class UserLookupError(RuntimeError):
    """Base class for failures while looking up a user."""

    message = "User lookup failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class UserNotFoundError(UserLookupError):
    message = "User not found"


class RateLimitError(UserLookupError):
    message = "Rate limit exceeded. Please try again later or provide a token."


class GitHubAPIError(UserLookupError):
    """Any other non-2xx response."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"API error: {status_code}")
        self.status_code = status_code


class NetworkError(UserLookupError):
    message = "Network error. Please check your connection."


class InvalidResponseError(UserLookupError):
    message = "Invalid API response"


__all__ = [
    "GitHubAPIError",
    "InvalidResponseError",
    "NetworkError",
    "RateLimitError",
    "UserLookupError",
    "UserNotFoundError",
]
