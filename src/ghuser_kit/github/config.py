# src/ghuser_kit/github/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class GitHubConfig:
    """Configuration for the GitHub users client.

    Immutable. Explicit. No magic defaults from environment.
    """

    base_url: str = "https://api.github.com"
    accept: str = "application/vnd.github.v3+json"
    user_agent: str = "GitHub-User-Creation-Date-Fetcher"
    timeout: float | None = None  # None waits indefinitely
    max_attempts: int = 1  # 1 = single shot, transport errors only
    retry_backoff: float = 0.5
