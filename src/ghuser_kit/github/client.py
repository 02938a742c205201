# src/ghuser_kit/github/client.py

import logging
from datetime import datetime
from time import monotonic
from urllib.parse import quote

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ghuser_kit.observability import names
from ghuser_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import GitHubConfig
from .errors import (
    GitHubAPIError,
    InvalidResponseError,
    NetworkError,
    RateLimitError,
    UserLookupError,
    UserNotFoundError,
)
from .models import GitHubUser

logger = logging.getLogger(__name__)


class GitHubUsersClient:
    """Async client for the GitHub users endpoint.

    One GET per call. Retries only on transport errors, and only when
    `max_attempts` > 1. HTTP status errors are never retried.
    """

    def __init__(
        self,
        config: GitHubConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config or GitHubConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._config.timeout)
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized GitHubUsersClient with base_url=%s, timeout=%s, max_attempts=%s",
            self._config.base_url,
            self._config.timeout,
            self._config.max_attempts,
        )

    async def __aenter__(self) -> "GitHubUsersClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_user(self, username: str, token: str | None = None) -> GitHubUser:
        url = f"{self._config.base_url.rstrip('/')}/users/{quote(username, safe='')}"
        headers = {
            "Accept": self._config.accept,
            "User-Agent": self._config.user_agent,
        }
        if token:
            headers["Authorization"] = f"token {token}"

        logger.debug("Fetching GitHub user: %s (authenticated=%s)", username, bool(token))
        start = monotonic()

        try:
            response = await self._get(url, headers)
        except httpx.RequestError as e:
            # Redirect loops and undecodable bodies land here too.
            logger.error("Network error fetching user %s: %s", username, e)
            self._record_error("NetworkError")
            raise NetworkError() from e

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.GITHUB_REQUEST_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.GITHUB_REQUESTS_TOTAL,
            labels={"status": str(response.status_code)},
        )

        if not response.is_success:
            error = self._status_error(response.status_code)
            logger.info(
                "GitHub lookup for %s failed: status=%d, latency=%.0fms",
                username,
                response.status_code,
                elapsed_ms,
            )
            self._record_error(type(error).__name__)
            raise error

        try:
            user = GitHubUser.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Unexpected payload for user %s: %s", username, e)
            self._record_error("InvalidResponseError")
            raise InvalidResponseError() from e

        logger.info(
            "GitHub lookup for %s succeeded: latency=%.0fms", username, elapsed_ms
        )
        return user

    async def fetch_user_creation_date(
        self, username: str, token: str | None = None
    ) -> datetime:
        user = await self.fetch_user(username, token)
        return user.created_at

    async def _get(self, url: str, headers: dict[str, str]) -> httpx.Response:
        """GET with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._config.max_attempts),
            wait=wait_exponential(multiplier=self._config.retry_backoff, max=5),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.get(
                    url, headers=headers, follow_redirects=True
                )
        raise AssertionError("unreachable")

    def _status_error(self, status_code: int) -> UserLookupError:
        if status_code == 404:
            return UserNotFoundError()
        if status_code == 403:
            return RateLimitError()
        return GitHubAPIError(status_code)

    def _record_error(self, kind: str) -> None:
        self.metrics_hook.increment(names.GITHUB_ERRORS_TOTAL, labels={"error": kind})
