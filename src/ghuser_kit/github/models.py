# src/ghuser_kit/github/models.py

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GitHubUser(BaseModel):
    """Subset of the GitHub `/users/{username}` payload we rely on."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None
    created_at: datetime
