from __future__ import annotations
import logging
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from .errors import ConfigError

# User-Agent is required to use the GitHub API:
# <https://docs.github.com/en/rest/using-the-rest-api/getting-started-with-the-rest-api#user-agent>
DEFAULT_USER_AGENT = "`go-pr` CLI: https://github.com/dgp1130/go-pr"

DEFAULT_USER = "dgp1130"

DEFAULT_API_URL = "https://api.github.com"


class Settings(BaseSettings):
    """Settings read from ``GO_PR_*`` environment variables"""

    model_config = SettingsConfigDict(env_prefix="GO_PR_", frozen=True)

    #: GitHub user whose open pull requests are searched
    user: str = Field(default=DEFAULT_USER, min_length=1)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    api_url: str = Field(default=DEFAULT_API_URL, min_length=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e
