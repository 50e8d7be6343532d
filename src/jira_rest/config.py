"""Configuration management with pydantic-settings for the Jira REST client.

- Automatic .env file loading (environment variables take precedence)
- Validation with clear error messages
- SecretStr for the account password / API token
- Frozen config, immutable after load

The settings object is passed explicitly to the dispatcher, so several
differently-configured clients can live in one process. ``get_config()`` is a
convenience for the common single-account case.
"""

import logging
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("jira_rest.config")

__all__ = [
    "API_PREFIX",
    "DEFAULT_HTTP_CLIENT",
    "DEFAULT_MAX_PAGES",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TIMEOUT_MS",
    "JiraConfig",
    "get_config",
    "reset_config",
]

API_PREFIX = "/rest/api/latest"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_HTTP_CLIENT = "httpx"
DEFAULT_PAGE_SIZE = 300
DEFAULT_MAX_PAGES = 1000


class JiraConfig(BaseSettings):
    """Configuration for the Jira REST client.

    Loads from (in order of precedence):
    1. Constructor keyword arguments
    2. Environment variables
    3. .env file in the working directory
    4. Default values

    Attributes:
        jira_account: Jira host name (e.g. company.atlassian.net)
        jira_username: Account user name or email for Basic Auth
        jira_password: Account password or API token
        jira_timeout: Per-request timeout in milliseconds
        jira_http_client: Name of the registered transport to use
        jira_page_size: maxResults sent with follow-up page requests
        jira_max_pages: Upper bound on requests per paginated call (None = unbounded)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        validate_default=True,
        frozen=True,
        extra="ignore",
    )

    jira_account: str = Field(
        default="",
        description="Jira host name, without scheme (e.g. company.atlassian.net)",
    )

    jira_username: str = Field(
        default="",
        description="Jira account user name or email for Basic Auth",
    )

    jira_password: SecretStr = Field(
        default=SecretStr(""),
        description="Jira password or API token (stored securely)",
    )

    jira_timeout: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        ge=1,
        le=600_000,
        description="Per-request timeout in milliseconds",
    )

    jira_http_client: str = Field(
        default=DEFAULT_HTTP_CLIENT,
        min_length=1,
        description="Registered transport name used for HTTP round trips",
    )

    jira_page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        le=1000,
        description="maxResults value sent when fetching follow-up pages",
    )

    jira_max_pages: int | None = Field(
        default=DEFAULT_MAX_PAGES,
        ge=1,
        description="Maximum requests per paginated call; 'none' for no limit",
    )

    @field_validator("jira_account", mode="before")
    @classmethod
    def strip_account(cls, v):
        """Accept 'https://host/' and reduce it to 'host'."""
        if isinstance(v, str):
            v = v.strip()
            for scheme in ("https://", "http://"):
                if v.lower().startswith(scheme):
                    v = v[len(scheme) :]
            return v.rstrip("/")
        return v

    @field_validator("jira_max_pages", mode="before")
    @classmethod
    def parse_max_pages(cls, v):
        """Accept JIRA_MAX_PAGES=none (or "unbounded") to disable the page limit."""
        if isinstance(v, str) and v.strip().lower() in ("none", "unbounded"):
            return None
        return v

    @field_validator("jira_http_client", mode="before")
    @classmethod
    def normalize_client_name(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def base_url(self) -> str:
        """Root URL every request path is appended to.

        Raises:
            ValueError: If no account host is configured.
        """
        if not self.jira_account:
            raise ValueError(
                "jira_account is not set (JIRA_ACCOUNT), cannot build a request URL"
            )
        return f"https://{self.jira_account}{API_PREFIX}"


@lru_cache(maxsize=1)
def get_config() -> JiraConfig:
    """Get the process-wide configuration singleton.

    First call loads from environment + .env file, later calls return the
    cached instance.

    Raises:
        ValidationError: If configuration values are invalid.
    """
    config = JiraConfig()
    logger.debug(
        "jira_config_loaded",
        extra={
            "account": config.jira_account,
            "http_client": config.jira_http_client,
            "timeout_ms": config.jira_timeout,
        },
    )
    return config


def reset_config() -> None:
    """Clear the cached configuration. Intended for tests."""
    get_config.cache_clear()
