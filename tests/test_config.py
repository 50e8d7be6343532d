"""Unit tests for configuration with pydantic-settings."""

import pytest
from pydantic import ValidationError

from jira_rest.config import JiraConfig, get_config, reset_config


class TestJiraConfig:
    def test_default_config_values(self):
        config = JiraConfig()

        assert config.jira_account == ""
        assert config.jira_username == ""
        assert config.jira_password.get_secret_value() == ""
        assert config.jira_timeout == 30_000
        assert config.jira_http_client == "httpx"
        assert config.jira_page_size == 300
        assert config.jira_max_pages == 1000

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("JIRA_ACCOUNT", "company.atlassian.net")
        monkeypatch.setenv("JIRA_USERNAME", "me@example.com")
        monkeypatch.setenv("JIRA_PASSWORD", "s3cret")
        monkeypatch.setenv("JIRA_TIMEOUT", "5000")

        config = JiraConfig()

        assert config.jira_account == "company.atlassian.net"
        assert config.jira_username == "me@example.com"
        assert config.jira_password.get_secret_value() == "s3cret"
        assert config.jira_timeout == 5000

    def test_dotenv_file_loaded(self, tmp_path):
        (tmp_path / ".env").write_text("JIRA_ACCOUNT=dotenv.atlassian.net\n")

        assert JiraConfig().jira_account == "dotenv.atlassian.net"

    def test_password_not_in_repr(self):
        config = JiraConfig(jira_password="hunter2")
        assert "hunter2" not in repr(config)

    def test_account_scheme_and_slash_stripped(self):
        config = JiraConfig(jira_account="https://company.atlassian.net/")
        assert config.jira_account == "company.atlassian.net"

    def test_base_url(self):
        config = JiraConfig(jira_account="company.atlassian.net")
        assert config.base_url == "https://company.atlassian.net/rest/api/latest"

    def test_http_client_normalized(self):
        assert JiraConfig(jira_http_client=" HTTPX ").jira_http_client == "httpx"

    def test_max_pages_can_be_disabled(self):
        assert JiraConfig(jira_max_pages=None).jira_max_pages is None

    @pytest.mark.parametrize("value", ["none", "None", "unbounded"])
    def test_max_pages_disabled_from_environment(self, monkeypatch, value):
        monkeypatch.setenv("JIRA_MAX_PAGES", value)
        assert JiraConfig().jira_max_pages is None

    def test_max_pages_from_environment(self, monkeypatch):
        monkeypatch.setenv("JIRA_MAX_PAGES", "25")
        assert JiraConfig().jira_max_pages == 25

    def test_base_url_requires_account(self):
        with pytest.raises(ValueError, match="jira_account is not set"):
            JiraConfig().base_url

    @pytest.mark.parametrize(
        "field,value",
        [
            ("jira_timeout", 0),
            ("jira_timeout", 600_001),
            ("jira_page_size", 0),
            ("jira_page_size", 1001),
            ("jira_max_pages", 0),
            ("jira_http_client", ""),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            JiraConfig(**{field: value})

    def test_config_is_frozen(self):
        config = JiraConfig()
        with pytest.raises(ValidationError):
            config.jira_timeout = 10


class TestGetConfig:
    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset_reloads_environment(self, monkeypatch):
        monkeypatch.setenv("JIRA_ACCOUNT", "first.atlassian.net")
        assert get_config().jira_account == "first.atlassian.net"

        monkeypatch.setenv("JIRA_ACCOUNT", "second.atlassian.net")
        assert get_config().jira_account == "first.atlassian.net"

        reset_config()
        assert get_config().jira_account == "second.atlassian.net"
