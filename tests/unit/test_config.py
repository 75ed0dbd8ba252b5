"""
Unit tests for configuration loading and validation.
"""

import pytest

from pr_bot.config import AppConfig, GitHubConfig, LoggingConfig, get_config, set_config
from pr_bot.context import RequestContext


class TestAppConfig:

    def test_defaults(self):
        config = AppConfig()

        assert config.github.api_base_url == "https://api.github.com/"
        assert config.github.repo_path == "/repos/elastic/kibana"
        assert config.github.accept == "application/vnd.github.shadow-cat-preview"
        assert config.logging.level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GITHUB_SECRET", "env_secret")
        monkeypatch.setenv("GITHUB_REPO_OWNER", "octo")
        monkeypatch.setenv("GITHUB_REPO_NAME", "hello")
        monkeypatch.setenv("GITHUB_TIMEOUT", "5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = AppConfig.from_env()

        assert config.github.token == "env_secret"
        assert config.github.repo_path == "/repos/octo/hello"
        assert config.github.timeout_seconds == 5.0
        assert config.logging.level == "DEBUG"
        config.validate()

    def test_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "github:\n"
            "  token: yaml_secret\n"
            "  repo_owner: octo\n"
            "logging:\n"
            "  level: WARNING\n"
            "debug: true\n",
            encoding="utf-8",
        )

        config = AppConfig.from_yaml(str(config_file))

        assert config.github.token == "yaml_secret"
        assert config.github.repo_owner == "octo"
        assert config.github.repo_name == "kibana"
        assert config.logging.level == "WARNING"
        assert config.debug is True

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_validate_collects_errors(self):
        config = AppConfig(
            github=GitHubConfig(token=None, api_base_url="ftp://example.com", timeout_seconds=0),
            logging=LoggingConfig(level="LOUD"),
        )

        with pytest.raises(ValueError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "GitHub secret is required" in message
        assert "Invalid GitHub API URL" in message
        assert "Timeout must be positive" in message
        assert "Invalid log level" in message

    def test_to_dict_omits_secret(self):
        config = AppConfig(github=GitHubConfig(token="secret"))

        data = config.to_dict()

        assert "token" not in data["github"]
        assert "secret" not in str(data)


class TestRequestContext:

    def test_contexts_compare_by_identity(self):
        first = RequestContext(request_id="same")
        second = RequestContext(request_id="same")

        assert first != second
        assert first == first
        assert len({first, second}) == 2

    def test_context_config_preferred(self):
        config = AppConfig(github=GitHubConfig(token="ctx"))
        assert RequestContext(config=config).get_config() is config


class TestActiveConfig:

    def test_set_config_validates(self, monkeypatch):
        monkeypatch.setattr("pr_bot.config._config_manager", None)

        with pytest.raises(ValueError):
            set_config(AppConfig())

    def test_set_and_get_config(self, monkeypatch):
        monkeypatch.setattr("pr_bot.config._config_manager", None)
        config = AppConfig(github=GitHubConfig(token="active"))

        set_config(config)

        assert get_config() is config
        assert RequestContext().get_config() is config

    def test_get_config_loads_environment(self, monkeypatch):
        monkeypatch.setattr("pr_bot.config._config_manager", None)
        monkeypatch.setenv("GITHUB_SECRET", "from_env")

        assert get_config().github.token == "from_env"
