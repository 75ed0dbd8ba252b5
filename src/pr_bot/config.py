"""
Configuration Management

Settings for the GitHub client and logging, loaded from the environment
or a YAML file.
"""

import os
import logging
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Dict, Any

import yaml


DEFAULT_USER_AGENT = "pr-bot-github"
DEFAULT_ACCEPT = "application/vnd.github.shadow-cat-preview"


@dataclass
class GitHubConfig:
    """GitHub API settings"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com/"
    repo_owner: str = "elastic"
    repo_name: str = "kibana"
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    timeout_seconds: float = 30

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.repo_owner}/{self.repo_name}"


@dataclass
class LoggingConfig:
    """Logging settings"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """Top-level application settings"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load settings from environment variables"""
        return cls(
            github=GitHubConfig(
                token=os.getenv("GITHUB_SECRET"),
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com/"),
                repo_owner=os.getenv("GITHUB_REPO_OWNER", "elastic"),
                repo_name=os.getenv("GITHUB_REPO_NAME", "kibana"),
                user_agent=os.getenv("GITHUB_USER_AGENT", DEFAULT_USER_AGENT),
                accept=os.getenv("GITHUB_ACCEPT", DEFAULT_ACCEPT),
                timeout_seconds=float(os.getenv("GITHUB_TIMEOUT", "30")),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """Load settings from a YAML file"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(
            github=GitHubConfig(**config_data.get('github', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            debug=config_data.get('debug', False),
        )

    def validate(self) -> None:
        """Check settings, raising ValueError listing every problem"""
        errors = []

        if not self.github.token:
            errors.append("GitHub secret is required")

        if not self.github.api_base_url.startswith(("http://", "https://")):
            errors.append(f"Invalid GitHub API URL: {self.github.api_base_url}")

        if not self.github.repo_owner or not self.github.repo_name:
            errors.append("Repository owner and name are required")

        if self.github.timeout_seconds <= 0:
            errors.append("Timeout must be positive")

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """Settings as a dictionary, without the secret"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'repo_owner': self.github.repo_owner,
                'repo_name': self.github.repo_name,
                'user_agent': self.github.user_agent,
                'accept': self.github.accept,
                'timeout_seconds': self.github.timeout_seconds,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


class ConfigManager:
    """Holds the active configuration and applies its logging settings"""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig.from_env()
        self._config.validate()
        self._setup_logging()

    @property
    def config(self) -> AppConfig:
        return self._config

    def _setup_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self._config.logging.level.upper()),
            format=self._config.logging.format,
        )

        # rotate the file log when one is configured
        if self._config.logging.file_path:
            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))
            logging.getLogger().addHandler(handler)


_config_manager: Optional[ConfigManager] = None


def get_config() -> AppConfig:
    """Active configuration, loaded from the environment on first use"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.config


def set_config(config: AppConfig) -> None:
    """Replace the active configuration"""
    global _config_manager
    _config_manager = ConfigManager(config)
