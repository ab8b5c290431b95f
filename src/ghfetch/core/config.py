"""Configuration for ghfetch."""

from pathlib import Path
from dataclasses import dataclass
import os

import yaml


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "ghfetch-release-downloader"


class ConfigError(Exception):
    """Invalid configuration file."""

    pass


@dataclass
class GhfetchConfig:
    """Settings shared by the API client and the downloader."""

    api_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    chunk_size: int = 8192

    @classmethod
    def default(cls) -> "GhfetchConfig":
        """Create config from the config file and environment overrides."""
        config = cls.load(default_config_path())

        if "GHFETCH_API_URL" in os.environ:
            config.api_url = os.environ["GHFETCH_API_URL"]
        if "GHFETCH_USER_AGENT" in os.environ:
            config.user_agent = os.environ["GHFETCH_USER_AGENT"]
        if "GHFETCH_TIMEOUT" in os.environ:
            try:
                config.timeout = float(os.environ["GHFETCH_TIMEOUT"])
            except ValueError as e:
                raise ConfigError(
                    f"GHFETCH_TIMEOUT must be a number, got {os.environ['GHFETCH_TIMEOUT']!r}"
                ) from e
            if config.timeout <= 0:
                raise ConfigError(f"GHFETCH_TIMEOUT must be positive, got {config.timeout}")

        return config

    @classmethod
    def load(cls, path: Path) -> "GhfetchConfig":
        """Load settings from a YAML file. A missing file gives the defaults."""
        if not path.exists():
            return cls()

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Failed to parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping of settings")

        config = cls()
        if "api_url" in data:
            config.api_url = str(data["api_url"]).rstrip("/")
        if "user_agent" in data:
            config.user_agent = str(data["user_agent"])
        try:
            if "timeout" in data:
                config.timeout = float(data["timeout"])
            if "chunk_size" in data:
                config.chunk_size = int(data["chunk_size"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in {path}: {e}") from e

        if config.timeout <= 0:
            raise ConfigError(f"timeout in {path} must be positive, got {config.timeout}")
        if config.chunk_size < 1:
            raise ConfigError(f"chunk_size in {path} must be at least 1, got {config.chunk_size}")
        return config


def default_config_path() -> Path:
    """Location of the user config file."""
    if "GHFETCH_CONFIG" in os.environ:
        return Path(os.environ["GHFETCH_CONFIG"])
    return Path.home() / ".config" / "ghfetch" / "config.yaml"


# Global config instance
_config: GhfetchConfig | None = None


def get_config() -> GhfetchConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = GhfetchConfig.default()
    return _config


def set_config(config: GhfetchConfig | None) -> None:
    """Set a custom configuration (useful for testing).

    Passing None makes the next get_config() reload from file and environment.
    """
    global _config
    _config = config
