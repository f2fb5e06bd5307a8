"""Configuration file support for baseline-audit."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class RequirementsConfig(BaseModel):
    """Where the minimum-requirements baseline is read from."""

    path: str = Field(default="minRequirements.json", description="Requirements file (JSON or YAML)")


class ProbeConfig(BaseModel):
    """Host probe configuration."""

    scripts_dir: str | None = Field(default=None, description="Directory holding probe .ps1 scripts")
    timeout: float = Field(default=30.0, description="Per-probe timeout in seconds")
    shell: str = Field(default="powershell", description="PowerShell executable")


class CollectorConfig(BaseModel):
    """Collector endpoint used by the agent."""

    url: str = Field(default="http://localhost:3000", description="Collector base URL")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    max_retries: int = Field(default=3, description="Connection retries per request (httpx transport)")


class ServerConfig(BaseModel):
    """Collector server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Bind port")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="terminal", description="Default output format")
    color: bool = Field(default=True, description="Enable color output")


class BaselineAuditConfig(BaseModel):
    """Main configuration for baseline-audit."""

    requirements: RequirementsConfig = Field(default_factory=RequirementsConfig)
    probe: ProbeConfig = Field(default_factory=ProbeConfig)
    collector: CollectorConfig = Field(default_factory=CollectorConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    paths.append(Path.cwd() / ".baseline-audit.yaml")
    paths.append(Path.cwd() / ".baseline-audit.yml")
    paths.append(Path.cwd() / "baseline-audit.yaml")

    home = Path.home()
    paths.append(home / ".baseline-audit.yaml")
    paths.append(home / ".baseline-audit" / "config.yaml")
    paths.append(home / ".config" / "baseline-audit" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "baseline-audit" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> BaselineAuditConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return BaselineAuditConfig()


def _load_config_file(path: Path) -> BaselineAuditConfig:
    """Load configuration from a specific file.

    Args:
        path: Path to config file

    Returns:
        Loaded configuration
    """
    try:
        data = yaml.safe_load(path.read_text())
        if data is None:
            return BaselineAuditConfig()
        return BaselineAuditConfig.model_validate(data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config file: {e}")


_config: BaselineAuditConfig | None = None


def get_config() -> BaselineAuditConfig:
    """Get the global configuration instance.

    Loads from file on first call.

    Returns:
        Global configuration
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: BaselineAuditConfig | None) -> None:
    """Set (or reset with None) the global configuration instance."""
    global _config
    _config = config
