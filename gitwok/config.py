"""Configuration management for gitwok.

Reads gitwok.yaml from an explicit path, the current directory or the home
directory:

    gitwok:
      commit:
        type: [fix, feat, ...]
        scope: []
        prompt:
          scope: true
          breaking: true
          body: true
          footers: true

Prompt toggles can be overridden with GITWOK_COMMIT_PROMPT_<NAME> environment
variables, also read from a .env file.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from gitwok.commit.constants import PRESET_COMMIT_TYPES
from gitwok.logs import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = "gitwok.yaml"

ENV_PREFIX = "GITWOK_COMMIT_PROMPT_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class ConfigError(Exception):
    """Raised when there's an error with the configuration file."""

    pass


class PromptConfig(BaseModel):
    """Which optional prompts are shown in interactive mode."""

    scope: bool = True
    breaking: bool = True
    body: bool = True
    footers: bool = True


class CommitConfig(BaseModel):
    """Commit command configuration.

    Attributes:
        type: Commit types offered by the type prompt.
        scope: Scopes offered by the scope prompt. Empty means free input.
        prompt: Optional prompt toggles.
    """

    type: list[str] = PRESET_COMMIT_TYPES.copy()
    scope: list[str] = []
    prompt: PromptConfig = PromptConfig()

    @field_validator("type", mode="before")
    @classmethod
    def default_types(cls, v):
        """Fall back to the preset types when no type is configured."""
        if not v:
            return PRESET_COMMIT_TYPES.copy()
        return v

    @field_validator("scope", mode="before")
    @classmethod
    def ensure_scope_list(cls, v):
        """Ensure scope is a list."""
        if v is None:
            return []
        return v


class GitwokConfig(BaseModel):
    """Top level gitwok configuration."""

    commit: CommitConfig = CommitConfig()
    path: Optional[Path] = None


def default_config_dict() -> dict[str, Any]:
    """Get the default configuration as written to gitwok.yaml.

    Returns:
        Dictionary with the default configuration.
    """
    commit = CommitConfig()
    return {"gitwok": {"commit": commit.model_dump()}}


def find_config_file(cwd: Optional[Path] = None, home: Optional[Path] = None) -> Optional[Path]:
    """Find gitwok.yaml in the current directory, then the home directory.

    Args:
        cwd: Directory searched first. Defaults to the current directory.
        home: Directory searched second. Defaults to the home directory.

    Returns:
        Path to the config file, or None if not found.
    """
    for directory in (cwd or Path.cwd(), home or Path.home()):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: {value}")


def _apply_env_overrides(prompt: dict[str, Any]) -> dict[str, Any]:
    """Override prompt toggles from GITWOK_COMMIT_PROMPT_* variables."""
    prompt = dict(prompt)
    for name in PromptConfig.model_fields:
        env_name = ENV_PREFIX + name.upper()
        value = os.environ.get(env_name)
        if value is not None:
            prompt[name] = _parse_bool(env_name, value)
    return prompt


def config_from_dict(config_dict: Optional[dict[str, Any]], path: Optional[Path] = None) -> GitwokConfig:
    """Build a GitwokConfig from a loaded YAML dictionary.

    Args:
        config_dict: Dictionary with a top level "gitwok" section.
        path: File the dictionary was read from.

    Returns:
        GitwokConfig instance.

    Raises:
        ConfigError: If the dictionary does not match the expected layout.
    """
    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigError("Configuration must be a mapping")

    gitwok_section = config_dict.get("gitwok") or {}
    if not isinstance(gitwok_section, dict) or not isinstance(gitwok_section.get("commit") or {}, dict):
        raise ConfigError("Invalid configuration: 'gitwok.commit' must be a mapping")
    commit_section = dict(gitwok_section.get("commit") or {})
    prompt_section = commit_section.get("prompt") or {}
    if not isinstance(prompt_section, dict):
        raise ConfigError("Invalid configuration: 'gitwok.commit.prompt' must be a mapping")
    commit_section["prompt"] = _apply_env_overrides(prompt_section)

    try:
        return GitwokConfig(commit=CommitConfig(**commit_section), path=path)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def load_config(config_file: Optional[Path] = None) -> GitwokConfig:
    """Load the gitwok configuration.

    Args:
        config_file: Explicit config file. Searched for if not given.

    Returns:
        GitwokConfig, with defaults if no file is found.

    Raises:
        ConfigError: If the file can't be read or parsed.
    """
    load_dotenv()

    if config_file is not None:
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_file}")
    else:
        config_file = find_config_file()

    if config_file is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE_NAME)
        return config_from_dict({})

    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    logger.debug("Using config file: %s", config_file)
    return config_from_dict(config_dict, path=config_file)


def save_config(config_file: Path, config_dict: dict[str, Any]) -> None:
    """Write a configuration dictionary as YAML.

    Args:
        config_file: Destination path.
        config_dict: Configuration to save.
    """
    try:
        with open(config_file, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")
