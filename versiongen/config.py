#!/usr/bin/env python3

import os
import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr)  # stdout carries the outputs
    ]
)
logger = logging.getLogger("versiongen")

CONFIG_ENV = "VERSIONGEN_CONFIG"
ENV_PREFIX = "VERSIONGEN_"
CONFIG_FILENAMES = ['.versiongen.toml', '.versiongen.yaml', '.versiongen.yml', '.versiongen.json']


@dataclass(frozen=True)
class CIEnvironment:
    """The values the CI host hands to the run."""
    event_name: Optional[str] = None
    ref: Optional[str] = None
    github_output: Optional[str] = None
    workspace: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'CIEnvironment':
        environ = os.environ if environ is None else environ
        return cls(
            event_name=environ.get('GITHUB_EVENT_NAME') or None,
            ref=environ.get('GITHUB_REF') or None,
            github_output=environ.get('GITHUB_OUTPUT') or None,
            workspace=environ.get('GITHUB_WORKSPACE') or None,
        )


def get_default_config():
    """Get default configuration."""
    return {
        "output": {
            "format": "github",
        },
        "git": {
            "timeout": 30,
        },
        "project_files": {
            "enabled": True,
            "strict": False,
        },
        "logging": {
            "level": "WARNING",
        },
    }


def get_config_path(repo_path: str, environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Get the path to the configuration file.

    Checks in order:
    1. VERSIONGEN_CONFIG environment variable
    2. .versiongen.{toml,yaml,yml,json} in the repository root

    Returns:
        Path of the file to load, or None when there is none
    """
    environ = os.environ if environ is None else environ

    if environ.get(CONFIG_ENV):
        path = Path(environ[CONFIG_ENV]).expanduser()
        if not path.exists():
            raise ConfigError(f"{CONFIG_ENV} points to a missing file: {path}")
        return path

    for filename in CONFIG_FILENAMES:
        path = Path(repo_path) / filename
        if path.exists():
            return path
    return None


def _read_config_file(config_path: Path) -> dict:
    suffix = config_path.suffix.lower()
    try:
        if suffix == '.toml':
            with open(config_path, 'rb') as f:
                return tomllib.load(f)
        if suffix in ('.yaml', '.yml'):
            with open(config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        with open(config_path, 'r') as f:
            return json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading config from {config_path}: {e}") from e


def load_config(repo_path: str = ".", environ: Optional[Mapping[str, str]] = None) -> dict:
    """Load configuration: defaults, then the config file, then environment overrides."""
    environ = os.environ if environ is None else environ
    config = get_default_config()

    config_path = get_config_path(repo_path, environ)
    if config_path is not None:
        file_config = _read_config_file(config_path)
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        config = merge_configs(config, file_config)
        logger.debug(f"Loaded config from {config_path}")

    config = apply_env_overrides(config, environ)
    get_git_timeout(config)
    return config


def get_git_timeout(config: dict) -> float:
    """
    The git command timeout in seconds.

    Raises:
        ConfigError: git.timeout is not a positive number
    """
    timeout = (config.get("git") or {}).get("timeout", 30)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"git.timeout must be a positive number of seconds, got {timeout!r}")
    return timeout


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def _typed(value: str):
    if value.lower() in ('true', 'yes', 'on'):
        return True
    if value.lower() in ('false', 'no', 'off'):
        return False
    if value.isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def apply_env_overrides(config, environ: Optional[Mapping[str, str]] = None):
    """
    Apply environment variable overrides to configuration.

    Variables follow the pattern VERSIONGEN_SECTION_KEY, where a section or
    key may itself contain underscores. For example:
    VERSIONGEN_GIT_TIMEOUT=60, VERSIONGEN_PROJECT_FILES_STRICT=true
    """
    environ = os.environ if environ is None else environ

    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX) or env_key == CONFIG_ENV:
            continue

        name = env_key[len(ENV_PREFIX):].lower()
        for section, options in config.items():
            if not isinstance(options, dict) or not name.startswith(section + '_'):
                continue
            key = name[len(section) + 1:]
            if key in options:
                options[key] = _typed(value)
                break
        else:
            logger.debug(f"Ignoring unknown setting {env_key}")

    return config


def configure_logging(config: dict, verbose: bool = False) -> None:
    """Set the package log level from config, or DEBUG when verbose."""
    level = "DEBUG" if verbose else str(config.get("logging", {}).get("level", "WARNING")).upper()
    logger.setLevel(getattr(logging, level, logging.WARNING))
