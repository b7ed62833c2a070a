"""
Configuration loading, validation, and typed models.

Supports:
  - YAML config file (optional when using the default location)
  - Environment variable overrides (JWT_CODEC_MODE, JWT_CODEC_VERBOSE)
  - CLI argument merging via merge_cli_overrides()
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "PROJECT_ROOT",
    "OUTPUT_MODES",
    "ConfigError",
    "OutputConfig",
    "LoggingConfig",
    "AppConfig",
    "load_config",
    "merge_cli_overrides",
]

logger = logging.getLogger(__name__)

# Project root directory (two levels up from this file)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "config.yaml")

# Environment variable names
ENV_MODE = "JWT_CODEC_MODE"
ENV_VERBOSE = "JWT_CODEC_VERBOSE"

OUTPUT_MODES = ("base64", "plain")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


# ---------------------------------------------------------------------------
# Typed configuration models
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass(frozen=True)
class OutputConfig:
    mode: str = "base64"
    indent: int = 4


@dataclass(frozen=True)
class LoggingConfig:
    verbose: bool = False
    log_file: str = ""  # Empty = console only


@dataclass(frozen=True)
class AppConfig:
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _validate_mode(mode: str) -> str:
    if mode not in OUTPUT_MODES:
        raise ConfigError(
            f"Invalid output mode: {mode!r}. Expected one of: {', '.join(OUTPUT_MODES)}."
        )
    return mode


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return value


def load_config(config_path: str | None = None) -> AppConfig:
    """Load and validate the YAML configuration file.

    When *config_path* is None the default location is used, and a missing
    default file simply yields the built-in defaults.

    Environment variables take precedence over YAML values:
      - JWT_CODEC_MODE     -> output.mode
      - JWT_CODEC_VERBOSE  -> logging.verbose

    Raises:
        ConfigError: If an explicit config file is missing or any value is invalid.
    """
    raw: dict = {}
    path = Path(config_path or DEFAULT_CONFIG_PATH)

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse config file {path}: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(
                f"Invalid config file format: expected YAML mapping, got {type(loaded).__name__}"
            )
        raw = loaded or {}
        logger.debug("Config loaded from %s", path)
    elif config_path is not None:
        raise ConfigError(
            f"Config file not found: {config_path}\n"
            "Copy config/config.yaml.example to config/config.yaml and adjust the values."
        )

    # --- Output ---
    out_section = _section(raw, "output")
    mode = os.environ.get(ENV_MODE) or out_section.get("mode", "base64") or "base64"
    indent = out_section.get("indent", 4)
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
        raise ConfigError(f"output.indent must be a non-negative integer, got {indent!r}")

    # --- Logging ---
    log_section = _section(raw, "logging")
    env_verbose = os.environ.get(ENV_VERBOSE)
    if env_verbose is not None:
        verbose = env_verbose.strip().lower() in _TRUE_VALUES
    else:
        verbose = bool(log_section.get("verbose", False))
    log_file = log_section.get("log_file", "") or ""
    if not isinstance(log_file, str):
        raise ConfigError("logging.log_file must be a string")

    return AppConfig(
        output=OutputConfig(mode=_validate_mode(mode), indent=indent),
        log=LoggingConfig(verbose=verbose, log_file=log_file),
    )


# ---------------------------------------------------------------------------
# CLI override merging
# ---------------------------------------------------------------------------

def merge_cli_overrides(cfg: AppConfig, args) -> AppConfig:
    """Merge CLI arguments over loaded config, returning a new AppConfig.

    ``args`` may carry ``mode``, ``verbose`` and ``log_file`` attributes;
    missing or None attributes keep the configured value.

    Raises:
        ConfigError: If merged values fail validation.
    """
    mode = getattr(args, "mode", None)
    log_file = getattr(args, "log_file", None)

    output = cfg.output
    if mode is not None:
        output = replace(output, mode=_validate_mode(mode))

    log_cfg = cfg.log
    if getattr(args, "verbose", False):
        log_cfg = replace(log_cfg, verbose=True)
    if log_file is not None:
        log_cfg = replace(log_cfg, log_file=log_file)

    return AppConfig(output=output, log=log_cfg)
