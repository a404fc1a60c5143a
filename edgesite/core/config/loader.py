"""
Configuration loader — reads site.yml into domain models.

This is the primary entry point for loading site configuration.
It reads YAML, validates against Pydantic schemas, and returns
typed domain objects. It also resolves the IndexNow token, which
may come from the command line, the environment, or site.yml.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from edgesite.core.models.site import DEFAULT_KEY_ENV_VAR, SiteConfig

logger = logging.getLogger(__name__)

# Default config filename
SITE_CONFIG_FILE = "site.yml"


class ConfigError(Exception):
    """Raised when site configuration is invalid or missing."""


def find_site_file(start_dir: Path | None = None) -> Path | None:
    """Search for site.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to site.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SITE_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_site(path: Path | None = None) -> SiteConfig:
    """Load and validate site configuration.

    Args:
        path: Explicit path to site.yml. If None, searches upward.

    Returns:
        Validated SiteConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_site_file()

    if path is None:
        raise ConfigError(
            f"No {SITE_CONFIG_FILE} found. Create one or specify --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading site config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "site" mapping or be flat
    if isinstance(data.get("site"), dict):
        site_data = dict(data["site"])
        for key in ("indexnow", "public_dir"):
            if key in data and key not in site_data:
                site_data[key] = data[key]
    else:
        site_data = data

    try:
        site = SiteConfig.model_validate(site_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid site configuration: {e}") from e

    logger.info("Loaded site %s (output=%s, adapter=%s)",
                site.site, site.output.value, site.adapter or "none")
    return site


def site_root(config_path: Path | None) -> Path:
    """Get the site root directory from a config file path (or cwd)."""
    return config_path.parent.resolve() if config_path else Path.cwd()


def resolve_indexnow_key(
    site: SiteConfig | None = None,
    *,
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve the IndexNow token from its sources.

    Precedence: explicit value > environment variable > site.yml.
    Whitespace-only values count as absent.

    Args:
        site: Loaded site config (optional).
        explicit: Value given on the command line.
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        The token, or None when no source provides one.
    """
    env = os.environ if environ is None else environ
    env_var = site.indexnow.env_var if site else DEFAULT_KEY_ENV_VAR

    candidates = (
        ("argument", explicit),
        (f"${env_var}", env.get(env_var)),
        (SITE_CONFIG_FILE, site.indexnow.key if site else None),
    )
    for source, value in candidates:
        if value and value.strip():
            logger.debug("IndexNow key taken from %s", source)
            return value.strip()

    return None
