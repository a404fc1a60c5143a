"""
Prebuild use case — the build hook run once before the framework build.

Loads site.yml when there is one, resolves the IndexNow token and
publishes the key file into the public directory. Nothing here fails
the build: config problems and emitter failures land in the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from edgesite.core.config.loader import (
    ConfigError,
    find_site_file,
    load_site,
    resolve_indexnow_key,
    site_root,
)
from edgesite.core.models.site import SiteConfig
from edgesite.core.services.indexnow_key import KeyFileResult, emit_key_file

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_DIR = "public"


@dataclass
class PrebuildResult:
    """Result of the prebuild hook."""

    site: SiteConfig | None = None
    config_path: Path | None = None
    public_dir: Path | None = None
    key_file: KeyFileResult | None = None
    error: str | None = None

    @property
    def key_location(self) -> str | None:
        if self.site and self.key_file and self.key_file.ok and self.key_file.path:
            return self.site.key_location(self.key_file.path.stem)
        return None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "site": self.site.site if self.site else None,
            "public_dir": str(self.public_dir) if self.public_dir else None,
            "key_file": self.key_file.to_dict() if self.key_file else None,
            "key_location": self.key_location,
        }


def run_prebuild(
    config_path: Path | None = None,
    *,
    key: str | None = None,
    public_dir: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> PrebuildResult:
    """Run the build hook.

    Args:
        config_path: Explicit site.yml path. If None, searches upward;
            without one, defaults apply and the cwd is the site root.
        key: Explicit token (overrides environment and site.yml).
        public_dir: Override for the public directory, relative to the
            site root.
        environ: Environment used to resolve the token.

    Returns:
        PrebuildResult; ``error`` is set only for an invalid site.yml.
    """
    result = PrebuildResult()

    if config_path is None:
        config_path = find_site_file()

    site: SiteConfig | None = None
    if config_path is not None:
        try:
            site = load_site(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
        result.config_path = config_path
        result.site = site
    else:
        logger.info("No site.yml found; using defaults")

    root = site_root(config_path)
    rel_public = public_dir or (site.public_dir if site else DEFAULT_PUBLIC_DIR)
    result.public_dir = root / rel_public

    token = resolve_indexnow_key(site, explicit=key, environ=environ)
    result.key_file = emit_key_file(token, result.public_dir)
    return result
