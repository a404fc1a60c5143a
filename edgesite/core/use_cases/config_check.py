"""
Config check use case — validate site.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from edgesite.core.config.loader import (
    ConfigError,
    find_site_file,
    load_site,
    resolve_indexnow_key,
)
from edgesite.core.models.site import OutputMode, SiteConfig
from edgesite.core.services.generators.framework_config import (
    adapter_import_name,
    supported_adapters,
)
from edgesite.core.services.indexnow_key import looks_like_indexnow_key


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    site: SiteConfig | None = None
    config_path: Path | None = None
    key_location: str | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "site": self.site.site if self.site else None,
            "output": self.site.output.value if self.site else None,
            "adapter": self.site.adapter if self.site else None,
            "key_location": self.key_location,
        }


def check_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigCheckResult:
    """Validate site configuration and report issues.

    Args:
        config_path: Optional explicit path to site.yml.
        environ: Environment used to resolve the IndexNow key
            (default: ``os.environ``).

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_site_file()

    if config_path is None:
        result.errors.append("No site.yml found.")
        return result

    result.config_path = config_path

    # Load and validate
    try:
        site = load_site(config_path)
        result.site = site
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Adapter
    if site.adapter and adapter_import_name(site.adapter) is None:
        result.errors.append(
            f"Unknown adapter '{site.adapter}'. "
            f"Supported: {', '.join(supported_adapters())}"
        )

    if site.output is OutputMode.SERVER and not site.adapter:
        result.errors.append("Server output requires an adapter.")

    if site.output is OutputMode.STATIC and site.adapter:
        result.warnings.append(
            f"Adapter '{site.adapter}' is set but output is static; "
            "the adapter may be unnecessary."
        )

    # IndexNow key
    key = resolve_indexnow_key(site, environ=environ)
    if key is None:
        result.warnings.append(
            f"No IndexNow key configured (set ${site.indexnow.env_var} "
            "or indexnow.key). The key file will not be created."
        )
    else:
        result.key_location = site.key_location(key)
        if not looks_like_indexnow_key(key):
            result.warnings.append(
                "IndexNow key does not look like an IndexNow key "
                "(expected 8-128 characters of a-z, A-Z, 0-9, '-')."
            )

    result.valid = len(result.errors) == 0
    return result
