"""
Site generation — render and write build files for the site root.

Thin layer over ``edgesite.core.services.generators``: generators stay
pure (config in → GeneratedFile out), this module touches the disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from edgesite.core.models.site import SiteConfig
from edgesite.core.models.template import GeneratedFile
from edgesite.core.services.generators.framework_config import (
    generate_framework_config,
    supported_adapters,
)

logger = logging.getLogger(__name__)


def write_generated_file(root: Path, generated: GeneratedFile) -> dict:
    """Write a GeneratedFile to disk.

    Args:
        root: Site root directory.
        generated: The rendered file.

    Returns:
        {"ok": True, "path": "...", "written": True} or {"error": "..."}
    """
    if not generated.path or not generated.content:
        return {"error": "Missing path or content"}

    target = root / generated.path

    if target.exists() and not generated.overwrite:
        return {
            "error": f"File already exists: {generated.path} (use --force to replace)",
            "path": generated.path,
            "written": False,
        }

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
    except OSError as e:
        logger.error("Cannot write %s: %s", target, e)
        return {"error": f"Cannot write {generated.path}: {e}", "path": generated.path,
                "written": False}

    logger.info("Wrote generated file: %s", target)
    return {"ok": True, "path": generated.path, "written": True}


def render_framework_config(site: SiteConfig, *, overwrite: bool = False) -> dict:
    """Render the framework config without writing it.

    Returns:
        {"ok": True, "file": {...}} or {"error": "..."}
    """
    generated = generate_framework_config(site, overwrite=overwrite)
    if generated is None:
        return {
            "error": f"Unknown adapter '{site.adapter}'. "
                     f"Supported: {', '.join(supported_adapters())}",
        }
    return {"ok": True, "file": generated.model_dump()}


def write_framework_config(root: Path, site: SiteConfig, *, overwrite: bool = False) -> dict:
    """Render the framework config and write it under ``root``."""
    rendered = render_framework_config(site, overwrite=overwrite)
    if "error" in rendered:
        return rendered
    return write_generated_file(root, GeneratedFile.model_validate(rendered["file"]))
