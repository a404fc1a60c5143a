"""
Framework config generator — produce astro.config.mjs from site.yml.

The framework reads this file at its own build time. We only pass our
declared fields through: target URL, rendering mode, and the edge
adapter plugin (import + call).
"""

from __future__ import annotations

from edgesite.core.models.site import SiteConfig
from edgesite.core.models.template import GeneratedFile

FRAMEWORK_CONFIG_FILE = "astro.config.mjs"


# ── Adapter → plugin mappings ───────────────────────────────────

# name: (npm package, call expression)
_ADAPTERS: dict[str, tuple[str, str]] = {
    "cloudflare": ("@astrojs/cloudflare", "cloudflare()"),
    "netlify": ("@astrojs/netlify", "netlify()"),
    "vercel": ("@astrojs/vercel", "vercel()"),
    "node": ("@astrojs/node", "node({ mode: 'standalone' })"),
}


def _js_string(value: str) -> str:
    """Single-quoted JS string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _resolve_adapter(name: str) -> tuple[str, str] | None:
    """Match an adapter name to its plugin package and call.

    Accepts both the short name (``cloudflare``) and the package name
    (``@astrojs/cloudflare``).
    """
    if name in _ADAPTERS:
        return _ADAPTERS[name]
    for package, call in _ADAPTERS.values():
        if name == package:
            return package, call
    return None


# ── Public API ──────────────────────────────────────────────────


def adapter_import_name(name: str) -> str | None:
    """Identifier the adapter is imported as, or None if unknown."""
    resolved = _resolve_adapter(name)
    if resolved is None:
        return None
    return resolved[1].split("(", 1)[0]


def generate_framework_config(
    site: SiteConfig,
    *,
    output_path: str = FRAMEWORK_CONFIG_FILE,
    overwrite: bool = False,
) -> GeneratedFile | None:
    """Render the framework config for the given site.

    Args:
        site: Validated site configuration.
        output_path: Relative path for the config file.
        overwrite: Whether writing may replace an existing file.

    Returns:
        GeneratedFile, or None if the adapter is not known.
    """
    lines = ["import { defineConfig } from 'astro/config';"]
    adapter_call = ""

    if site.adapter:
        resolved = _resolve_adapter(site.adapter)
        if resolved is None:
            return None
        package, adapter_call = resolved
        lines.append(f"import {adapter_import_name(site.adapter)} from '{package}';")

    lines += [
        "",
        "export default defineConfig({",
        f"  site: {_js_string(site.site)},",
        f"  output: {_js_string(site.output.value)},",
    ]
    if adapter_call:
        lines.append(f"  adapter: {adapter_call},")
    lines.append("});")

    return GeneratedFile(
        path=output_path,
        content="\n".join(lines) + "\n",
        overwrite=overwrite,
        reason=f"Generated framework config for {site.adapter or 'no'} adapter",
    )


def supported_adapters() -> list[str]:
    """Return adapter names with a known plugin mapping."""
    return sorted(_ADAPTERS.keys())
