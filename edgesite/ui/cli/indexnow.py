"""
CLI commands for the IndexNow key file.

Thin wrappers over ``edgesite.core.services.indexnow_key``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from edgesite.core.models.site import SiteConfig


def _load_optional_site(ctx: click.Context) -> tuple[SiteConfig | None, Path | None]:
    """Load site.yml if there is one; a broken file is fatal."""
    from edgesite.core.config.loader import ConfigError, find_site_file, load_site

    config_path: Path | None = ctx.obj.get("config_path") or find_site_file()
    if config_path is None:
        return None, None
    try:
        return load_site(config_path), config_path
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
def indexnow() -> None:
    """IndexNow — publish the site verification key file."""


@indexnow.command()
@click.option("--key", "-k", default=None, help="Token (overrides environment and site.yml).")
@click.option("--public-dir", "-d", default=None, help="Public directory, relative to the site root.")
@click.option("--strict", is_flag=True, help="Exit 1 if the key file could not be written.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def emit(
    ctx: click.Context,
    key: str | None,
    public_dir: str | None,
    strict: bool,
    as_json: bool,
) -> None:
    """Write <public-dir>/<key>.txt containing the key."""
    from edgesite.core.use_cases.prebuild import run_prebuild

    result = run_prebuild(
        config_path=ctx.obj.get("config_path"),
        key=key,
        public_dir=public_dir,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif result.error:
        click.secho(f"❌ {result.error}", fg="red")
    else:
        print_key_file(result)

    if result.error:
        sys.exit(1)
    if strict and result.key_file is not None and result.key_file.failed:
        sys.exit(1)


@indexnow.command()
@click.option("--key", "-k", default=None, help="Token (overrides environment and site.yml).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def location(ctx: click.Context, key: str | None, as_json: bool) -> None:
    """Show the public URL the key file will be served from."""
    from edgesite.core.config.loader import resolve_indexnow_key
    from edgesite.core.services.indexnow_key import key_file_name

    site, _ = _load_optional_site(ctx)
    token = resolve_indexnow_key(site, explicit=key)

    if token is None:
        if as_json:
            click.echo(json.dumps({"error": "No IndexNow key configured"}, indent=2))
        else:
            click.secho("⚠️  No IndexNow key configured.", fg="yellow")
        sys.exit(1)

    url = site.key_location(token) if site else None
    if as_json:
        click.echo(json.dumps({"file": key_file_name(token), "url": url}, indent=2))
        return

    click.echo(f"   File: {key_file_name(token)}")
    if url:
        click.echo(f"   URL:  {url}")
    else:
        click.secho("   (no site.yml — public URL unknown)", fg="yellow")


def print_key_file(result) -> None:
    """Human-readable outcome of a key file run."""
    key_file = result.key_file
    if key_file is None or key_file.skipped:
        click.secho("⚠️  No IndexNow key configured — key file not created.", fg="yellow")
        return
    if key_file.failed:
        click.secho("❌ Failed to create IndexNow key file", fg="red", bold=True)
        click.echo(f"   Path:  {key_file.path}")
        click.echo(f"   Error: {key_file.error}")
        return
    click.secho("✅ IndexNow key file created", fg="green", bold=True)
    click.echo(f"   Path: {key_file.path}")
    if result.key_location:
        click.echo(f"   URL:  {result.key_location}")
