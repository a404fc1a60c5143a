"""
edgesite — CLI entrypoint.

Usage:
    python -m edgesite.main --help
    python -m edgesite.main config check
    python -m edgesite.main prebuild
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from edgesite import __version__
from edgesite.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="edgesite")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to site.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """edgesite — build-time tooling for an edge-hosted site."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("EDGESITE_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("EDGESITE_LOG_FILE"),
        log_file_level=os.environ.get("EDGESITE_LOG_FILE_LEVEL"),
    )


@cli.group()
def config() -> None:
    """Site configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate site.yml configuration."""
    from edgesite.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.site is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Site:    {result.site.site}")
        click.echo(f"   Output:  {result.site.output.value}")
        click.echo(f"   Adapter: {result.site.adapter or '(none)'}")
        if result.key_location:
            click.echo(f"   Key URL: {result.key_location}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@config.command("render")
@click.option("--write", "-w", is_flag=True, help="Write the file into the site root.")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_render(ctx: click.Context, write: bool, force: bool, as_json: bool) -> None:
    """Render the framework config (astro.config.mjs) from site.yml."""
    from edgesite.core.config.loader import ConfigError, find_site_file, load_site, site_root
    from edgesite.core.services.site_generate import (
        render_framework_config,
        write_framework_config,
    )

    config_path: Path | None = ctx.obj.get("config_path") or find_site_file()
    try:
        site = load_site(config_path)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if write:
        result = write_framework_config(site_root(config_path), site, overwrite=force)
    else:
        result = render_framework_config(site)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        sys.exit(1 if "error" in result else 0)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if write:
        click.secho(f"✅ Wrote {result['path']}", fg="green", bold=True)
    else:
        click.echo(result["file"]["content"], nl=False)


@cli.command()
@click.option("--key", "-k", default=None, help="IndexNow token (overrides environment and site.yml).")
@click.option("--render-config", is_flag=True, help="Also (re)write the framework config.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def prebuild(ctx: click.Context, key: str | None, render_config: bool, as_json: bool) -> None:
    """Run the build hook: publish the IndexNow key file.

    A missing key or a failed write is reported but never fails the
    build. Only an invalid site.yml exits non-zero.

    Examples:

        edgesite prebuild

        INDEXNOW_API_KEY_NAME=... edgesite prebuild --render-config
    """
    from edgesite.core.config.loader import site_root
    from edgesite.core.use_cases.prebuild import run_prebuild
    from edgesite.ui.cli.indexnow import print_key_file

    result = run_prebuild(config_path=ctx.obj.get("config_path"), key=key)

    config_written: dict | None = None
    if render_config and result.site is not None:
        from edgesite.core.services.site_generate import write_framework_config

        config_written = write_framework_config(
            site_root(result.config_path), result.site, overwrite=True,
        )

    if as_json:
        data = result.to_dict()
        if config_written is not None:
            data["framework_config"] = config_written
        click.echo(json.dumps(data, indent=2))
        sys.exit(1 if result.error else 0)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    print_key_file(result)

    if render_config:
        if config_written is None:
            click.secho("⚠️  No site.yml — framework config not rendered.", fg="yellow")
        elif "error" in config_written:
            click.secho(f"❌ {config_written['error']}", fg="red")
        else:
            click.secho(f"✅ Wrote {config_written['path']}", fg="green")


# ── Register sub-command groups from edgesite/ui/cli/ ─────────────

from edgesite.ui.cli.indexnow import indexnow

cli.add_command(indexnow)


if __name__ == "__main__":
    cli()
