"""
proofkit — CLI entrypoint.

Usage:
    python -m proofkit.main --help
    python -m proofkit.main select
    python -m proofkit.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from proofkit import __version__
from proofkit.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="proofkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to proofkit.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """proofkit — pick adapters, platforms and architectures to build for."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("PROOFKIT_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("PROOFKIT_LOG_FILE"),
        log_file_level=os.environ.get("PROOFKIT_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--reuse", is_flag=True, help="Replay the stored selection without prompting.")
@click.pass_context
def select(ctx: click.Context, as_json: bool, reuse: bool) -> None:
    """Choose adapters, platforms and per-platform architectures."""
    from proofkit.core.use_cases.select import run_selection

    result = run_selection(config_path=ctx.obj.get("config_path"), reuse=reuse)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.adapters is not None and result.platforms is not None

    click.echo()
    click.secho("🧩 Selection", fg="cyan", bold=True)
    click.echo(f"   Adapters:  {', '.join(result.adapters.labels())}")
    click.echo(f"   Platforms: {', '.join(result.platforms.labels())}")
    for platform, archs in result.archs.items():
        click.echo(f"     • {platform}: {', '.join(archs)}")

    if not ctx.obj.get("quiet"):
        click.echo()
        if result.platforms_changed:
            click.secho("⚠️  Platforms differ from the stored configuration.", fg="yellow")
        else:
            click.secho("✅ Platforms unchanged.", fg="green")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def catalog(as_json: bool) -> None:
    """List known adapters, platforms and architectures."""
    from proofkit.core.models.catalog import ADAPTERS, Platform

    data = {
        "adapters": list(ADAPTERS),
        "platforms": {p.value: list(p.archs) for p in Platform},
    }

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    click.secho("🧩 Adapters", fg="cyan", bold=True)
    for i, label in enumerate(data["adapters"]):
        click.echo(f"   {i}  {label}")
    click.echo()
    click.secho("📱 Platforms", fg="cyan", bold=True)
    for platform in Platform:
        click.echo(f"   {platform.position}  {platform.value}")
        for arch in platform.archs:
            click.echo(f"        - {arch}")


@cli.group()
def config() -> None:
    """Build configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate proofkit.yml against the catalog."""
    from proofkit.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Adapters:  {', '.join(result.config.target_adapters) or '-'}")
        click.echo(f"   Platforms: {', '.join(result.config.target_platforms) or '-'}")
        click.echo(f"   Mode:      {result.config.build_mode}")
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


if __name__ == "__main__":
    cli()
