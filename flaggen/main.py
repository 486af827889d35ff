"""
flaggen — CLI entrypoint.

Usage:
    python -m flaggen.main --help
    python -m flaggen.main cache check
    python -m flaggen.main java generate --out gen --write
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from flaggen import __version__
from flaggen.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="flaggen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--cache",
    "-c",
    "cache_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to flags.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    cache_path: str | None,
) -> None:
    """flaggen — generate feature flag accessors from a flag cache."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["cache_path"] = Path(cache_path) if cache_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
        quiet_third_party=not debug,
    )


@cli.group()
def cache() -> None:
    """Flag cache commands."""


@cache.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def cache_check(ctx: click.Context, as_json: bool) -> None:
    """Validate flags.yml."""
    from flaggen.core.use_cases.cache_check import check_cache

    result = check_cache(cache_path=ctx.obj.get("cache_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.cache is not None  # guaranteed when valid
        summary = result.to_dict()
        click.secho("✅ Flag cache is valid", fg="green", bold=True)
        click.echo(f"   Package: {result.cache.package}")
        click.echo(f"   Flags: {summary['flag_count']} ({summary['read_write_count']} read-write)")
    else:
        click.secho("❌ Flag cache errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings and not ctx.obj.get("quiet"):
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def dump(ctx: click.Context, fmt: str) -> None:
    """Print the flag cache."""
    from flaggen.core.config.loader import CacheError, load_cache
    from flaggen.core.services.codegen_ops import dump_cache

    try:
        flag_cache = load_cache(ctx.obj.get("cache_path"))
    except CacheError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.echo(dump_cache(flag_cache, fmt), nl=False)


# ── Register sub-command groups from flaggen/ui/cli/ ──────────────

from flaggen.ui.cli.java import java

cli.add_command(java)


if __name__ == "__main__":
    cli()
