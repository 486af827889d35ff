"""
CLI commands for Java flag library generation.

Thin wrappers over ``flaggen.core.services.codegen_ops``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


@click.group()
def java() -> None:
    """Java — generate Flags / FeatureFlagsImpl / FeatureFlags."""


@java.command("generate")
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Output root; files go under <out>/<package path>/.",
)
@click.option("--write", is_flag=True, help="Write to disk (default: preview only).")
@click.option("--overwrite", is_flag=True, help="Replace files that already exist.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, out_dir: str, write: bool, overwrite: bool, as_json: bool) -> None:
    """Generate the Java flag library for the cache."""
    from flaggen.core.config.loader import CacheError, load_cache
    from flaggen.core.services.codegen_ops import generate_java_lib, write_artifacts

    try:
        cache = load_cache(ctx.obj.get("cache_path"))
    except CacheError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    result = generate_java_lib(cache)

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    wr = None
    if write:
        wr = write_artifacts(Path(out_dir), result["artifacts"], overwrite=overwrite)

    if as_json:
        payload = {"package": result["package"], "files": result["files"]}
        if wr is not None:
            payload["write"] = wr
        click.echo(json.dumps(payload, indent=2))
        sys.exit(0 if wr is None or wr["ok"] else 1)

    if wr is not None:
        for path in wr["written"]:
            click.secho(f"✅ Written: {path}", fg="green", bold=True)
        for err in wr["errors"]:
            click.secho(f"❌ {err}", fg="red")
        if not wr["ok"]:
            sys.exit(1)
        return

    for file_data in result["files"]:
        click.secho(f"📄 Preview: {file_data['path']}", fg="cyan", bold=True)
        click.echo("─" * 60)
        click.echo(file_data["content"], nl=False)
        click.echo("─" * 60)
    click.secho("   (use --write to save to disk)", fg="yellow")
