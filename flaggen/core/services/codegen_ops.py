"""Flag codegen operations — generate, write and dump, as plain dicts.

Thin layer between the pure generators and the CLI.  The generators
never touch the filesystem; writing artifacts happens here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from flaggen.core.errors import GenerationError
from flaggen.core.models.artifact import Artifact
from flaggen.core.models.flag import FlagCache, FlagRecord
from flaggen.core.services.codegen.renderer import TemplateRenderer

logger = logging.getLogger(__name__)

DUMP_FORMATS = ("text", "json", "yaml")


def _artifact_dict(artifact: Artifact) -> dict:
    return {
        "path": artifact.path,
        "content": artifact.text,
        "reason": artifact.reason,
        "size": len(artifact.contents),
    }


def generate_java_lib(cache: FlagCache, renderer: TemplateRenderer | None = None) -> dict:
    """Generate the Java flag library for a cache.

    Returns:
        {"ok": True, "package": ..., "files": [...], "artifacts": [...]}
        or {"error": "...", "package": ...}
    """
    from flaggen.core.services.generators.java import generate_java_code

    try:
        artifacts = generate_java_code(cache, renderer)
    except GenerationError as e:
        return {"error": str(e), "package": e.package}

    return {
        "ok": True,
        "package": cache.package,
        "files": [_artifact_dict(a) for a in artifacts],
        "artifacts": artifacts,
    }


def write_artifacts(out_dir: Path, artifacts: list[Artifact], *, overwrite: bool = False) -> dict:
    """Write artifacts below ``out_dir``.

    The three files belong together: if any target already exists and
    ``overwrite`` is not set, nothing is written.

    Returns:
        {"ok": bool, "written": [...], "skipped": [...], "errors": [...]}
    """
    written: list[str] = []
    skipped: list[str] = []
    errors: list[str] = []

    if not overwrite:
        for artifact in artifacts:
            if (out_dir / artifact.path).exists():
                errors.append(f"File already exists: {artifact.path} (use --overwrite to replace)")
        if errors:
            skipped = [a.path for a in artifacts]
            return {"ok": False, "written": written, "skipped": skipped, "errors": errors}

    for artifact in artifacts:
        target = out_dir / artifact.path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(artifact.contents)
        except OSError as e:
            errors.append(f"Cannot write {artifact.path}: {e}")
            continue

        logger.info("Wrote generated file: %s", target)
        written.append(artifact.path)

    return {"ok": not errors, "written": written, "skipped": skipped, "errors": errors}


def _flag_dict(flag: FlagRecord) -> dict:
    return {
        "name": flag.name,
        "namespace": flag.namespace,
        "description": flag.description,
        "state": flag.state.value,
        "permission": flag.permission.value,
    }


def dump_cache(cache: FlagCache, fmt: str = "text") -> str:
    """Render a cache as text, JSON or YAML.

    Text format is one line per flag: ``<package>/<name>: <STATE> <PERMISSION>``.

    Raises:
        ValueError: Unknown format.
    """
    if fmt == "text":
        return "".join(
            f"{cache.package}/{f.name}: {f.state.name} {f.permission.name}\n"
            for f in cache.iter()
        )

    data = {"package": cache.package, "flags": [_flag_dict(f) for f in cache.iter()]}
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)

    raise ValueError(f"Unknown dump format '{fmt}' (expected one of: {', '.join(DUMP_FORMATS)})")
