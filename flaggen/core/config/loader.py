"""
Cache loader — reads flags.yml into a validated FlagCache.

This is the primary entry point for loading flag declarations.
It reads YAML, validates against the Pydantic schema, and returns
a typed cache that the generators can trust.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from flaggen.core.models.flag import FlagCache

logger = logging.getLogger(__name__)

# Default cache filename
CACHE_FILE = "flags.yml"


class CacheError(Exception):
    """Raised when the flag cache is invalid or missing."""


def find_cache_file(start_dir: Path | None = None) -> Path | None:
    """Search for flags.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to flags.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CACHE_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def parse_cache(data: object, source: str = "<data>") -> FlagCache:
    """Validate already-parsed YAML/JSON data into a FlagCache.

    The mapping may sit under a top-level ``cache:`` key or be flat.

    Raises:
        CacheError: If the data is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise CacheError(f"Expected a YAML mapping in {source}, got {type(data).__name__}")

    cache_data = data["cache"] if isinstance(data.get("cache"), dict) else data

    try:
        return FlagCache.model_validate(cache_data)
    except ValidationError as e:
        raise CacheError(f"Invalid flag cache in {source}: {_format_validation_error(e)}") from e


def load_cache(path: Path | None = None) -> FlagCache:
    """Load and validate a flag cache.

    Args:
        path: Explicit path to flags.yml. If None, searches upward.

    Returns:
        Validated FlagCache.

    Raises:
        CacheError: If the file is missing or invalid.
    """
    if path is None:
        path = find_cache_file()

    if path is None:
        raise CacheError(f"No {CACHE_FILE} found. Specify one with --cache.")

    if not path.is_file():
        raise CacheError(f"Cache file not found: {path}")

    logger.debug("Loading flag cache from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CacheError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise CacheError(f"Invalid YAML in {path}: {e}") from e

    cache = parse_cache(data, source=str(path))
    logger.info("Loaded package '%s' with %d flags", cache.package, cache.flag_count)
    return cache
