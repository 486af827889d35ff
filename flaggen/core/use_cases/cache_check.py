"""
Cache check use case — validate flags.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from flaggen.core.config.loader import CacheError, find_cache_file, load_cache
from flaggen.core.models.flag import FlagCache, Permission


@dataclass
class CacheCheckResult:
    """Result of cache validation."""

    valid: bool = False
    cache: FlagCache | None = None
    cache_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        flags = self.cache.flags if self.cache else []
        return {
            "valid": self.valid,
            "cache_path": str(self.cache_path) if self.cache_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "package": self.cache.package if self.cache else None,
            "flag_count": len(flags),
            "read_write_count": sum(1 for f in flags if f.permission == Permission.READ_WRITE),
        }


def check_cache(cache_path: Path | None = None) -> CacheCheckResult:
    """Validate a flag cache and report issues.

    Args:
        cache_path: Optional explicit path to flags.yml.

    Returns:
        CacheCheckResult with validation status and any issues.
    """
    result = CacheCheckResult()

    if cache_path is None:
        cache_path = find_cache_file()

    if cache_path is None:
        result.errors.append("No flags.yml found.")
        return result

    result.cache_path = cache_path

    try:
        cache = load_cache(cache_path)
        result.cache = cache
    except CacheError as e:
        result.errors.append(str(e))
        return result

    if not cache.flags:
        result.warnings.append("No flags declared. Generated classes will be empty.")

    undocumented = [f.name for f in cache.flags if not f.description.strip()]
    if undocumented:
        result.warnings.append(f"Flags without description: {', '.join(undocumented)}")

    result.valid = len(result.errors) == 0
    return result
