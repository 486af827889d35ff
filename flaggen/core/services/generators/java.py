"""
Java generator — Flags / FeatureFlagsImpl / FeatureFlags from a flag cache.

Three files, always generated together:

    Flags.java             static accessors delegating to one impl instance
    FeatureFlagsImpl.java  read-only flags return a literal, read-write
                           flags read DeviceConfig with the default
    FeatureFlags.java      the interface both of the above agree on

The ``DeviceConfig`` import is only emitted when at least one flag is
read-write, so an all read-only package compiles without the
runtime-config dependency.
"""

from __future__ import annotations

import logging
import string
from pathlib import Path, PurePosixPath

from flaggen.core.errors import CodegenError, GenerationError, TemplateRenderError
from flaggen.core.models.artifact import Artifact
from flaggen.core.models.flag import FlagCache, FlagRecord, FlagState, Permission
from flaggen.core.models.render import RenderContext, RenderElement
from flaggen.core.services.codegen.ident import create_device_config_ident
from flaggen.core.services.codegen.renderer import (
    JinjaTemplateRenderer,
    TemplateRenderer,
    read_template_dir,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Output order is fixed; it does not depend on the flags.
JAVA_FILES: tuple[str, ...] = ("Flags.java", "FeatureFlagsImpl.java", "FeatureFlags.java")


# ── Context ─────────────────────────────────────────────────────


_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def create_render_element(package: str, flag: FlagRecord) -> RenderElement:
    """Derive the template values for one flag."""
    return RenderElement(
        default_value="true" if flag.state == FlagState.ENABLED else "false",
        namespace=flag.namespace,
        qualified_id=create_device_config_ident(package, flag.name),
        constant_suffix=flag.name.translate(_ASCII_UPPER),
        is_read_write=flag.permission == Permission.READ_WRITE,
        accessor_name=flag.name,
    )


def build_context(cache: FlagCache) -> RenderContext:
    """Build the template context for a whole package.

    Elements keep the cache's declaration order.
    """
    elements = [create_render_element(cache.package, flag) for flag in cache.iter()]
    any_read_write = any(e.is_read_write for e in elements)
    logger.debug(
        "Built context for %s: %d flags, read-write=%s",
        cache.package, len(elements), any_read_write,
    )
    return RenderContext(
        package=cache.package,
        any_read_write=any_read_write,
        elements=elements,
    )


# ── Templates ───────────────────────────────────────────────────


def load_java_templates(template_dir: Path | None = None) -> JinjaTemplateRenderer:
    """Compile the three Java templates.

    Args:
        template_dir: Directory holding ``<file>.j2`` sources
            (default: the templates bundled with flaggen).

    Raises:
        TemplateParseError: If a template is missing or invalid.
    """
    sources = read_template_dir(template_dir or TEMPLATES_DIR, list(JAVA_FILES))
    return JinjaTemplateRenderer(sources)


# ── Output ──────────────────────────────────────────────────────


def package_dir(package: str) -> PurePosixPath:
    """``com.example.app`` → ``com/example/app``."""
    return PurePosixPath(*package.split("."))


def assemble(package: str, rendered: dict[str, str]) -> list[Artifact]:
    """Pair each rendered file with its path under the package directory.

    Args:
        package: Dotted package name.
        rendered: File name → rendered text, for every name in ``JAVA_FILES``.

    Returns:
        Artifacts in ``JAVA_FILES`` order.
    """
    directory = package_dir(package)
    return [
        Artifact(
            path=str(directory / name),
            contents=rendered[name].encode("utf-8"),
            reason=f"Generated {name} for package {package}",
        )
        for name in JAVA_FILES
    ]


# ── Public API ──────────────────────────────────────────────────


def _render(renderer: TemplateRenderer, name: str, context: RenderContext) -> str:
    """Render one file, mapping foreign renderer failures to TemplateRenderError."""
    try:
        return renderer.render(name, context)
    except CodegenError:
        raise
    except Exception as e:
        raise TemplateRenderError(name, f"{type(e).__name__}: {e}") from e


def generate_java_code(
    cache: FlagCache,
    renderer: TemplateRenderer | None = None,
) -> list[Artifact]:
    """Generate the Java flag library for one package.

    All three templates are rendered before any artifact is built, so
    callers get either the complete set or an exception.

    Args:
        cache: Validated flag cache.
        renderer: Renderer to use (default: bundled Java templates,
            loaded for this call).

    Returns:
        Three artifacts: Flags.java, FeatureFlagsImpl.java, FeatureFlags.java.

    Raises:
        GenerationError: Wrapping the template or contract error that
            aborted the run.
    """
    package = cache.package
    try:
        if renderer is None:
            renderer = load_java_templates()
        context = build_context(cache)
        rendered = {name: _render(renderer, name, context) for name in JAVA_FILES}
    except CodegenError as e:
        logger.error("Java generation failed for %s: %s", package, e)
        raise GenerationError(package, e) from e

    artifacts = assemble(package, rendered)
    logger.info("Generated %d Java files for %s", len(artifacts), package)
    return artifacts
