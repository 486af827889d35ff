"""
Template renderer — named templates + one context → text.

The generators only depend on the ``TemplateRenderer`` protocol.
``JinjaTemplateRenderer`` is the bundled implementation: every template
is compiled up front, so a broken template fails before anything is
rendered, and ``StrictUndefined`` turns a context field the template
expects but does not get into a hard error instead of an empty string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import jinja2
from pydantic import BaseModel

from flaggen.core.errors import TemplateParseError, TemplateRenderError

logger = logging.getLogger(__name__)


class TemplateRenderer(Protocol):
    """Anything that can render a named template against a context."""

    def render(self, name: str, context: BaseModel | Mapping[str, Any]) -> str:
        ...


def _make_environment(sources: Mapping[str, str]) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.DictLoader(dict(sources)),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )


class JinjaTemplateRenderer:
    """Jinja2-backed renderer over a fixed set of template sources.

    Args:
        sources: Template name → template source text.

    Raises:
        TemplateParseError: If any source is not valid Jinja2.
    """

    def __init__(self, sources: Mapping[str, str]):
        self._env = _make_environment(sources)
        self._templates: dict[str, jinja2.Template] = {}
        for name in sources:
            try:
                self._templates[name] = self._env.get_template(name)
            except jinja2.TemplateSyntaxError as e:
                raise TemplateParseError(name, e.message or str(e), e.lineno) from e
        logger.debug("Compiled %d templates: %s", len(self._templates), ", ".join(self._templates))

    @property
    def names(self) -> list[str]:
        """Names of the compiled templates."""
        return list(self._templates)

    def render(self, name: str, context: BaseModel | Mapping[str, Any]) -> str:
        """Render one template.

        Pydantic contexts are dumped to plain data first, so templates
        only ever see dicts, lists, strings and booleans.

        Raises:
            TemplateRenderError: Unknown template name, missing context
                field, a value of the wrong type, or any other
                failure while evaluating the template.
        """
        template = self._templates.get(name)
        if template is None:
            raise TemplateRenderError(name, "no such template")

        data = context.model_dump() if isinstance(context, BaseModel) else dict(context)
        try:
            return template.render(data)
        except jinja2.TemplateError as e:
            # UndefinedError, TemplateNotFound from include/import, runtime errors
            raise TemplateRenderError(name, e.message or str(e)) from e
        except (TypeError, AttributeError, ValueError, LookupError, ArithmeticError) as e:
            raise TemplateRenderError(name, str(e)) from e


def read_template_dir(template_dir: Path, names: list[str]) -> dict[str, str]:
    """Read ``<template_dir>/<name>.j2`` for each name.

    Returns:
        Template name → source text, in the order of ``names``.

    Raises:
        TemplateParseError: If a template file is missing or unreadable.
    """
    sources: dict[str, str] = {}
    for name in names:
        path = template_dir / f"{name}.j2"
        try:
            sources[name] = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateParseError(name, f"cannot read {path}: {e}") from e
    return sources
