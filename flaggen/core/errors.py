"""
Code generation errors.

Every failure inside a generation run is fatal.  The low-level kinds
(parse, render, contract) are raised where they happen and wrapped by
``generate_java_code`` into a single ``GenerationError`` that names the
package being generated.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all code generation failures."""


class TemplateParseError(CodegenError):
    """A template source is syntactically invalid."""

    def __init__(self, template: str, message: str, lineno: int | None = None):
        self.template = template
        self.lineno = lineno
        where = f"{template}:{lineno}" if lineno else template
        super().__init__(f"Cannot parse template {where}: {message}")


class TemplateRenderError(CodegenError):
    """A template references context that is missing or has the wrong type."""

    def __init__(self, template: str, message: str):
        self.template = template
        super().__init__(f"Cannot render template {template}: {message}")


class ContractViolation(CodegenError):
    """An input that upstream validation should have rejected reached the core."""


class GenerationError(CodegenError):
    """A generation run failed; no artifacts were produced."""

    def __init__(self, package: str, cause: Exception):
        self.package = package
        self.cause = cause
        super().__init__(f"Code generation failed for package '{package}': {cause}")
