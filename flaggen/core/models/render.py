"""
Render context — what the Java templates see.

Built fresh by ``build_context`` for every generation run and never
mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RenderElement(BaseModel):
    """Per-flag values referenced by the templates.

    Attributes:
        default_value:   Java boolean literal, ``"true"`` or ``"false"``.
        namespace:       DeviceConfig namespace.
        qualified_id:    DeviceConfig flag identifier (``<package>.<name>``).
        constant_suffix: Upper-cased flag name, used for ``FLAG_*`` constants.
        is_read_write:   Value is read from DeviceConfig at runtime.
        accessor_name:   Java method name.
    """

    model_config = ConfigDict(frozen=True)

    default_value: str
    namespace: str
    qualified_id: str
    constant_suffix: str
    is_read_write: bool
    accessor_name: str


class RenderContext(BaseModel):
    """Package-wide template context."""

    model_config = ConfigDict(frozen=True)

    package: str
    any_read_write: bool
    elements: list[RenderElement] = Field(default_factory=list)
