"""
Domain models — Pydantic types for flag code generation.

All models are re-exported here for convenient access:

    from flaggen.core.models import FlagCache, FlagRecord, Artifact
"""

from flaggen.core.models.artifact import Artifact
from flaggen.core.models.flag import FlagCache, FlagRecord, FlagState, Permission
from flaggen.core.models.render import RenderContext, RenderElement

__all__ = [
    # artifact.py
    "Artifact",
    # flag.py
    "FlagCache",
    "FlagRecord",
    "FlagState",
    "Permission",
    # render.py
    "RenderContext",
    "RenderElement",
]
