"""
Artifact model — a generated file, ready for the caller to write.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Artifact(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:     Relative POSIX path (package directories + file name).
        contents: UTF-8 encoded file content.
        reason:   Why this file was generated.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    contents: bytes
    reason: str = ""

    @property
    def text(self) -> str:
        """Decoded file content."""
        return self.contents.decode("utf-8")
