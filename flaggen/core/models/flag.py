"""
Flag model — the validated flag cache that code generation consumes.

Loaded from flags.yml by ``flaggen.core.config.loader``.  Validation
happens here, once, so the generators can treat every record as
well-formed.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from flaggen.core.services.codegen.ident import is_valid_name_ident, is_valid_package_ident


class FlagState(StrEnum):
    """Default state baked into the generated code."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class Permission(StrEnum):
    """Whether the flag can be flipped at runtime through DeviceConfig."""

    READ_ONLY = "read_only"
    READ_WRITE = "read_write"


class FlagRecord(BaseModel):
    """A single flag declaration."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    state: FlagState
    permission: Permission
    description: str = ""

    @field_validator("state", "permission", mode="before")
    @classmethod
    def _fold_case(cls, value: object) -> object:
        # ENABLED / Read_Write etc.
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_name_ident(value):
            raise ValueError(
                f"invalid flag name '{value}' (expected [a-z][a-z0-9_]* without '__')"
            )
        return value

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        if not is_valid_name_ident(value):
            raise ValueError(
                f"invalid namespace '{value}' (expected [a-z][a-z0-9_]* without '__')"
            )
        return value


class FlagCache(BaseModel):
    """All flags of one package, in declaration order.

    This is the unit of code generation: one cache → one set of
    generated files.
    """

    model_config = ConfigDict(frozen=True)

    package: str
    flags: list[FlagRecord] = Field(default_factory=list)

    @field_validator("package")
    @classmethod
    def _check_package(cls, value: str) -> str:
        if not is_valid_package_ident(value):
            raise ValueError(f"invalid package '{value}' (expected dotted lower-case idents)")
        return value

    @model_validator(mode="after")
    def _check_unique_names(self) -> FlagCache:
        seen: set[str] = set()
        dupes: list[str] = []
        for flag in self.flags:
            if flag.name in seen and flag.name not in dupes:
                dupes.append(flag.name)
            seen.add(flag.name)
        if dupes:
            raise ValueError(f"duplicate flag names: {', '.join(dupes)}")
        return self

    def iter(self) -> Iterator[FlagRecord]:
        """Iterate flags in declaration order."""
        return iter(self.flags)

    def get_flag(self, name: str) -> FlagRecord | None:
        """Look up a flag by name."""
        for flag in self.flags:
            if flag.name == name:
                return flag
        return None

    @property
    def flag_count(self) -> int:
        """Number of declared flags."""
        return len(self.flags)
