"""
Tests for domain models — validation, lookups, immutability.
"""

import pytest
from pydantic import ValidationError

from flaggen.core.models import (
    Artifact,
    FlagCache,
    FlagRecord,
    FlagState,
    Permission,
    RenderContext,
    RenderElement,
)


def _flag(name: str = "my_flag", **kwargs) -> FlagRecord:
    data = {"namespace": "ns", "name": name, "state": "enabled", "permission": "read_only"}
    data.update(kwargs)
    return FlagRecord(**data)


class TestFlagRecord:
    """FlagRecord model tests."""

    def test_minimal_flag(self):
        f = _flag()
        assert f.state is FlagState.ENABLED
        assert f.permission is Permission.READ_ONLY
        assert f.description == ""

    def test_enum_values_case_insensitive(self):
        f = _flag(state="DISABLED", permission="Read_Write")
        assert f.state is FlagState.DISABLED
        assert f.permission is Permission.READ_WRITE

    def test_unknown_state_rejected(self):
        with pytest.raises(ValidationError):
            _flag(state="maybe")

    @pytest.mark.parametrize("name", ["", "Upper", "1st", "_lead", "has-dash", "dou__ble"])
    def test_invalid_name_rejected(self, name):
        with pytest.raises(ValidationError, match="invalid flag name"):
            _flag(name=name)

    def test_empty_namespace_rejected(self):
        with pytest.raises(ValidationError, match="namespace"):
            _flag(namespace="  ")

    @pytest.mark.parametrize("namespace", ['a"b', 'a", "evil', "line\nbreak", "Upper", "dou__ble"])
    def test_invalid_namespace_rejected(self, namespace):
        with pytest.raises(ValidationError, match="invalid namespace"):
            _flag(namespace=namespace)

    def test_frozen(self):
        f = _flag()
        with pytest.raises(ValidationError):
            f.name = "other"


class TestFlagCache:
    """FlagCache model tests."""

    def test_empty_cache(self):
        c = FlagCache(package="com.example")
        assert c.flags == []
        assert c.flag_count == 0
        assert list(c.iter()) == []

    def test_iter_keeps_declaration_order(self):
        c = FlagCache(package="com.example", flags=[_flag("zeta"), _flag("alpha"), _flag("mid")])
        assert [f.name for f in c.iter()] == ["zeta", "alpha", "mid"]

    def test_get_flag(self, test_cache):
        assert test_cache.get_flag("enabled_rw").permission is Permission.READ_WRITE
        assert test_cache.get_flag("missing") is None

    @pytest.mark.parametrize("package", ["", "Com.example", "com..example", "com.example.", "com.1x"])
    def test_invalid_package_rejected(self, package):
        with pytest.raises(ValidationError, match="invalid package"):
            FlagCache(package=package)

    def test_single_segment_package(self):
        assert FlagCache(package="flags").package == "flags"

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValidationError, match="duplicate flag names: twice"):
            FlagCache(package="com.example", flags=[_flag("twice"), _flag("once"), _flag("twice")])


class TestRenderModels:
    def test_context_holds_elements(self):
        e = RenderElement(
            default_value="true",
            namespace="ns",
            qualified_id="com.example.flag",
            constant_suffix="FLAG",
            is_read_write=False,
            accessor_name="flag",
        )
        ctx = RenderContext(package="com.example", any_read_write=False, elements=[e])
        dumped = ctx.model_dump()
        assert dumped["elements"][0]["qualified_id"] == "com.example.flag"


class TestArtifact:
    def test_text_decodes_utf8(self):
        a = Artifact(path="a/b/Flags.java", contents="// héllo\n".encode("utf-8"))
        assert a.text == "// héllo\n"
        assert a.reason == ""
