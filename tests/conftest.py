"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from flaggen.core.models.flag import FlagCache, FlagRecord, FlagState, Permission

TEST_PACKAGE = "com.android.aconfig.test"


def first_significant_code_diff(expected: str, actual: str) -> str | None:
    """Compare two sources ignoring blank lines and indentation.

    Returns:
        None if equivalent, else a description of the first difference.
    """
    def significant(text: str) -> list[str]:
        return [line.strip() for line in text.splitlines() if line.strip()]

    exp, act = significant(expected), significant(actual)
    for i, (e, a) in enumerate(zip(exp, act)):
        if e != a:
            return f"line {i + 1}: expected {e!r}, got {a!r}"
    if len(exp) != len(act):
        return f"expected {len(exp)} significant lines, got {len(act)}"
    return None


@pytest.fixture
def code_diff() -> Callable[[str, str], str | None]:
    """Return the significant-line comparison helper."""
    return first_significant_code_diff


@pytest.fixture
def test_cache() -> FlagCache:
    """Four flags covering every state × permission combination."""
    return FlagCache(
        package=TEST_PACKAGE,
        flags=[
            FlagRecord(
                namespace="aconfig_test",
                name="disabled_ro",
                state=FlagState.DISABLED,
                permission=Permission.READ_ONLY,
                description="This flag is DISABLED + READ_ONLY",
            ),
            FlagRecord(
                namespace="aconfig_test",
                name="disabled_rw",
                state=FlagState.DISABLED,
                permission=Permission.READ_WRITE,
                description="This flag is DISABLED + READ_WRITE",
            ),
            FlagRecord(
                namespace="aconfig_test",
                name="enabled_ro",
                state=FlagState.ENABLED,
                permission=Permission.READ_ONLY,
                description="This flag is ENABLED + READ_ONLY",
            ),
            FlagRecord(
                namespace="aconfig_test",
                name="enabled_rw",
                state=FlagState.ENABLED,
                permission=Permission.READ_WRITE,
                description="This flag is ENABLED + READ_WRITE",
            ),
        ],
    )


@pytest.fixture
def read_only_cache() -> FlagCache:
    """A package where no flag is read-write."""
    return FlagCache(
        package="com.example.ro",
        flags=[
            FlagRecord(namespace="ro_ns", name="alpha", state="enabled", permission="read_only"),
            FlagRecord(namespace="ro_ns", name="beta", state="disabled", permission="read_only"),
        ],
    )


@pytest.fixture
def flags_yml(tmp_path: Path) -> Path:
    """Write a valid flags.yml matching ``test_cache``."""
    content = textwrap.dedent(f"""\
        package: {TEST_PACKAGE}
        flags:
          - name: disabled_ro
            namespace: aconfig_test
            description: This flag is DISABLED + READ_ONLY
            state: disabled
            permission: read_only
          - name: disabled_rw
            namespace: aconfig_test
            description: This flag is DISABLED + READ_WRITE
            state: DISABLED
            permission: READ_WRITE
          - name: enabled_ro
            namespace: aconfig_test
            description: This flag is ENABLED + READ_ONLY
            state: enabled
            permission: read_only
          - name: enabled_rw
            namespace: aconfig_test
            description: This flag is ENABLED + READ_WRITE
            state: Enabled
            permission: Read_Write
    """)
    path = tmp_path / "flags.yml"
    path.write_text(content)
    return path
