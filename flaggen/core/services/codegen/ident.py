"""
Identifier grammar — flag names, packages and DeviceConfig identifiers.

A name ident is ``[a-z][a-z0-9_]*`` with no ``__`` run.  A package ident
is one or more name idents joined by ``.``.  The cache loader rejects
anything else, so by the time a flag reaches the generators every
identifier is already known to be valid.
"""

from __future__ import annotations

from flaggen.core.errors import ContractViolation


def is_valid_name_ident(s: str) -> bool:
    """Check ``s`` against the flag name grammar."""
    if not s or "__" in s:
        return False
    first = s[0]
    if not ("a" <= first <= "z"):
        return False
    return all(("a" <= ch <= "z") or ("0" <= ch <= "9") or ch == "_" for ch in s[1:])


def is_valid_package_ident(s: str) -> bool:
    """Check ``s`` against the package grammar (dotted name idents)."""
    if not s:
        return False
    return all(is_valid_name_ident(part) for part in s.split("."))


def create_device_config_ident(package: str, flag_name: str) -> str:
    """Build the DeviceConfig identifier ``<package>.<flag_name>``.

    Raises:
        ContractViolation: If either part is malformed.  Inputs come from
            a validated cache, so this is a caller bug, not a user error.
    """
    if not is_valid_package_ident(package):
        raise ContractViolation(f"bad package: '{package}'")
    if not is_valid_name_ident(flag_name):
        raise ContractViolation(f"bad flag name: '{flag_name}'")
    return f"{package}.{flag_name}"
