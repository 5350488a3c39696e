# SPDX-License-Identifier: MIT
"""Toolchain definitions (LLVM, GCC)."""

from __future__ import annotations

from collections.abc import Sequence

from flatbuild.core.errors import ConfigureError
from flatbuild.toolchains.gcc import GccToolchain
from flatbuild.toolchains.llvm import LlvmToolchain
from flatbuild.tools.toolchain import BaseToolchain

TOOLCHAINS: dict[str, type[BaseToolchain]] = {
    "llvm": LlvmToolchain,
    "gcc": GccToolchain,
}


def find_toolchain(name: str, defines: Sequence[str] = ()) -> BaseToolchain:
    """Create a toolchain by name.

    Raises:
        ConfigureError: If name is not a known toolchain.
    """
    cls = TOOLCHAINS.get(name)
    if cls is None:
        known = ", ".join(sorted(TOOLCHAINS))
        raise ConfigureError(f"unknown toolchain {name!r} (known: {known})")
    return cls(defines)  # type: ignore[call-arg]


__all__ = [
    "GccToolchain",
    "LlvmToolchain",
    "TOOLCHAINS",
    "find_toolchain",
]
