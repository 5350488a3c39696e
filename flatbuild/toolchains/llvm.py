# SPDX-License-Identifier: MIT
"""LLVM toolchain implementation.

Clang compiles both languages and drives the link; GNU-compatible ar
creates the archives.
"""

from __future__ import annotations

from flatbuild.tools.toolchain import BaseToolchain


class LlvmToolchain(BaseToolchain):
    """Clang-based toolchain (the default)."""

    def __init__(self, defines=()) -> None:
        super().__init__("llvm", defines)

    def default_vars(self) -> dict[str, object]:
        return {
            "cc": "clang",
            "cxx": "clang",
            "ar": "ar",
            "link": "clang",
            "flags": ["-g"],
            "cxxflags": ["-std=c++17"],
            "warnflags": ["-Werror", "-Wfatal-errors"],
            "dprefix": "-D",
            "arflags": ["rcs"],
            "syslibs": ["-lstdc++", "-lm"],
        }
