# SPDX-License-Identifier: MIT
"""GCC toolchain implementation.

Provides GCC-based C and C++ compilation:
- GCC C compiler (gcc)
- GCC C++ compiler (g++)
- GNU archiver (ar)
- Linker (using g++)
"""

from __future__ import annotations

from flatbuild.tools.toolchain import BaseToolchain


class GccToolchain(BaseToolchain):
    """GCC-based toolchain."""

    def __init__(self, defines=()) -> None:
        super().__init__("gcc", defines)

    def default_vars(self) -> dict[str, object]:
        return {
            "cc": "gcc",
            "cxx": "g++",
            "ar": "ar",
            "link": "g++",
            "flags": ["-g"],
            "cxxflags": ["-std=c++17"],
            "warnflags": ["-Werror", "-Wfatal-errors"],
            "dprefix": "-D",
            "arflags": ["rcs"],
            "syslibs": ["-lstdc++", "-lm"],
        }
