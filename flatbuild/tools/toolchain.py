# SPDX-License-Identifier: MIT
"""Toolchain protocol and base implementation.

A Toolchain turns the build's three subprocess contracts (compile one
translation unit, archive objects, link an executable) into argv lists.
Switching toolchains switches all three atomically.
"""

from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from flatbuild.core.errors import ToolNotFoundError

# Source suffix -> language
SOURCE_SUFFIX_MAP: dict[str, str] = {
    ".c": "c",
    ".cpp": "cxx",
}


def is_translation_unit(path: Path | str) -> bool:
    """True if path names a compilable C or C++ source."""
    return Path(path).suffix in SOURCE_SUFFIX_MAP


@runtime_checkable
class Toolchain(Protocol):
    """Protocol for toolchains."""

    @property
    def name(self) -> str:
        """Toolchain name (e.g., 'llvm', 'gcc')."""
        ...

    @property
    def object_suffix(self) -> str: ...

    @property
    def archive_suffix(self) -> str: ...

    @property
    def exe_suffix(self) -> str: ...

    def configure(self) -> None:
        """Check that every tool is available."""
        ...

    def compile_command(self, source: Path, output: Path) -> list[str]: ...

    def archive_command(self, output: Path, objects: Sequence[Path]) -> list[str]: ...

    def link_command(
        self, output: Path, objects: Sequence[Path], libraries: Sequence[Path]
    ) -> list[str]: ...


class BaseToolchain(ABC):
    """Abstract base class for toolchains.

    Subclasses provide default_vars(); the command shapes are shared.

    Variables:
        cc: C compiler command
        cxx: C++ compiler command
        ar: Archiver command
        link: Linker driver command
        flags: Flags passed to every compile (list)
        cxxflags: Extra flags for C++ units only (list)
        warnflags: Warning flags (list)
        dprefix: Define prefix (default: '-D')
        arflags: Archiver flags (list)
        syslibs: Runtime libraries appended to every link (list)
    """

    object_suffix = ".obj"
    archive_suffix = ".lib"
    exe_suffix = ".exe"

    def __init__(self, name: str, defines: Sequence[str] = ()) -> None:
        self._name = name
        self.defines: list[str] = list(defines)
        self.vars: dict[str, object] = self.default_vars()
        self._configured = False

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def default_vars(self) -> dict[str, object]:
        """Return the default command variables."""
        ...

    def _str(self, key: str) -> str:
        return str(self.vars[key])

    def _list(self, key: str) -> list[str]:
        value = self.vars.get(key, [])
        if isinstance(value, str):
            return value.split()
        return [str(v) for v in value]  # type: ignore[union-attr]

    def tool_commands(self) -> list[str]:
        """Executables this toolchain launches."""
        return sorted({self._str(key) for key in ("cc", "cxx", "ar", "link")})

    def configure(self) -> None:
        """Verify every tool can be found on PATH.

        Raises:
            ToolNotFoundError: For the first missing tool.
        """
        if self._configured:
            return
        for tool in self.tool_commands():
            if shutil.which(tool) is None:
                raise ToolNotFoundError(tool)
        self._configured = True

    def compile_command(self, source: Path, output: Path) -> list[str]:
        """Command compiling one translation unit to an object file."""
        language = SOURCE_SUFFIX_MAP.get(source.suffix)
        if language is None:
            raise ValueError(f"not a translation unit: {source}")
        compiler = self._str("cxx") if language == "cxx" else self._str("cc")
        cmd = [compiler, *self._list("flags")]
        dprefix = self._str("dprefix")
        cmd.extend(f"{dprefix}{d}" for d in self.defines)
        if language == "cxx":
            cmd.extend(self._list("cxxflags"))
        cmd.extend(self._list("warnflags"))
        cmd.extend(["-c", str(source), "-o", str(output)])
        return cmd

    def archive_command(self, output: Path, objects: Sequence[Path]) -> list[str]:
        """Command creating a static library from objects."""
        return [
            self._str("ar"),
            *self._list("arflags"),
            str(output),
            *(str(o) for o in objects),
        ]

    def link_command(
        self,
        output: Path,
        objects: Sequence[Path],
        libraries: Sequence[Path],
    ) -> list[str]:
        """Command linking objects and static libraries into an executable."""
        return [
            self._str("link"),
            "-o",
            str(output),
            *(str(o) for o in objects),
            *(str(lib) for lib in libraries),
            *self._list("syslibs"),
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
