# SPDX-License-Identifier: MIT
"""Pull sources out of the nested LLVM tree into one flat directory.

Every pulled file is renamed to its root-relative path with separators
replaced by underscores (``llvm/lib/Support/Path.cpp`` becomes
``llvm_lib_Support_Path.cpp``) and its includes are rewritten to the same
naming. Anything a pulled file includes from the tree is pulled too.
"""

from __future__ import annotations

import fnmatch
import logging
import posixpath
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from flatbuild.core.errors import DuplicateFileError, MissingSourceError
from flatbuild.core.graph import (
    SOURCE_ENCODING,
    SOURCE_ERRORS,
    read_source_text,
    write_source_text,
)
from flatbuild.core.scanner import IncludeDirective, rewrite_includes
from flatbuild.tools.toolchain import is_translation_unit

if TYPE_CHECKING:
    from flatbuild.configure.config import BuildConfig, IncludeRule

logger = logging.getLogger(__name__)

SEPARATORS = ("/", "\\")


def flat_name(path: str) -> str:
    """Replace every path separator in path with '_'."""
    for sep in SEPARATORS:
        path = path.replace(sep, "_")
    return path


def write_if_changed(path: Path, content: str) -> bool:
    """Write content to path unless the file already holds exactly that.

    Leaving identical files alone keeps their mtimes, so regenerating an
    unchanged file never makes its dependents stale.

    Returns:
        True if the file was written.
    """
    try:
        if path.read_bytes() == content.encode(SOURCE_ENCODING, SOURCE_ERRORS):
            return False
    except FileNotFoundError:
        pass
    write_source_text(path, content)
    return True


@dataclass
class FlattenResult:
    """Outcome of a flattening pass.

    Attributes:
        pulled: Flat name -> origin path, for every file visited.
        written: Flat files whose content changed this run.
    """

    pulled: dict[str, Path] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)


class SourceFlattener:
    """Copies the relevant part of the source tree into the flat directory.

    Example:
        flattener = SourceFlattener(config)
        result = flattener.run()
    """

    def __init__(self, config: BuildConfig) -> None:
        self.config = config
        self.source_root = config.source_root
        self.flat_dir = config.flat_dir
        self.rules: list[IncludeRule] = list(config.include_rules)
        self.generated = set(config.generated_includes)

    def seeds(self) -> list[str]:
        """Root-relative paths to start from.

        Raises:
            MissingSourceError: If a seed directory holds no translation units.
        """
        seeds = list(self.config.flatten_files)
        for rel_dir in self.config.flatten_dirs:
            directory = self.source_root / rel_dir
            if not directory.is_dir():
                raise MissingSourceError("source directory not found", directory)
            units = sorted(
                p.name
                for p in directory.iterdir()
                if p.is_file() and is_translation_unit(p)
            )
            if not units:
                raise MissingSourceError("0 source files", directory)
            seeds.extend(f"{rel_dir}/{name}" for name in units)
        return seeds

    def keeps(self, include: str) -> bool:
        """True if include must be left exactly as written."""
        return any(fnmatch.fnmatchcase(include, p) for p in self.config.keep_includes)

    def resolve_include(
        self, directive: IncludeDirective, including: str
    ) -> str | None:
        """Root-relative path an include refers to, or None to leave it alone.

        Args:
            directive: The include as found in the file.
            including: Root-relative path of the including file.
        """
        include = directive.target
        for rule in self.rules:
            resolved = rule.apply(include)
            if resolved is not None:
                return resolved
        if directive.is_quoted and not self.keeps(include):
            return posixpath.normpath(
                posixpath.join(posixpath.dirname(including), include)
            )
        return None

    def flatten_text(self, text: str, including: str, found: list[str]) -> str:
        """Rewrite includes in text to flat names.

        Root-relative paths of includes that must be pulled are appended
        to found.
        """

        def replace(directive: IncludeDirective) -> str | None:
            resolved = self.resolve_include(directive, including)
            if resolved is None:
                return None
            if directive.target not in self.generated:
                found.append(resolved)
            return f'#include "{flat_name(resolved)}"'

        return rewrite_includes(text, replace)

    def run(self, seeds: Iterable[str] | None = None) -> FlattenResult:
        """Pull seeds and everything they include into the flat directory.

        Raises:
            MissingSourceError: If a seed or included file cannot be read.
            DuplicateFileError: If two origins flatten to the same name.
        """
        self.flat_dir.mkdir(parents=True, exist_ok=True)
        result = FlattenResult()
        queue = deque(self.seeds() if seeds is None else seeds)
        while queue:
            rel = queue.popleft()
            origin = self.source_root / rel
            name = flat_name(rel)
            previous = result.pulled.get(name)
            if previous is not None:
                if previous != origin:
                    raise DuplicateFileError(name, previous, origin)
                continue
            result.pulled[name] = origin

            found: list[str] = []
            text = self.flatten_text(read_source_text(origin), rel, found)
            target = self.flat_dir / name
            if write_if_changed(target, text):
                result.written.append(target)
            queue.extend(found)

        logger.info(
            "Flattened %d files into %s (%d changed)",
            len(result.pulled),
            self.flat_dir,
            len(result.written),
        )
        return result
