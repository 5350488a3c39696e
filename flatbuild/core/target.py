# SPDX-License-Identifier: MIT
"""Static library and executable targets.

Staleness flows forward through every level: a stale object makes its
library rebuild, and a rebuilt library (or a stale object of its own)
makes a dependent executable relink. Outputs that are up to date are
skipped with an informational message.

Layout under the build directory:
    <prefix>/<unit>.obj   object files, one folder per target prefix
    <prefix>.lib          static libraries
    <name>.exe            executables
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from flatbuild.core.errors import MissingSourceError
from flatbuild.core.scheduler import BuildScheduler, Command, CompileResult

if TYPE_CHECKING:
    from flatbuild.core.build_context import BuildContext

logger = logging.getLogger(__name__)


@dataclass
class LibraryTarget:
    """A static library built from every unit whose name starts with prefix.

    Attributes:
        prefix: File name prefix selecting the member units.
        output: Path of the archive.
        objects: Member object files.
        rebuilt: True if a member recompiled or the archive was missing.
    """

    prefix: str
    output: Path
    objects: list[Path] = field(default_factory=list)
    rebuilt: bool = False


@dataclass
class ExeTarget:
    """An executable linked from its own units plus upstream libraries.

    Attributes:
        prefix: File name prefix selecting the executable's own units.
        output: Path of the executable.
        dependencies: Libraries linked in, in link order.
        objects: The executable's own object files.
        rebuilt: True if relinked this run.
    """

    prefix: str
    output: Path
    dependencies: list[LibraryTarget] = field(default_factory=list)
    objects: list[Path] = field(default_factory=list)
    rebuilt: bool = False


def remove_if_exists(path: Path) -> None:
    path.unlink(missing_ok=True)


def _compile_prefix(ctx: BuildContext, prefix: str) -> CompileResult:
    sources = ctx.sources_with_prefix(prefix)
    if not sources:
        raise MissingSourceError(
            f"no translation units start with {prefix!r}", ctx.config.flat_dir
        )
    scheduler = BuildScheduler(ctx)
    return scheduler.compile_stale(ctx.build_dir / prefix, sources)


def build_library(ctx: BuildContext, prefix: str) -> LibraryTarget:
    """Compile a library's stale members and re-archive if needed.

    Raises:
        MissingSourceError: If no unit starts with prefix.
        CommandError: If a compile or the archiver fails.
    """
    toolchain = ctx.toolchain
    output = ctx.build_dir / f"{prefix}{toolchain.archive_suffix}"
    target = LibraryTarget(prefix, output)
    result = _compile_prefix(ctx, prefix)
    target.objects = result.objects

    if result.any_recompiled or not target.output.is_file():
        # ar appends to an existing archive, so start from scratch
        remove_if_exists(target.output)
        command = toolchain.archive_command(output, target.objects)
        ctx.run([Command(command, output)])
        target.rebuilt = True
    else:
        logger.info("cache hit: %s", target.output.name)
    return target


def build_executable(
    ctx: BuildContext,
    prefix: str,
    dependencies: Sequence[LibraryTarget],
    name: str | None = None,
) -> ExeTarget:
    """Compile an executable's own units and relink if anything changed.

    Args:
        ctx: Build context.
        prefix: File name prefix selecting the executable's units.
        dependencies: Libraries to link, in link order.
        name: Output base name (default: prefix).

    Raises:
        MissingSourceError: If no unit starts with prefix.
        CommandError: If a compile or the link fails.
    """
    toolchain = ctx.toolchain
    output = ctx.build_dir / f"{name or prefix}{toolchain.exe_suffix}"
    target = ExeTarget(prefix, output, list(dependencies))
    result = _compile_prefix(ctx, prefix)
    target.objects = result.objects

    dependency_rebuilt = any(dep.rebuilt for dep in dependencies)
    if dependency_rebuilt or result.any_recompiled or not output.is_file():
        remove_if_exists(output)
        libraries = [dep.output for dep in dependencies]
        command = toolchain.link_command(output, target.objects, libraries)
        ctx.run([Command(command, output)])
        target.rebuilt = True
    else:
        logger.info("cache hit: %s", output.name)
    return target
