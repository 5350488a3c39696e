# SPDX-License-Identifier: MIT
"""Bounded-parallel process scheduling and compile staleness.

The scheduler itself is single-threaded. Concurrency comes only from the
subprocesses it launches: commands run in consecutive batches of at most
``jobs`` processes, every process of a batch is launched before any is
waited on, and the whole batch is joined before the next one starts.
Each command writes its own output file, so nothing needs locking.
"""

from __future__ import annotations

import logging
import multiprocessing
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from flatbuild.core.errors import CommandError, ConfigureError

if TYPE_CHECKING:
    from flatbuild.core.build_context import BuildContext

logger = logging.getLogger(__name__)


@dataclass
class Command:
    """One external command and the file it produces."""

    argv: list[str]
    output: Path | None = None

    def __str__(self) -> str:
        return shlex.join(self.argv)


class Process(Protocol):
    def wait(self) -> int: ...


class Launcher(Protocol):
    """The process-launching primitive.

    launch() must start the command without waiting for it.
    """

    def launch(self, command: Command) -> Process: ...


class SubprocessLauncher:
    """Launches commands as OS subprocesses sharing this process's stdio."""

    def launch(self, command: Command) -> Process:
        logger.info("%s", command)
        try:
            return subprocess.Popen(command.argv)
        except OSError as e:
            raise CommandError(command.argv, reason=e.strerror) from e


def core_count() -> int:
    """Number of cores available to the build.

    Raises:
        ConfigureError: If the host does not report a core count.
    """
    try:
        return multiprocessing.cpu_count()
    except NotImplementedError as e:
        raise ConfigureError("cannot determine the number of cores") from e


def run_batches(
    commands: Sequence[Command],
    jobs: int,
    launcher: Launcher,
) -> int:
    """Run commands in batches of at most jobs processes.

    A failing command does not stop the rest of its batch; the batch is
    always joined before the first failure is raised.

    Returns:
        The number of batches run.

    Raises:
        CommandError: If any command failed to launch or exited nonzero.
    """
    if jobs < 1:
        raise ConfigureError(f"job count must be positive, got {jobs}")

    batches = 0
    for start in range(0, len(commands), jobs):
        batch = commands[start : start + jobs]
        running: list[tuple[Command, Process]] = []
        launch_error: CommandError | None = None
        for command in batch:
            try:
                running.append((command, launcher.launch(command)))
            except CommandError as e:
                launch_error = e
                break

        failed: list[tuple[Command, int]] = []
        for command, process in running:
            returncode = process.wait()
            if returncode != 0:
                failed.append((command, returncode))
        batches += 1

        if launch_error is not None:
            raise launch_error
        if failed:
            command, returncode = failed[0]
            for other, code in failed[1:]:
                logger.error("also failed (status %d): %s", code, other)
            raise CommandError(command.argv, returncode)

    logger.debug("Ran %d commands in %d batches of <= %d", len(commands), batches, jobs)
    return batches


@dataclass
class CompileResult:
    """Outcome of compiling a set of translation units.

    Attributes:
        objects: Every object path, compiled this run or already fresh.
        compiled: Sources that were stale and got recompiled.
    """

    objects: list[Path] = field(default_factory=list)
    compiled: list[Path] = field(default_factory=list)

    @property
    def any_recompiled(self) -> bool:
        return bool(self.compiled)


def object_path(output_dir: Path, source: Path, suffix: str) -> Path:
    """Object file for source: same base name, object suffix, under output_dir."""
    return output_dir / (source.stem + suffix)


def mtime_ns(path: Path) -> int | None:
    """Modification time of path in nanoseconds, None if it does not exist."""
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


class BuildScheduler:
    """Decides which translation units are stale and compiles them."""

    def __init__(self, ctx: BuildContext) -> None:
        self.ctx = ctx

    def is_stale(self, source: Path, obj: Path) -> bool:
        """True if obj is missing or older than source's effective timestamp."""
        obj_time = mtime_ns(obj)
        if obj_time is None:
            logger.debug("%s: stale (no object)", source.name)
            return True
        effective = self.ctx.graph.effective_timestamp(source.name)
        if effective > obj_time:
            logger.debug("%s: stale (dependencies newer than object)", source.name)
            return True
        return False

    def compile_stale(
        self,
        output_dir: Path,
        sources: Sequence[Path],
    ) -> CompileResult:
        """Compile every stale source into output_dir.

        Returns:
            All object paths plus the list of sources that were compiled.

        Raises:
            CommandError: If any compile fails.
        """
        toolchain = self.ctx.toolchain
        result = CompileResult()
        commands: list[Command] = []
        for source in sources:
            obj = object_path(output_dir, source, toolchain.object_suffix)
            result.objects.append(obj)
            if self.is_stale(source, obj):
                result.compiled.append(source)
                commands.append(Command(toolchain.compile_command(source, obj), obj))

        if commands:
            output_dir.mkdir(parents=True, exist_ok=True)
            self.ctx.run(commands)
            self.ctx.compiled_count += len(commands)
        logger.debug(
            "%s: %d of %d units recompiled",
            output_dir.name,
            len(commands),
            len(result.objects),
        )
        return result
