# SPDX-License-Identifier: MIT
"""Shared fixtures: a recording launcher that stands in for real tools."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from flatbuild.configure.config import BuildConfig
from flatbuild.core.build_context import BuildContext
from flatbuild.core.errors import CommandError
from flatbuild.core.scheduler import Command
from flatbuild.toolchains.llvm import LlvmToolchain

# A fixed point in the past for source mtimes (nanoseconds)
OLD_NS = 1_000_000_000 * 1_000_000_000


class FakeProcess:
    def __init__(self, launcher: FakeLauncher, returncode: int) -> None:
        self.launcher = launcher
        self.returncode = returncode

    def wait(self) -> int:
        self.launcher.in_flight -= 1
        return self.returncode


class FakeLauncher:
    """Records commands and creates their output files instead of running them.

    Attributes:
        launched: Every command launched, in order.
        fail: Output file names whose command exits with status 1.
        unlaunchable: Output file names whose command cannot be started.
        contents: Output file name -> text written on success.
        max_in_flight: Highest number of processes running at once.
    """

    def __init__(
        self,
        fail: Iterable[str] = (),
        unlaunchable: Iterable[str] = (),
        contents: dict[str, str] | None = None,
    ) -> None:
        self.launched: list[Command] = []
        self.fail = set(fail)
        self.unlaunchable = set(unlaunchable)
        self.contents = contents or {}
        self.in_flight = 0
        self.max_in_flight = 0

    def launch(self, command: Command) -> FakeProcess:
        name = command.output.name if command.output else ""
        if name in self.unlaunchable:
            raise CommandError(command.argv, reason="No such file or directory")
        self.launched.append(command)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        if name in self.fail:
            return FakeProcess(self, 1)
        if command.output is not None:
            command.output.write_text(self.contents.get(name, ""))
        return FakeProcess(self, 0)

    def outputs(self) -> list[str]:
        """Names of the files launched commands produce."""
        return [c.output.name for c in self.launched if c.output is not None]

    def reset(self) -> None:
        self.launched.clear()


def set_mtime(path: Path, ns: int) -> None:
    os.utime(path, ns=(ns, ns))


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def write_file() -> Callable[..., Path]:
    """Write a file and pin its mtime (default: long ago)."""

    def _write(path: Path, text: str = "", mtime_ns: int = OLD_NS) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        set_mtime(path, mtime_ns)
        return path

    return _write


@pytest.fixture
def config(tmp_path: Path) -> BuildConfig:
    """A small configuration rooted in tmp_path with no flattening."""
    return BuildConfig(
        root=tmp_path,
        jobs=2,
        flatten=False,
        defines=["NDEBUG"],
        generated_headers={},
        target_defs=[],
        generator_libraries=[],
        generators={},
        codegen_jobs=[],
        libraries=[],
        executable_libraries=[],
    )


@pytest.fixture
def make_ctx(config: BuildConfig, launcher: FakeLauncher) -> Callable[[], BuildContext]:
    """Build a scanned BuildContext over config.flat_dir."""

    def _make() -> BuildContext:
        ctx = BuildContext(config, LlvmToolchain(config.defines), launcher=launcher)
        ctx.scan()
        return ctx

    return _make
