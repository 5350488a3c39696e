# SPDX-License-Identifier: MIT
"""Top-level build sequence.

The Orchestrator runs the whole build in dependency order:

    flatten -> generated headers -> scan -> generator libraries
    -> generator executables -> codegen -> (rescan) -> libraries
    -> final executable

Every stage shares one BuildContext. Any FlatbuildError aborts the run.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from flatbuild.codegen.config_headers import write_generated_headers, write_target_def
from flatbuild.codegen.runner import CodegenRunner
from flatbuild.configure.config import BuildConfig
from flatbuild.core.build_context import BuildContext
from flatbuild.core.errors import ConfigureError
from flatbuild.core.scheduler import Launcher, SubprocessLauncher
from flatbuild.core.target import (
    ExeTarget,
    LibraryTarget,
    build_executable,
    build_library,
)
from flatbuild.flatten import SourceFlattener
from flatbuild.toolchains import find_toolchain
from flatbuild.tools.toolchain import BaseToolchain

logger = logging.getLogger(__name__)


@dataclass
class BuildSummary:
    """What a build run did.

    Attributes:
        rebuilt: Target name -> whether it was rebuilt this run.
        compiled: Number of translation units compiled.
        generated: Number of files the code generator produced.
        batches: Number of process batches run.
        elapsed_ms: Wall-clock time of the run.
    """

    rebuilt: dict[str, bool] = field(default_factory=dict)
    compiled: int = 0
    generated: int = 0
    batches: int = 0
    elapsed_ms: float = 0.0

    @property
    def up_to_date(self) -> bool:
        return not any(self.rebuilt.values()) and self.generated == 0


class Orchestrator:
    """Drives one complete build.

    Example:
        config = load_config(Path.cwd())
        summary = Orchestrator(config).run()
    """

    def __init__(
        self,
        config: BuildConfig,
        toolchain: BaseToolchain | None = None,
        launcher: Launcher | None = None,
        jobs: int | None = None,
    ) -> None:
        self.config = config
        self.toolchain = toolchain or find_toolchain(config.toolchain, config.defines)
        self.launcher: Launcher = launcher or SubprocessLauncher()
        self.ctx = BuildContext(
            config,
            self.toolchain,
            jobs=jobs or 0,
            launcher=self.launcher,
        )
        self.libraries: dict[str, LibraryTarget] = {}
        self.executables: dict[str, ExeTarget] = {}

    def flatten(self) -> None:
        """Pull sources into the flat directory, if the source tree exists."""
        if not self.config.flatten:
            logger.info("Flattening disabled; using %s as-is", self.config.flat_dir)
            return
        if not self.config.source_root.is_dir():
            logger.info(
                "No source tree at %s; using %s as-is",
                self.config.source_root,
                self.config.flat_dir,
            )
            return
        SourceFlattener(self.config).run()

    def write_config_headers(self) -> None:
        """Write the fixed headers and render the target definition files."""
        config = self.config
        write_generated_headers(config.flat_dir, config.generated_headers)
        if not config.source_root.is_dir():
            return
        for template, output in config.target_defs:
            write_target_def(
                config.source_root / template,
                config.flat_dir / output,
                config.target,
            )

    def library(self, prefix: str) -> LibraryTarget:
        target = build_library(self.ctx, prefix)
        self.libraries[prefix] = target
        return target

    def link_libraries(self, prefixes: list[str]) -> list[LibraryTarget]:
        """Built libraries for prefixes, in the given order.

        Raises:
            ConfigureError: If a prefix was never built.
        """
        missing = [p for p in prefixes if p not in self.libraries]
        if missing:
            raise ConfigureError(f"link order names unbuilt libraries: {missing}")
        return [self.libraries[p] for p in prefixes]

    def executable(
        self, prefix: str, libraries: list[str], name: str | None = None
    ) -> ExeTarget:
        target = build_executable(
            self.ctx, prefix, self.link_libraries(libraries), name=name
        )
        self.executables[name or prefix] = target
        return target

    def build_generators(self) -> dict[str, Path]:
        """Build the generator libraries and executables.

        Returns:
            Generator key -> executable path.
        """
        config = self.config
        for prefix in config.generator_libraries:
            self.library(prefix)
        generators = {}
        for key, prefix in config.generators.items():
            exe = self.executable(prefix, config.generator_libraries)
            generators[key] = exe.output
        return generators

    def run_codegen(self, generators: dict[str, Path]) -> int:
        """Run the code generator jobs, rescanning if anything was produced."""
        generated = CodegenRunner(self.ctx, generators).run(self.config.codegen_jobs)
        if generated:
            self.ctx.scan()
        return len(generated)

    def run(self) -> BuildSummary:
        """Run the full build.

        Raises:
            FlatbuildError: If any stage fails.
        """
        start = time.perf_counter()
        config = self.config
        if isinstance(self.launcher, SubprocessLauncher):
            self.toolchain.configure()

        config.build_dir.mkdir(parents=True, exist_ok=True)
        config.flat_dir.mkdir(parents=True, exist_ok=True)

        self.flatten()
        self.write_config_headers()
        self.ctx.scan()

        generators = self.build_generators()
        generated = self.run_codegen(generators)

        for prefix in config.libraries:
            if prefix not in self.libraries:
                self.library(prefix)
        self.executable(
            config.executable_prefix,
            config.executable_libraries,
            name=config.executable_name,
        )

        summary = BuildSummary(
            rebuilt={
                **{t.output.name: t.rebuilt for t in self.libraries.values()},
                **{t.output.name: t.rebuilt for t in self.executables.values()},
            },
            compiled=self.ctx.compiled_count,
            generated=generated,
            batches=self.ctx.batch_count,
            elapsed_ms=(time.perf_counter() - start) * 1000,
        )
        logger.info("total: %.2fms", summary.elapsed_ms)
        return summary
