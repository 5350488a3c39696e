# SPDX-License-Identifier: MIT
"""Per-run build state.

A BuildContext is created once by the orchestrator and handed to every
stage. It replaces process-wide globals: the dependency graph, the list
of tracked sources, the toolchain, the job limit and the launcher all
live here and are discarded when the run ends.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from flatbuild.configure.config import BuildConfig
from flatbuild.core.graph import DependencyGraph
from flatbuild.core.scheduler import (
    Command,
    Launcher,
    SubprocessLauncher,
    core_count,
    run_batches,
)
from flatbuild.tools.toolchain import BaseToolchain, is_translation_unit

logger = logging.getLogger(__name__)


@dataclass
class BuildContext:
    """Everything one build run shares between stages.

    Attributes:
        config: The build configuration.
        toolchain: Produces compile/archive/link commands.
        graph: Dependency graph of the flat directory.
        jobs: Maximum number of concurrent subprocesses.
        launcher: Starts external commands.
        compiled_count: Translation units compiled so far this run.
        batch_count: Batches run so far this run.
    """

    config: BuildConfig
    toolchain: BaseToolchain
    graph: DependencyGraph = field(default_factory=DependencyGraph)
    jobs: int = 0
    launcher: Launcher = field(default_factory=SubprocessLauncher)
    compiled_count: int = 0
    batch_count: int = 0

    def __post_init__(self) -> None:
        if self.jobs <= 0:
            self.jobs = self.config.jobs or core_count()

    @property
    def build_dir(self) -> Path:
        return self.config.build_dir

    def scan(self) -> DependencyGraph:
        """Rebuild and resolve the dependency graph from the flat directory.

        Each call produces a new graph; a resolved graph is never updated.
        """
        graph = DependencyGraph.from_directory(self.config.flat_dir)
        graph.resolve_all()
        self.graph = graph
        logger.info("Tracking %d files in %s", len(graph), self.config.flat_dir)
        return graph

    def sources(self) -> list[Path]:
        """Tracked translation units, sorted by name."""
        return sorted(
            (r.path for r in self.graph if is_translation_unit(r.path)),
            key=lambda p: p.name,
        )

    def sources_with_prefix(self, prefix: str) -> list[Path]:
        """Tracked translation units whose file name starts with prefix."""
        return [p for p in self.sources() if p.name.startswith(prefix)]

    def run(self, commands: Sequence[Command]) -> None:
        """Run commands through the shared batch scheduler."""
        self.batch_count += run_batches(commands, self.jobs, self.launcher)
