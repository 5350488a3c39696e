# SPDX-License-Identifier: MIT
"""Tests for flatbuild.core.build_context."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from flatbuild.core.build_context import BuildContext
from flatbuild.core.errors import DuplicateFileError, MissingSourceError
from flatbuild.core.scheduler import Command
from flatbuild.toolchains.gcc import GccToolchain


class TestBuildContext:
    """Tests for BuildContext."""

    def test_jobs_from_config(self, config) -> None:
        config.jobs = 3
        ctx = BuildContext(config, GccToolchain())
        assert ctx.jobs == 3

    def test_jobs_default_to_cores(self, config) -> None:
        config.jobs = None
        with patch("flatbuild.core.build_context.core_count", return_value=12):
            ctx = BuildContext(config, GccToolchain())
        assert ctx.jobs == 12

    def test_explicit_jobs_win(self, config) -> None:
        config.jobs = 3
        assert BuildContext(config, GccToolchain(), jobs=7).jobs == 7

    def test_scan_replaces_graph(self, config, make_ctx, write_file) -> None:
        write_file(config.flat_dir / "a.h")
        ctx = make_ctx()
        first = ctx.graph
        write_file(config.flat_dir / "b.cpp", '#include "a.h"\n')
        second = ctx.scan()
        assert second is not first
        assert "b.cpp" in second
        assert "b.cpp" not in first

    def test_scan_missing_flat_dir(self, config) -> None:
        ctx = BuildContext(config, GccToolchain())
        with pytest.raises(MissingSourceError):
            ctx.scan()

    def test_sources_are_translation_units(self, config, make_ctx, write_file) -> None:
        for name in ("z.cpp", "a.c", "m.h", "gen.inc", "b.def", "k.cpp"):
            write_file(config.flat_dir / name)
        ctx = make_ctx()
        assert [p.name for p in ctx.sources()] == ["a.c", "k.cpp", "z.cpp"]

    def test_sources_with_prefix(self, config, make_ctx, write_file) -> None:
        names = (
            "llvm_lib_Target_X.cpp",
            "llvm_lib_TargetParser_Y.cpp",
            "llvm_lib_MC_Z.cpp",
        )
        for name in names:
            write_file(config.flat_dir / name)
        ctx = make_ctx()
        # Plain prefix match: Target also selects TargetParser units
        assert [p.name for p in ctx.sources_with_prefix("llvm_lib_Target")] == [
            "llvm_lib_TargetParser_Y.cpp",
            "llvm_lib_Target_X.cpp",
        ]

    def test_graph_rejects_duplicate_base_names(
        self, config, make_ctx, write_file
    ) -> None:
        write_file(config.flat_dir / "a.h")
        ctx = make_ctx()
        with pytest.raises(DuplicateFileError):
            ctx.graph.add_file(config.root / "elsewhere" / "a.h", 0)

    def test_run_counts_batches(self, config, make_ctx, write_file, launcher) -> None:
        write_file(config.flat_dir / "a.cpp")
        ctx = make_ctx()
        ctx.run([Command(["x"], config.root / f"o{i}") for i in range(5)])
        assert ctx.batch_count == 3
        assert len(launcher.launched) == 5
