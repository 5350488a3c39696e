# SPDX-License-Identifier: MIT
"""Tests for flatbuild.configure.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from flatbuild.configure import llvm
from flatbuild.configure.config import (
    BuildConfig,
    CodegenJobSpec,
    IncludeRule,
    load_config,
)
from flatbuild.core.errors import ConfigureError


class TestDefaults:
    """Tests for the built-in LLVM layout."""

    def test_derived_paths(self, tmp_path: Path) -> None:
        config = BuildConfig(root=tmp_path)
        assert config.source_root == tmp_path / "llvm-project"
        assert config.flat_dir == tmp_path / "clang_src"
        assert config.build_dir == tmp_path / "build"

    def test_build_dir_override(self, tmp_path: Path) -> None:
        config = BuildConfig(root=tmp_path, build_dir_override=tmp_path / "out")
        assert config.build_dir == tmp_path / "out"

    def test_codegen_jobs_name_known_generators(self) -> None:
        config = BuildConfig()
        assert set(config.generators) == set(config.codegen_namespaces)
        assert all(job.generator in config.generators for job in config.codegen_jobs)

    def test_link_order_only_names_known_libraries(self) -> None:
        config = BuildConfig()
        known = set(config.libraries) | set(config.generator_libraries)
        assert set(config.executable_libraries) <= known

    def test_defaults_are_copies(self) -> None:
        config = BuildConfig()
        config.libraries.append("extra")
        assert "extra" not in llvm.LIBRARIES

    def test_target_defs_are_generated_includes(self) -> None:
        config = BuildConfig()
        flat_generated = {i.replace("/", "_") for i in config.generated_includes}
        for _, output in config.target_defs:
            assert output.removeprefix("llvm_include_") in flat_generated


class TestIncludeRule:
    """Tests for IncludeRule.apply."""

    def test_prefix(self) -> None:
        rule = IncludeRule("prefix", "llvm", "llvm/include")
        assert rule.apply("llvm/ADT/STLExtras.h") == "llvm/include/llvm/ADT/STLExtras.h"
        assert rule.apply("clang/Basic/LLVM.h") is None

    def test_exact(self) -> None:
        rule = IncludeRule("exact", "Targets.h", "clang/lib/Basic/Targets.h")
        assert rule.apply("Targets.h") == "clang/lib/Basic/Targets.h"
        assert rule.apply("X/Targets.h") is None

    def test_suffix(self) -> None:
        rule = IncludeRule("suffix", "X86TargetInfo.h", "llvm/lib/X86TargetInfo.h")
        assert rule.apply("TargetInfo/X86TargetInfo.h") == "llvm/lib/X86TargetInfo.h"

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConfigureError):
            IncludeRule("regex", "x", "y")


class TestCodegenJobSpec:
    """Tests for CodegenJobSpec."""

    def test_from_row(self) -> None:
        job = CodegenJobSpec.from_row(
            (
                "llvm",
                "llvm/include/llvm/IR/Attributes.td",
                "llvm_include_llvm_IR_Attributes.inc",
                "llvm/include llvm/lib/Target",
                "-gen-attrs --write-if-changed",
            )
        )
        assert job.generator == "llvm"
        assert job.includes == ["llvm/include", "llvm/lib/Target"]
        assert job.args == ["-gen-attrs", "--write-if-changed"]


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.toolchain == "llvm"
        assert config.jobs is None

    def test_reads_flatbuild_toml(self, tmp_path: Path) -> None:
        (tmp_path / "flatbuild.toml").write_text(
            'toolchain = "gcc"\n'
            "jobs = 8\n"
            'libraries = ["llvm_lib_Support"]\n'
            "\n"
            "[[codegen]]\n"
            'generator = "llvm"\n'
            'input = "llvm/x.td"\n'
            'output = "llvm_x.inc"\n'
            'includes = ["llvm/include"]\n'
            'args = ["-gen-x"]\n'
        )
        config = load_config(tmp_path)
        assert config.toolchain == "gcc"
        assert config.jobs == 8
        assert config.libraries == ["llvm_lib_Support"]
        extra = config.codegen_jobs[-1]
        assert extra.output == "llvm_x.inc"
        assert extra.args == ["-gen-x"]
        assert len(config.codegen_jobs) == len(llvm.CODEGEN_JOBS) + 1

    def test_include_rules_replace(self, tmp_path: Path) -> None:
        (tmp_path / "flatbuild.toml").write_text(
            "[[include_rules]]\n"
            'kind = "prefix"\n'
            'match = "foo"\n'
            'value = "foo/include"\n'
        )
        config = load_config(tmp_path)
        assert config.include_rules == [IncludeRule("prefix", "foo", "foo/include")]

    def test_explicit_file(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('build_dir_override = "/tmp/out"\nflatten = false\n')
        config = load_config(tmp_path, config_file=path)
        assert config.build_dir == Path("/tmp/out")
        assert config.flatten is False

    def test_explicit_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigureError, match="config file not found"):
            load_config(tmp_path, config_file=tmp_path / "nope.toml")

    def test_unknown_key(self, tmp_path: Path) -> None:
        (tmp_path / "flatbuild.toml").write_text("colour = 1\n")
        with pytest.raises(ConfigureError, match="unknown configuration key"):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "flatbuild.toml").write_text("jobs = = 2\n")
        with pytest.raises(ConfigureError, match="invalid TOML"):
            load_config(tmp_path)

    def test_malformed_codegen(self, tmp_path: Path) -> None:
        (tmp_path / "flatbuild.toml").write_text('[[codegen]]\ngenerator = "llvm"\n')
        with pytest.raises(ConfigureError, match="malformed codegen job"):
            load_config(tmp_path)
