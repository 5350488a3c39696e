# SPDX-License-Identifier: MIT
"""Tests for flatbuild.flatten."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import set_mtime

from flatbuild.configure.config import BuildConfig
from flatbuild.core.errors import DuplicateFileError, MissingSourceError
from flatbuild.core.graph import read_source_text
from flatbuild.flatten import SourceFlattener, flat_name, write_if_changed


@pytest.fixture
def tree(config: BuildConfig, write_file) -> Path:
    """A miniature llvm-project tree."""
    root = config.source_root
    write_file(
        root / "llvm/lib/Support/Path.cpp",
        '#include "llvm/Support/Path.h"\n'
        '#include "Local.h"\n'
        "#include <vector>\n"
        '#include "llvm/Config/config.h"\n'
        '#include "google/protobuf.h"\n'
        "int path;\n",
    )
    write_file(root / "llvm/lib/Support/Local.h", '#include "../Other/Up.h"\n')
    write_file(root / "llvm/lib/Other/Up.h", "")
    write_file(
        root / "llvm/include/llvm/Support/Path.h",
        '#include "llvm/ADT/Twine.h"\n',
    )
    write_file(root / "llvm/include/llvm/ADT/Twine.h", "")
    write_file(root / "llvm/lib/Support/notes.txt", "")
    write_file(root / "clang/tools/driver/driver.cpp", '#include "llvm/ADT/Twine.h"\n')
    config.flatten_files = ["clang/tools/driver/driver.cpp"]
    config.flatten_dirs = ["llvm/lib/Support"]
    return root


class TestFlatName:
    """Tests for flat_name."""

    def test_separators(self) -> None:
        assert flat_name("llvm/lib/Support/Path.cpp") == "llvm_lib_Support_Path.cpp"
        assert flat_name("a\\b/c.h") == "a_b_c.h"


class TestWriteIfChanged:
    """Tests for write_if_changed."""

    def test_new_file(self, tmp_path: Path) -> None:
        assert write_if_changed(tmp_path / "a.h", "x")
        assert (tmp_path / "a.h").read_text() == "x"

    def test_same_content_keeps_mtime(self, tmp_path: Path, write_file) -> None:
        path = write_file(tmp_path / "a.h", "x", mtime_ns=12345)
        assert not write_if_changed(path, "x")
        assert path.stat().st_mtime_ns == 12345

    def test_changed_content(self, tmp_path: Path, write_file) -> None:
        path = write_file(tmp_path / "a.h", "x", mtime_ns=12345)
        assert write_if_changed(path, "y")
        assert path.stat().st_mtime_ns != 12345

    def test_undecodable_bytes_unchanged(self, tmp_path: Path) -> None:
        path = tmp_path / "a.h"
        path.write_bytes(b"caf\xe9\r\n")
        set_mtime(path, 12345)
        assert not write_if_changed(path, read_source_text(path))
        assert path.stat().st_mtime_ns == 12345


class TestSourceFlattener:
    """Tests for SourceFlattener."""

    def test_seeds(self, tree: Path, config: BuildConfig) -> None:
        assert SourceFlattener(config).seeds() == [
            "clang/tools/driver/driver.cpp",
            "llvm/lib/Support/Path.cpp",
        ]

    def test_pulls_transitive_includes(self, tree: Path, config: BuildConfig) -> None:
        result = SourceFlattener(config).run()
        assert sorted(result.pulled) == [
            "clang_tools_driver_driver.cpp",
            "llvm_include_llvm_ADT_Twine.h",
            "llvm_include_llvm_Support_Path.h",
            "llvm_lib_Other_Up.h",
            "llvm_lib_Support_Local.h",
            "llvm_lib_Support_Path.cpp",
        ]
        assert sorted(p.name for p in config.flat_dir.iterdir()) == sorted(
            result.pulled
        )

    def test_rewrites_includes(self, tree: Path, config: BuildConfig) -> None:
        SourceFlattener(config).run()
        text = (config.flat_dir / "llvm_lib_Support_Path.cpp").read_text()
        assert text == (
            '#include "llvm_include_llvm_Support_Path.h"\n'
            '#include "llvm_lib_Support_Local.h"\n'
            "#include <vector>\n"
            '#include "llvm_include_llvm_Config_config.h"\n'
            '#include "google/protobuf.h"\n'
            "int path;\n"
        )
        local = (config.flat_dir / "llvm_lib_Support_Local.h").read_text()
        assert local == '#include "llvm_lib_Other_Up.h"\n'

    def test_generated_includes_not_pulled(
        self, tree: Path, config: BuildConfig
    ) -> None:
        result = SourceFlattener(config).run()
        assert "llvm_include_llvm_Config_config.h" not in result.pulled

    def test_copies_bytes_outside_includes(
        self, tree: Path, config: BuildConfig
    ) -> None:
        (tree / "llvm/lib/Other/Up.h").write_bytes(
            b'#include "Sub.h"\r\nconst char *s = "caf\xe9";\r\n'
        )
        (tree / "llvm/lib/Other/Sub.h").write_bytes(b"\xff\xfe")
        SourceFlattener(config).run()
        assert (config.flat_dir / "llvm_lib_Other_Up.h").read_bytes() == (
            b'#include "llvm_lib_Other_Sub.h"\r\nconst char *s = "caf\xe9";\r\n'
        )
        assert (config.flat_dir / "llvm_lib_Other_Sub.h").read_bytes() == b"\xff\xfe"

    def test_second_run_writes_nothing(self, tree: Path, config: BuildConfig) -> None:
        SourceFlattener(config).run()
        result = SourceFlattener(config).run()
        assert result.written == []

    def test_changed_origin_rewritten(
        self, tree: Path, config: BuildConfig, write_file
    ) -> None:
        SourceFlattener(config).run()
        write_file(tree / "llvm/lib/Other/Up.h", "int up;\n")
        result = SourceFlattener(config).run()
        assert result.written == [config.flat_dir / "llvm_lib_Other_Up.h"]

    def test_missing_include_origin(
        self, tree: Path, config: BuildConfig, write_file
    ) -> None:
        write_file(tree / "llvm/lib/Support/Bad.cpp", '#include "Gone.h"\n')
        with pytest.raises(MissingSourceError) as exc_info:
            SourceFlattener(config).run()
        assert exc_info.value.path == tree / "llvm/lib/Support/Gone.h"

    def test_missing_seed_dir(self, tree: Path, config: BuildConfig) -> None:
        config.flatten_dirs.append("llvm/lib/Nope")
        with pytest.raises(MissingSourceError, match="not found"):
            SourceFlattener(config).seeds()

    def test_empty_seed_dir(self, tree: Path, config: BuildConfig) -> None:
        (tree / "llvm/lib/Empty").mkdir()
        config.flatten_dirs.append("llvm/lib/Empty")
        with pytest.raises(MissingSourceError, match="0 source files"):
            SourceFlattener(config).seeds()

    def test_flat_name_clash(self, tree: Path, config: BuildConfig, write_file) -> None:
        # llvm/lib_a.h and llvm_lib/a.h flatten to the same name
        write_file(tree / "llvm/lib_a.h", "")
        write_file(tree / "llvm_lib/a.h", "")
        with pytest.raises(DuplicateFileError):
            SourceFlattener(config).run(seeds=["llvm/lib_a.h", "llvm_lib/a.h"])
