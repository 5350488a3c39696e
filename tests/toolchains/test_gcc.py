# SPDX-License-Identifier: MIT
"""Tests for flatbuild.toolchains.gcc."""

from pathlib import Path

from flatbuild.toolchains import find_toolchain
from flatbuild.toolchains.gcc import GccToolchain


class TestGccToolchain:
    def test_creation(self):
        tc = GccToolchain()
        assert tc.name == "gcc"
        assert tc.tool_commands() == ["ar", "g++", "gcc"]

    def test_compile_c_uses_gcc(self):
        cmd = GccToolchain().compile_command(Path("a.c"), Path("a.obj"))
        assert cmd[0] == "gcc"

    def test_compile_cxx_uses_gxx(self):
        cmd = GccToolchain(["N"]).compile_command(Path("a.cpp"), Path("a.obj"))
        assert cmd[0] == "g++"
        assert "-DN" in cmd
        assert "-std=c++17" in cmd

    def test_link_uses_gxx(self):
        cmd = GccToolchain().link_command(Path("a.exe"), [Path("a.obj")], [])
        assert cmd[:3] == ["g++", "-o", "a.exe"]

    def test_found_by_name(self):
        assert isinstance(find_toolchain("gcc"), GccToolchain)
