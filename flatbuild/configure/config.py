# SPDX-License-Identifier: MIT
"""Build configuration for flatbuild.

BuildConfig holds everything the orchestrator needs. Defaults are the
compiled-in LLVM/Clang layout from flatbuild.configure.llvm; an optional
flatbuild.toml in the project root overrides them.

Example flatbuild.toml:

    toolchain = "gcc"
    jobs = 8
    libraries = ["llvm_lib_Support"]

    [[codegen]]
    generator = "llvm"
    input = "llvm/include/llvm/IR/Attributes.td"
    output = "llvm_include_llvm_IR_Attributes.inc"
    includes = ["llvm/include"]
    args = ["-gen-attrs"]
"""

from __future__ import annotations

import dataclasses
import shlex
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from flatbuild.configure import llvm
from flatbuild.core.errors import ConfigureError

CONFIG_FILE = "flatbuild.toml"

RULE_KINDS = ("prefix", "exact", "suffix")


@dataclass(frozen=True)
class IncludeRule:
    """Maps an include name to a path relative to the source root.

    Attributes:
        kind: 'prefix' joins value before the include name; 'exact' and
            'suffix' replace the include name with value.
        match: String compared against the include name.
        value: Root-relative directory (prefix) or path (exact, suffix).
    """

    kind: str
    match: str
    value: str

    def __post_init__(self) -> None:
        if self.kind not in RULE_KINDS:
            raise ConfigureError(f"unknown include rule kind: {self.kind!r}")

    def apply(self, include: str) -> str | None:
        """Root-relative path for include, or None if the rule does not match."""
        if self.kind == "prefix":
            if include.startswith(self.match):
                return f"{self.value}/{include}"
        elif self.kind == "exact":
            if include == self.match:
                return self.value
        elif include.endswith(self.match):
            return self.value
        return None


@dataclass
class CodegenJobSpec:
    """Declarative description of one generator run.

    Attributes:
        generator: Key into BuildConfig.generators.
        input: Schema file, relative to the source root.
        output: Flat output name inside the flat directory.
        includes: Include directories, relative to the source root.
        args: Generator arguments.
    """

    generator: str
    input: str
    output: str
    includes: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: tuple[str, str, str, str, str]) -> CodegenJobSpec:
        """Build from the (generator, input, output, includes, args) form."""
        generator, input_, output, includes, args = row
        return cls(generator, input_, output, includes.split(), shlex.split(args))


def _default_jobs() -> list[CodegenJobSpec]:
    return [CodegenJobSpec.from_row(row) for row in llvm.CODEGEN_JOBS]


def _default_rules() -> list[IncludeRule]:
    return [IncludeRule(*rule) for rule in llvm.INCLUDE_RULES]


@dataclass
class BuildConfig:
    """Complete configuration of one build.

    Attributes:
        root: Project root; the other directories are derived from it.
        build_dir_override: Explicit build directory, if not root/build.
        toolchain: Toolchain name ('llvm' or 'gcc').
        jobs: Parallel process limit; None means the host's core count.
        flatten: Whether to pull sources out of the nested tree first.
    """

    root: Path = field(default_factory=Path.cwd)
    source_dir_name: str = "llvm-project"
    flat_dir_name: str = "clang_src"
    build_dir_name: str = "build"
    build_dir_override: Path | None = None
    toolchain: str = "llvm"
    jobs: int | None = None
    flatten: bool = True
    defines: list[str] = field(default_factory=lambda: list(llvm.DEFINES))
    flatten_files: list[str] = field(default_factory=lambda: list(llvm.FLATTEN_FILES))
    flatten_dirs: list[str] = field(default_factory=lambda: list(llvm.FLATTEN_DIRS))
    include_rules: list[IncludeRule] = field(default_factory=_default_rules)
    keep_includes: list[str] = field(default_factory=lambda: list(llvm.KEEP_INCLUDES))
    generated_includes: list[str] = field(
        default_factory=lambda: list(llvm.GENERATED_INCLUDES)
    )
    generated_headers: dict[str, str] = field(
        default_factory=lambda: dict(llvm.GENERATED_HEADERS)
    )
    target: str = llvm.TARGET
    target_defs: list[tuple[str, str]] = field(
        default_factory=lambda: list(llvm.TARGET_DEFS)
    )
    codegen_namespaces: dict[str, str] = field(
        default_factory=lambda: dict(llvm.CODEGEN_NAMESPACES)
    )
    generator_libraries: list[str] = field(
        default_factory=lambda: list(llvm.GENERATOR_LIBRARIES)
    )
    generators: dict[str, str] = field(default_factory=lambda: dict(llvm.GENERATORS))
    codegen_jobs: list[CodegenJobSpec] = field(default_factory=_default_jobs)
    libraries: list[str] = field(default_factory=lambda: list(llvm.LIBRARIES))
    executable_name: str = llvm.EXECUTABLE_NAME
    executable_prefix: str = llvm.EXECUTABLE_PREFIX
    executable_libraries: list[str] = field(
        default_factory=lambda: list(llvm.EXECUTABLE_LIBRARIES)
    )

    @property
    def source_root(self) -> Path:
        return self.root / self.source_dir_name

    @property
    def flat_dir(self) -> Path:
        return self.root / self.flat_dir_name

    @property
    def build_dir(self) -> Path:
        if self.build_dir_override is not None:
            return self.build_dir_override
        return self.root / self.build_dir_name

    def update(self, values: dict[str, Any]) -> None:
        """Apply overrides from a parsed TOML document.

        Unknown keys are rejected. ``codegen`` tables are appended to the
        job list; ``include_rules`` tables replace the rule list.

        Raises:
            ConfigureError: On unknown keys or malformed values.
        """
        names = {f.name for f in dataclasses.fields(self)}
        for key, value in values.items():
            if key == "codegen":
                self.codegen_jobs.extend(_parse_jobs(value))
            elif key == "include_rules":
                self.include_rules = _parse_rules(value)
            elif key == "target_defs":
                self.target_defs = [(str(a), str(b)) for a, b in value]
            elif key in ("root", "build_dir_override"):
                setattr(self, key, Path(value))
            elif key in names:
                setattr(self, key, value)
            else:
                raise ConfigureError(f"unknown configuration key: {key!r}")


def _parse_jobs(tables: Any) -> list[CodegenJobSpec]:
    jobs = []
    for table in tables:
        try:
            jobs.append(
                CodegenJobSpec(
                    generator=table["generator"],
                    input=table["input"],
                    output=table["output"],
                    includes=list(table.get("includes", [])),
                    args=list(table.get("args", [])),
                )
            )
        except (KeyError, TypeError) as e:
            raise ConfigureError(f"malformed codegen job: {table!r}") from e
    return jobs


def _parse_rules(tables: Any) -> list[IncludeRule]:
    try:
        return [IncludeRule(t["kind"], t["match"], t["value"]) for t in tables]
    except (KeyError, TypeError) as e:
        raise ConfigureError(f"malformed include rules: {tables!r}") from e


def load_config(
    root: Path | str | None = None,
    config_file: Path | str | None = None,
) -> BuildConfig:
    """Create the configuration for a project root.

    Args:
        root: Project root (default: current directory).
        config_file: Explicit TOML file. When omitted, root/flatbuild.toml
            is used if it exists.

    Returns:
        The merged configuration.

    Raises:
        ConfigureError: If an explicit config file is missing or invalid.
    """
    config = BuildConfig(root=Path(root) if root is not None else Path.cwd())

    if config_file is not None:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigureError("config file not found", path)
    else:
        path = config.root / CONFIG_FILE
        if not path.is_file():
            return config

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigureError(f"invalid TOML: {e}", path) from e

    config.update(data)
    return config
