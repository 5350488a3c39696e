# SPDX-License-Identifier: MIT
"""Run the code generator (TableGen) and flatten its output.

Generator output includes other headers by their nested path
(``#include "llvm/IR/Attributes.inc"``). After each run those includes
are rewritten to the flat naming by looking up the include's top-level
namespace in a table (``llvm`` -> ``llvm/include``) and replacing path
separators with underscores. An include outside every known namespace
is an error rather than a guess.

A job is skipped when its output already exists; presence alone gates
regeneration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from flatbuild.core.errors import CommandError, ConfigureError, FlattenError
from flatbuild.core.graph import read_source_text, write_source_text
from flatbuild.core.scanner import IncludeDirective, rewrite_includes
from flatbuild.core.scheduler import Command
from flatbuild.flatten import flat_name

if TYPE_CHECKING:
    from flatbuild.configure.config import CodegenJobSpec
    from flatbuild.core.build_context import BuildContext

logger = logging.getLogger(__name__)


def flatten_generated_include(include: str, namespaces: Mapping[str, str]) -> str:
    """Flat file name for an include emitted by the generator.

    Raises:
        FlattenError: If include does not start with a known namespace.
    """
    for namespace, directory in namespaces.items():
        if include.startswith(namespace):
            return flat_name(f"{directory}/{include}")
    known = ", ".join(sorted(namespaces))
    raise FlattenError(f"include {include!r} is outside known namespaces ({known})")


def flatten_generated_text(text: str, namespaces: Mapping[str, str]) -> str:
    """Rewrite every quoted include in generator output to its flat name."""

    def replace(directive: IncludeDirective) -> str | None:
        if not directive.is_quoted:
            return None
        return f'#include "{flatten_generated_include(directive.target, namespaces)}"'

    return rewrite_includes(text, replace)


class CodegenRunner:
    """Runs a batch of generator jobs through the shared scheduler.

    Attributes:
        ctx: Build context.
        generators: Generator name -> executable path.
    """

    def __init__(self, ctx: BuildContext, generators: Mapping[str, Path]) -> None:
        self.ctx = ctx
        self.generators = dict(generators)
        self.source_root = ctx.config.source_root
        self.flat_dir = ctx.config.flat_dir
        self.namespaces = ctx.config.codegen_namespaces

    def output_path(self, job: CodegenJobSpec) -> Path:
        return self.flat_dir / job.output

    def command(self, job: CodegenJobSpec) -> Command:
        """Generator invocation for job.

        Raises:
            ConfigureError: If the job names an unknown generator.
        """
        exe = self.generators.get(job.generator)
        if exe is None:
            raise ConfigureError(
                f"unknown generator {job.generator!r} for {job.output}"
            )
        includes = [f"-I{self.source_root / inc}" for inc in job.includes]
        output = self.output_path(job)
        argv = [
            str(exe),
            *job.args,
            *includes,
            str(self.source_root / job.input),
            "-o",
            str(output),
        ]
        return Command(argv, output)

    def flatten_output(self, path: Path) -> None:
        """Rewrite the includes of a freshly generated file in place."""
        text = read_source_text(path)
        try:
            flattened = flatten_generated_text(text, self.namespaces)
        except FlattenError as e:
            raise FlattenError(e.message, path) from e
        write_source_text(path, flattened)

    def run(self, jobs: Sequence[CodegenJobSpec]) -> list[Path]:
        """Run every job whose output does not exist yet.

        Returns:
            Paths of the files generated this run.

        Raises:
            CommandError: If a generator fails.
            FlattenError: If generator output cannot be flattened.
        """
        commands: list[Command] = []
        for job in jobs:
            output = self.output_path(job)
            if output.exists():
                logger.debug("already generated: %s", job.output)
                continue
            commands.append(self.command(job))

        if not commands:
            logger.info("cache hit: all %d generated files present", len(jobs))
            return []

        generated: list[Path] = []
        try:
            self.ctx.run(commands)
            for command in commands:
                assert command.output is not None
                self.flatten_output(command.output)
                generated.append(command.output)
        except (CommandError, FlattenError):
            # Presence gates regeneration, so drop partial and unflattened output
            for command in commands:
                assert command.output is not None
                command.output.unlink(missing_ok=True)
            raise

        logger.info("Generated %d files", len(generated))
        return generated
