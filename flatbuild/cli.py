# SPDX-License-Identifier: MIT
"""Command-line interface for flatbuild."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from flatbuild.configure.config import BuildConfig, load_config
from flatbuild.core.errors import ConfigureError, FlatbuildError, InternalError
from flatbuild.orchestrator import Orchestrator
from flatbuild.toolchains import TOOLCHAINS

# Set up logging
logger = logging.getLogger("flatbuild")


def setup_logging(quiet: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif quiet:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def parse_jobs(value: str | None, source: str) -> int | None:
    """Parse a job count.

    Raises:
        ConfigureError: If value is not a positive integer.
    """
    if value is None:
        return None
    try:
        jobs = int(value)
    except ValueError as e:
        raise ConfigureError(
            f"{source}: job count must be an integer, got {value!r}"
        ) from e
    if jobs < 1:
        raise ConfigureError(f"{source}: job count must be positive, got {jobs}")
    return jobs


def resolve_config(args: argparse.Namespace) -> BuildConfig:
    """Merge config file, environment and command-line settings.

    Precedence (highest to lowest): command line, environment,
    flatbuild.toml, built-in defaults.
    """
    from flatbuild import get_var

    root = args.root or get_var("FLATBUILD_ROOT")
    config = load_config(
        Path(root).resolve() if root else Path.cwd(),
        config_file=args.config,
    )

    env_jobs = parse_jobs(get_var("FLATBUILD_JOBS"), "FLATBUILD_JOBS")
    if env_jobs is not None:
        config.jobs = env_jobs
    env_toolchain = get_var("FLATBUILD_TOOLCHAIN")
    if env_toolchain:
        config.toolchain = env_toolchain

    if args.jobs is not None:
        config.jobs = parse_jobs(str(args.jobs), "--jobs")
    if args.toolchain:
        config.toolchain = args.toolchain
    if args.build_dir:
        config.build_dir_override = Path(args.build_dir).resolve()
    if args.no_flatten:
        config.flatten = False
    return config


def cmd_build(args: argparse.Namespace) -> int:
    """Run the full build."""
    config = resolve_config(args)
    logger.debug("Root: %s", config.root)
    logger.debug("Build directory: %s", config.build_dir)
    summary = Orchestrator(config).run()
    if summary.up_to_date:
        logger.info("Everything is up to date")
    else:
        logger.info(
            "Compiled %d units, generated %d files",
            summary.compiled,
            summary.generated,
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the flatbuild CLI."""
    parser = argparse.ArgumentParser(
        prog="flatbuild",
        description="Incrementally build Clang from a flattened source tree.",
    )
    from flatbuild import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only show warnings and errors"
    )
    parser.add_argument("--debug", action="store_true", help="Show debug output")
    parser.add_argument(
        "--root", help="Project root holding llvm-project/ (default: current dir)"
    )
    parser.add_argument(
        "-B", "--build-dir", help="Build directory (default: <root>/build)"
    )
    parser.add_argument(
        "-j", "--jobs", type=int, help="Number of parallel jobs (default: cores)"
    )
    parser.add_argument(
        "--toolchain", choices=sorted(TOOLCHAINS), help="Toolchain to build with"
    )
    parser.add_argument("--config", help="Path to a flatbuild.toml file")
    parser.add_argument(
        "--no-flatten",
        action="store_true",
        help="Build the flat directory as-is without pulling sources",
    )

    args = parser.parse_args(argv)
    setup_logging(args.quiet, args.debug)

    try:
        return cmd_build(args)
    except InternalError:
        # Broken invariants propagate with their traceback
        raise
    except FlatbuildError as e:
        logger.error("error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
