# SPDX-License-Identifier: MIT
"""
Flatbuild: an incremental build orchestrator for a flattened LLVM/Clang tree.

Flatbuild pulls the sources it needs out of the nested llvm-project tree
into one flat directory, tracks include dependencies by modification
time, and rebuilds only the objects, libraries and executables that are
out of date.
"""

from __future__ import annotations

import json
import os

# Re-export commonly used classes for convenient imports
from flatbuild.configure.config import BuildConfig, load_config  # noqa: E402
from flatbuild.core.errors import FlatbuildError  # noqa: E402
from flatbuild.orchestrator import BuildSummary, Orchestrator  # noqa: E402
from flatbuild.toolchains import find_toolchain  # noqa: E402

__version__ = "0.1.0"

# Internal storage for variables passed down by a wrapper
_cli_vars: dict[str, str] | None = None


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a build variable from FLATBUILD_VARS or the environment.

    Precedence (highest to lowest):
        1. FLATBUILD_VARS, a JSON object of name -> value
        2. Environment variable: VAR=value flatbuild

    Args:
        name: Variable name.
        default: Default value if not set.

    Returns:
        The variable value, or default if not set.
    """
    global _cli_vars

    # Lazy-load on first access
    if _cli_vars is None:
        flatbuild_vars = os.environ.get("FLATBUILD_VARS")
        if flatbuild_vars:
            try:
                _cli_vars = json.loads(flatbuild_vars)
            except json.JSONDecodeError:
                _cli_vars = {}
        else:
            _cli_vars = {}

    if name in _cli_vars:
        return _cli_vars[name]

    return os.environ.get(name, default)


def _reset_vars() -> None:
    """Forget cached FLATBUILD_VARS (used by tests)."""
    global _cli_vars
    _cli_vars = None


__all__ = [
    "__version__",
    "get_var",
    "BuildConfig",
    "BuildSummary",
    "FlatbuildError",
    "Orchestrator",
    "find_toolchain",
    "load_config",
]
