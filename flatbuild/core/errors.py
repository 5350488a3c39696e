# SPDX-License-Identifier: MIT
"""Custom exceptions for flatbuild.

All flatbuild exceptions inherit from FlatbuildError, which includes
an optional path so the CLI can name the file or command that failed.
Every error aborts the build; there is no partial-result recovery.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class FlatbuildError(Exception):
    """Base class for all flatbuild exceptions.

    Attributes:
        message: The error message.
        path: Optional path of the file the error is about.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
    ) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigureError(FlatbuildError):
    """Configuration is invalid or incomplete.

    Raised for unknown configuration keys, missing environment values
    and hosts where the core count cannot be determined.
    """


class ToolNotFoundError(ConfigureError):
    """Required tool was not found.

    Attributes:
        tool: The name of the tool that was not found.
    """

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"tool not found: {tool}")


class MissingSourceError(FlatbuildError):
    """A file or directory the build needs does not exist or is unreadable."""


class DuplicateFileError(FlatbuildError):
    """Two different files map to the same flat name.

    Attributes:
        name: The colliding base name.
        first: The path that claimed the name first.
        second: The path that collided with it.
    """

    def __init__(self, name: str, first: Path | str, second: Path | str) -> None:
        self.name = name
        self.first = Path(first)
        self.second = Path(second)
        super().__init__(
            f"duplicate file name {name!r}: {self.first} and {self.second}"
        )


class CommandError(FlatbuildError):
    """An external command failed to start or exited nonzero.

    Attributes:
        command: The argv of the failing command.
        returncode: Exit status, or None if the command never started.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        cmd_str = " ".join(self.command)
        if returncode is None:
            message = f"failed to launch: {cmd_str}"
            if reason:
                message += f" ({reason})"
        else:
            message = f"command exited with status {returncode}: {cmd_str}"
        super().__init__(message)


class FlattenError(FlatbuildError):
    """An include or template could not be rewritten into the flat layout."""


class InternalError(FlatbuildError):
    """An internal invariant was violated. Indicates a bug in flatbuild."""
