# SPDX-License-Identifier: MIT
"""Include dependency graph with effective timestamps.

Every tracked file is keyed by its base name (the flat layout guarantees
uniqueness; collisions are rejected). A file's effective timestamp is the
newest modification time among itself and everything it transitively
includes. Resolution is a memoized depth-first walk; an include that leads
back to a file still on the walk's stack contributes nothing, which makes
the walk total on cyclic include graphs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from flatbuild.core.errors import (
    DuplicateFileError,
    InternalError,
    MissingSourceError,
)
from flatbuild.core.scanner import scan_includes

logger = logging.getLogger(__name__)


class ResolveState(Enum):
    Unresolved = "unresolved"
    Resolving = "resolving"
    Resolved = "resolved"


@dataclass
class FileRecord:
    """One tracked file.

    Attributes:
        path: Filesystem path of the file.
        own_timestamp: The file's own mtime in nanoseconds.
        direct_includes: Include targets found in the file, in order.
        effective_timestamp: Set once resolved, None before.
        state: Position of the record in the resolution walk.
    """

    path: Path
    own_timestamp: int
    direct_includes: list[str] = field(default_factory=list)
    effective_timestamp: int | None = None
    state: ResolveState = ResolveState.Unresolved

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def resolving(self) -> bool:
        return self.state is ResolveState.Resolving


@dataclass
class _Frame:
    record: FileRecord
    latest: int
    index: int = 0
    child: FileRecord | None = None


SOURCE_ENCODING = "utf-8"

# Undecodable bytes round-trip unchanged through read_source_text and
# write_source_text
SOURCE_ERRORS = "surrogateescape"


def read_source_text(path: Path) -> str:
    """Read a source file exactly as stored.

    Line endings are left untranslated and bytes that are not UTF-8 are
    carried as surrogates, so writing the text back with
    write_source_text reproduces the file byte for byte.

    Raises:
        MissingSourceError: If the file cannot be read.
    """
    try:
        with path.open(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS, newline="") as f:
            return f.read()
    except OSError as e:
        raise MissingSourceError(f"cannot read file: {e.strerror}", path) from e


def write_source_text(path: Path, text: str) -> None:
    """Write text read by read_source_text back to path unchanged."""
    path.write_text(text, encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS, newline="")


class DependencyGraph:
    """Table of FileRecords keyed by base name.

    Example:
        graph = DependencyGraph.from_directory(Path("clang_src"))
        graph.resolve_all()
        stamp = graph.effective_timestamp("clang_lib_Basic_Cuda.cpp")
    """

    def __init__(self) -> None:
        self._records: dict[str, FileRecord] = {}

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> DependencyGraph:
        """Stat and scan every path into a new graph."""
        graph = cls()
        for path in paths:
            graph.scan_file(path)
        return graph

    @classmethod
    def from_directory(cls, directory: Path) -> DependencyGraph:
        """Build a graph from the regular files directly inside directory.

        Raises:
            MissingSourceError: If directory does not exist.
        """
        if not directory.is_dir():
            raise MissingSourceError("source directory not found", directory)
        files = sorted(p for p in directory.iterdir() if p.is_file())
        graph = cls.from_paths(files)
        logger.debug("Scanned %d files in %s", len(graph), directory)
        return graph

    def scan_file(self, path: Path) -> FileRecord:
        """Stat path, scan its includes and add it to the table."""
        text = read_source_text(path)
        try:
            own = path.stat().st_mtime_ns
        except OSError as e:
            raise MissingSourceError(f"cannot stat file: {e.strerror}", path) from e
        return self.add_file(path, own, scan_includes(text))

    def add_file(
        self,
        path: Path | str,
        own_timestamp: int,
        includes: Iterable[str] = (),
    ) -> FileRecord:
        """Add a record without touching the filesystem.

        Raises:
            DuplicateFileError: If another path already claimed the base name.
        """
        path = Path(path)
        existing = self._records.get(path.name)
        if existing is not None and existing.path != path:
            raise DuplicateFileError(path.name, existing.path, path)
        record = FileRecord(path, own_timestamp, list(includes))
        self._records[path.name] = record
        return record

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self._records.values())

    def get(self, name: str) -> FileRecord | None:
        return self._records.get(name)

    def record(self, name: str) -> FileRecord:
        """Look up a record by base name.

        Raises:
            MissingSourceError: If the name is not tracked.
        """
        record = self._records.get(name)
        if record is None:
            raise MissingSourceError("file is not in the dependency graph", name)
        return record

    def resolve(self, record: FileRecord) -> int:
        """Compute and memoize the effective timestamp of record.

        Walks includes depth-first with an explicit stack so that long
        include chains cannot exhaust the interpreter's recursion limit.
        Includes naming untracked files are ignored, as are includes of a
        record that is currently being resolved (a cycle back-edge).

        Returns:
            The record's effective timestamp.

        Raises:
            InternalError: If record is already being resolved.
        """
        if record.state is ResolveState.Resolved:
            assert record.effective_timestamp is not None
            return record.effective_timestamp
        if record.state is ResolveState.Resolving:
            raise InternalError("record re-entered while resolving", record.path)

        record.state = ResolveState.Resolving
        stack = [_Frame(record, record.own_timestamp)]
        while stack:
            frame = stack[-1]
            if frame.child is not None:
                assert frame.child.effective_timestamp is not None
                frame.latest = max(frame.latest, frame.child.effective_timestamp)
                frame.child = None

            descended = False
            includes = frame.record.direct_includes
            while frame.index < len(includes):
                dep = self._records.get(includes[frame.index])
                frame.index += 1
                if dep is None or dep.state is ResolveState.Resolving:
                    continue
                if dep.state is ResolveState.Resolved:
                    assert dep.effective_timestamp is not None
                    frame.latest = max(frame.latest, dep.effective_timestamp)
                    continue
                dep.state = ResolveState.Resolving
                frame.child = dep
                stack.append(_Frame(dep, dep.own_timestamp))
                descended = True
                break

            if not descended:
                stack.pop()
                frame.record.effective_timestamp = frame.latest
                frame.record.state = ResolveState.Resolved

        assert record.effective_timestamp is not None
        return record.effective_timestamp

    def resolve_all(self) -> None:
        """Resolve every record. Order does not matter."""
        for record in self._records.values():
            self.resolve(record)

    def effective_timestamp(self, name: str) -> int:
        """Effective timestamp of a tracked file, resolving it on demand."""
        return self.resolve(self.record(name))
