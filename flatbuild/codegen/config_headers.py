# SPDX-License-Identifier: MIT
"""Headers that the real build produces from CMake templates.

Fixed-content headers are written verbatim. Target definition files
(``Targets.def.in`` and friends) get their ``@...@`` placeholder replaced
with a single ``<MACRO>(<target>)`` entry, where MACRO is the name on the
template's ``#ifndef`` line.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from flatbuild.core.errors import FlattenError
from flatbuild.core.graph import read_source_text
from flatbuild.flatten import write_if_changed

logger = logging.getLogger(__name__)


def render_target_def(template: str, target: str) -> str:
    """Fill a target definition template for a single target.

    Raises:
        FlattenError: If the template has no #ifndef line or no pair of
            '@' markers.
    """
    ifndef = template.find("#ifndef")
    if ifndef == -1:
        raise FlattenError("template has no #ifndef line")
    line_start = ifndef + len("#ifndef")
    line_end = template.find("\n", line_start)
    if line_end == -1:
        raise FlattenError("template ends on its #ifndef line")
    macro = template[line_start:line_end].strip()

    first = template.find("@")
    second = template.find("@", first + 1) if first != -1 else -1
    if second == -1:
        raise FlattenError("template has no @...@ placeholder")
    return f"{template[:first]}{macro}({target}){template[second + 1:]}"


def write_target_def(template: Path, output: Path, target: str) -> bool:
    """Render template into output.

    Returns:
        True if output changed.
    """
    try:
        content = render_target_def(read_source_text(template), target)
    except FlattenError as e:
        raise FlattenError(e.message, template) from e
    return write_if_changed(output, content)


def write_generated_headers(
    flat_dir: Path,
    headers: Mapping[str, str],
) -> list[Path]:
    """Write fixed-content headers into flat_dir.

    Returns:
        Headers whose content changed.
    """
    flat_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, content in headers.items():
        path = flat_dir / name
        if write_if_changed(path, content):
            written.append(path)
    if written:
        logger.info("Wrote %d generated headers", len(written))
    return written
