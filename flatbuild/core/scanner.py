# SPDX-License-Identifier: MIT
"""Textual #include scanner.

This is deliberately not a preprocessor: it finds every occurrence of the
literal token ``#include `` followed by a quoted or angle-bracketed name,
including ones inside comments or disabled ``#if 0`` blocks. Extra edges
can only make the staleness bound more conservative (an unneeded rebuild),
never less.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

INCLUDE_TOKEN = "#include "

CLOSING_DELIMITERS = {'"': '"', "<": ">"}


@dataclass(frozen=True)
class IncludeDirective:
    """One include found in a file's text.

    Attributes:
        target: The name between the delimiters.
        opening: The opening delimiter, '"' or '<'.
        start: Offset of the '#' of the directive.
        end: Offset just past the closing delimiter.
    """

    target: str
    opening: str
    start: int
    end: int

    @property
    def closing(self) -> str:
        return CLOSING_DELIMITERS[self.opening]

    @property
    def is_quoted(self) -> bool:
        return self.opening == '"'


def iter_includes(text: str) -> Iterator[IncludeDirective]:
    """Yield include directives in the order they appear in text.

    A match not followed by '"' or '<' (e.g. ``#include MACRO``) is skipped.
    An include whose closing delimiter never appears ends the scan.
    """
    pos = 0
    while True:
        start = text.find(INCLUDE_TOKEN, pos)
        if start == -1:
            return
        name_start = start + len(INCLUDE_TOKEN)
        if name_start >= len(text):
            return
        opening = text[name_start]
        if opening not in CLOSING_DELIMITERS:
            pos = name_start
            continue
        close = text.find(CLOSING_DELIMITERS[opening], name_start + 1)
        if close == -1:
            return
        yield IncludeDirective(
            target=text[name_start + 1 : close],
            opening=opening,
            start=start,
            end=close + 1,
        )
        pos = close + 1


def scan_includes(text: str) -> list[str]:
    """Return the direct include targets of a file's text.

    Duplicates are kept; callers only use the result as a set of edges.
    """
    return [directive.target for directive in iter_includes(text)]


def rewrite_includes(
    text: str, replace: Callable[[IncludeDirective], str | None]
) -> str:
    """Rebuild text with every include directive passed through replace.

    Args:
        text: Source text.
        replace: Callable taking an IncludeDirective and returning the
            replacement directive text, or None to keep it unchanged.

    Returns:
        The rewritten text. Bytes outside directives are preserved.
    """
    parts: list[str] = []
    pos = 0
    for directive in iter_includes(text):
        replacement = replace(directive)
        if replacement is None:
            continue
        parts.append(text[pos : directive.start])
        parts.append(replacement)
        pos = directive.end
    parts.append(text[pos:])
    return "".join(parts)
