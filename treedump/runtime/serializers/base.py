# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""Formatting configuration shared by the serializers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from treedump.schema import ErrorKind, report_error
from treedump.schema.errors import Path


DEFAULT_INDENTATION = "  "
DEFAULT_LINE_SEPARATOR = "\n"
DEFAULT_MAX_DEPTH = 200

ENTRY_SEPARATOR = ","
ONE_LINE_SEPARATOR = ", "


@dataclass(frozen=True, slots=True)
class Formatter:
    """
    Indentation and line-break rules for one nesting level.

    Formatters are immutable. Descending into a container produces a new
    formatter via :meth:`enter_level`; the parent keeps its own depth, so
    every exit path (including a raised error) leaves the caller's
    formatter as it was.

    Attributes:
        single_line_indentation: Unit repeated once per depth level
        line_separator: Inserted before each entry in multi-line mode
        depth: Current nesting level (0 at the root)
        one_lined: Emit everything on a single line
        max_depth: Most containers that may be nested inside one another
    """
    single_line_indentation: str = DEFAULT_INDENTATION
    line_separator: str = DEFAULT_LINE_SEPARATOR
    depth: int = 0
    one_lined: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate depth bounds."""
        if self.depth < 0:
            raise ValueError(f"Depth must be >= 0, got {self.depth}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def one_line(cls, max_depth: int = DEFAULT_MAX_DEPTH) -> Formatter:
        """Compact single-line formatter."""
        return cls(one_lined=True, max_depth=max_depth)

    @classmethod
    def multi_line(
        cls,
        indentation: str = DEFAULT_INDENTATION,
        line_separator: str = DEFAULT_LINE_SEPARATOR,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Formatter:
        """Indented formatter with one entry per line."""
        return cls(
            single_line_indentation=indentation,
            line_separator=line_separator,
            max_depth=max_depth,
        )

    def line_indentation(self) -> str:
        """Indentation prefix for the current depth (empty when one-lined)."""
        if self.one_lined:
            return ""
        return self.single_line_indentation * self.depth

    def reset(self, one_lined: bool | None = None) -> Formatter:
        """Copy at depth 0, optionally switching the line mode."""
        if one_lined is None:
            one_lined = self.one_lined
        return replace(self, depth=0, one_lined=one_lined)

    def enter_level(self, path: Path = ()) -> Formatter:
        """
        Formatter for the children of a container at this level.

        Raises:
            SerializationError: MAX_DEPTH_EXCEEDED past ``max_depth``.
        """
        if self.depth >= self.max_depth:
            raise report_error(
                ErrorKind.MAX_DEPTH_EXCEEDED, path=path, max_depth=self.max_depth
            )
        return replace(self, depth=self.depth + 1)

    def exit_level(self) -> Formatter:
        """Formatter for the parent level."""
        return replace(self, depth=max(self.depth - 1, 0))

    def join(self, entries: Iterable[str], opening: str, closing: str) -> str:
        """
        Wrap already-rendered child entries in a bracket pair.

        ``self`` is the formatter of the container itself; entries are
        indented one level deeper and the closing bracket sits at this
        formatter's indentation.
        """
        entries = list(entries)
        if not entries:
            return opening + closing
        if self.one_lined:
            return opening + ONE_LINE_SEPARATOR.join(entries) + closing

        child_prefix = self.line_separator + self.single_line_indentation * (self.depth + 1)
        body = (ENTRY_SEPARATOR + child_prefix).join(entries)
        return (
            opening
            + child_prefix
            + body
            + self.line_separator
            + self.line_indentation()
            + closing
        )
