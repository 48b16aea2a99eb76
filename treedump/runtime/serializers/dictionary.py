# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Dictionary serializer.

Renders a mapping-rooted value tree as indented, JSON-like text::

    {
      "a": 1,
      "b": [
        null,
        2
      ]
    }

or, in one-line mode, ``{"a": 1, "b": [null, 2]}``.

Serialization is all-or-nothing: the first invalid element aborts the
whole call and no partial text is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from treedump.runtime.serializers.base import Formatter
from treedump.runtime.serializers.classify import (
    classify_value,
    format_number,
    validate_key,
)
from treedump.schema import (
    NULL_TOKEN,
    ErrorKind,
    Rect,
    SerializationError,
    ValueKind,
    report_error,
)
from treedump.schema.errors import Path

logger = logging.getLogger(__name__)

KEY_WRAPPER = '"'


def serialize_dictionary(
    value: Any,
    *,
    one_line: bool = False,
    formatter: Optional[Formatter] = None,
) -> str:
    """Serialize a mapping and everything nested in it.

    Args:
        value: The root value. Must be a mapping.
        one_line: Render on a single line, entries joined by ``", "``.
        formatter: Custom indentation, line separator or depth limit.
            Its depth is reset to 0 before rendering.

    Returns:
        The rendered text.

    Raises:
        SerializationError: INVALID_ROOT_TYPE if ``value`` is not a mapping,
            or the first error met anywhere in the tree.
    """
    if formatter is None:
        formatter = Formatter()
    formatter = formatter.reset(one_lined=one_line or formatter.one_lined)

    try:
        kind = classify_value(value)
    except SerializationError:
        kind = None
    if kind != ValueKind.MAPPING:
        error = report_error(ErrorKind.INVALID_ROOT_TYPE, value=value)
        logger.debug("Serialization rejected: %s", error.message)
        raise error

    try:
        return render(value, formatter)
    except RecursionError as e:
        error = report_error(ErrorKind.MAX_DEPTH_EXCEEDED)
        logger.debug("Serialization failed (%s): %s", error.kind.name, error.message)
        raise error from e
    except SerializationError as e:
        logger.debug("Serialization failed (%s): %s", e.kind.name, e.message)
        raise


def try_serialize_dictionary(
    value: Any,
    *,
    one_line: bool = False,
    formatter: Optional[Formatter] = None,
) -> tuple[Optional[str], Optional[SerializationError]]:
    """Serialize a mapping, returning ``(text, error)``.

    Exactly one side of the pair is populated: the text on success, the
    error on failure.
    """
    try:
        return serialize_dictionary(value, one_line=one_line, formatter=formatter), None
    except SerializationError as e:
        return None, e


def render(value: Any, formatter: Formatter, path: Path = ()) -> str:
    """Render any supported value at the formatter's depth."""
    kind = classify_value(value, path)

    if kind == ValueKind.MAPPING:
        return _render_mapping(value.items(), formatter, path)
    elif kind == ValueKind.SEQUENCE:
        return _render_sequence(value, formatter, path)
    elif kind == ValueKind.UNORDERED:
        return _render_unordered(value, formatter, path)
    elif kind == ValueKind.NUMBER:
        return format_number(value, path)
    elif kind == ValueKind.NULL:
        return NULL_TOKEN
    elif kind == ValueKind.RECTANGLE:
        return _render_rect(value, formatter, path)
    raise AssertionError(f"Unhandled value kind: {kind}")


def _render_mapping(items, formatter: Formatter, path: Path) -> str:
    child = formatter.enter_level(path)
    entries = []
    for key, item in items:
        key_text = validate_key(key, path)
        item_path = path + (key,)
        entries.append(
            f"{KEY_WRAPPER}{key_text}{KEY_WRAPPER}: {render(item, child, item_path)}"
        )
    return formatter.join(entries, "{", "}")


def _render_sequence(items, formatter: Formatter, path: Path) -> str:
    child = formatter.enter_level(path)
    entries = [render(item, child, path + (i,)) for i, item in enumerate(items)]
    return formatter.join(entries, "[", "]")


def _render_unordered(items, formatter: Formatter, path: Path) -> str:
    # Set iteration order varies between runs; sort by rendered text.
    # Members have no stable position, so errors report the set itself.
    child = formatter.enter_level(path)
    entries = sorted(render(item, child, path) for item in items)
    return formatter.join(entries, "[", "]")


def _render_rect(rect: Rect, formatter: Formatter, path: Path) -> str:
    """Render a Rect exactly as the equivalent hand-built mapping."""
    return _render_mapping(rect.to_dict().items(), formatter, path)
