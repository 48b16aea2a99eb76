# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Error taxonomy for serialization failures.

Every failure surfaces as a :class:`SerializationError` carrying one of a
fixed set of :class:`ErrorKind` values. Kinds have stable integer codes so
callers can branch on them without matching message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Hashable, Optional


class ErrorKind(Enum):
    """Kind of serialization failure, with a stable integer code."""

    INVALID_ROOT_TYPE = 1
    UNSUPPORTED_TYPE = 2
    INVALID_KEY_TYPE = 3
    MAX_DEPTH_EXCEEDED = 4

    @property
    def code(self) -> int:
        return self.value


Path = tuple[Hashable, ...]

_UNSET = object()


def format_path(path: Path) -> str:
    """
    Render a path from the root as ``$["key"][0]``.

    Mapping keys are shown quoted, sequence indexes bare.
    """
    parts = ["$"]
    for step in path:
        if isinstance(step, int) and not isinstance(step, bool):
            parts.append(f"[{step}]")
        else:
            parts.append(f'["{step}"]')
    return "".join(parts)


class SerializationError(ValueError):
    """
    A value tree could not be serialized.

    Attributes:
        kind: The ErrorKind of the failure
        message: Human-readable description
        path: Keys and indexes leading from the root to the offending element
    """

    def __init__(self, kind: ErrorKind, message: str, path: Path = ()) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = tuple(path)

    @property
    def code(self) -> int:
        return self.kind.code

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.name,
            "code": self.code,
            "message": self.message,
            "path": format_path(self.path),
        }

    def __reduce__(self):
        return (type(self), (self.kind, self.message, self.path))

    def __repr__(self) -> str:
        return f"SerializationError({self.kind.name}, {self.message!r})"


def _type_name(value: Any) -> str:
    return type(value).__name__


def report_error(
    kind: ErrorKind,
    *,
    value: Any = _UNSET,
    key: Any = _UNSET,
    path: Path = (),
    max_depth: Optional[int] = None,
) -> SerializationError:
    """
    Build a SerializationError with a message describing the failure.

    Args:
        kind: Kind of failure.
        value: The offending value (root or nested element).
        key: The offending mapping key, for INVALID_KEY_TYPE.
        path: Location of the failure relative to the root.
        max_depth: The configured limit, for MAX_DEPTH_EXCEEDED.

    Returns:
        The error, ready to raise.
    """
    if kind == ErrorKind.INVALID_ROOT_TYPE:
        message = (
            f"Expected a mapping as the root value but "
            f"{_type_name(value)} was received."
        )
    elif kind == ErrorKind.UNSUPPORTED_TYPE:
        message = f"Received a value of unsupported type: {_type_name(value)}."
    elif kind == ErrorKind.INVALID_KEY_TYPE:
        message = f"A mapping key has invalid type: {_type_name(key)}."
    elif max_depth is not None:
        message = f"Nesting depth exceeds the limit of {max_depth}."
    else:
        message = "Nesting depth exceeds the interpreter recursion limit."

    if path:
        message += f" Location: {format_path(path)}."
    return SerializationError(kind, message, path)
