# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Value model for treedump.

A value tree is built from plain Python objects. Every node falls into
exactly one of six structural variants:

- Mapping: any ``collections.abc.Mapping`` (keys are str or numbers)
- Sequence: lists, tuples, numpy arrays -- order is preserved
- Unordered: sets and frozensets -- rendered in a canonical order
- Number: bool, int, float, Decimal and numpy scalars
- Null: ``None``
- Rectangle: :class:`Rect`, rendered as a four-field mapping

Strings are accepted as mapping keys only, never as values.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


# =============================================================================
# Variant Tags
# =============================================================================


class ValueKind(Enum):
    """Structural variant of a value in the tree."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    UNORDERED = "unordered"
    NUMBER = "number"
    NULL = "null"
    RECTANGLE = "rectangle"


NULL_TOKEN = "null"


# =============================================================================
# Rectangle
# =============================================================================


RECT_FIELDS = ("x", "y", "width", "height")


def _is_rect_number(value: object) -> bool:
    if isinstance(value, (numbers.Real, Decimal)):
        return True
    if isinstance(value, complex):
        return False
    # numpy.bool_ is not registered with numbers.Real
    return hasattr(value, "item") and getattr(value, "ndim", None) == 0


@dataclass(frozen=True, slots=True)
class Rect:
    """
    An axis-aligned rectangle.

    Serializes as a mapping of its four fields, in the order
    ``x``, ``y``, ``width``, ``height``.

    Attributes:
        x: Origin x coordinate
        y: Origin y coordinate
        width: Horizontal extent
        height: Vertical extent
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate that every field is numeric."""
        for name in RECT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str) or not _is_rect_number(value):
                raise TypeError(
                    f"Rect.{name} must be a number, got {type(value).__name__}"
                )

    def to_dict(self) -> dict:
        """Serialize to dictionary in canonical field order."""
        return {name: getattr(self, name) for name in RECT_FIELDS}

