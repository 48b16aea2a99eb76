# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Schema definitions for value trees and serialization errors.

Values are read-only inputs. The only type defined here that callers
place in a tree is :class:`Rect`; everything else is a plain Python object.
"""

from treedump.schema.errors import (
    ErrorKind,
    SerializationError,
    format_path,
    report_error,
)
from treedump.schema.value import (
    NULL_TOKEN,
    RECT_FIELDS,
    Rect,
    ValueKind,
)

__all__ = [
    # Value model
    "ValueKind",
    "Rect",
    "RECT_FIELDS",
    "NULL_TOKEN",
    # Errors
    "ErrorKind",
    "SerializationError",
    "report_error",
    "format_path",
]
