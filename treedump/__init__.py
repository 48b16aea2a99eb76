# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Treedump -- readable text dumps of nested value trees.

Renders mappings, sequences, sets, numbers, ``None`` and rectangles as
deterministic JSON-like text for logs, debugging output and config files.

Quick start::

    from treedump import serialize_dictionary, Rect

    serialize_dictionary({"a": 1, "b": [None, 2]})
    serialize_dictionary({"frame": Rect(0, 0, 320, 240)}, one_line=True)
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from treedump.runtime import (
    Formatter,
    serialize_dictionary,
    try_serialize_dictionary,
)
from treedump.schema import (
    ErrorKind,
    Rect,
    SerializationError,
    ValueKind,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "serialize_dictionary",
    "try_serialize_dictionary",
    "Formatter",
    # Types
    "Rect",
    "ValueKind",
    # Errors
    "ErrorKind",
    "SerializationError",
    # Version
    "__version__",
]
