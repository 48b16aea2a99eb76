# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Serializers for value trees.

The dictionary serializer is the single entry point; classification,
key validation and formatting are its building blocks. Serializers only
read the tree -- input values are never modified.
"""

from treedump.runtime.serializers.base import (
    DEFAULT_INDENTATION,
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_MAX_DEPTH,
    Formatter,
)
from treedump.runtime.serializers.classify import (
    classify_value,
    format_number,
    validate_key,
)
from treedump.runtime.serializers.dictionary import (
    render,
    serialize_dictionary,
    try_serialize_dictionary,
)

__all__ = [
    "Formatter",
    "DEFAULT_INDENTATION",
    "DEFAULT_LINE_SEPARATOR",
    "DEFAULT_MAX_DEPTH",
    "classify_value",
    "format_number",
    "validate_key",
    "render",
    "serialize_dictionary",
    "try_serialize_dictionary",
]
