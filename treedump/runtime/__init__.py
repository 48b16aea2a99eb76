# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Serialization runtime for treedump.

Turns a mapping-rooted value tree into JSON-like text, either indented
(one entry per line) or compact (a single line).
"""

from treedump.runtime.serializers import (
    Formatter,
    serialize_dictionary,
    try_serialize_dictionary,
)

__all__ = [
    "serialize_dictionary",
    "try_serialize_dictionary",
    "Formatter",
]
