# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""
Value classification and key validation.

Maps runtime Python objects onto the closed set of ValueKind variants,
and canonicalizes mapping keys. Both operations are pure inspection.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from typing import Any

import numpy as np

from treedump.schema import (
    ErrorKind,
    Rect,
    ValueKind,
    report_error,
)
from treedump.schema.errors import Path


_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def _is_number(value: Any) -> bool:
    """True for bools, reals, Decimals and non-complex numpy scalars."""
    if isinstance(value, (np.bool_, bool)):
        return True
    if isinstance(value, (complex, np.complexfloating)):
        return False
    if isinstance(value, np.generic):
        return isinstance(value, np.number)
    return isinstance(value, (numbers.Real, Decimal))


def classify_value(value: Any, path: Path = ()) -> ValueKind:
    """
    Determine the structural variant of a value.

    Args:
        value: Any runtime object.
        path: Location of the value, used in the error message.

    Returns:
        The ValueKind of the value.

    Raises:
        SerializationError: UNSUPPORTED_TYPE if the value fits no variant.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, Rect):
        return ValueKind.RECTANGLE
    if _is_number(value):
        return ValueKind.NUMBER
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            if _is_number(value[()]):
                return ValueKind.NUMBER
            raise report_error(ErrorKind.UNSUPPORTED_TYPE, value=value[()], path=path)
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Set):
        return ValueKind.UNORDERED
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ValueKind.SEQUENCE
    raise report_error(ErrorKind.UNSUPPORTED_TYPE, value=value, path=path)


_INT_CHUNK_DIGITS = 1000


def _format_int(n: int) -> str:
    """Decimal digits of ``n``, including integers past ``sys.get_int_max_str_digits``."""
    try:
        return int.__repr__(n)
    except ValueError:
        pass
    sign = "-" if n < 0 else ""
    n = abs(n)
    base = 10**_INT_CHUNK_DIGITS
    chunks = []
    while n:
        n, low = divmod(n, base)
        chunks.append(low)
    head = int.__repr__(chunks.pop())
    return sign + head + "".join(f"{c:0{_INT_CHUNK_DIGITS}d}" for c in reversed(chunks))


def _format_float(f: float) -> str:
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "Infinity" if f > 0 else "-Infinity"
    return float.__repr__(f)


def format_number(value: Any, path: Path = ()) -> str:
    """
    Render a number in its literal form.

    Booleans become ``1``/``0``, integers their digits, floats the
    shortest repr that round-trips. Non-finite floats use the tokens the
    ``json`` module emits (``NaN``, ``Infinity``, ``-Infinity``).
    Fractions too large for a float fall back to Decimal division.

    Raises:
        SerializationError: UNSUPPORTED_TYPE for a real that cannot be
            expressed as a float.
    """
    if isinstance(value, np.ndarray):
        value = value[()]
    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, numbers.Integral):
        return _format_int(int(value))
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, numbers.Rational):
        if value.denominator == 1:
            return _format_int(int(value.numerator))
        try:
            return _format_float(float(value))
        except OverflowError:
            return str(Decimal(int(value.numerator)) / Decimal(int(value.denominator)))

    try:
        f = float(value)
    except OverflowError as e:
        raise report_error(ErrorKind.UNSUPPORTED_TYPE, value=value, path=path) from e
    return _format_float(f)


def validate_key(key: Any, path: Path = ()) -> str:
    """
    Canonicalize a mapping key.

    String keys are used verbatim; numeric keys become their literal form.
    Numerically equal keys of different types (``1`` and ``1.0``) are not
    merged.

    Raises:
        SerializationError: INVALID_KEY_TYPE for any other key type.
    """
    if isinstance(key, str):
        return key
    if _is_number(key):
        return format_number(key, path)
    raise report_error(ErrorKind.INVALID_KEY_TYPE, key=key, path=path)
