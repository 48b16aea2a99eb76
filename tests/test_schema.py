# Copyright (c) 2026 Treedump
# SPDX-License-Identifier: MIT

"""Tests for schema types: Rect and the error taxonomy."""

import copy
import dataclasses
import pickle

import numpy as np
import pytest

from treedump.schema import (
    RECT_FIELDS,
    ErrorKind,
    Rect,
    SerializationError,
    format_path,
    report_error,
)


class TestRect:

    def test_fields(self):
        r = Rect(x=1, y=2, width=3, height=4)
        assert (r.x, r.y, r.width, r.height) == (1, 2, 3, 4)

    def test_to_dict_order(self):
        d = Rect(1, 2, 3, 4).to_dict()
        assert tuple(d) == RECT_FIELDS == ("x", "y", "width", "height")
        assert d == {"x": 1, "y": 2, "width": 3, "height": 4}

    def test_numpy_fields(self):
        r = Rect(np.float64(0.5), np.int32(1), 2, 3)
        assert r.x == 0.5

    @pytest.mark.parametrize("bad", ["1", None, [1], 1j])
    def test_non_numeric_field(self, bad):
        with pytest.raises(TypeError, match="Rect.width"):
            Rect(0, 0, bad, 1)

    def test_frozen(self):
        r = Rect(0, 0, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.x = 5


class TestErrorKind:

    def test_stable_codes(self):
        assert ErrorKind.INVALID_ROOT_TYPE.code == 1
        assert ErrorKind.UNSUPPORTED_TYPE.code == 2
        assert ErrorKind.INVALID_KEY_TYPE.code == 3
        assert ErrorKind.MAX_DEPTH_EXCEEDED.code == 4


class TestFormatPath:

    def test_root(self):
        assert format_path(()) == "$"

    def test_keys_and_indexes(self):
        assert format_path(("a", 0, "b")) == '$["a"][0]["b"]'

    def test_non_index_numbers_are_keys(self):
        assert format_path((True, 2.5)) == '$["True"]["2.5"]'


class TestReportError:

    def test_is_value_error(self):
        error = report_error(ErrorKind.UNSUPPORTED_TYPE, value="x")
        assert isinstance(error, SerializationError)
        assert isinstance(error, ValueError)

    def test_root_message(self):
        error = report_error(ErrorKind.INVALID_ROOT_TYPE, value=[1])
        assert "list" in str(error)
        assert error.path == ()

    def test_unsupported_message_has_location(self):
        error = report_error(ErrorKind.UNSUPPORTED_TYPE, value=object(), path=("k", 1))
        assert "object" in error.message
        assert '$["k"][1]' in error.message

    def test_key_message(self):
        error = report_error(ErrorKind.INVALID_KEY_TYPE, key=(1,))
        assert "tuple" in error.message

    def test_depth_message(self):
        error = report_error(ErrorKind.MAX_DEPTH_EXCEEDED, max_depth=10)
        assert "10" in error.message

    def test_to_dict(self):
        error = report_error(ErrorKind.INVALID_KEY_TYPE, key=None, path=("a",))
        assert error.to_dict() == {
            "kind": "INVALID_KEY_TYPE",
            "code": 3,
            "message": error.message,
            "path": '$["a"]',
        }

    def test_pickle_roundtrip(self):
        error = report_error(ErrorKind.INVALID_KEY_TYPE, key=None, path=("a", 1))
        restored = pickle.loads(pickle.dumps(error))
        assert restored.kind == ErrorKind.INVALID_KEY_TYPE
        assert restored.path == ("a", 1)
        assert str(restored) == error.message

    def test_copy(self):
        error = report_error(ErrorKind.UNSUPPORTED_TYPE, value="x")
        assert copy.copy(error).to_dict() == error.to_dict()

    def test_depth_message_without_limit(self):
        error = report_error(ErrorKind.MAX_DEPTH_EXCEEDED)
        assert "recursion limit" in error.message

    def test_repr(self):
        error = report_error(ErrorKind.INVALID_ROOT_TYPE, value=None)
        assert repr(error).startswith("SerializationError(INVALID_ROOT_TYPE")
