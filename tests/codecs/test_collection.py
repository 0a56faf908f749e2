# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for element-wise collection conversion."""

from typing import Any

import pytest

from structserde.codecs.collection import decode_collection, encode_collection
from structserde.errors import MissingElementTypeError, NotACollectionError, TransformError
from structserde.model.types import FieldMeta

# ###############
# Helpers
# ###############

_INT = FieldMeta(name="values", declared_type=int)
_LIST = FieldMeta(name="values", declared_type=list, element=_INT)
_DICT = FieldMeta(name="values", declared_type=dict, element=_INT, keyed=True)


def _double(raw: Any, meta: FieldMeta, path: str) -> Any:
    if not isinstance(raw, int):
        raise TransformError("not an int", path=path, value=raw)
    return raw * 2


class _Recorder:
    def __init__(self) -> None:
        self.seen: list[tuple[Any, str, str]] = []

    def __call__(self, raw: Any, meta: FieldMeta, path: str) -> Any:
        self.seen.append((raw, meta.name, path))
        return raw


# ###############
# Ordered Collections
# ###############


def test_list_elements_are_converted_in_order() -> None:
    assert decode_collection([3, 1, 2], _LIST, "values", _double) == [6, 2, 4]


def test_ordered_collection_discards_mapping_keys() -> None:
    assert decode_collection({"b": 1, "a": 2}, _LIST, "values", _double) == [2, 4]


def test_tuple_input_is_accepted() -> None:
    assert decode_collection((1, 2), _LIST, "values", _double) == [2, 4]


def test_element_paths() -> None:
    recorder = _Recorder()
    decode_collection([10, 20], _LIST, "p.values", recorder)
    assert recorder.seen == [(10, "values", "p.values[0]"), (20, "values", "p.values[1]")]


# ###############
# Keyed Collections
# ###############


def test_keyed_collection_preserves_keys() -> None:
    result = decode_collection({"x-1": 1, "Y_2": 2}, _DICT, "values", _double)
    assert result == {"x-1": 2, "Y_2": 4}
    assert list(result) == ["x-1", "Y_2"]


def test_keyed_collection_from_list_uses_indices() -> None:
    assert decode_collection([5, 6], _DICT, "values", _double) == {0: 10, 1: 12}


def test_keyed_element_paths() -> None:
    recorder = _Recorder()
    decode_collection({"en": 1}, _DICT, "labels", recorder)
    assert recorder.seen == [(1, "values", "labels['en']")]


# ###############
# Failures
# ###############


@pytest.mark.parametrize("raw", ["abc", 5, 1.5, object()])
def test_not_a_collection(raw: Any) -> None:
    with pytest.raises(NotACollectionError):
        decode_collection(raw, _LIST, "values", _double)


def test_missing_element_type() -> None:
    untyped = FieldMeta(name="values", declared_type=list)
    with pytest.raises(MissingElementTypeError, match="'values'"):
        decode_collection([1], untyped, "values", _double)


def test_first_element_failure_aborts() -> None:
    recorder: list[Any] = []

    def convert(raw: Any, meta: FieldMeta, path: str) -> Any:
        recorder.append(raw)
        return _double(raw, meta, path)

    with pytest.raises(TransformError) as excinfo:
        decode_collection([1, "x", 3], _LIST, "values", convert)
    assert excinfo.value.path == "values[1]"
    assert recorder == [1, "x"]


# ###############
# Encoding
# ###############


def test_encode_list() -> None:
    assert encode_collection([1, 2], _LIST, "values", _double) == [2, 4]


def test_encode_dict() -> None:
    assert encode_collection({"a": 1}, _DICT, "values", _double) == {"a": 2}


def test_encode_rejects_non_collection() -> None:
    with pytest.raises(NotACollectionError):
        encode_collection("ab", _LIST, "values", _double)
