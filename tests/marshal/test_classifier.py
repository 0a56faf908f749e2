# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the classification of declared types into conversion rules."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

import pytest

from structserde.marshal.classifier import classify
from structserde.model.types import Struct, TypeCategory, WrappedScalar


class Mode(Enum):
    ON = "on"


class Token(WrappedScalar):
    @classmethod
    def from_text(cls, text: str) -> Token:
        return cls()

    def to_text(self) -> str:
        return "token"


@dataclass
class Node(Struct):
    value: int


@dataclass
class StructLikeToken(Token, Struct):
    """Implements both capabilities; the wrapped scalar rule comes first."""


@pytest.mark.parametrize(
    ("declared_type", "expected"),
    [
        (Mode, TypeCategory.ENUM),
        (Token, TypeCategory.WRAPPED_SCALAR),
        (StructLikeToken, TypeCategory.WRAPPED_SCALAR),
        (Node, TypeCategory.STRUCTURE),
        (list, TypeCategory.COLLECTION),
        (dict, TypeCategory.COLLECTION),
        (str, TypeCategory.BUILT_IN),
        (int, TypeCategory.BUILT_IN),
        (Decimal, TypeCategory.BUILT_IN),
        (datetime.date, TypeCategory.BUILT_IN),
        (Any, TypeCategory.BUILT_IN),
    ],
)
def test_classify_declared_types(declared_type: Any, expected: TypeCategory) -> None:
    assert classify("raw", declared_type) is expected


@pytest.mark.parametrize("declared_type", [Mode, Token, Node, list, dict, str, Any])
def test_none_is_always_null(declared_type: Any) -> None:
    assert classify(None, declared_type) is TypeCategory.NULL


def test_raw_shape_is_not_inspected() -> None:
    """Only the absence of the raw value matters, never its shape."""
    assert classify(42, Node) is TypeCategory.STRUCTURE
    assert classify("text", list) is TypeCategory.COLLECTION
    assert classify([], int) is TypeCategory.BUILT_IN


def test_falsy_values_are_not_null() -> None:
    for raw in (0, "", [], {}, False):
        assert classify(raw, int) is not TypeCategory.NULL
