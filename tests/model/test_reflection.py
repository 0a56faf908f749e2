# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for field metadata extraction from structure declarations."""

import datetime
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

import pytest

from structserde.errors import InvalidTargetError, UnsupportedTypeError
from structserde.model import Struct, describe, fields, is_struct_type


class Level(Enum):
    LOW = "low"
    HIGH = "high"


@dataclass
class Inner(Struct):
    value: int


@dataclass
class Sample(Struct):
    name: str
    nickname: Optional[str]
    score: float | None = 0.5
    tags: list[str] = field(default_factory=list)
    labels: dict[str, int] = field(default_factory=dict)
    matrix: list[list[int | None]] = field(default_factory=list)
    inner: Inner | None = None
    level: Level = Level.LOW
    price: Decimal = Decimal("0")
    seen: datetime.date | None = None
    extra: Any = None
    counter: int = field(default=0, init=False)


@dataclass
class Untyped(Struct):
    items: list
    mapping: dict


@dataclass
class Abstract(Struct):
    items: Sequence[int]
    mapping: Mapping[str, Inner]


@dataclass
class NotAStruct:
    value: int


class Plain(Struct):
    value: int


@dataclass
class BadUnion(Struct):
    value: int | str


@dataclass
class BadClass(Struct):
    value: NotAStruct


# ###############
# Structure Capability
# ###############


def test_is_struct_type() -> None:
    assert is_struct_type(Sample)
    assert not is_struct_type(NotAStruct)
    assert not is_struct_type(Plain)
    assert not is_struct_type(Sample(name="a", nickname=None))
    assert not is_struct_type(dict)


@pytest.mark.parametrize("target", [NotAStruct, Plain, dict, "Sample"])
def test_fields_rejects_non_structures(target: Any) -> None:
    with pytest.raises(InvalidTargetError):
        fields(target)


# ###############
# Field Metadata
# ###############


def test_fields_in_declaration_order() -> None:
    names = [meta.name for meta in fields(Sample)]
    assert names == [
        "name",
        "nickname",
        "score",
        "tags",
        "labels",
        "matrix",
        "inner",
        "level",
        "price",
        "seen",
        "extra",
        "counter",
    ]


def test_required_and_nullable_fields() -> None:
    meta = {m.name: m for m in fields(Sample)}
    assert meta["name"].declared_type is str
    assert not meta["name"].nullable
    assert not meta["name"].has_default
    assert meta["nickname"].declared_type is str
    assert meta["nickname"].nullable
    assert not meta["nickname"].has_default


def test_defaults() -> None:
    meta = {m.name: m for m in fields(Sample)}
    assert meta["score"].nullable
    assert meta["score"].has_default
    assert meta["score"].default_value() == 0.5
    assert meta["level"].default_value() is Level.LOW
    assert meta["counter"].has_default
    assert not meta["counter"].init


def test_default_factory_builds_fresh_values() -> None:
    tags = {m.name: m for m in fields(Sample)}["tags"]
    first = tags.default_value()
    second = tags.default_value()
    assert first == [] and second == []
    assert first is not second


def test_collections() -> None:
    meta = {m.name: m for m in fields(Sample)}
    tags = meta["tags"]
    assert tags.declared_type is list
    assert not tags.keyed
    assert tags.element is not None and tags.element.declared_type is str

    labels = meta["labels"]
    assert labels.declared_type is dict
    assert labels.keyed
    assert labels.element is not None and labels.element.declared_type is int


def test_nested_collections_describe_element_nullability() -> None:
    matrix = {m.name: m for m in fields(Sample)}["matrix"]
    row = matrix.element
    assert row is not None and row.declared_type is list
    cell = row.element
    assert cell is not None
    assert cell.declared_type is int
    assert cell.nullable


def test_untyped_collections_have_no_element() -> None:
    meta = {m.name: m for m in fields(Untyped)}
    assert meta["items"].declared_type is list
    assert meta["items"].element is None
    assert meta["mapping"].declared_type is dict
    assert meta["mapping"].element is None


def test_abstract_collection_annotations() -> None:
    meta = {m.name: m for m in fields(Abstract)}
    assert meta["items"].declared_type is list
    assert meta["mapping"].keyed
    assert meta["mapping"].element is not None
    assert meta["mapping"].element.declared_type is Inner


def test_fields_are_cached() -> None:
    assert fields(Sample) is fields(Sample)


# ###############
# Unsupported Annotations
# ###############


def test_union_of_several_types_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError, match="union"):
        fields(BadUnion)


def test_unknown_class_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError):
        fields(BadClass)


def test_describe_unsupported_element() -> None:
    with pytest.raises(UnsupportedTypeError):
        describe("blobs", list[bytes])
