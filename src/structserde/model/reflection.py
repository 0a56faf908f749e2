# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shape reflection: field metadata extracted from structure declarations.

The metadata for a structure type is computed once from its dataclass
fields and resolved type hints, then cached for the life of the process.
Every conversion reads the same immutable :class:`FieldMeta` tuple.
"""

from __future__ import annotations

import dataclasses
import datetime
import functools
import types
import typing
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from structserde.errors import InvalidTargetError, UnsupportedTypeError
from structserde.model.types import (
    FieldMeta,
    is_enum_type,
    is_struct_type,
    is_wrapped_scalar_type,
)

# ###############
# Public Interface
# ###############

BUILT_IN_TYPES: tuple[Any, ...] = (
    str,
    int,
    float,
    bool,
    Decimal,
    datetime.datetime,
    datetime.date,
    Any,
)


def fields(struct_type: type) -> tuple[FieldMeta, ...]:
    """Return the field metadata of *struct_type* in declaration order.

    Raises:
        InvalidTargetError: If *struct_type* is not a structure.
        UnsupportedTypeError: If a field annotation has no conversion rule.
    """
    if not is_struct_type(struct_type):
        raise InvalidTargetError(
            "target type must be a dataclass deriving from Struct",
            declared_type=struct_type,
        )
    return _cached_fields(struct_type)


def describe(name: str, annotation: Any) -> FieldMeta:
    """Build the metadata for a value annotated with *annotation*.

    Used for structure fields and, recursively, for collection elements.
    """
    nullable = False
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = typing.get_args(annotation)
        non_none = [m for m in members if m is not type(None)]
        if len(non_none) != 1:
            raise UnsupportedTypeError(
                f"field '{name}' declares a union of several types",
                declared_type=annotation,
            )
        nullable = len(non_none) != len(members)
        annotation = non_none[0]
        origin = typing.get_origin(annotation)

    if annotation in (list, Sequence) or origin in (list, Sequence):
        args = typing.get_args(annotation)
        return FieldMeta(
            name=name,
            declared_type=list,
            nullable=nullable,
            element=describe(name, args[0]) if args else None,
            keyed=False,
        )
    if annotation in (dict, Mapping) or origin in (dict, Mapping):
        args = typing.get_args(annotation)
        return FieldMeta(
            name=name,
            declared_type=dict,
            nullable=nullable,
            element=describe(name, args[1]) if len(args) == 2 else None,
            keyed=True,
        )

    if not _is_supported(annotation):
        raise UnsupportedTypeError(
            f"field '{name}' has no conversion rule for its type",
            declared_type=annotation,
        )
    return FieldMeta(name=name, declared_type=annotation, nullable=nullable)


# ################
# Implementation
# ################


@functools.cache
def _cached_fields(struct_type: type) -> tuple[FieldMeta, ...]:
    try:
        hints = typing.get_type_hints(struct_type)
    except NameError as exc:
        raise UnsupportedTypeError(
            f"cannot resolve field annotations: {exc}",
            declared_type=struct_type,
        ) from exc

    result: list[FieldMeta] = []
    for field in dataclasses.fields(struct_type):
        meta = describe(field.name, hints[field.name])
        has_factory = field.default_factory is not dataclasses.MISSING
        has_default = field.default is not dataclasses.MISSING
        result.append(
            meta.model_copy(
                update={
                    "has_default": has_default or has_factory,
                    "default": field.default if has_default else None,
                    "default_factory": field.default_factory if has_factory else None,
                    "init": field.init,
                }
            )
        )
    return tuple(result)


def _is_supported(annotation: Any) -> bool:
    if annotation in BUILT_IN_TYPES:
        return True
    return is_enum_type(annotation) or is_wrapped_scalar_type(annotation) or is_struct_type(annotation)
