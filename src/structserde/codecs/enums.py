# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between enum members and their external representation.

An enum is *backed* when every member value is a ``str`` or an ``int``; its
members travel as those values. Any other enum travels by member name.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from structserde.errors import InvalidEnumRawTypeError, TransformError, UnknownEnumValueError

# ###############
# Public Interface
# ###############


def decode_enum(raw: Any, enum_type: type[Enum], path: str = "") -> Enum:
    """Look up the member of *enum_type* that *raw* denotes.

    Raises:
        InvalidEnumRawTypeError: If *raw* is neither a ``str`` nor an ``int``.
        UnknownEnumValueError: If no member matches *raw*.
    """
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise InvalidEnumRawTypeError(
            "enum value must be a string or an integer",
            path=path,
            declared_type=enum_type,
            value=raw,
        )

    if is_backed(enum_type):
        for member in enum_type:
            if type(member.value) is type(raw) and member.value == raw:
                return member
    elif isinstance(raw, str) and raw in enum_type.__members__:
        return enum_type.__members__[raw]
    raise UnknownEnumValueError("value is not allowed for enum", path=path, declared_type=enum_type, value=raw)


def encode_enum(value: Any, path: str = "") -> str | int:
    """Return the external representation of the enum member *value*."""
    if not isinstance(value, Enum):
        raise TransformError("expected an enum member", path=path, value=value)
    if is_backed(type(value)):
        return value.value
    return value.name


def is_backed(enum_type: type[Enum]) -> bool:
    """Return whether every member of *enum_type* has a ``str`` or ``int`` value."""
    return all(_is_backing_value(member.value) for member in enum_type)


# ################
# Implementation
# ################


def _is_backing_value(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (str, int))
