# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of (declared type, raw value) pairs into conversion rules."""

from __future__ import annotations

from typing import Any

from structserde.model.types import (
    TypeCategory,
    is_enum_type,
    is_struct_type,
    is_wrapped_scalar_type,
)

# ###############
# Public Interface
# ###############

COLLECTION_TYPES: tuple[type, ...] = (list, dict)


def classify(raw: Any, declared_type: Any) -> TypeCategory:
    """Return the conversion rule for *raw* declared as *declared_type*.

    Rules are checked in order and the first match wins. Only the absence
    of *raw* is inspected, never its shape.
    """
    if raw is None:
        return TypeCategory.NULL
    if is_enum_type(declared_type):
        return TypeCategory.ENUM
    if is_wrapped_scalar_type(declared_type):
        return TypeCategory.WRAPPED_SCALAR
    if is_struct_type(declared_type):
        return TypeCategory.STRUCTURE
    if declared_type in COLLECTION_TYPES:
        return TypeCategory.COLLECTION
    return TypeCategory.BUILT_IN
