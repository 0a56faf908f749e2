# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for structserde: structure capabilities and field metadata."""

from structserde.model.reflection import BUILT_IN_TYPES, describe, fields
from structserde.model.types import (
    FieldMeta,
    Struct,
    TypeCategory,
    WrappedScalar,
    is_enum_type,
    is_struct_type,
    is_wrapped_scalar_type,
)

__all__ = [
    # Capabilities
    "Struct",
    "WrappedScalar",
    "is_struct_type",
    "is_enum_type",
    "is_wrapped_scalar_type",
    # Metadata
    "FieldMeta",
    "TypeCategory",
    "BUILT_IN_TYPES",
    "describe",
    "fields",
]
