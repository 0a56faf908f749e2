# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Leaf codecs: built-in scalars, enums, wrapped scalars and collections."""

from structserde.codecs.collection import decode_collection, encode_collection
from structserde.codecs.enums import decode_enum, encode_enum, is_backed
from structserde.codecs.scalar import export, transform
from structserde.codecs.wrapped import (
    DefaultWrappedScalarFactory,
    WrappedScalarFactory,
    decode_wrapped,
    encode_wrapped,
)

__all__ = [
    "transform",
    "export",
    "decode_enum",
    "encode_enum",
    "is_backed",
    "WrappedScalarFactory",
    "DefaultWrappedScalarFactory",
    "decode_wrapped",
    "encode_wrapped",
    "decode_collection",
    "encode_collection",
]
