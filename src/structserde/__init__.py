# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-directed conversion between structures and mappings, objects and JSON."""

from structserde.codecs.wrapped import DefaultWrappedScalarFactory, WrappedScalarFactory
from structserde.config import SerializerConfig, SerializerConfigError, load_serializer_config
from structserde.errors import (
    EncodingError,
    EnumError,
    InvalidEnumRawTypeError,
    InvalidTargetError,
    InvalidWrappedScalarError,
    MalformedJsonError,
    MissingElementTypeError,
    MissingValueError,
    NotACollectionError,
    SerializationError,
    TransformError,
    UnknownEnumValueError,
    UnrepresentableInputError,
    UnsupportedTypeError,
)
from structserde.keys import KeyConvert
from structserde.model import Struct, WrappedScalar
from structserde.serializer import (
    StructSerializer,
    deserialize,
    deserialize_from_json,
    serialize,
    serialize_to_json,
)

__all__ = [
    # Facade
    "serialize",
    "deserialize",
    "serialize_to_json",
    "deserialize_from_json",
    "StructSerializer",
    # Model
    "Struct",
    "WrappedScalar",
    "WrappedScalarFactory",
    "DefaultWrappedScalarFactory",
    "KeyConvert",
    # Configuration
    "SerializerConfig",
    "SerializerConfigError",
    "load_serializer_config",
    # Errors
    "SerializationError",
    "InvalidTargetError",
    "UnrepresentableInputError",
    "MissingValueError",
    "MissingElementTypeError",
    "NotACollectionError",
    "EnumError",
    "InvalidEnumRawTypeError",
    "UnknownEnumValueError",
    "InvalidWrappedScalarError",
    "TransformError",
    "UnsupportedTypeError",
    "MalformedJsonError",
    "EncodingError",
]
