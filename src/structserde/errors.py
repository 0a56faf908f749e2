# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy raised by the structserde conversion engine.

Every error carries the location (``path``) at which the conversion failed,
the declared type that was being targeted and the offending raw value, so a
failure can be diagnosed without re-running the conversion.
"""

from __future__ import annotations

from typing import Any

# ###############
# Public Interface
# ###############

_UNSET: Any = object()


class SerializationError(Exception):
    """Base class for all conversion failures.

    Attributes:
        path: Dotted location of the failing value, e.g. ``profile.tags[2]``.
        declared_type: The type the value was converted to or from, if known.
        value: The offending raw or typed value, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str = "",
        declared_type: Any = None,
        value: Any = _UNSET,
    ) -> None:
        self.message = message
        self.path = path
        self.declared_type = declared_type
        self.value = None if value is _UNSET else value
        super().__init__(_format_message(message, path, declared_type, value))


class InvalidTargetError(SerializationError):
    """Raised when the requested type is not a structure."""


class UnrepresentableInputError(SerializationError):
    """Raised when deserialize input cannot be normalized into a mapping."""


class MissingValueError(SerializationError):
    """Raised when a non-nullable field without a default has no value."""


class MissingElementTypeError(SerializationError):
    """Raised when a collection field does not declare its element type."""


class NotACollectionError(SerializationError):
    """Raised when the raw value of a collection field is not collection-shaped."""


class EnumError(SerializationError):
    """Base class for enum decoding failures."""


class InvalidEnumRawTypeError(EnumError):
    """Raised when an enum raw value is neither text nor an integer."""


class UnknownEnumValueError(EnumError):
    """Raised when an enum raw value matches no member."""


class InvalidWrappedScalarError(SerializationError):
    """Raised when a wrapped scalar cannot be built from its text form."""


class TransformError(SerializationError):
    """Raised when a built-in scalar cast is impossible."""


class UnsupportedTypeError(SerializationError):
    """Raised when a field annotation cannot be mapped onto a conversion rule."""


class MalformedJsonError(SerializationError):
    """Raised when text given to a JSON entry point is not valid JSON."""


class EncodingError(SerializationError):
    """Raised when a generic representation cannot be encoded as JSON."""


# ################
# Implementation
# ################


def _format_message(message: str, path: str, declared_type: Any, value: Any) -> str:
    parts = [f"{path}: {message}" if path else message]
    if declared_type is not None:
        parts.append(f"declared type: {_type_name(declared_type)}")
    if value is not _UNSET:
        parts.append(f"value: {_short_repr(value)}")
    return "; ".join(parts)


def _type_name(declared_type: Any) -> str:
    if isinstance(declared_type, type):
        return declared_type.__qualname__
    return repr(declared_type)


def _short_repr(value: Any, limit: int = 80) -> str:
    text = repr(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text
