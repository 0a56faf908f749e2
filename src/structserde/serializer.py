# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Public entry points: structures to and from mappings and JSON text.

The module-level functions use a default :class:`StructSerializer`; create
your own instance to change key naming, JSON formatting, the wrapped scalar
factory or the object adapters.

Usage::

    point = deserialize({"x": 3, "y": 4}, Point)
    assert serialize(point) == {"x": 3, "y": 4}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from structserde.codecs.wrapped import WrappedScalarFactory
from structserde.config import SerializerConfig
from structserde.errors import EncodingError, InvalidTargetError, MalformedJsonError, SerializationError
from structserde.keys import KeyConvert
from structserde.log import get_logger
from structserde.marshal.structure import ObjectAdapter, StructureMarshaller
from structserde.model.types import Struct, is_struct_type

log = get_logger(__name__)

S = TypeVar("S", bound=Struct)

# ###############
# Public Interface
# ###############


class StructSerializer:
    """Configurable facade over :class:`StructureMarshaller` and the JSON codec.

    Args:
        config: Key naming and JSON formatting settings.
        factory: Factory for wrapped scalars.
        object_adapters: Per-type callables projecting input objects into mappings.

    Every method takes an optional *key_convert* that overrides the
    configured naming convention for that call.
    """

    def __init__(
        self,
        config: SerializerConfig | None = None,
        factory: WrappedScalarFactory | None = None,
        object_adapters: Mapping[type, ObjectAdapter] | None = None,
    ) -> None:
        self.config = config or SerializerConfig()
        self._factory = factory
        self._object_adapters = object_adapters
        self._default_marshaller = self._new_marshaller(self.config.key_convert)

    def serialize(self, struct: Struct, key_convert: KeyConvert | None = None) -> dict[str, Any]:
        """Return the generic representation of *struct*.

        Raises:
            InvalidTargetError: If *struct* is not a structure instance.
            SerializationError: If a field value cannot be converted.
        """
        if not is_struct_type(type(struct)):
            raise InvalidTargetError("only structure instances can be serialized", value=struct)
        log.debug("struct.serialize", struct=type(struct).__qualname__)
        try:
            return self._marshaller(key_convert).extract(struct)
        except SerializationError as exc:
            log.debug("struct.serialize.failed", struct=type(struct).__qualname__, error=str(exc))
            raise

    def deserialize(self, data: Any, struct_type: type[S], key_convert: KeyConvert | None = None) -> S:
        """Build a *struct_type* instance from a mapping or an object.

        Raises:
            UnrepresentableInputError: If *data* cannot be normalized into a mapping.
            InvalidTargetError: If *struct_type* is not a structure.
            SerializationError: If a field value cannot be converted.
        """
        target = getattr(struct_type, "__qualname__", repr(struct_type))
        log.debug("struct.deserialize", target=target)
        try:
            return self._marshaller(key_convert).build(data, struct_type)
        except SerializationError as exc:
            log.debug("struct.deserialize.failed", target=target, path=exc.path, error=str(exc))
            raise

    def serialize_to_json(self, struct: Struct, key_convert: KeyConvert | None = None) -> str:
        """Return *struct* encoded as JSON text.

        Raises:
            EncodingError: If the generic representation is not JSON encodable.
        """
        data = self.serialize(struct, key_convert)
        try:
            return json.dumps(
                data,
                indent=self.config.json_indent,
                ensure_ascii=self.config.json_ensure_ascii,
                sort_keys=self.config.json_sort_keys,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"cannot encode as JSON: {exc}", declared_type=type(struct)) from exc

    def deserialize_from_json(self, text: str, struct_type: type[S], key_convert: KeyConvert | None = None) -> S:
        """Build a *struct_type* instance from JSON text.

        Raises:
            MalformedJsonError: If *text* is not valid JSON.
            UnrepresentableInputError: If the JSON document is not an object.
        """
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise MalformedJsonError(f"cannot parse JSON: {exc.msg} at line {exc.lineno} column {exc.colno}") from exc
        except ValueError as exc:
            raise MalformedJsonError(f"cannot parse JSON: {exc}") from exc
        return self.deserialize(data, struct_type, key_convert)

    def _marshaller(self, key_convert: KeyConvert | None) -> StructureMarshaller:
        if key_convert is None or key_convert is self.config.key_convert:
            return self._default_marshaller
        return self._new_marshaller(key_convert)

    def _new_marshaller(self, key_convert: KeyConvert | None) -> StructureMarshaller:
        return StructureMarshaller(key_convert, self._factory, self._object_adapters)


def serialize(struct: Struct, key_convert: KeyConvert | None = None) -> dict[str, Any]:
    """Return the generic representation of *struct*."""
    return _DEFAULT.serialize(struct, key_convert)


def deserialize(data: Any, struct_type: type[S], key_convert: KeyConvert | None = None) -> S:
    """Build a *struct_type* instance from a mapping or an object."""
    return _DEFAULT.deserialize(data, struct_type, key_convert)


def serialize_to_json(struct: Struct, key_convert: KeyConvert | None = None) -> str:
    """Return *struct* encoded as pretty-printed JSON text."""
    return _DEFAULT.serialize_to_json(struct, key_convert)


def deserialize_from_json(text: str, struct_type: type[S], key_convert: KeyConvert | None = None) -> S:
    """Build a *struct_type* instance from JSON text."""
    return _DEFAULT.deserialize_from_json(text, struct_type, key_convert)


# ################
# Implementation
# ################

_DEFAULT = StructSerializer()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON number")
