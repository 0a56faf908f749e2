# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field-by-field marshalling of structures.

:meth:`StructureMarshaller.build` turns a mapping (or an object projected
into one) into a structure instance; :meth:`StructureMarshaller.extract`
turns a structure instance into an ordered ``dict``. Both walk the field
metadata supplied by :func:`structserde.model.reflection.fields` and hand
every field value to the :class:`Dispatcher`.
"""

from __future__ import annotations

import dataclasses
import datetime
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from structserde.codecs.enums import encode_enum
from structserde.codecs.wrapped import DefaultWrappedScalarFactory, WrappedScalarFactory
from structserde.errors import UnrepresentableInputError
from structserde.keys import KeyConvert, convert_key
from structserde.marshal.dispatcher import Dispatcher
from structserde.model.reflection import fields
from structserde.model.types import FieldMeta, Struct

# ###############
# Public Interface
# ###############

ObjectAdapter = Callable[[Any], Mapping[str, Any]]


class StructureMarshaller:
    """Builds structures from generic data and extracts generic data from structures.

    Args:
        key_convert: Naming convention of the external keys; ``None`` uses field names.
        factory: Factory for wrapped scalars; defaults to :class:`DefaultWrappedScalarFactory`.
        object_adapters: Per-type callables projecting input objects into mappings.
            They take precedence over the built-in projections.
    """

    def __init__(
        self,
        key_convert: KeyConvert | None = None,
        factory: WrappedScalarFactory | None = None,
        object_adapters: Mapping[type, ObjectAdapter] | None = None,
    ) -> None:
        self._key_convert = key_convert
        self._object_adapters = dict(object_adapters or {})
        self._dispatcher = Dispatcher(self, factory or DefaultWrappedScalarFactory())

    @property
    def dispatcher(self) -> Dispatcher:
        """The dispatcher converting individual field values."""
        return self._dispatcher

    def build(self, data: Any, struct_type: type[Struct], path: str = "") -> Any:
        """Build a fresh *struct_type* instance from *data*.

        Every field is converted before the instance is created, so a
        failure never leaves a partially initialized structure behind.

        Raises:
            UnrepresentableInputError: If *data* cannot be normalized into a mapping.
            InvalidTargetError: If *struct_type* is not a structure.
            SerializationError: If any field fails to convert.
        """
        mapping = self._normalize(data, path)
        metas = fields(struct_type)
        values: dict[str, Any] = {}
        for meta in metas:
            key = convert_key(meta.name, self._key_convert)
            values[meta.name] = self._dispatcher.convert_in(mapping.get(key), meta, _join(path, key))
        return _instantiate(struct_type, metas, values)

    def extract(self, struct: Any, path: str = "") -> dict[str, Any]:
        """Return the generic representation of *struct* in field declaration order.

        Raises:
            InvalidTargetError: If *struct* is not a structure instance.
            SerializationError: If any field fails to convert.
        """
        result: dict[str, Any] = {}
        for meta in fields(type(struct)):
            key = convert_key(meta.name, self._key_convert)
            result[key] = self._dispatcher.convert_out(getattr(struct, meta.name), meta, _join(path, key))
        return result

    def _normalize(self, data: Any, path: str) -> Mapping[str, Any]:
        """Return *data* as a mapping keyed in the external naming convention.

        Objects are projected shallowly: only their direct members are
        rendered (date/time values as ISO-8601 text, enum members through
        the enum codec); nested values are left to the dispatcher.
        """
        if isinstance(data, Mapping):
            return data
        members = self._project(data, path)
        return {convert_key(name, self._key_convert): _render_member(value) for name, value in members.items()}

    def _project(self, data: Any, path: str) -> Mapping[str, Any]:
        for adapted_type, adapter in self._object_adapters.items():
            if isinstance(data, adapted_type):
                members = adapter(data)
                if not isinstance(members, Mapping):
                    raise UnrepresentableInputError(
                        f"adapter for {adapted_type.__name__} did not return a mapping",
                        path=path,
                        value=data,
                    )
                return members
        if isinstance(data, BaseModel):
            return dict(data)
        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
        if _has_plain_members(data):
            return {name: value for name, value in vars(data).items() if not name.startswith("_")}
        raise UnrepresentableInputError("input cannot be represented as a mapping", path=path, value=data)


# ################
# Implementation
# ################


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _instantiate(struct_type: type, metas: tuple[FieldMeta, ...], values: dict[str, Any]) -> Any:
    init_values = {meta.name: values[meta.name] for meta in metas if meta.init}
    instance = struct_type(**init_values)
    for meta in metas:
        if not meta.init:
            # object.__setattr__ also works on frozen dataclasses.
            object.__setattr__(instance, meta.name, values[meta.name])
    return instance


def _has_plain_members(data: Any) -> bool:
    if isinstance(data, (type, datetime.date, datetime.time, Enum)):
        return False
    return hasattr(data, "__dict__")


def _render_member(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return encode_enum(value)
    return value
