# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""The recursive core: routes every value to the codec its category calls for."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from structserde.codecs.collection import decode_collection, encode_collection
from structserde.codecs.enums import decode_enum, encode_enum
from structserde.codecs.scalar import export, transform
from structserde.codecs.wrapped import WrappedScalarFactory, decode_wrapped, encode_wrapped
from structserde.errors import MissingValueError, TransformError
from structserde.marshal.classifier import classify
from structserde.model.types import FieldMeta, TypeCategory

if TYPE_CHECKING:
    from structserde.marshal.structure import StructureMarshaller

# ###############
# Public Interface
# ###############


class Dispatcher:
    """Converts single values in both directions according to their field metadata.

    Structures are handed back to the owning :class:`StructureMarshaller`,
    collections recurse into this dispatcher once per element.
    """

    def __init__(self, marshaller: StructureMarshaller, factory: WrappedScalarFactory) -> None:
        self._marshaller = marshaller
        self._factory = factory

    def convert_in(self, raw: Any, meta: FieldMeta, path: str) -> Any:
        """Convert the raw value *raw* into the typed value *meta* declares."""
        declared_type = meta.declared_type
        category = classify(raw, declared_type)
        if category is TypeCategory.NULL:
            return _fallback(meta, path)
        if category is TypeCategory.STRUCTURE:
            return self._marshaller.build(raw, declared_type, path)
        if category is TypeCategory.ENUM:
            return decode_enum(raw, declared_type, path)
        if category is TypeCategory.COLLECTION:
            return decode_collection(raw, meta, path, self.convert_in)
        if category is TypeCategory.WRAPPED_SCALAR:
            return decode_wrapped(raw, declared_type, self._factory, path)
        # BUILT_IN is the only remaining category.
        assert category is TypeCategory.BUILT_IN
        return transform(raw, declared_type, path)

    def convert_out(self, value: Any, meta: FieldMeta, path: str) -> Any:
        """Convert the typed value *value* into its generic representation."""
        declared_type = meta.declared_type
        category = classify(value, declared_type)
        if category is TypeCategory.NULL:
            if meta.nullable:
                return None
            default = _fallback(meta, path)
            return None if default is None else self.convert_out(default, meta, path)
        if category is TypeCategory.STRUCTURE:
            _require_instance(value, meta, path)
            return self._marshaller.extract(value, path)
        if category is TypeCategory.ENUM:
            _require_instance(value, meta, path)
            return encode_enum(value, path)
        if category is TypeCategory.COLLECTION:
            return encode_collection(value, meta, path, self.convert_out)
        if category is TypeCategory.WRAPPED_SCALAR:
            _require_instance(value, meta, path)
            return encode_wrapped(value, path)
        assert category is TypeCategory.BUILT_IN
        return export(value)


# ################
# Implementation
# ################


def _fallback(meta: FieldMeta, path: str) -> Any:
    """Resolve a missing value: ``None`` if nullable, else the declared default."""
    if meta.nullable:
        return None
    if meta.has_default:
        return meta.default_value()
    raise MissingValueError(f"no value for field '{meta.name}'", path=path, declared_type=meta.declared_type)


def _require_instance(value: Any, meta: FieldMeta, path: str) -> None:
    if not isinstance(value, meta.declared_type):
        raise TransformError(
            f"expected an instance of {meta.declared_type.__name__}",
            path=path,
            declared_type=meta.declared_type,
            value=value,
        )
