# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Element-wise conversion of ordered and keyed collections.

Each element is handed back to the caller-supplied *convert* callable
(the dispatcher), so elements may themselves be structures or collections.
The first failing element aborts the whole collection.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from structserde.errors import MissingElementTypeError, NotACollectionError
from structserde.model.types import FieldMeta

# ###############
# Public Interface
# ###############

Convert = Callable[[Any, FieldMeta, str], Any]


def decode_collection(raw: Any, meta: FieldMeta, path: str, convert: Convert) -> list[Any] | dict[Any, Any]:
    """Convert the raw collection *raw* into a ``list`` or ``dict`` of typed elements.

    Ordered collections discard any input keys and keep input order; keyed
    collections keep input keys (list input is keyed by index).

    Raises:
        NotACollectionError: If *raw* is not a list, tuple or mapping.
        MissingElementTypeError: If *meta* declares no element type.
    """
    items = _raw_items(raw, meta, path)
    element = _require_element(meta, path)
    if meta.keyed:
        return {key: convert(value, element, _element_path(path, key)) for key, value in items}
    return [convert(value, element, _element_path(path, index)) for index, (_, value) in enumerate(items)]


def encode_collection(value: Any, meta: FieldMeta, path: str, convert: Convert) -> list[Any] | dict[Any, Any]:
    """Convert the typed collection *value* into a ``list`` or ``dict`` of raw elements."""
    items = _raw_items(value, meta, path)
    element = _require_element(meta, path)
    if meta.keyed:
        return {key: convert(item, element, _element_path(path, key)) for key, item in items}
    return [convert(item, element, _element_path(path, index)) for index, (_, item) in enumerate(items)]


# ################
# Implementation
# ################


def _raw_items(raw: Any, meta: FieldMeta, path: str) -> list[tuple[Any, Any]]:
    if isinstance(raw, Mapping):
        return list(raw.items())
    if isinstance(raw, (list, tuple)):
        return list(enumerate(raw))
    raise NotACollectionError("value is not a collection", path=path, declared_type=meta.declared_type, value=raw)


def _require_element(meta: FieldMeta, path: str) -> FieldMeta:
    if meta.element is None:
        raise MissingElementTypeError(
            f"the element type of collection field '{meta.name}' must be declared",
            path=path,
            declared_type=meta.declared_type,
        )
    return meta.element


def _element_path(path: str, key: Any) -> str:
    return f"{path}[{key!r}]" if isinstance(key, str) else f"{path}[{key}]"
