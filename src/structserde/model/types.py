# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Capabilities and metadata types for the structserde data model."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class Struct:
    """Marker base class for structures.

    A structure is a dataclass deriving from this class::

        @dataclass
        class Point(Struct):
            x: int
            y: int
    """

    __slots__ = ()


class WrappedScalar(ABC):
    """A validated scalar value type with a canonical text form."""

    @classmethod
    @abstractmethod
    def from_text(cls, text: str) -> WrappedScalar:
        """Build an instance from its canonical text form.

        Raises:
            ValueError: If *text* is not a valid representation.
        """

    @abstractmethod
    def to_text(self) -> str:
        """Return the canonical text form."""


class TypeCategory(Enum):
    """Conversion rule that applies to a (declared type, raw value) pair."""

    STRUCTURE = "structure"
    NULL = "null"
    ENUM = "enum"
    COLLECTION = "collection"
    WRAPPED_SCALAR = "wrapped_scalar"
    BUILT_IN = "built_in"


class FieldMeta(BaseModel):
    """Shape of a single structure field or collection element.

    Attributes:
        name: Field name as declared on the dataclass.
        declared_type: Declared type with any ``None`` union member removed.
            Collections are reported as ``list`` or ``dict``.
        nullable: Whether ``None`` is an accepted value.
        has_default: Whether the field declares a default or default factory.
        default: The declared default value.
        default_factory: The declared default factory, if any.
        init: Whether the field is accepted by the dataclass constructor.
        element: Shape of the collection elements, ``None`` if undeclared.
        keyed: Whether the collection is map-like.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    declared_type: Any
    nullable: bool = False
    has_default: bool = False
    default: Any = None
    default_factory: Callable[[], Any] | None = None
    init: bool = True
    element: FieldMeta | None = None
    keyed: bool = False

    def default_value(self) -> Any:
        """Return the declared default, building a fresh one from the factory if declared."""
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


def is_struct_type(declared_type: Any) -> bool:
    """Return whether *declared_type* satisfies the structure capability."""
    return (
        isinstance(declared_type, type)
        and issubclass(declared_type, Struct)
        and dataclasses.is_dataclass(declared_type)
    )


def is_enum_type(declared_type: Any) -> bool:
    """Return whether *declared_type* is an enumeration."""
    return isinstance(declared_type, type) and issubclass(declared_type, Enum)


def is_wrapped_scalar_type(declared_type: Any) -> bool:
    """Return whether *declared_type* implements the wrapped scalar capability."""
    return isinstance(declared_type, type) and issubclass(declared_type, WrappedScalar)


# Resolve the self-reference on FieldMeta.element.
FieldMeta.model_rebuild()
