# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion between wrapped scalars and their canonical text form."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Protocol

from structserde.errors import InvalidWrappedScalarError, TransformError
from structserde.model.types import WrappedScalar

# ###############
# Public Interface
# ###############


class WrappedScalarFactory(Protocol):
    """Builds wrapped scalars from their canonical text form."""

    def from_text(self, wrapped_type: type[WrappedScalar], text: str) -> WrappedScalar:
        """Return an instance of *wrapped_type* for *text*.

        Raises:
            ValueError: If *text* is not valid for *wrapped_type*.
        """
        ...


class DefaultWrappedScalarFactory:
    """Factory delegating to :meth:`WrappedScalar.from_text` of the requested type."""

    def from_text(self, wrapped_type: type[WrappedScalar], text: str) -> WrappedScalar:
        return wrapped_type.from_text(text)


def decode_wrapped(
    raw: Any,
    wrapped_type: type[WrappedScalar],
    factory: WrappedScalarFactory,
    path: str = "",
) -> WrappedScalar:
    """Build a *wrapped_type* instance from *raw* through *factory*.

    Raises:
        InvalidWrappedScalarError: If *raw* has no text form or the factory rejects it.
    """
    text = _to_text(raw)
    if text is None:
        raise InvalidWrappedScalarError(
            "wrapped scalar value must be text or a number",
            path=path,
            declared_type=wrapped_type,
            value=raw,
        )
    try:
        result = factory.from_text(wrapped_type, text)
    except (ValueError, TypeError, ArithmeticError) as exc:
        raise InvalidWrappedScalarError(
            f"rejected by factory: {exc}", path=path, declared_type=wrapped_type, value=raw
        ) from exc
    if not isinstance(result, wrapped_type):
        raise InvalidWrappedScalarError(
            f"factory returned {type(result).__name__}",
            path=path,
            declared_type=wrapped_type,
            value=raw,
        )
    return result


def encode_wrapped(value: Any, path: str = "") -> str:
    """Return the canonical text form of the wrapped scalar *value*."""
    if not isinstance(value, WrappedScalar):
        raise TransformError("expected a wrapped scalar", path=path, value=value)
    return value.to_text()


# ################
# Implementation
# ################


def _to_text(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        return str(raw)
    return None
