# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Checked casts between raw values and built-in scalar types.

Casts never lose information silently: a float with a fractional part is
not an ``int``, and only ``True``/``False`` or the strings ``"true"`` and
``"false"`` are booleans.
"""

from __future__ import annotations

import datetime
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from structserde.errors import TransformError

# ###############
# Public Interface
# ###############


def transform(raw: Any, builtin_type: Any, path: str = "") -> Any:
    """Cast *raw* into *builtin_type*.

    Raises:
        TransformError: If *raw* cannot be represented as *builtin_type*.
    """
    if builtin_type is Any:
        return raw
    caster = _CASTERS.get(builtin_type)
    if caster is None:
        raise TransformError("unsupported built-in type", path=path, declared_type=builtin_type, value=raw)
    result = caster(raw)
    if result is _FAILED:
        raise TransformError(
            f"cannot represent {type(raw).__name__} as {builtin_type.__name__}",
            path=path,
            declared_type=builtin_type,
            value=raw,
        )
    return result


def export(value: Any) -> Any:
    """Render a built-in scalar into its JSON-compatible form."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    return value


# ################
# Implementation
# ################

_FAILED: Any = object()

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_str(raw: Any) -> Any:
    if isinstance(raw, str):
        return raw
    return _FAILED


def _to_int(raw: Any) -> Any:
    if isinstance(raw, bool):
        return _FAILED
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return int(raw)
        return _FAILED
    if isinstance(raw, str) and _INT_RE.fullmatch(raw.strip()):
        # int() refuses literals beyond the interpreter's digit limit.
        try:
            return int(raw)
        except ValueError:
            return _FAILED
    return _FAILED


def _to_float(raw: Any) -> Any:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        return _FAILED
    try:
        result = float(raw)
    except (OverflowError, ValueError):
        return _FAILED
    if not math.isfinite(result):
        return _FAILED
    # Integers beyond 2**53 do not survive the conversion exactly.
    if isinstance(raw, int) and result != raw:
        return _FAILED
    return result


def _to_bool(raw: Any) -> Any:
    if isinstance(raw, bool):
        return raw
    if raw == "true":
        return True
    if raw == "false":
        return False
    return _FAILED


def _to_decimal(raw: Any) -> Any:
    if isinstance(raw, bool):
        return _FAILED
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, float):
        raw = repr(raw)
    if isinstance(raw, (int, str)):
        try:
            result = Decimal(raw)
        except InvalidOperation:
            return _FAILED
        return result if result.is_finite() else _FAILED
    return _FAILED


def _to_datetime(raw: Any) -> Any:
    if isinstance(raw, datetime.datetime):
        return raw
    if isinstance(raw, str):
        try:
            return datetime.datetime.fromisoformat(raw)
        except ValueError:
            return _FAILED
    return _FAILED


def _to_date(raw: Any) -> Any:
    # datetime is a date subclass; a timestamp is not a calendar date.
    if isinstance(raw, datetime.date) and not isinstance(raw, datetime.datetime):
        return raw
    if isinstance(raw, str):
        try:
            return datetime.date.fromisoformat(raw)
        except ValueError:
            return _FAILED
    return _FAILED


_CASTERS: dict[Any, Any] = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
    Decimal: _to_decimal,
    datetime.datetime: _to_datetime,
    datetime.date: _to_date,
}
