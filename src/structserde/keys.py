# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming conventions for the external keys of serialized structures."""

from __future__ import annotations

import re
from enum import Enum

# ###############
# Public Interface
# ###############


class KeyConvert(Enum):
    """Naming convention applied to structure field names on the wire."""

    SNAKE = "snake"
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"


def convert_key(name: str, key_convert: KeyConvert | None) -> str:
    """Render the field *name* in the *key_convert* convention.

    ``None`` leaves the name untouched.

    >>> convert_key("created_at", KeyConvert.CAMEL)
    'createdAt'
    """
    if key_convert is None:
        return name
    words = _split_words(name)
    if not words:
        return name
    if key_convert is KeyConvert.SNAKE:
        return "_".join(w.lower() for w in words)
    if key_convert is KeyConvert.KEBAB:
        return "-".join(w.lower() for w in words)
    if key_convert is KeyConvert.PASCAL:
        return "".join(w.capitalize() for w in words)
    assert key_convert is KeyConvert.CAMEL
    return words[0].lower() + "".join(w.capitalize() for w in words[1:])


# ################
# Implementation
# ################

# Acronym runs ("HTTPServer" -> "HTTP", "Server"), capitalized words, lowercase runs, digit runs.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def _split_words(name: str) -> list[str]:
    return _WORD_RE.findall(name)
