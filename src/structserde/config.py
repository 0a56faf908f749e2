# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serializer configuration and its YAML loader."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic import Field as _Field

from structserde.keys import KeyConvert

# ###############
# Public Interface
# ###############


class SerializerConfigError(Exception):
    """Raised when a serializer configuration file is invalid or cannot be loaded."""


class SerializerConfig(BaseModel):
    """Presentation settings for a :class:`~structserde.serializer.StructSerializer`.

    Attributes:
        key_convert: Naming convention for structure keys; ``None`` keeps field names.
        json_indent: Indentation passed to the JSON encoder; ``None`` gives compact output.
        json_ensure_ascii: Escape non-ASCII characters in JSON output.
        json_sort_keys: Sort object keys in JSON output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key_convert: KeyConvert | None = None
    json_indent: int | None = _Field(default=4, ge=0)
    json_ensure_ascii: bool = False
    json_sort_keys: bool = False


def load_serializer_config(path: Path) -> SerializerConfig:
    """Load and validate a serializer configuration file.

    Keys in the file may use either dashes or underscores
    (``key-convert: camel`` and ``key_convert: camel`` are equivalent).

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A SerializerConfig populated from the file.

    Raises:
        SerializerConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SerializerConfigError(f"Serializer config file not found: {path}") from None
    except OSError as exc:
        raise SerializerConfigError(f"Cannot read serializer config file: {exc}") from exc

    return _parse_serializer_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_serializer_config(text: str, source_label: str = "<string>") -> SerializerConfig:
    """Parse serializer config YAML text into a SerializerConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SerializerConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return SerializerConfig()
    if not isinstance(data, dict):
        raise SerializerConfigError(f"{source_label}: serializer config must be a YAML mapping")

    normalized = {str(key).replace("-", "_"): value for key, value in data.items()}
    try:
        return SerializerConfig.model_validate(normalized)
    except ValidationError as exc:
        raise SerializerConfigError(f"{source_label}: invalid serializer config: {exc}") from exc
