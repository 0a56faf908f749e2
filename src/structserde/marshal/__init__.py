# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-directed traversal: classification, dispatch and structure marshalling."""

from structserde.marshal.classifier import classify
from structserde.marshal.dispatcher import Dispatcher
from structserde.marshal.structure import ObjectAdapter, StructureMarshaller

__all__ = [
    "classify",
    "Dispatcher",
    "ObjectAdapter",
    "StructureMarshaller",
]
