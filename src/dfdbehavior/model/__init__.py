# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagram model consumed by the validator (nodes, output ports, label catalog)."""

from dfdbehavior.model.entities import DfdNode, DfdOutputPort
from dfdbehavior.model.labels import LabelType, LabelTypeError, LabelTypeRegistry, LabelValue

__all__ = [
    "DfdNode",
    "DfdOutputPort",
    "LabelType",
    "LabelTypeError",
    "LabelTypeRegistry",
    "LabelValue",
]
