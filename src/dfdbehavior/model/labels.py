# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Label types, label values and the registry holding them."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class LabelValue(BaseModel):
    """One permitted value of a label type, e.g. ``Secret``."""

    model_config = ConfigDict(extra="forbid")

    id: str = _Field(default_factory=lambda: uuid.uuid4().hex)
    text: str


class LabelType(BaseModel):
    """A named category of labels, e.g. ``Classification``."""

    model_config = ConfigDict(extra="forbid")

    id: str = _Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    values: list[LabelValue] = _Field(default_factory=list)

    @field_validator("values")
    @classmethod
    def _unique_value_texts(cls, values: list[LabelValue]) -> list[LabelValue]:
        seen: set[str] = set()
        for value in values:
            if value.text in seen:
                raise ValueError(f"duplicate label value: {value.text}")
            seen.add(value.text)
        return values

    def get_value(self, text: str) -> LabelValue | None:
        """Return the value with the given text, or None."""
        for value in self.values:
            if value.text == text:
                return value
        return None


class LabelTypeError(Exception):
    """Raised when the registry would end up with two label types of the same name."""


class LabelTypeRegistry:
    """The catalog of label types known in a diagram.

    The registry is owned by the diagram; validators only read from it.
    """

    def __init__(self, label_types: list[LabelType] | None = None) -> None:
        self._label_types: list[LabelType] = []
        for label_type in label_types or []:
            self.register_label_type(label_type)

    def get_label_types(self) -> list[LabelType]:
        """Return all label types in registration order."""
        return list(self._label_types)

    def get_label_type(self, name: str) -> LabelType | None:
        """Return the label type called *name*, or None."""
        for label_type in self._label_types:
            if label_type.name == name:
                return label_type
        return None

    def register_label_type(self, label_type: LabelType) -> None:
        """Add a label type.

        Raises:
            LabelTypeError: If a label type with the same name is registered.
        """
        if self.get_label_type(label_type.name) is not None:
            raise LabelTypeError(f"Label type '{label_type.name}' is already registered")
        self._label_types.append(label_type)

    def unregister_label_type(self, name: str) -> None:
        """Remove the label type called *name*; unknown names are ignored."""
        self._label_types = [t for t in self._label_types if t.name != name]
