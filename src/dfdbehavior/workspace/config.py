# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for diagram description files.

A diagram file lists the label catalog, the nodes with their inputs, and the
behavior text of each output port::

    validator:
      min-input-name-length: 1
    label-types:
      - name: Sensitivity
        values: [Personal, Public]
    nodes:
      - name: Process
        inputs: [request]
        outputs:
          - name: out
            behavior: |
              Forwarding({request})
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dfdbehavior.model.entities import DfdNode
from dfdbehavior.model.labels import LabelType, LabelTypeError, LabelTypeRegistry
from dfdbehavior.validation.validator import ValidatorSettings

# ###############
# Public Interface
# ###############


class ConfigError(Exception):
    """Raised when a diagram file is invalid or cannot be loaded."""


class DiagramConfig(BaseModel):
    """The parsed contents of a diagram file.

    Attributes:
        settings: Validator settings (``validator`` key).
        label_types: The label catalog (``label-types`` key).
        nodes: The nodes whose output behaviors are validated.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    settings: ValidatorSettings = Field(default_factory=ValidatorSettings, alias="validator")
    label_types: list[LabelType] = Field(default_factory=list, alias="label-types")
    nodes: list[DfdNode] = Field(default_factory=list)

    @field_validator("label_types", mode="before")
    @classmethod
    def _expand_value_shorthand(cls, raw: Any) -> Any:
        """Allow label values to be written as plain strings."""
        if not isinstance(raw, list):
            return raw
        expanded = []
        for entry in raw:
            if isinstance(entry, dict) and isinstance(entry.get("values"), list):
                values = [{"text": v} if isinstance(v, str) else v for v in entry["values"]]
                entry = {**entry, "values": values}
            expanded.append(entry)
        return expanded

    @model_validator(mode="after")
    def _unique_node_names(self) -> DiagramConfig:
        seen: set[str] = set()
        for node in self.nodes:
            if node.name in seen:
                raise ValueError(f"duplicate node name: {node.name}")
            seen.add(node.name)
        return self

    def build_registry(self) -> LabelTypeRegistry:
        """Create a label type registry holding the configured label types.

        Raises:
            LabelTypeError: If two label types share a name.
        """
        return LabelTypeRegistry(list(self.label_types))


def load_diagram_config(path: Path) -> DiagramConfig:
    """Load and validate a diagram file.

    Args:
        path: Path to the YAML (or JSON) diagram file.

    Returns:
        A validated DiagramConfig instance.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Diagram file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read diagram file: {exc}") from exc

    return parse_diagram_config(text, source_label=str(path))


def parse_diagram_config(text: str, source_label: str = "<string>") -> DiagramConfig:
    """Parse diagram YAML text into a DiagramConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ConfigError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: diagram file must be a YAML mapping")

    try:
        config = DiagramConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid diagram file {source_label}: {exc}") from exc

    try:
        config.build_registry()
    except LabelTypeError as exc:
        raise ConfigError(f"{source_label}: {exc}") from exc
    return config


def load_label_catalog(path: Path) -> LabelTypeRegistry:
    """Load only the label catalog of a diagram file.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    return load_diagram_config(path).build_registry()
