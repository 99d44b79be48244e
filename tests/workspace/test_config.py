# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the diagram file loader."""

from pathlib import Path

import pytest

from dfdbehavior.model import DfdNode
from dfdbehavior.workspace import (
    ConfigError,
    DiagramConfig,
    load_diagram_config,
    load_label_catalog,
    parse_diagram_config,
)

# ###############
# Helpers
# ###############


def _write_diagram(tmp_path: Path, content: str) -> Path:
    """Write a diagram file and return its path."""
    diagram_file = tmp_path / "diagram.yaml"
    diagram_file.write_text(content, encoding="utf-8")
    return diagram_file


_FULL_DIAGRAM = """\
validator:
  min-input-name-length: 2
label-types:
  - name: Sensitivity
    values: [Personal, Public]
  - id: t-out
    name: Out
    values:
      - id: v-1
        text: v
nodes:
  - name: Process
    inputs: [request, session]
    outputs:
      - name: out
        behavior: |
          Forwarding({request})
          Assignment({session};Sensitivity.Personal;{Out.v})
"""

# ###############
# Normal Cases
# ###############


def test_full_diagram(tmp_path: Path) -> None:
    """All sections of a diagram file are parsed."""
    config = load_diagram_config(_write_diagram(tmp_path, _FULL_DIAGRAM))

    assert isinstance(config, DiagramConfig)
    assert config.settings.min_input_name_length == 2
    assert [t.name for t in config.label_types] == ["Sensitivity", "Out"]
    assert len(config.nodes) == 1
    node = config.nodes[0]
    assert isinstance(node, DfdNode)
    assert node.inputs == ["request", "session"]
    assert node.outputs[0].behavior.splitlines() == [
        "Forwarding({request})",
        "Assignment({session};Sensitivity.Personal;{Out.v})",
    ]


def test_ports_are_attached_to_their_nodes() -> None:
    """Loaded output ports know the node they belong to."""
    config = parse_diagram_config(_FULL_DIAGRAM)
    node = config.nodes[0]
    assert node.outputs[0].parent is node


def test_value_shorthand_and_explicit_ids() -> None:
    """Label values may be plain strings or mappings with an id."""
    config = parse_diagram_config(_FULL_DIAGRAM)
    sensitivity, out = config.label_types
    assert [v.text for v in sensitivity.values] == ["Personal", "Public"]
    assert out.id == "t-out"
    assert out.values[0].id == "v-1"


def test_empty_file_uses_defaults() -> None:
    """An empty diagram file gives default settings and no nodes."""
    config = parse_diagram_config("")
    assert config.settings.min_input_name_length == 1
    assert config.label_types == []
    assert config.nodes == []


def test_build_registry() -> None:
    """The configured label types end up in a registry."""
    registry = parse_diagram_config(_FULL_DIAGRAM).build_registry()
    assert registry.get_label_type("Sensitivity") is not None
    assert len(registry.get_label_types()) == 2


def test_load_label_catalog(tmp_path: Path) -> None:
    """A diagram file can be used as a pure label catalog."""
    content = "label-types:\n  - name: Color\n    values: [Red]\n"
    registry = load_label_catalog(_write_diagram(tmp_path, content))
    color = registry.get_label_type("Color")
    assert color is not None
    assert color.get_value("Red") is not None


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing diagram file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_diagram_config(tmp_path / "missing.yaml")


def test_invalid_yaml() -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_diagram_config("nodes: [unclosed", source_label="broken.yaml")


def test_top_level_must_be_mapping() -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        parse_diagram_config("- a\n- b\n")


def test_unknown_key_rejected() -> None:
    """Unknown top-level keys are reported."""
    with pytest.raises(ConfigError, match="Invalid diagram file"):
        parse_diagram_config("nodez: []\n")


def test_invalid_minimum_length_rejected() -> None:
    """The minimum input name length must be at least one."""
    with pytest.raises(ConfigError):
        parse_diagram_config("validator:\n  min-input-name-length: 0\n")


def test_duplicate_node_names_rejected() -> None:
    """Node names are unique within a diagram."""
    content = "nodes:\n  - name: A\n  - name: A\n"
    with pytest.raises(ConfigError, match="duplicate node name: A"):
        parse_diagram_config(content)


def test_duplicate_label_type_names_rejected() -> None:
    """Label type names are unique within a diagram."""
    content = "label-types:\n  - name: Color\n  - name: Color\n"
    with pytest.raises(ConfigError, match="Color"):
        parse_diagram_config(content, source_label="dup.yaml")


def test_duplicate_label_values_rejected() -> None:
    """Values of one label type are unique."""
    content = "label-types:\n  - name: Color\n    values: [Red, Red]\n"
    with pytest.raises(ConfigError, match="duplicate label value"):
        parse_diagram_config(content)
