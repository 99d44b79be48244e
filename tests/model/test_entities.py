# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for dataflow diagram nodes and output ports."""

from dfdbehavior.model import DfdNode, DfdOutputPort


def test_port_starts_detached() -> None:
    """A port created on its own has no parent."""
    port = DfdOutputPort(name="out")
    assert port.parent is None
    assert port.behavior == ""


def test_ports_passed_to_node_are_attached() -> None:
    """Ports given at construction belong to the node."""
    node = DfdNode(name="Filter", inputs=["raw"], outputs=[DfdOutputPort(name="out", behavior="Forwarding({raw})")])
    assert node.outputs[0].parent is node


def test_add_output_attaches_port() -> None:
    """Adding an output port attaches it and returns it."""
    node = DfdNode(name="Filter")
    port = node.add_output(DfdOutputPort(name="out"))
    assert port.parent is node
    assert node.outputs == [port]


def test_available_inputs() -> None:
    """The available inputs are the node's input names."""
    node = DfdNode(name="Join", inputs=["left", "right"])
    assert node.get_available_inputs() == ["left", "right"]


def test_available_inputs_returns_a_copy() -> None:
    """Callers cannot change the node's inputs through the returned list."""
    node = DfdNode(name="Join", inputs=["left"])
    node.get_available_inputs().append("right")
    assert node.inputs == ["left"]


def test_node_from_mapping() -> None:
    """Nodes validate from plain mappings, as read from YAML."""
    node = DfdNode.model_validate({"name": "Store", "inputs": ["in"], "outputs": [{"name": "out"}]})
    assert node.outputs[0].name == "out"
    assert node.outputs[0].parent is node
