# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Nodes and output ports of a dataflow diagram, as far as behaviors need them."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, PrivateAttr
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class DfdOutputPort(BaseModel):
    """An output port of a node, carrying the behavior text that derives it.

    The owning node is available as :attr:`parent` once the port has been
    attached to a :class:`DfdNode`.
    """

    name: str
    behavior: str = ""

    _parent: Any = PrivateAttr(default=None)

    @property
    def parent(self) -> Any:
        """The element the port belongs to, normally a :class:`DfdNode`."""
        return self._parent

    def attach(self, parent: Any) -> None:
        """Set the element the port belongs to."""
        self._parent = parent


class DfdNode(BaseModel):
    """A node of a dataflow diagram with named inputs and output ports."""

    name: str
    inputs: list[str] = _Field(default_factory=list)
    outputs: list[DfdOutputPort] = _Field(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        for port in self.outputs:
            port.attach(self)

    def get_available_inputs(self) -> list[str]:
        """Return the input names usable inside the behaviors of this node's outputs."""
        return list(self.inputs)

    def add_output(self, port: DfdOutputPort) -> DfdOutputPort:
        """Append an output port and attach it to this node."""
        self.outputs.append(port)
        port.attach(self)
        return port
