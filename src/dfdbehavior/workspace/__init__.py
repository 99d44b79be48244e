# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagram description files for the dfd-behavior command line."""

from dfdbehavior.workspace.config import (
    ConfigError,
    DiagramConfig,
    load_diagram_config,
    load_label_catalog,
    parse_diagram_config,
)

__all__ = [
    "ConfigError",
    "DiagramConfig",
    "load_diagram_config",
    "load_label_catalog",
    "parse_diagram_config",
]
