# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the dfd-behavior API documentation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "dfd-behavior"
author = "dfd-behavior Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"
napoleon_google_docstring = True

html_theme = "alabaster"
