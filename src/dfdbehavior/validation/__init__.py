# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation of output port behavior text into line/column diagnostics."""

from dfdbehavior.validation.diagnostics import Diagnostic
from dfdbehavior.validation.validator import (
    PortBehaviorValidator,
    PortContextError,
    ValidatorSettings,
    validate,
)

__all__ = [
    "Diagnostic",
    "PortBehaviorValidator",
    "PortContextError",
    "ValidatorSettings",
    "validate",
]
