# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Parameter parsing, usage text and exit handling for the pmd driver."""

from pmd.config import VERSION
from pmd.parameters import (
    ParameterError,
    ParameterRecord,
    UsageRequested,
    parse_parameters,
)
from pmd.status import ExitCoordinator, StatusCode
from pmd.usage import build_usage_text

__version__ = VERSION

__all__ = [
    "ExitCoordinator",
    "ParameterError",
    "ParameterRecord",
    "StatusCode",
    "UsageRequested",
    "build_usage_text",
    "parse_parameters",
]
