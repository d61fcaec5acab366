# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Boundary to the analysis engine that consumes parsed parameters."""

import logging
from typing import Protocol

from pmd.config import ENGINE_PLUGIN_GROUP
from pmd.parameters import ParameterRecord
from pmd.plugins import load_plugin_factories

logger = logging.getLogger(__name__)


class EngineError(RuntimeError):
    """Represent an analysis run that failed before producing a status."""


class EngineUnavailableError(EngineError):
    """Represent a missing analysis engine installation."""


class AnalysisEngine(Protocol):
    """Define how the driver hands parameters to an analysis engine."""

    def run(self, parameters: ParameterRecord) -> int:
        """Run an analysis.

        Args:
            parameters: Validated command-line parameters.

        Returns:
            Status code: 0 for success, 4 when violations were found, any
            other non-negative code as the engine defines it.

        Raises:
            EngineError: If the analysis cannot be carried out.
        """


def load_engine() -> AnalysisEngine:
    """Create the first analysis engine registered by an installed package.

    Returns:
        Engine built by the first ``pmd.engines`` factory.

    Raises:
        EngineUnavailableError: If no engine is installed or its factory fails.
    """
    factories = load_plugin_factories(ENGINE_PLUGIN_GROUP)
    if not factories:
        raise EngineUnavailableError(
            f"No analysis engine installed (entry point group {ENGINE_PLUGIN_GROUP!r})"
        )
    if len(factories) > 1:
        logger.info(
            f"Several analysis engines installed; using the first (count={len(factories)})"
        )
    try:
        return factories[0]()
    except (TypeError, ValueError, RuntimeError) as exc:
        raise EngineUnavailableError(
            f"Analysis engine could not be created: {exc}"
        ) from exc
