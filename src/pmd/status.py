# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Exit status codes and process termination policy."""

import logging
from collections.abc import Mapping, MutableMapping
from enum import IntEnum

from pmd.config import NO_EXIT_AFTER_RUN, NO_EXIT_AFTER_RUN_ENV, STATUS_CODE_PROPERTY

logger = logging.getLogger(__name__)


class StatusCode(IntEnum):
    """Well-known process exit codes."""

    SUCCESS = 0
    ERROR = 1
    VIOLATIONS_FOUND = 4


def is_embedded(environ: Mapping[str, str], properties: Mapping[str, str]) -> bool:
    """Check whether the driver runs inside a hosting process.

    The environment is checked before the process properties. Only the
    presence of a key matters, not its value.

    Args:
        environ: Process environment.
        properties: Process-scoped properties.

    Returns:
        True when process termination must be suppressed.
    """
    if NO_EXIT_AFTER_RUN_ENV in environ:
        return True
    return NO_EXIT_AFTER_RUN in properties


class ExitCoordinator:
    """Turn a final status code into process exit or a recorded result."""

    def __init__(self, embedded: bool, properties: MutableMapping[str, str]) -> None:
        """Initialize coordinator.

        Args:
            embedded: Whether the hosting process must survive ``finish``.
            properties: Caller-owned mapping that receives the status code
                under ``pmd.cli.status`` in embedded mode.
        """
        self._embedded = embedded
        self._properties = properties

    @property
    def embedded(self) -> bool:
        return self._embedded

    def finish(self, status: int) -> int:
        """Finish one invocation with a status code.

        Args:
            status: Final status code.

        Returns:
            The status code, in embedded mode only.

        Raises:
            SystemExit: Outside embedded mode, always, carrying ``status``.
        """
        if not self._embedded:
            logger.debug(f"Exiting process (status={status})")
            raise SystemExit(int(status))
        self._properties[STATUS_CODE_PROPERTY] = str(int(status))
        logger.debug(f"Status recorded (status={status})")
        return int(status)
