# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Entry-point discovery for languages, renderers and analysis engines.

Installed packages contribute to the driver by registering a zero-argument
factory under one of the groups in :mod:`pmd.config`. Factories that fail to
import are logged and skipped so one broken distribution cannot take the
command line down with it.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from importlib import metadata
from typing import Any

logger = logging.getLogger(__name__)


def _select_entry_points(entries: Any, group: str) -> Iterable[Any]:
    # SelectableGroups is a dict on 3.10/3.11 and warns on mapping access.
    if hasattr(entries, "select"):
        return entries.select(group=group)
    if isinstance(entries, Mapping):
        return entries.get(group, ())
    return ()


def load_plugin_factories(group: str) -> tuple[Callable[[], Any], ...]:
    """Load the factories registered under an entry-point group.

    Args:
        group: Entry-point group name.

    Returns:
        Loaded factories in discovery order.
    """
    selected = _select_entry_points(metadata.entry_points(), group)
    factories: list[Callable[[], Any]] = []
    for entry in selected:
        try:
            factory = entry.load()
        except (AttributeError, ImportError, ValueError, RuntimeError) as exc:
            logger.warning(
                f"Skipping plugin that failed to load "
                f"(group={group} entry={getattr(entry, 'name', entry)!r} error={exc})"
            )
            continue
        factories.append(factory)
    logger.debug(f"Plugins discovered (group={group} count={len(factories)})")
    return tuple(factories)


def load_contributions(group: str) -> list[Any]:
    """Call every factory of a group and flatten the returned items.

    Args:
        group: Entry-point group name.

    Returns:
        Contributed items, in factory order then item order.
    """
    items: list[Any] = []
    for factory in load_plugin_factories(group):
        try:
            contributed = list(factory())
        except (TypeError, ValueError, RuntimeError) as exc:
            logger.warning(
                f"Skipping plugin contribution (group={group} factory={factory!r} error={exc})"
            )
            continue
        items.extend(contributed)
    return items
