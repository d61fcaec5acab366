# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Read-only registry of supported source languages."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pmd.config import LANGUAGE_PLUGIN_GROUP
from pmd.plugins import load_contributions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageDescriptor:
    """Describe one supported source language.

    Attributes:
        terse_name: Short identifier used on the command line.
        name: Human-readable language name.
    """

    terse_name: str
    name: str


BUILTIN_LANGUAGES: tuple[LanguageDescriptor, ...] = (
    LanguageDescriptor(terse_name="apex", name="Apex"),
    LanguageDescriptor(terse_name="ecmascript", name="Ecmascript"),
    LanguageDescriptor(terse_name="java", name="Java"),
    LanguageDescriptor(terse_name="jsp", name="Java Server Pages"),
    LanguageDescriptor(terse_name="modelica", name="Modelica"),
    LanguageDescriptor(terse_name="plsql", name="PLSQL"),
    LanguageDescriptor(terse_name="pom", name="Maven POM"),
    LanguageDescriptor(terse_name="scala", name="Scala"),
    LanguageDescriptor(terse_name="swift", name="Swift"),
    LanguageDescriptor(terse_name="vf", name="Salesforce VisualForce"),
    LanguageDescriptor(terse_name="vm", name="VM"),
    LanguageDescriptor(terse_name="wsdl", name="WSDL"),
    LanguageDescriptor(terse_name="xml", name="XML"),
    LanguageDescriptor(terse_name="xsl", name="XSL"),
)


class LanguageRegistry:
    """Ordered lookup table of language descriptors."""

    def __init__(self, languages: Iterable[LanguageDescriptor]) -> None:
        """Initialize registry contents.

        Args:
            languages: Descriptors in registry order. A repeated terse name
                keeps its first position and first descriptor.
        """
        self._languages: dict[str, LanguageDescriptor] = {}
        for language in languages:
            if language.terse_name in self._languages:
                logger.debug(
                    f"Ignoring duplicate language (terse_name={language.terse_name})"
                )
                continue
            self._languages[language.terse_name] = language

    def languages(self) -> tuple[LanguageDescriptor, ...]:
        """Return all descriptors in registry order."""
        return tuple(self._languages.values())

    def terse_names(self) -> tuple[str, ...]:
        """Return all terse names in registry order."""
        return tuple(self._languages)

    def find(self, terse_name: str) -> LanguageDescriptor | None:
        """Look up a language by terse name.

        Args:
            terse_name: Short language identifier.

        Returns:
            Matching descriptor, or ``None`` when the language is unknown.
        """
        return self._languages.get(terse_name)


def default_language_registry() -> LanguageRegistry:
    """Build the registry from built-in and installed languages.

    Returns:
        Registry with built-in languages first, then plugin contributions.
    """
    contributed = [
        item
        for item in load_contributions(LANGUAGE_PLUGIN_GROUP)
        if isinstance(item, LanguageDescriptor)
    ]
    return LanguageRegistry([*BUILTIN_LANGUAGES, *contributed])
