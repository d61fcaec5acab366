# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Read-only catalog of report renderers and their configurable properties."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from pmd.config import RENDERER_PLUGIN_GROUP
from pmd.plugins import load_contributions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyDescriptor:
    """Describe one configurable renderer property.

    Attributes:
        name: Property key accepted by ``-property key=value``.
        description: Human-readable description.
        default: Default value; ``None`` means the property has no default.
            Falsy values such as ``False`` or ``""`` are real defaults.
    """

    name: str
    description: str
    default: object | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class RendererDescriptor:
    """Describe one registered report renderer.

    Attributes:
        canonical_name: Report format name the renderer is registered under.
        display_name: Name the renderer reports for itself.
        description: Human-readable description of the format.
        properties: Configurable properties in declaration order.
    """

    canonical_name: str
    display_name: str
    description: str
    properties: tuple[PropertyDescriptor, ...] = ()

    @property
    def is_alias(self) -> bool:
        """Whether this entry is a deprecated alias of another renderer."""
        return self.canonical_name != self.display_name

    def alias(self, alias_name: str) -> "RendererDescriptor":
        """Return a copy of this descriptor registered under another name.

        Args:
            alias_name: Deprecated report format name.

        Returns:
            Descriptor whose canonical name is ``alias_name``.
        """
        return replace(self, canonical_name=alias_name)


def _renderer(
    name: str, description: str, *properties: PropertyDescriptor
) -> RendererDescriptor:
    return RendererDescriptor(
        canonical_name=name,
        display_name=name,
        description=description,
        properties=tuple(properties),
    )


_LINK_PREFIX = PropertyDescriptor("linkPrefix", "Path to HTML source.")
_LINE_PREFIX = PropertyDescriptor(
    "linePrefix", "Prefix for line number anchor in the source file."
)
_HTML_EXTENSION = PropertyDescriptor(
    "htmlExtension", "Replace file extension with .html for the links.", False
)
_ENCODING = PropertyDescriptor("encoding", "XML encoding format", "UTF-8")

_XSLT = _renderer(
    "xslt",
    "XML with a XSL Transformation applied.",
    _ENCODING,
    PropertyDescriptor("xsltFilename", "The XSLT file name."),
)

BUILTIN_RENDERERS: tuple[RendererDescriptor, ...] = (
    _renderer("codeclimate", "Code Climate integration."),
    _renderer("xml", "XML format.", _ENCODING),
    _renderer(
        "ideaj",
        "IntelliJ IDEA integration.",
        PropertyDescriptor(
            "classAndMethodName",
            "Class and Method name, pass '.method' when processing a directory.",
        ),
        PropertyDescriptor("fileName", "File name."),
        PropertyDescriptor("sourcePath", "Source path."),
    ),
    _renderer(
        "textcolor",
        "Text format, with color support "
        "(requires ANSI console support, e.g. xterm, rxvt, etc.).",
        PropertyDescriptor(
            "color", "Enables colors with anything other than 'false' or '0'.", "yes"
        ),
    ),
    _renderer("text", "Text format."),
    _renderer("textpad", "TextPad integration."),
    _renderer("emacs", "GNU Emacs integration."),
    _renderer(
        "csv",
        "Comma-separated values tabular format.",
        PropertyDescriptor("problem", "Include Problem column", True),
        PropertyDescriptor("package", "Include Package column", True),
        PropertyDescriptor("file", "Include File column", True),
        PropertyDescriptor("priority", "Include Priority column", True),
        PropertyDescriptor("line", "Include Line column", True),
        PropertyDescriptor("desc", "Include Description column", True),
        PropertyDescriptor("ruleSet", "Include Rule set column", True),
        PropertyDescriptor("rule", "Include Rule column", True),
    ),
    _renderer("html", "HTML format", _LINK_PREFIX, _LINE_PREFIX, _HTML_EXTENSION),
    _XSLT,
    _renderer(
        "yahtml",
        "Yet Another HTML format.",
        PropertyDescriptor("outputDir", "Output directory."),
    ),
    _renderer(
        "summaryhtml",
        "Summary HTML format.",
        _LINK_PREFIX,
        _LINE_PREFIX,
        _HTML_EXTENSION,
    ),
    _renderer("vbhtml", "Vladimir Bossicard HTML format."),
    _renderer("empty", "Empty, nothing."),
    _renderer("json", "JSON format."),
    _renderer("sarif", "Static Analysis Results Interchange Format."),
    _XSLT.alias("nicehtml"),
)


class RendererCatalog:
    """Ordered lookup table of renderer descriptors keyed by report format."""

    def __init__(self, renderers: Iterable[RendererDescriptor]) -> None:
        """Initialize catalog contents.

        Args:
            renderers: Descriptors in registry order. A repeated report format
                keeps its first position and first descriptor.
        """
        self._renderers: dict[str, RendererDescriptor] = {}
        for renderer in renderers:
            if renderer.canonical_name in self._renderers:
                logger.debug(
                    f"Ignoring duplicate renderer (report_format={renderer.canonical_name})"
                )
                continue
            self._renderers[renderer.canonical_name] = renderer

    def renderers(self) -> tuple[RendererDescriptor, ...]:
        """Return all descriptors in registry order."""
        return tuple(self._renderers.values())

    def report_formats(self) -> tuple[str, ...]:
        """Return all report format names in registry order."""
        return tuple(self._renderers)

    def find(self, report_format: str) -> RendererDescriptor | None:
        """Look up a renderer by report format name.

        Args:
            report_format: Report format name given with ``-format``.

        Returns:
            Matching descriptor, or ``None`` when the format is unknown.
        """
        return self._renderers.get(report_format)


def default_renderer_catalog() -> RendererCatalog:
    """Build the catalog from built-in and installed renderers.

    Returns:
        Catalog with built-in renderers first, then plugin contributions.
    """
    contributed = [
        item
        for item in load_contributions(RENDERER_PLUGIN_GROUP)
        if isinstance(item, RendererDescriptor)
    ]
    return RendererCatalog([*BUILTIN_RENDERERS, *contributed])
