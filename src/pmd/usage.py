# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Usage text assembled from the registered languages and renderers."""

from pmd.config import PROG_NAME, VERSION
from pmd.languages import LanguageRegistry, default_language_registry
from pmd.renderers import (
    PropertyDescriptor,
    RendererCatalog,
    RendererDescriptor,
    default_renderer_catalog,
)

EOL = "\n"
REPORT_INDENT = "   "
PROPERTY_INDENT = "        "

WINDOWS_PATH_TO_CODE = "c:\\my\\source\\code"

WINDOWS_EXAMPLE_ARGS: tuple[str, ...] = (
    f"-dir {WINDOWS_PATH_TO_CODE} -format text -R rulesets/java/quickstart.xml "
    "-version 1.5 -language java -debug",
    f"-dir {WINDOWS_PATH_TO_CODE} -f xml "
    "-rulesets rulesets/java/quickstart.xml,category/java/codestyle.xml "
    "-encoding UTF-8",
    f"-d {WINDOWS_PATH_TO_CODE} -rulesets rulesets/java/quickstart.xml "
    "-auxclasspath lib\\commons-collections.jar;lib\\derby.jar",
    f"-d {WINDOWS_PATH_TO_CODE} -f html -R rulesets/java/quickstart.xml "
    "-auxclasspath file:///C:/my/classpathfile",
)
UNIX_EXAMPLE_ARGS: tuple[str, ...] = (
    "-dir /home/workspace/src/main/java/code -f html "
    "-rulesets rulesets/java/quickstart.xml,category/java/codestyle.xml",
    "-d ./src/main/java/code -R rulesets/java/quickstart.xml -f xslt "
    "-property xsltFilename=my-own.xsl",
    "-d ./src/main/java/code -f html -R rulesets/java/quickstart.xml "
    "-auxclasspath commons-collections.jar:derby.jar",
)


def build_usage_text(
    languages: LanguageRegistry | None = None,
    renderers: RendererCatalog | None = None,
    version: str = VERSION,
) -> str:
    """Build the usage document shown by ``-help`` and on parse failures.

    The sections always come in this order: mandatory arguments with one
    example, supported languages, report formats with their properties, then
    the Windows and *nix example blocks. Both example blocks are included
    whatever the host platform.

    Args:
        languages: Language registry; the default registry when omitted.
        renderers: Renderer catalog; the default catalog when omitted.
        version: Version embedded in the example launch commands.

    Returns:
        Usage text. Identical for identical catalog contents.
    """
    if languages is None:
        languages = default_language_registry()
    if renderers is None:
        renderers = default_renderer_catalog()

    sections = [
        mandatory_arguments(version),
        supported_languages(languages) + EOL,
        "Available report formats and their configuration properties are:" + EOL,
        report_formats(renderers) + EOL,
        examples(version) + EOL * 3,
    ]
    return "".join(sections)


def windows_launch_command(version: str = VERSION) -> str:
    return f"C:\\>pmd-bin-{version}\\bin\\pmd.bat"


def unix_launch_command(version: str = VERSION) -> str:
    return f"$ pmd-bin-{version}/bin/run.sh {PROG_NAME}"


def mandatory_arguments(version: str = VERSION) -> str:
    lines = [
        "",
        "Mandatory arguments:",
        "1) A source code filename or directory",
        "2) A report format ",
        "3) A ruleset filename or a comma-delimited string of ruleset filenames",
        "",
        "For example: ",
        f"{windows_launch_command(version)} -d {WINDOWS_PATH_TO_CODE} "
        "-f html -R java-unusedcode",
        "",
    ]
    return EOL.join(lines) + EOL


def supported_languages(languages: LanguageRegistry) -> str:
    """Render the comma-joined terse names in registry order."""
    names = ", ".join(languages.terse_names())
    return f"Languages and version supported:{EOL}{names}{EOL}"


def report_formats(renderers: RendererCatalog) -> str:
    """Render one entry per renderer, in catalog order.

    Args:
        renderers: Renderer catalog.

    Returns:
        Report format section; empty for an empty catalog.
    """
    return "".join(_report_format(renderer) for renderer in renderers.renderers())


def _report_format(renderer: RendererDescriptor) -> str:
    header = f"{REPORT_INDENT}{renderer.canonical_name}: "
    if renderer.is_alias:
        return f"{header}Deprecated alias for '{renderer.display_name}'{EOL}"
    lines = [header + renderer.description]
    lines.extend(_property_line(prop) for prop in renderer.properties)
    return EOL.join(lines) + EOL


def _property_line(prop: PropertyDescriptor) -> str:
    line = f"{PROPERTY_INDENT}{prop.name} - {prop.description}"
    if prop.has_default:
        line += f"   default: {format_default(prop.default)}"
    return line


def format_default(value: object) -> str:
    """Render a property default as command-line text.

    Booleans are lower-cased to match what ``-property`` accepts.
    """
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def examples(version: str = VERSION) -> str:
    """Render the Windows block followed by the *nix block."""
    windows_cmd = windows_launch_command(version)
    unix_cmd = unix_launch_command(version)
    lines = ["For example on windows: "]
    lines.extend(f"{windows_cmd} {args}" for args in WINDOWS_EXAMPLE_ARGS)
    lines.append("")
    lines.append("For example on *nix: ")
    lines.extend(f"{unix_cmd} {args}" for args in UNIX_EXAMPLE_ARGS)
    return EOL.join(lines) + EOL
