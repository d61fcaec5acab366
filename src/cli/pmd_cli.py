# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line driver: parse arguments, show usage, run the engine, exit."""

import logging
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from pmd.config import PROG_NAME, process_properties
from pmd.engine import AnalysisEngine, EngineError, load_engine
from pmd.languages import LanguageRegistry, default_language_registry
from pmd.parameters import (
    ParameterError,
    ParameterRecord,
    UsageRequested,
    build_parser,
    parse_parameters,
)
from pmd.renderers import RendererCatalog, default_renderer_catalog
from pmd.status import ExitCoordinator, StatusCode, is_embedded
from pmd.usage import build_usage_text

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Log records go to standard error; standard output carries usage text.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
    )


def write_usage(
    stdout: TextIO,
    languages: LanguageRegistry,
    renderers: RendererCatalog,
    prog_name: str = PROG_NAME,
) -> None:
    """Write the option listing followed by the usage document.

    Args:
        stdout: Standard output stream.
        languages: Language registry listed in the usage document.
        renderers: Renderer catalog listed in the usage document.
        prog_name: Program name shown in the option listing.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for text in (
        build_parser(prog_name).format_help(),
        build_usage_text(languages=languages, renderers=renderers),
    ):
        console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True, end=""
        )
    stdout.flush()


def run(
    argv: Sequence[str],
    stdout: TextIO,
    stderr: TextIO,
    engine: AnalysisEngine | None = None,
    languages: LanguageRegistry | None = None,
    renderers: RendererCatalog | None = None,
) -> int:
    """Run one command-line invocation.

    Args:
        argv: CLI arguments, without the program name.
        stdout: Standard output stream.
        stderr: Standard error stream.
        engine: Analysis engine; the installed engine when omitted.
        languages: Language registry; the default registry when omitted.
        renderers: Renderer catalog; the default catalog when omitted.

    Returns:
        Exit code.
    """
    if languages is None:
        languages = default_language_registry()
    if renderers is None:
        renderers = default_renderer_catalog()

    try:
        parameters = parse_parameters(argv, prog_name=PROG_NAME)
    except UsageRequested:
        write_usage(stdout=stdout, languages=languages, renderers=renderers)
        return StatusCode.SUCCESS
    except ParameterError as exc:
        write_usage(stdout=stdout, languages=languages, renderers=renderers)
        stderr.write(f"{exc}\n")
        stderr.flush()
        logger.debug(f"Argument parsing failed (argv={list(argv)} error={exc})")
        return StatusCode.ERROR

    if parameters.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    problem = _check_capabilities(
        parameters=parameters, languages=languages, renderers=renderers
    )
    if problem:
        logger.debug(f"Capability check failed (error={problem})")
        stderr.write(f"{problem}\n")
        return StatusCode.ERROR

    try:
        if engine is None:
            engine = load_engine()
        status = engine.run(parameters)
    except EngineError as exc:
        logger.debug(
            f"Analysis failed (input_path={parameters.input_path} error={exc})"
        )
        stderr.write(f"{exc}\n")
        return StatusCode.ERROR

    logger.info(
        f"Analysis completed (input_path={parameters.input_path} status={status})"
    )
    return resolve_status(status=status, parameters=parameters)


def resolve_status(status: int, parameters: ParameterRecord) -> int:
    """Map an engine result to the process exit code.

    Args:
        status: Code returned by the analysis engine.
        parameters: Parameters the analysis ran with.

    Returns:
        ``ERROR`` for negative codes, ``SUCCESS`` for found violations when
        ``-failOnViolation false`` was given, otherwise ``status`` unchanged.
    """
    if status < 0:
        logger.warning(f"Engine returned a negative status (status={status})")
        return StatusCode.ERROR
    if status == StatusCode.VIOLATIONS_FOUND and not parameters.fail_on_violation:
        return StatusCode.SUCCESS
    return status


def _check_capabilities(
    parameters: ParameterRecord,
    languages: LanguageRegistry,
    renderers: RendererCatalog,
) -> str | None:
    if renderers.find(parameters.report_format) is None:
        return f"Unknown report format: {parameters.report_format}"
    if parameters.language is not None and languages.find(parameters.language) is None:
        return f"Unknown language: {parameters.language}"
    return None


def main() -> None:
    """Run the CLI application and exit, unless embedded."""
    configure_logging()
    coordinator = ExitCoordinator(
        embedded=is_embedded(os.environ, process_properties),
        properties=process_properties,
    )
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    coordinator.finish(exit_code)


if __name__ == "__main__":
    main()
