# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command-line parameter schema and parsing."""

import argparse
import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NoReturn

from pmd.config import (
    DEFAULT_ENCODING,
    DEFAULT_MINIMUM_PRIORITY,
    DEFAULT_REPORT_FORMAT,
    DEFAULT_SUPPRESS_MARKER,
    DEFAULT_THREADS,
    PROG_NAME,
)

logger = logging.getLogger(__name__)

HELP_FLAGS: frozenset[str] = frozenset({"-help", "-h", "-H", "--help"})
FILE_URL_PREFIX = "file:"


class CommandLineError(Exception):
    """Represent an argument vector that does not yield a parameter record."""


class UsageRequested(CommandLineError):
    """Represent an explicit request for the usage text."""


class ParameterError(CommandLineError):
    """Represent an invalid argument vector.

    The message is a single line naming the offending flag or value.
    """


@dataclass(frozen=True)
class ParameterRecord:
    """Validated, immutable result of argument parsing.

    Attributes:
        input_path: Source file or directory to analyze.
        report_format: Report format name of the renderer to use.
        rulesets: Ruleset references in command-line order.
        language: Terse name of the target language, if forced.
        language_version: Target language version, if forced.
        aux_classpath: Auxiliary classpath entries in command-line order.
        encoding: Source file encoding.
        renderer_properties: Renderer property overrides from ``-property``.
        help: Whether usage was requested. Always ``False`` on a parsed record.
        debug: Whether debug logging is enabled.
        report_file: Report destination; ``None`` means standard output.
        minimum_priority: Lowest rule priority reported (1 = highest).
        threads: Analysis worker count; ``0`` runs in the calling thread.
        fail_on_violation: Whether found violations turn into exit code 4.
        short_names: Whether report file names are shortened.
        show_suppressed: Whether suppressed violations are reported.
        suppress_marker: Comment marker that suppresses a violation.
        benchmark: Whether the engine reports timing information.
        cache_location: Incremental analysis cache file, if any.
        no_cache: Whether incremental analysis is explicitly disabled.
    """

    input_path: str
    report_format: str
    rulesets: tuple[str, ...]
    language: str | None = None
    language_version: str | None = None
    aux_classpath: tuple[str, ...] = ()
    encoding: str = DEFAULT_ENCODING
    renderer_properties: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    help: bool = False
    debug: bool = False
    report_file: str | None = None
    minimum_priority: int = DEFAULT_MINIMUM_PRIORITY
    threads: int = DEFAULT_THREADS
    fail_on_violation: bool = True
    short_names: bool = False
    show_suppressed: bool = False
    suppress_marker: str = DEFAULT_SUPPRESS_MARKER
    benchmark: bool = False
    cache_location: str | None = None
    no_cache: bool = False


class _ParameterParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ParameterError(message)


def _non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("value must not be empty")
    return value


def _ruleset_list(value: str) -> list[str]:
    rulesets = [part.strip() for part in value.split(",") if part.strip()]
    if not rulesets:
        raise argparse.ArgumentTypeError(f"no ruleset in {value!r}")
    return rulesets


def _priority(value: str) -> int:
    try:
        priority = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid priority value: {value!r}"
        ) from None
    if not 1 <= priority <= 5:
        raise argparse.ArgumentTypeError(
            f"priority must be between 1 and 5, got {priority}"
        )
    return priority


def _thread_count(value: str) -> int:
    try:
        threads = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid thread count: {value!r}"
        ) from None
    if threads < 0:
        raise argparse.ArgumentTypeError(f"thread count must be >= 0, got {threads}")
    return threads


def _boolean(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _property_assignment(value: str) -> tuple[str, str]:
    key, sep, prop_value = value.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    return key.strip(), prop_value


def build_parser(
    prog_name: str = PROG_NAME, strict: bool = True
) -> argparse.ArgumentParser:
    """Build the parser for the command-line schema.

    Args:
        prog_name: Program name shown in the usage line.
        strict: When false, values are not coerced, nothing is mandatory and
            cache flags may be combined. Used to find unrecognized arguments
            before validation.

    Returns:
        Parser whose ``error`` raises :class:`ParameterError`.
    """
    parser = _ParameterParser(prog=prog_name, add_help=False, allow_abbrev=False)

    def add(*flags: str, **kwargs: object) -> None:
        if not strict:
            kwargs.pop("type", None)
            kwargs.pop("required", None)
        parser.add_argument(*flags, **kwargs)  # type: ignore[arg-type]

    add(
        "-dir",
        "-d",
        dest="input_path",
        required=True,
        type=_non_empty,
        help="Root directory or file to analyze.",
    )
    add(
        "-format",
        "-f",
        dest="report_format",
        default=DEFAULT_REPORT_FORMAT,
        type=_non_empty,
        help="Report format type.",
    )
    add(
        "-rulesets",
        "-R",
        dest="rulesets",
        required=True,
        action="append",
        type=_ruleset_list,
        help="Comma separated list of ruleset names to use.",
    )
    add("-language", "-l", dest="language", help="Specify a language PMD should use.")
    add(
        "-version",
        "-v",
        dest="language_version",
        help="Specify version of a language PMD should use.",
    )
    add(
        "-auxclasspath",
        dest="aux_classpath",
        action="append",
        help=(
            "Specifies the classpath for libraries used by the source code, "
            "or a file: URL to a file listing classpath entries."
        ),
    )
    add(
        "-encoding",
        "-e",
        dest="encoding",
        default=DEFAULT_ENCODING,
        type=_non_empty,
        help="Specifies the character set encoding of the source code files.",
    )
    add(
        "-property",
        "-P",
        dest="properties",
        action="append",
        type=_property_assignment,
        metavar="KEY=VALUE",
        help="Renderer property override, can be repeated.",
    )
    add(
        "-debug",
        "-verbose",
        "-D",
        "-V",
        dest="debug",
        action="store_true",
        help="Debug mode.",
    )
    add(
        "-help",
        "-h",
        "-H",
        "--help",
        dest="help",
        action="store_true",
        help="Display help on usage.",
    )
    add(
        "-reportfile",
        "-r",
        dest="report_file",
        type=_non_empty,
        help="Sends report output to a file; defaults to standard output.",
    )
    add(
        "-minimumpriority",
        "-min",
        dest="minimum_priority",
        default=DEFAULT_MINIMUM_PRIORITY,
        type=_priority,
        help="Rule priority threshold; rules with lower priority are not used.",
    )
    add(
        "-threads",
        "-t",
        dest="threads",
        default=DEFAULT_THREADS,
        type=_thread_count,
        help="Sets the number of threads used by PMD.",
    )
    add(
        "-failOnViolation",
        dest="fail_on_violation",
        default=True,
        type=_boolean,
        metavar="{true,false}",
        help="By default PMD exits with status 4 if violations are found.",
    )
    add(
        "-shortnames",
        dest="short_names",
        action="store_true",
        help="Prints shortened filenames in the report.",
    )
    add(
        "-showsuppressed",
        dest="show_suppressed",
        action="store_true",
        help="Report should show suppressed rule violations.",
    )
    add(
        "-suppressmarker",
        dest="suppress_marker",
        default=DEFAULT_SUPPRESS_MARKER,
        type=_non_empty,
        help="Specifies the string that marks a line which PMD should ignore.",
    )
    add(
        "-benchmark",
        dest="benchmark",
        action="store_true",
        help="Benchmark mode - output a benchmark report upon completion.",
    )
    cache_group = parser.add_mutually_exclusive_group() if strict else parser
    cache_group.add_argument(
        "-cache",
        dest="cache_location",
        type=_non_empty if strict else None,
        help="Specify the location of the cache file for incremental analysis.",
    )
    cache_group.add_argument(
        "-no-cache",
        dest="no_cache",
        action="store_true",
        help="Explicitly disable incremental analysis.",
    )
    return parser


def requests_help(argv: Sequence[str]) -> bool:
    """Check whether an argument vector asks for the usage text.

    Args:
        argv: Raw command-line arguments.

    Returns:
        True when a help flag appears before any ``--`` terminator.
    """
    for arg in argv:
        if arg == "--":
            return False
        if arg in HELP_FLAGS:
            return True
    return False


def _unrecognized_flags(
    argv: Sequence[str], parser: argparse.ArgumentParser
) -> list[str]:
    # argparse reads "-debugx" as "-d ebugx"; only exact option strings count.
    takes_value = {
        option: action.nargs != 0
        for action in parser._actions
        for option in action.option_strings
    }
    unknown: list[str] = []
    expect_value = False
    for arg in argv:
        if expect_value:
            expect_value = False
            continue
        if arg == "--":
            break
        if arg in takes_value:
            expect_value = takes_value[arg]
            continue
        if arg.partition("=")[0] in takes_value:
            continue
        if arg.startswith("-") and len(arg) > 1:
            unknown.append(arg)
    return unknown


def _unrecognized_arguments(argv: Sequence[str], prog_name: str) -> list[str]:
    unknown = _unrecognized_flags(argv, build_parser(prog_name, strict=False))
    if unknown:
        return unknown
    try:
        _, extras = build_parser(prog_name, strict=False).parse_known_args(list(argv))
    except ParameterError:
        # Arity problems are reported by the strict pass.
        return []
    return extras


def split_aux_classpath(
    values: Sequence[str] | None, path_separator: str = os.pathsep
) -> tuple[str, ...]:
    """Split ``-auxclasspath`` values into entries.

    Args:
        values: Raw option values in command-line order.
        path_separator: Separator between entries of one value.

    Returns:
        Non-empty entries; a ``file:`` URL is kept as a single entry.
    """
    entries: list[str] = []
    for value in values or ():
        if value.startswith(FILE_URL_PREFIX):
            entries.append(value)
            continue
        entries.extend(part for part in value.split(path_separator) if part.strip())
    return tuple(entries)


def parse_parameters(
    argv: Sequence[str],
    prog_name: str = PROG_NAME,
    path_separator: str = os.pathsep,
) -> ParameterRecord:
    """Parse an argument vector into a parameter record.

    Help flags win over everything else. Unrecognized arguments are reported
    before missing or malformed values so the message names them.

    Args:
        argv: Raw command-line arguments, without the program name.
        prog_name: Program name used in parser messages.
        path_separator: Separator for ``-auxclasspath`` entries.

    Returns:
        Populated parameter record.

    Raises:
        UsageRequested: If a help flag is present, whatever else is given.
        ParameterError: If the arguments do not match the schema.
    """
    if requests_help(argv):
        logger.debug(f"Usage requested (argv={list(argv)})")
        raise UsageRequested(prog_name)

    extras = _unrecognized_arguments(argv, prog_name)
    if extras:
        raise ParameterError(f"unrecognized arguments: {' '.join(extras)}")

    args = build_parser(prog_name).parse_args(list(argv))
    rulesets = tuple(name for chunk in args.rulesets for name in chunk)
    properties = dict(args.properties or [])
    record = ParameterRecord(
        input_path=args.input_path,
        report_format=args.report_format,
        rulesets=rulesets,
        language=args.language,
        language_version=args.language_version,
        aux_classpath=split_aux_classpath(args.aux_classpath, path_separator),
        encoding=args.encoding,
        renderer_properties=MappingProxyType(properties),
        help=False,
        debug=args.debug,
        report_file=args.report_file,
        minimum_priority=args.minimum_priority,
        threads=args.threads,
        fail_on_violation=args.fail_on_violation,
        short_names=args.short_names,
        show_suppressed=args.show_suppressed,
        suppress_marker=args.suppress_marker,
        benchmark=args.benchmark,
        cache_location=args.cache_location,
        no_cache=args.no_cache,
    )
    logger.debug(
        f"Parameters parsed (input_path={record.input_path} "
        f"report_format={record.report_format} rulesets={','.join(record.rulesets)})"
    )
    return record
