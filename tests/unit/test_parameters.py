# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for command-line parameter parsing."""

import dataclasses

import pytest

from pmd.parameters import (
    ParameterError,
    UsageRequested,
    build_parser,
    parse_parameters,
    requests_help,
    split_aux_classpath,
)

MINIMAL_ARGS = ["-d", "/src", "-f", "xml", "-R", "rules.xml"]


def test_args_001_parses_minimal_invocation() -> None:
    record = parse_parameters(MINIMAL_ARGS)

    assert record.input_path == "/src"
    assert record.report_format == "xml"
    assert record.rulesets == ("rules.xml",)
    assert record.help is False
    assert record.debug is False
    assert record.encoding == "UTF-8"
    assert record.aux_classpath == ()
    assert dict(record.renderer_properties) == {}


def test_args_002_long_flag_spellings_match_short_ones() -> None:
    record = parse_parameters(
        ["-dir", "/src", "-format", "xml", "-rulesets", "rules.xml"]
    )

    assert record == parse_parameters(MINIMAL_ARGS)


def test_args_003_format_defaults_to_text() -> None:
    record = parse_parameters(["-d", "/src", "-R", "rules.xml"])

    assert record.report_format == "text"


def test_args_004_comma_delimited_and_repeated_rulesets_keep_order() -> None:
    record = parse_parameters(
        ["-d", "/src", "-R", "a.xml, b.xml,,c.xml", "-R", "d.xml"]
    )

    assert record.rulesets == ("a.xml", "b.xml", "c.xml", "d.xml")


def test_args_005_record_is_immutable() -> None:
    record = parse_parameters(MINIMAL_ARGS + ["-P", "encoding=UTF-16"])

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.input_path = "/other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        record.renderer_properties["encoding"] = "UTF-8"  # type: ignore[index]


def test_args_006_populates_every_optional_field() -> None:
    record = parse_parameters(
        [
            "-d",
            "/src",
            "-R",
            "rules.xml",
            "-language",
            "java",
            "-version",
            "1.8",
            "-encoding",
            "ISO-8859-1",
            "-debug",
            "-reportfile",
            "out.xml",
            "-min",
            "3",
            "-t",
            "4",
            "-failOnViolation",
            "false",
            "-shortnames",
            "-showsuppressed",
            "-suppressmarker",
            "NOLINT",
            "-benchmark",
            "-cache",
            "cache.bin",
        ]
    )

    assert record.language == "java"
    assert record.language_version == "1.8"
    assert record.encoding == "ISO-8859-1"
    assert record.debug is True
    assert record.report_file == "out.xml"
    assert record.minimum_priority == 3
    assert record.threads == 4
    assert record.fail_on_violation is False
    assert record.short_names is True
    assert record.show_suppressed is True
    assert record.suppress_marker == "NOLINT"
    assert record.benchmark is True
    assert record.cache_location == "cache.bin"
    assert record.no_cache is False


@pytest.mark.parametrize("flag", ["-debug", "-verbose", "-D", "-V"])
def test_args_007_debug_aliases(flag: str) -> None:
    assert parse_parameters(MINIMAL_ARGS + [flag]).debug is True


def test_args_008_property_overrides_keep_last_value_per_key() -> None:
    record = parse_parameters(
        MINIMAL_ARGS
        + ["-property", "a=1", "-P", "b=x=y", "-P", "a=2", "-P", "empty="]
    )

    assert dict(record.renderer_properties) == {"a": "2", "b": "x=y", "empty": ""}
    assert list(record.renderer_properties) == ["a", "b", "empty"]


def test_args_009_aux_classpath_splits_on_path_separator() -> None:
    record = parse_parameters(
        MINIMAL_ARGS + ["-auxclasspath", "lib/a.jar:lib/b.jar"], path_separator=":"
    )

    assert record.aux_classpath == ("lib/a.jar", "lib/b.jar")


def test_args_010_aux_classpath_uses_given_separator_convention() -> None:
    record = parse_parameters(
        MINIMAL_ARGS + ["-auxclasspath", "lib\\a.jar;lib\\b.jar"], path_separator=";"
    )

    assert record.aux_classpath == ("lib\\a.jar", "lib\\b.jar")


def test_args_011_aux_classpath_file_url_is_one_entry() -> None:
    assert split_aux_classpath(["file:///C:/my/classpathfile"], ":") == (
        "file:///C:/my/classpathfile",
    )
    assert split_aux_classpath(["a.jar::b.jar", "c.jar"], ":") == (
        "a.jar",
        "b.jar",
        "c.jar",
    )
    assert split_aux_classpath(None, ":") == ()


@pytest.mark.parametrize("flag", ["-help", "-h", "-H", "--help"])
def test_args_012_help_flag_requests_usage(flag: str) -> None:
    with pytest.raises(UsageRequested):
        parse_parameters([flag])


def test_args_013_help_wins_over_invalid_and_missing_flags() -> None:
    with pytest.raises(UsageRequested):
        parse_parameters(["-bogusflag", "-t", "many", "-h"])


def test_args_014_help_after_terminator_is_not_a_flag() -> None:
    assert requests_help(["-d", "/src", "-h"]) is True
    assert requests_help(["-d", "/src", "--", "-h"]) is False


def test_args_015_unknown_flag_is_named_in_error() -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(["-bogusflag"])

    assert "-bogusflag" in str(exc_info.value)


def test_args_016_unknown_flag_is_reported_before_type_errors() -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(MINIMAL_ARGS + ["-t", "many", "-nosuchflag"])

    assert "-nosuchflag" in str(exc_info.value)


def test_args_017_missing_mandatory_flags_are_named() -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(["-f", "xml"])

    message = str(exc_info.value)
    assert "-dir/-d" in message
    assert "-rulesets/-R" in message


def test_args_018_missing_value_names_the_flag() -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(["-R", "rules.xml", "-d"])

    assert "-dir/-d" in str(exc_info.value)


@pytest.mark.parametrize(
    ("extra", "flag"),
    [
        (["-t", "many"], "-threads/-t"),
        (["-t", "-1"], "-threads/-t"),
        (["-min", "9"], "-minimumpriority/-min"),
        (["-min", "high"], "-minimumpriority/-min"),
        (["-failOnViolation", "maybe"], "-failOnViolation"),
        (["-P", "novalue"], "-property/-P"),
        (["-P", "=value"], "-property/-P"),
    ],
)
def test_args_019_type_coercion_failure_names_the_flag(
    extra: list[str], flag: str
) -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(MINIMAL_ARGS + extra)

    assert flag in str(exc_info.value)


@pytest.mark.parametrize(
    "args",
    [
        ["-d", "", "-R", "rules.xml"],
        ["-d", "/src", "-R", " , "],
        ["-d", "/src", "-R", "rules.xml", "-f", "  "],
    ],
)
def test_args_020_mandatory_values_must_not_be_empty(args: list[str]) -> None:
    with pytest.raises(ParameterError):
        parse_parameters(args)


def test_args_021_cache_and_no_cache_are_exclusive() -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(MINIMAL_ARGS + ["-cache", "c.bin", "-no-cache"])

    assert "-no-cache" in str(exc_info.value)


def test_args_022_stray_positional_is_unrecognized() -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(MINIMAL_ARGS + ["extra.java"])

    assert "extra.java" in str(exc_info.value)


def test_args_023_error_messages_are_single_line() -> None:
    for args in (["-bogusflag"], ["-f", "xml"], MINIMAL_ARGS + ["-t", "x"]):
        with pytest.raises(ParameterError) as exc_info:
            parse_parameters(args)
        assert "\n" not in str(exc_info.value)


def test_args_024_option_listing_uses_program_name() -> None:
    listing = build_parser("pmd-custom").format_help()

    assert listing.startswith("usage: pmd-custom")
    assert "-rulesets" in listing
    assert "-auxclasspath" in listing


@pytest.mark.parametrize(
    ("args", "unknown"),
    [
        (["-debugx", "-f", "xml", "-R", "rules.xml"], "-debugx"),
        (["-d", "/src", "-R", "r.xml", "-formats", "xml"], "-formats"),
        (["-d", "/src", "-Rx", "r.xml"], "-Rx"),
        (["-d", "/src", "-R", "r.xml", "-threadsx", "2"], "-threadsx"),
    ],
)
def test_args_025_flag_glued_to_short_option_is_unrecognized(
    args: list[str], unknown: str
) -> None:
    with pytest.raises(ParameterError) as exc_info:
        parse_parameters(args)

    assert str(exc_info.value) == f"unrecognized arguments: {unknown}"


def test_args_026_equals_form_of_registered_option_is_accepted() -> None:
    record = parse_parameters(["-dir=/src", "-R", "rules.xml"])

    assert record.input_path == "/src"
