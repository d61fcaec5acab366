# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Process-level configuration for the pmd command-line driver."""

VERSION = "0.1.0"
PROG_NAME = "pmd"

NO_EXIT_AFTER_RUN_ENV = "PMD_CLI_NO_EXIT"
NO_EXIT_AFTER_RUN = "pmd.cli.noExit"
STATUS_CODE_PROPERTY = "pmd.cli.status"

DEFAULT_REPORT_FORMAT = "text"
DEFAULT_ENCODING = "UTF-8"
DEFAULT_MINIMUM_PRIORITY = 5
DEFAULT_THREADS = 1
DEFAULT_SUPPRESS_MARKER = "NOPMD"

LANGUAGE_PLUGIN_GROUP = "pmd.languages"
RENDERER_PLUGIN_GROUP = "pmd.renderers"
ENGINE_PLUGIN_GROUP = "pmd.engines"

# Process-scoped properties shared with a hosting process. Only the entry point
# reads it; embedded runs publish their status code here.
process_properties: dict[str, str] = {}
