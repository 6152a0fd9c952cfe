"""Pure text utilities for SQL: schema parser, linter, formatter and diff."""

from querycraft.sqltools.diff import DiffKind, DiffLine, diff_sql
from querycraft.sqltools.formatter import format_sql
from querycraft.sqltools.linter import LintIssue, LintRule, Severity, lint_sql
from querycraft.sqltools.schema_parser import (
    ParsedSchema,
    parse_json_schema,
    parse_schema,
    parse_sql_schema,
)

__all__ = [
    "DiffKind",
    "DiffLine",
    "LintIssue",
    "LintRule",
    "ParsedSchema",
    "Severity",
    "diff_sql",
    "format_sql",
    "lint_sql",
    "parse_json_schema",
    "parse_schema",
    "parse_sql_schema",
]
