"""
SQL Linter

Flags common SQL anti-patterns with regular expressions. Each rule in the
table is an independent check; issues are reported in rule order, not by
severity. There is no schema or engine behind this, so findings are hints.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """How serious a lint finding is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class LintIssue:
    """A single finding."""

    severity: Severity
    message: str
    suggestion: str | None = None
    rule: str | None = None


Check = Callable[[str], Iterable[LintIssue]]


@dataclass(frozen=True)
class LintRule:
    """Named check that yields zero or more issues for a SQL string."""

    name: str
    check: Check

    def run(self, sql: str) -> list[LintIssue]:
        return [
            LintIssue(issue.severity, issue.message, issue.suggestion, rule=self.name)
            for issue in self.check(sql)
        ]


def pattern_rule(
    name: str,
    pattern: str,
    severity: Severity,
    message: str,
    suggestion: str | None = None,
    unless: str | None = None,
    flags: int = re.IGNORECASE,
) -> LintRule:
    """Rule that fires once when `pattern` matches and `unless` does not."""
    compiled = re.compile(pattern, flags)
    compiled_unless = re.compile(unless, flags) if unless else None

    def check(sql: str) -> list[LintIssue]:
        if not compiled.search(sql):
            return []
        if compiled_unless and compiled_unless.search(sql):
            return []
        return [LintIssue(severity, message, suggestion)]

    return LintRule(name, check)


def _unbalanced_parentheses(sql: str) -> list[LintIssue]:
    opening = sql.count("(")
    closing = sql.count(")")
    if opening == closing:
        return []
    return [
        LintIssue(
            Severity.ERROR,
            f"Unbalanced parentheses: {opening} opening, {closing} closing",
            "Check for missing or extra parentheses",
        )
    ]


def _unbalanced_quotes(sql: str) -> list[LintIssue]:
    # '' is an escaped quote inside a literal
    if sql.replace("''", "").count("'") % 2 == 0:
        return []
    return [LintIssue(Severity.ERROR, "Unbalanced single quotes", "Check for missing closing quote")]


def _implicit_conversion(sql: str) -> list[LintIssue]:
    if re.search(r"=\s*['\"]?\d+['\"]?", sql) and re.search(r"=\s*['\"]", sql):
        return [
            LintIssue(
                Severity.INFO,
                "Possible implicit type conversion in comparison",
                "Ensure data types match for optimal performance",
            )
        ]
    return []


def _ambiguous_join_columns(sql: str) -> list[LintIssue]:
    if "JOIN" not in sql.upper():
        return []
    if not re.search(r"SELECT.*?(?<!\.)\b(?:id|name|created_at|updated_at)\b", sql, re.IGNORECASE | re.DOTALL):
        return []
    return [
        LintIssue(
            Severity.INFO,
            "Consider using table aliases for column references in JOINs",
            "Prefix column names with table aliases (e.g., t.column_name)",
        )
    ]


def _distinct_with_order_by(sql: str) -> list[LintIssue]:
    if re.search(r"SELECT\s+DISTINCT", sql, re.IGNORECASE) and re.search(r"ORDER\s+BY\s+\w+", sql, re.IGNORECASE):
        return [
            LintIssue(
                Severity.INFO,
                "Ensure ORDER BY columns are included in SELECT DISTINCT",
                "Columns in ORDER BY should appear in the SELECT list",
            )
        ]
    return []


KEYWORD_TYPOS = [
    (r"SLECT", "SELECT"),
    (r"FORM\s+", "FROM"),
    (r"WEHRE", "WHERE"),
    (r"GRUOP", "GROUP"),
    (r"ODERR", "ORDER"),
]


def _keyword_typos(sql: str) -> list[LintIssue]:
    return [
        LintIssue(Severity.ERROR, f"Possible typo: did you mean {correct}?", f"Replace with {correct}")
        for wrong, correct in KEYWORD_TYPOS
        if re.search(wrong, sql, re.IGNORECASE)
    ]


def _missing_final_semicolon(sql: str) -> list[LintIssue]:
    stripped = sql.strip()
    statements = [s for s in stripped.split(";") if s.strip()]
    if len(statements) > 1 and not stripped.endswith(";"):
        return [
            LintIssue(Severity.INFO, "Consider ending the last statement with a semicolon", "Add ; at the end")
        ]
    return []


DEFAULT_RULES: list[LintRule] = [
    pattern_rule(
        "select-star",
        r"SELECT\s+\*",
        Severity.WARNING,
        "Avoid SELECT * - specify columns explicitly for better performance",
        "List specific column names instead of using *",
    ),
    pattern_rule(
        "delete-without-where",
        r"DELETE\s+FROM\s+\w+\s*(?:;|$)",
        Severity.ERROR,
        "DELETE without WHERE clause will delete all rows",
        "Add a WHERE clause to limit affected rows",
        unless=r"\bWHERE\b",
        flags=re.IGNORECASE | re.MULTILINE,
    ),
    pattern_rule(
        "update-without-where",
        r"UPDATE\s+\w+\s+SET",
        Severity.ERROR,
        "UPDATE without WHERE clause will update all rows",
        "Add a WHERE clause to limit affected rows",
        unless=r"\bWHERE\b",
    ),
    pattern_rule(
        "leading-wildcard-like",
        r"LIKE\s+['\"]%",
        Severity.WARNING,
        "LIKE with leading wildcard cannot use indexes",
        "Consider using full-text search for better performance",
    ),
    pattern_rule(
        "not-equal-operator",
        r"!=",
        Severity.INFO,
        "Consider using <> instead of != for SQL standard compliance",
        "Replace != with <>",
    ),
    LintRule("unbalanced-parentheses", _unbalanced_parentheses),
    LintRule("unbalanced-quotes", _unbalanced_quotes),
    pattern_rule(
        "limit-without-order-by",
        r"LIMIT\s+\d+",
        Severity.WARNING,
        "LIMIT without ORDER BY returns non-deterministic results",
        "Add ORDER BY to ensure consistent results",
        unless=r"ORDER\s+BY",
    ),
    LintRule("implicit-type-conversion", _implicit_conversion),
    LintRule("ambiguous-join-columns", _ambiguous_join_columns),
    pattern_rule(
        "correlated-subquery",
        r"SELECT.*?\(\s*SELECT",
        Severity.WARNING,
        "Correlated subquery in SELECT may cause N+1 performance issues",
        "Consider using JOIN instead",
        flags=re.IGNORECASE | re.DOTALL,
    ),
    pattern_rule(
        "function-on-indexed-column",
        r"WHERE.*?(?:LOWER|UPPER|DATE|YEAR|MONTH)\s*\(",
        Severity.WARNING,
        "Function on column in WHERE clause prevents index usage",
        "Consider using expression indexes or refactoring the query",
        flags=re.IGNORECASE | re.DOTALL,
    ),
    LintRule("distinct-with-order-by", _distinct_with_order_by),
    LintRule("keyword-typos", _keyword_typos),
    pattern_rule(
        "trailing-comma-before-from",
        r",\s*FROM\b",
        Severity.ERROR,
        "Trailing comma before FROM clause",
        "Remove the trailing comma",
    ),
    LintRule("missing-final-semicolon", _missing_final_semicolon),
]


def lint_sql(sql: str, rules: Iterable[LintRule] = DEFAULT_RULES) -> list[LintIssue]:
    """Run every rule against `sql` and collect the issues in rule order."""
    issues: list[LintIssue] = []
    for rule in rules:
        issues.extend(rule.run(sql or ""))
    return issues


def count_by_severity(issues: Iterable[LintIssue]) -> dict[str, int]:
    counts = {severity.value: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity.value] += 1
    return counts
