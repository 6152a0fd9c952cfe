"""
SQL Linter Tests
================
Rule table behavior and individual rules.
"""

import pytest

from querycraft.sqltools.linter import (
    DEFAULT_RULES,
    LintIssue,
    LintRule,
    Severity,
    count_by_severity,
    lint_sql,
    pattern_rule,
)


def _rules(issues):
    return [issue.rule for issue in issues]


class TestWriteWithoutWhere:
    def test_delete_without_where_is_error(self):
        issues = lint_sql("DELETE FROM users;")

        errors = [i for i in issues if i.rule == "delete-without-where"]
        assert len(errors) == 1
        assert errors[0].severity == Severity.ERROR

    def test_delete_with_where_is_clean(self):
        issues = lint_sql("DELETE FROM users WHERE id = 1;")

        assert "delete-without-where" not in _rules(issues)

    def test_update_without_where_is_error(self):
        issues = lint_sql("UPDATE users SET active = false;")

        assert "update-without-where" in _rules(issues)

    def test_update_with_where_is_clean(self):
        issues = lint_sql("UPDATE users SET active = false WHERE id = 3;")

        assert "update-without-where" not in _rules(issues)


class TestBalance:
    @pytest.mark.parametrize(
        "sql, opening, closing",
        [
            ("SELECT COUNT(id FROM users;", 1, 0),
            ("SELECT id) FROM users;", 0, 1),
            ("SELECT ((a + b) FROM t;", 2, 1),
        ],
    )
    def test_unbalanced_parentheses_reports_counts_once(self, sql, opening, closing):
        issues = [i for i in lint_sql(sql) if i.rule == "unbalanced-parentheses"]

        assert len(issues) == 1
        assert issues[0].severity == Severity.ERROR
        assert f"{opening} opening, {closing} closing" in issues[0].message

    def test_balanced_parentheses(self):
        assert "unbalanced-parentheses" not in _rules(lint_sql("SELECT COUNT(id) FROM users;"))

    def test_escaped_quotes_are_balanced(self):
        issues = lint_sql("SELECT id FROM users WHERE name = 'O''Brien';")

        assert "unbalanced-quotes" not in _rules(issues)

    def test_unclosed_quote(self):
        issues = lint_sql("SELECT id FROM users WHERE name = 'Bob;")

        assert "unbalanced-quotes" in _rules(issues)


class TestPatternRules:
    def test_select_star_warning(self):
        issues = lint_sql("SELECT * FROM users;")

        star = next(i for i in issues if i.rule == "select-star")
        assert star.severity == Severity.WARNING
        assert star.suggestion

    def test_leading_wildcard_like(self):
        assert "leading-wildcard-like" in _rules(lint_sql("SELECT id FROM t WHERE name LIKE '%phone';"))
        assert "leading-wildcard-like" not in _rules(lint_sql("SELECT id FROM t WHERE name LIKE 'phone%';"))

    def test_limit_without_order_by(self):
        assert "limit-without-order-by" in _rules(lint_sql("SELECT id FROM t LIMIT 10;"))
        assert "limit-without-order-by" not in _rules(lint_sql("SELECT id FROM t ORDER BY id LIMIT 10;"))

    def test_function_on_column_in_where(self):
        issues = lint_sql("SELECT id FROM users WHERE LOWER(email) = 'a@b.c';")

        assert "function-on-indexed-column" in _rules(issues)

    def test_keyword_typos_each_reported(self):
        issues = [i for i in lint_sql("SLECT id FORM users WEHRE id = 1") if i.rule == "keyword-typos"]

        assert [i.message for i in issues] == [
            "Possible typo: did you mean SELECT?",
            "Possible typo: did you mean FROM?",
            "Possible typo: did you mean WHERE?",
        ]

    def test_trailing_comma_before_from(self):
        issues = lint_sql("SELECT id, name, FROM users;")

        assert "trailing-comma-before-from" in _rules(issues)

    def test_missing_final_semicolon_only_for_multiple_statements(self):
        assert "missing-final-semicolon" in _rules(lint_sql("SELECT 1; SELECT 2"))
        assert "missing-final-semicolon" not in _rules(lint_sql("SELECT 1"))


class TestRuleTable:
    def test_clean_query_has_no_issues(self):
        assert lint_sql("SELECT id, email FROM users WHERE id = 1 ORDER BY id LIMIT 5;") == []

    def test_issues_follow_rule_order(self):
        issues = lint_sql("DELETE FROM users; SELECT * FROM t LIMIT 1")
        order = [rule.name for rule in DEFAULT_RULES]

        positions = [order.index(rule) for rule in _rules(issues)]
        assert positions == sorted(positions)

    def test_custom_rule_table(self):
        no_drop = pattern_rule("no-drop", r"\bDROP\b", Severity.ERROR, "DROP is not allowed")

        issues = lint_sql("DROP TABLE users; SELECT * FROM t", rules=[no_drop])

        assert issues == [LintIssue(Severity.ERROR, "DROP is not allowed", None, rule="no-drop")]

    def test_rule_run_tags_issue_with_rule_name(self):
        rule = LintRule("always", lambda sql: [LintIssue(Severity.INFO, "hi")])

        assert rule.run("x")[0].rule == "always"

    def test_count_by_severity(self):
        issues = lint_sql("DELETE FROM users")
        counts = count_by_severity(issues)

        assert set(counts) == {"error", "warning", "info"}
        assert counts["error"] >= 1
