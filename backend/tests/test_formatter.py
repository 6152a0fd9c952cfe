"""
Formatter and Diff Tests
========================
"""

import pytest

from querycraft.sqltools.diff import DiffKind, diff_sql, summarize
from querycraft.sqltools.formatter import format_sql

SAMPLES = [
    "select id, name from users where active = true and age > 21 order by name limit 10",
    "SELECT u.id,o.total FROM users u left join orders o on o.user_id = u.id WHERE o.total > 100",
    "select status, count(*) as total from orders group by status having count(*) > 5",
    "update users set name = 'x', email = 'y' where id = 1",
    "SELECT CASE WHEN a > 1 THEN 'big' ELSE 'small' END AS size FROM t",
    "  SELECT\n\n id ,\tname\nFROM   users  ",
]


class TestFormatSQL:
    def test_breaks_and_capitalizes_major_clauses(self):
        formatted = format_sql("select id, name from users where id = 1 order by name")

        assert formatted == "\n".join(
            [
                "SELECT id,",
                "  name",
                "FROM users",
                "WHERE id = 1",
                "ORDER BY name",
            ]
        )

    def test_multi_word_keywords_stay_together(self):
        formatted = format_sql("select a from t1 left join t2 on t1.id = t2.id")

        assert "\nLEFT JOIN t2" in formatted
        assert "\nON t1.id = t2.id" in formatted
        assert "LEFT\n" not in formatted

    def test_empty_input(self):
        assert format_sql("") == ""

    @pytest.mark.parametrize("sql", SAMPLES)
    def test_idempotent(self, sql):
        once = format_sql(sql)

        assert format_sql(once) == once


class TestDiffSQL:
    def test_line_kinds(self):
        lines = diff_sql("SELECT *\nFROM users\nWHERE id = 1", "SELECT id\nFROM users")

        assert [line.kind for line in lines] == [
            DiffKind.MODIFIED,
            DiffKind.UNCHANGED,
            DiffKind.REMOVED,
        ]

    def test_added_lines(self):
        lines = diff_sql("SELECT id", "SELECT id\nLIMIT 5")

        assert lines[1].kind == DiffKind.ADDED
        assert lines[1].modified == "LIMIT 5"
        assert lines[1].original == ""

    def test_summary_counts_every_kind(self):
        summary = summarize(diff_sql("a\nb", "a\nc\nd"))

        assert summary == {"unchanged": 1, "added": 1, "removed": 0, "modified": 1}
