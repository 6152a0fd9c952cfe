"""
SQL Formatter

Keyword-based reflow: one major clause per line, keywords uppercased, comma
separated lists broken onto indented lines. String literals and nesting are
not understood. Output depends only on the token sequence, so formatting
formatted text is a no-op.
"""

import re

MAJOR_KEYWORDS = [
    "SELECT", "FROM", "WHERE", "JOIN", "LEFT JOIN", "RIGHT JOIN", "INNER JOIN",
    "OUTER JOIN", "FULL JOIN", "CROSS JOIN", "ON", "AND", "OR", "ORDER BY",
    "GROUP BY", "HAVING", "LIMIT", "OFFSET", "UNION", "EXCEPT", "INTERSECT",
    "INSERT INTO", "VALUES", "UPDATE", "SET", "DELETE FROM", "CREATE TABLE",
    "ALTER TABLE", "DROP TABLE", "WITH", "AS", "CASE", "WHEN", "THEN", "ELSE", "END",
]

INDENT = "  "

# Longest first so "LEFT JOIN" wins over "JOIN" and "ORDER BY" over "OR"
_KEYWORD_ALTERNATION = "|".join(
    kw.replace(" ", r"\s+") for kw in sorted(MAJOR_KEYWORDS, key=len, reverse=True)
)
_BREAK_BEFORE_RE = re.compile(rf"\s+({_KEYWORD_ALTERNATION})\s+", re.IGNORECASE)
_KEYWORD_RE = re.compile(rf"\b({_KEYWORD_ALTERNATION})\b", re.IGNORECASE)
_LEADING_KEYWORD_RE = re.compile(rf"^({_KEYWORD_ALTERNATION})\b")
_WHITESPACE_RE = re.compile(r"\s+")
_COMMA_RE = re.compile(r"\s*,\s*")


def _canonical(keyword: str) -> str:
    return _WHITESPACE_RE.sub(" ", keyword).upper()


def format_sql(sql: str) -> str:
    """Reflow SQL text; see the module docstring for the rules applied."""
    formatted = _WHITESPACE_RE.sub(" ", (sql or "").strip())
    formatted = _COMMA_RE.sub(", ", formatted)

    formatted = _BREAK_BEFORE_RE.sub(lambda m: f"\n{_canonical(m.group(1))} ", formatted)
    formatted = _KEYWORD_RE.sub(lambda m: _canonical(m.group(1)), formatted)
    formatted = formatted.replace(", ", f",\n{INDENT}").lstrip("\n")

    lines = []
    for index, line in enumerate(formatted.split("\n")):
        trimmed = line.strip()
        if index == 0 or _LEADING_KEYWORD_RE.match(trimmed):
            lines.append(trimmed)
        else:
            lines.append(INDENT + trimmed)

    return "\n".join(lines)
