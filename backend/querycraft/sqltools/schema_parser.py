"""
Schema Parser

Best-effort extraction of tables, columns and foreign-key relationships from
CREATE TABLE text or a JSON schema document. This is a diagramming aid, not
a SQL grammar: odd input yields partial or empty results, never an exception.
"""

import json
import re
from dataclasses import asdict, dataclass, field

_TABLE_RE = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?[`\"]?(\w+)[`\"]?\s*\((.*?)\);",
    re.IGNORECASE | re.DOTALL,
)
_CONSTRAINT_RE = re.compile(r"^\s*(PRIMARY\s+KEY|FOREIGN\s+KEY|UNIQUE|CHECK|CONSTRAINT)", re.IGNORECASE)
_FK_CONSTRAINT_RE = re.compile(
    r"FOREIGN\s+KEY\s*\([`\"]?(\w+)[`\"]?\)\s*REFERENCES\s+[`\"]?(\w+)[`\"]?\s*\([`\"]?(\w+)[`\"]?\)",
    re.IGNORECASE,
)
_COLUMN_RE = re.compile(r"^[`\"]?(\w+)[`\"]?\s+(\w+(?:\([^)]+\))?)", re.IGNORECASE)
_INLINE_PK_RE = re.compile(r"PRIMARY\s+KEY", re.IGNORECASE)
_INLINE_REF_RE = re.compile(
    r"REFERENCES\s+[`\"]?(\w+)[`\"]?\s*\([`\"]?(\w+)[`\"]?\)",
    re.IGNORECASE,
)


@dataclass
class ColumnReference:
    """Target of a foreign key."""

    table: str
    column: str


@dataclass
class Column:
    """A table column with key annotations."""

    name: str
    type: str
    is_primary_key: bool = False
    is_foreign_key: bool = False
    references: ColumnReference | None = None


@dataclass
class Table:
    """A table and its columns in declaration order."""

    name: str
    columns: list[Column] = field(default_factory=list)

    def column(self, name: str) -> Column | None:
        return next((c for c in self.columns if c.name == name), None)


@dataclass
class Relationship:
    """Foreign key edge: from_table.from_column -> to_table.to_column."""

    from_table: str
    from_column: str
    to_table: str
    to_column: str


@dataclass
class ParsedSchema:
    """Tables plus the relationship edges between them."""

    tables: list[Table] = field(default_factory=list)
    relationships: list[Relationship] = field(default_factory=list)

    def table(self, name: str) -> Table | None:
        return next((t for t in self.tables if t.name == name), None)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_prompt_text(self) -> str:
        """Compact rendering used when a parsed schema is embedded in a prompt."""
        lines = []
        for table in self.tables:
            lines.append(f"Table: {table.name}")
            for col in table.columns:
                line = f"  - {col.name} ({col.type})"
                if col.is_primary_key:
                    line += " [PRIMARY KEY]"
                if col.references:
                    line += f" [FK -> {col.references.table}.{col.references.column}]"
                elif col.is_foreign_key:
                    line += " [FK]"
                lines.append(line)
        return "\n".join(lines)


def parse_sql_schema(sql: str) -> ParsedSchema:
    """Extract tables and relationships from CREATE TABLE statements."""
    schema = ParsedSchema()

    for match in _TABLE_RE.finditer(sql or ""):
        table = Table(name=match.group(1))
        lines = [line.strip() for line in match.group(2).split(",")]

        for line in filter(None, lines):
            if _CONSTRAINT_RE.match(line):
                fk = _FK_CONSTRAINT_RE.search(line)
                if fk:
                    from_column, to_table, to_column = fk.groups()
                    schema.relationships.append(
                        Relationship(table.name, from_column, to_table, to_column)
                    )
                    col = table.column(from_column)
                    if col:
                        col.is_foreign_key = True
                        col.references = ColumnReference(to_table, to_column)
                continue

            col_match = _COLUMN_RE.match(line)
            if not col_match:
                continue

            name, col_type = col_match.groups()
            column = Column(
                name=name,
                type=col_type.upper(),
                is_primary_key=bool(_INLINE_PK_RE.search(line)),
                is_foreign_key="REFERENCES" in line.upper(),
            )

            if column.is_foreign_key:
                ref = _INLINE_REF_RE.search(line)
                if ref:
                    column.references = ColumnReference(ref.group(1), ref.group(2))
                    schema.relationships.append(
                        Relationship(table.name, name, ref.group(1), ref.group(2))
                    )

            table.columns.append(column)

        schema.tables.append(table)

    return schema


def parse_json_schema(text: str) -> ParsedSchema:
    """Parse a {"tables": [...]} document. Returns an empty schema on bad input."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        return ParsedSchema()

    schema = ParsedSchema()
    if not isinstance(data, dict) or not isinstance(data.get("tables"), list):
        return schema

    try:
        for raw_table in data["tables"]:
            table = Table(name=raw_table["name"])

            for raw_col in raw_table.get("columns") or []:
                column = Column(
                    name=raw_col["name"],
                    type=(raw_col.get("type") or "VARCHAR").upper(),
                    is_primary_key=bool(raw_col.get("primaryKey") or raw_col.get("isPrimaryKey")),
                    is_foreign_key=bool(raw_col.get("foreignKey") or raw_col.get("isForeignKey")),
                )

                ref = raw_col.get("references")
                if ref:
                    column.references = ColumnReference(ref["table"], ref["column"])
                    schema.relationships.append(
                        Relationship(table.name, column.name, ref["table"], ref["column"])
                    )

                table.columns.append(column)

            schema.tables.append(table)
    except (AttributeError, KeyError, TypeError):
        return ParsedSchema()

    return schema


def parse_schema(text: str) -> ParsedSchema:
    """Parse either format, picking JSON when the text looks like an object."""
    if (text or "").lstrip().startswith("{"):
        return parse_json_schema(text)
    return parse_sql_schema(text)
