"""
SQL Tools Schemas

Pydantic models for the lint, format, parse-schema and diff endpoints.
"""

from typing import Literal

from pydantic import Field

from querycraft.schemas import CamelModel
from querycraft.sqltools.diff import DiffKind
from querycraft.sqltools.linter import Severity


class SQLTextRequest(CamelModel):
    sql: str = ""


class LintIssueResponse(CamelModel):
    severity: Severity
    message: str
    suggestion: str | None = None
    rule: str | None = None


class LintResponse(CamelModel):
    issues: list[LintIssueResponse]
    counts: dict[str, int]


class FormatResponse(CamelModel):
    sql: str


class ParseSchemaRequest(CamelModel):
    schema_text: str = Field(default="", alias="schema")
    format: Literal["auto", "sql", "json"] = "auto"


class ColumnReferenceResponse(CamelModel):
    table: str
    column: str


class ColumnResponse(CamelModel):
    name: str
    type: str
    is_primary_key: bool = False
    is_foreign_key: bool = False
    references: ColumnReferenceResponse | None = None


class TableResponse(CamelModel):
    name: str
    columns: list[ColumnResponse]


class RelationshipResponse(CamelModel):
    from_table: str
    from_column: str
    to_table: str
    to_column: str


class ParsedSchemaResponse(CamelModel):
    tables: list[TableResponse]
    relationships: list[RelationshipResponse]


class DiffRequest(CamelModel):
    original: str = ""
    modified: str = ""


class DiffLineResponse(CamelModel):
    kind: DiffKind
    original: str
    modified: str


class DiffResponse(CamelModel):
    lines: list[DiffLineResponse]
    summary: dict[str, int]
