"""
SQL Tools Router

Endpoints for the local SQL heuristics. None of these call an LLM.
"""

from fastapi import APIRouter

from querycraft.sqltools.diff import diff_sql, summarize
from querycraft.sqltools.formatter import format_sql
from querycraft.sqltools.linter import count_by_severity, lint_sql
from querycraft.sqltools.schema_parser import parse_json_schema, parse_schema, parse_sql_schema
from querycraft.sqltools.schemas import (
    DiffRequest,
    DiffResponse,
    FormatResponse,
    LintResponse,
    ParsedSchemaResponse,
    ParseSchemaRequest,
    SQLTextRequest,
)

router = APIRouter()

_PARSERS = {
    "auto": parse_schema,
    "sql": parse_sql_schema,
    "json": parse_json_schema,
}


@router.post("/lint-sql", response_model=LintResponse)
async def lint(request: SQLTextRequest) -> LintResponse:
    """Check a query against the lint rule table."""
    issues = lint_sql(request.sql)
    return LintResponse.model_validate({"issues": issues, "counts": count_by_severity(issues)})


@router.post("/format-sql", response_model=FormatResponse)
async def format_query(request: SQLTextRequest) -> FormatResponse:
    return FormatResponse(sql=format_sql(request.sql))


@router.post("/parse-schema", response_model=ParsedSchemaResponse)
async def parse(request: ParseSchemaRequest) -> ParsedSchemaResponse:
    """Extract tables and relationships from CREATE TABLE text or JSON."""
    parsed = _PARSERS[request.format](request.schema_text)
    return ParsedSchemaResponse.model_validate(parsed)


@router.post("/diff-sql", response_model=DiffResponse)
async def diff(request: DiffRequest) -> DiffResponse:
    lines = diff_sql(request.original, request.modified)
    return DiffResponse.model_validate({"lines": lines, "summary": summarize(lines)})
