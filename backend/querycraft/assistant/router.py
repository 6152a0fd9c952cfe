"""
Assistant Router

LLM-backed API endpoints: generate, explain, convert, optimize and debug SQL,
mock results, performance analysis, schema generation and ORM export.
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import APIRouter, HTTPException, status

from querycraft.assistant.dependencies import Assistant
from querycraft.assistant.schemas import (
    ConvertSQLRequest,
    DebugSQLRequest,
    DebugSQLResponse,
    DescriptionResponse,
    ExplainSQLResponse,
    ExportORMRequest,
    GenerateSchemaRequest,
    GenerateSQLRequest,
    ImageToSchemaRequest,
    MockResultsResponse,
    MultiQueryRequest,
    MultiQueryResponse,
    OptimizeSQLResponse,
    ORMExportResponse,
    PerformanceAnalysisResponse,
    QuerySuggestionsRequest,
    QuerySuggestionsResponse,
    SchemaResponse,
    SQLRequest,
    SQLResponse,
    SQLWithSchemaRequest,
)
from querycraft.assistant.service import InvalidImageError, parse_image_payload
from querycraft.config import get_settings
from querycraft.errors import LLMError

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _require(condition: object, message: str) -> None:
    if not condition:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def _call(operation: Awaitable[T], failure: str) -> T:
    """Await a service call, turning provider failures into a 500."""
    try:
        return await operation
    except LLMError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or failure,
        ) from e


@router.post("/generate-sql", response_model=SQLResponse)
async def generate_sql(request: GenerateSQLRequest, assistant: Assistant) -> SQLResponse:
    """Generate SQL from a natural-language prompt."""
    _require(request.prompt, "Prompt is required")
    return await _call(
        assistant.generate_sql(request.prompt, request.schema_text, request.dialect),
        "Failed to generate SQL",
    )


@router.post("/explain-sql", response_model=ExplainSQLResponse)
async def explain_sql(request: SQLRequest, assistant: Assistant) -> ExplainSQLResponse:
    """Explain a query as summary, per-clause sections, result and tips."""
    _require(request.sql, "SQL query is required")
    return await _call(assistant.explain_sql(request.sql), "Failed to explain SQL")


@router.post("/convert-sql", response_model=SQLResponse)
async def convert_sql(request: ConvertSQLRequest, assistant: Assistant) -> SQLResponse:
    """Convert a query to another SQL dialect."""
    _require(request.sql and request.to_dialect, "SQL and target dialect are required")
    return await _call(
        assistant.convert_sql(request.sql, request.to_dialect, request.from_dialect),
        "Failed to convert SQL",
    )


@router.post("/optimize-sql", response_model=OptimizeSQLResponse)
async def optimize_sql(request: SQLWithSchemaRequest, assistant: Assistant) -> OptimizeSQLResponse:
    """Suggest an optimized query, indexes and tips."""
    _require(request.sql, "SQL query is required")
    return await _call(
        assistant.optimize_sql(request.sql, request.schema_text),
        "Failed to optimize SQL",
    )


@router.post("/sql-to-natural", response_model=DescriptionResponse)
async def sql_to_natural(request: SQLRequest, assistant: Assistant) -> DescriptionResponse:
    """Describe a query in plain language."""
    _require(request.sql, "SQL query is required")
    return await _call(
        assistant.sql_to_natural(request.sql),
        "Failed to convert SQL to natural language",
    )


@router.post("/mock-results", response_model=MockResultsResponse)
async def mock_results(request: SQLRequest, assistant: Assistant) -> MockResultsResponse:
    """Generate realistic sample rows for a query."""
    _require(request.sql, "SQL query is required")
    return await _call(assistant.mock_results(request.sql), "Failed to generate mock results")


@router.post("/analyze-performance", response_model=PerformanceAnalysisResponse)
async def analyze_performance(
    request: SQLWithSchemaRequest, assistant: Assistant
) -> PerformanceAnalysisResponse:
    """Simulated EXPLAIN ANALYZE."""
    _require(request.sql, "SQL query is required")
    return await _call(
        assistant.analyze_performance(request.sql, request.schema_text),
        "Failed to analyze performance",
    )


@router.post("/debug-sql", response_model=DebugSQLResponse)
async def debug_sql(request: DebugSQLRequest, assistant: Assistant) -> DebugSQLResponse:
    """Explain a database error message and propose a fixed query."""
    _require(request.sql and request.error, "SQL query and error message are required")
    return await _call(
        assistant.debug_sql(request.sql, request.error, request.schema_text),
        "Failed to debug SQL",
    )


@router.post("/generate-schema", response_model=SchemaResponse)
async def generate_schema(request: GenerateSchemaRequest, assistant: Assistant) -> SchemaResponse:
    """Generate CREATE TABLE statements from a description."""
    _require(request.description, "Description is required")
    return await _call(assistant.generate_schema(request.description), "Failed to generate schema")


@router.post("/image-to-schema", response_model=SchemaResponse)
async def image_to_schema(request: ImageToSchemaRequest, assistant: Assistant) -> SchemaResponse:
    """Infer a schema from an uploaded ERD image."""
    _require(request.image, "Image is required")
    try:
        image = parse_image_payload(
            request.image, request.mime_type, get_settings().max_image_bytes
        )
    except InvalidImageError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return await _call(assistant.image_to_schema(image), "Failed to extract schema")


@router.post("/export-orm", response_model=ORMExportResponse)
async def export_orm(request: ExportORMRequest, assistant: Assistant) -> ORMExportResponse:
    """Translate a query into ORM code."""
    _require(request.sql and request.orm, "SQL and ORM type are required")
    return await _call(assistant.export_orm(request.sql, request.orm), "Failed to export to ORM")


@router.post("/query-suggestions", response_model=QuerySuggestionsResponse)
async def query_suggestions(
    request: QuerySuggestionsRequest, assistant: Assistant
) -> QuerySuggestionsResponse:
    """Autocomplete a partial natural-language request."""
    _require(request.query is not None, "Query is required")
    return await _call(
        assistant.query_suggestions(request.query, request.schema_text),
        "Failed to get suggestions",
    )


@router.post("/multi-query", response_model=MultiQueryResponse)
async def multi_query(request: MultiQueryRequest, assistant: Assistant) -> MultiQueryResponse:
    """Generate an ordered set of dependent SQL statements."""
    _require(request.prompt, "Prompt is required")
    return await _call(
        assistant.multi_query(request.prompt, request.schema_text, request.dialect),
        "Failed to generate queries",
    )
