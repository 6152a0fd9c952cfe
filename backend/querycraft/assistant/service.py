"""
Assistant Service

Operation logic for the LLM-backed endpoints: build the prompt, make one
provider call, clean up the reply and shape it into a response model.

Structured replies that cannot be parsed never fail the request; each
operation has a fallback shape built from the raw reply text.
"""

import base64
import binascii
import logging
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from querycraft.assistant.schemas import (
    DebugSQLResponse,
    DescriptionResponse,
    ExplainSQLResponse,
    MockResultsResponse,
    MultiQueryResponse,
    MultiQueryStep,
    OptimizeSQLResponse,
    ORMExportResponse,
    PerformanceAnalysisResponse,
    QuerySuggestion,
    QuerySuggestionsResponse,
    SchemaResponse,
    SQLResponse,
)
from querycraft.llm import prompts
from querycraft.llm.extraction import (
    Extraction,
    extract_structured,
    first_fenced_block,
    strip_code_fences,
)
from querycraft.llm.gateway import ImagePayload, LLMGateway, LLMRequest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Autocomplete is not worth a provider call below this many characters
MIN_SUGGESTION_QUERY_LENGTH = 3

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+);base64,(?P<data>.+)$", re.DOTALL)


class InvalidImageError(ValueError):
    """Uploaded image is not valid base64 or is too large."""


def _format_size(num_bytes: int) -> str:
    if num_bytes >= 1024 * 1024:
        return f"{num_bytes // (1024 * 1024)}MB"
    if num_bytes >= 1024:
        return f"{num_bytes // 1024}KB"
    return f"{num_bytes} bytes"


def parse_image_payload(image: str, mime_type: str | None, max_bytes: int) -> ImagePayload:
    """Accept a data URL or bare base64 and check the decoded size."""
    match = _DATA_URL_RE.match(image.strip())
    if match:
        mime_type = match.group("mime")
        data = match.group("data")
    else:
        data = image.strip()

    mime_type = mime_type or "image/png"
    if not mime_type.startswith("image/"):
        raise InvalidImageError("Please upload an image file")

    data = re.sub(r"\s+", "", data)
    try:
        decoded = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError("Image must be base64 encoded") from e

    if len(decoded) > max_bytes:
        raise InvalidImageError(f"Image size must be less than {_format_size(max_bytes)}")

    return ImagePayload(mime_type=mime_type, data_base64=data)


def _drop_null_keys(value: Any) -> Any:
    """Remove null-valued object keys so the model defaults apply instead."""
    if isinstance(value, dict):
        return {key: _drop_null_keys(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        # Only object keys are dropped; null cells inside row arrays are data
        return [_drop_null_keys(item) if isinstance(item, (dict, list)) else item for item in value]
    return value


def _coerce(model: type[ModelT], extraction: Extraction) -> ModelT | None:
    """Validate structured data against a response model, or None on mismatch."""
    if not extraction.is_structured:
        return None
    try:
        return model.model_validate(_drop_null_keys(extraction.structured))
    except ValidationError as e:
        logger.warning(f"Structured reply does not match {model.__name__}: {e.error_count()} errors")
        return None


class AssistantService:
    """One method per assistant endpoint."""

    def __init__(self, gateway: LLMGateway) -> None:
        self.gateway = gateway

    async def _complete(self, request: LLMRequest, operation: str) -> str:
        response = await self.gateway.generate(request, operation=operation)
        return response.text

    async def generate_sql(
        self, prompt: str, schema: str | None = None, dialect: str | None = None
    ) -> SQLResponse:
        text = await self._complete(prompts.generate_sql(prompt, schema, dialect), "generate-sql")
        return SQLResponse(sql=strip_code_fences(text))

    async def explain_sql(self, sql: str) -> ExplainSQLResponse:
        text = await self._complete(prompts.explain_sql(sql), "explain-sql")
        extraction = extract_structured(text)
        return _coerce(ExplainSQLResponse, extraction) or ExplainSQLResponse(
            summary=extraction.raw_text
        )

    async def convert_sql(
        self, sql: str, to_dialect: str, from_dialect: str | None = None
    ) -> SQLResponse:
        text = await self._complete(prompts.convert_sql(sql, to_dialect, from_dialect), "convert-sql")
        return SQLResponse(sql=strip_code_fences(text))

    async def optimize_sql(self, sql: str, schema: str | None = None) -> OptimizeSQLResponse:
        text = await self._complete(prompts.optimize_sql(sql, schema), "optimize-sql")
        extraction = extract_structured(text)
        return _coerce(OptimizeSQLResponse, extraction) or OptimizeSQLResponse(
            optimized_query=first_fenced_block(text) or "",
            summary=extraction.raw_text,
        )

    async def sql_to_natural(self, sql: str) -> DescriptionResponse:
        text = await self._complete(prompts.sql_to_natural(sql), "sql-to-natural")
        return DescriptionResponse(description=strip_code_fences(text))

    async def mock_results(self, sql: str) -> MockResultsResponse:
        text = await self._complete(prompts.mock_results(sql), "mock-results")
        return _coerce(MockResultsResponse, extract_structured(text)) or MockResultsResponse()

    async def analyze_performance(
        self, sql: str, schema: str | None = None
    ) -> PerformanceAnalysisResponse:
        text = await self._complete(prompts.analyze_performance(sql, schema), "analyze-performance")
        extraction = extract_structured(text)
        return _coerce(PerformanceAnalysisResponse, extraction) or PerformanceAnalysisResponse(
            summary=extraction.raw_text
        )

    async def debug_sql(self, sql: str, error: str, schema: str | None = None) -> DebugSQLResponse:
        text = await self._complete(prompts.debug_sql(sql, error, schema), "debug-sql")
        extraction = extract_structured(text)
        return _coerce(DebugSQLResponse, extraction) or DebugSQLResponse(
            explanation=extraction.raw_text
        )

    async def generate_schema(self, description: str) -> SchemaResponse:
        text = await self._complete(prompts.generate_schema(description), "generate-schema")
        return SchemaResponse(schema_text=strip_code_fences(text))

    async def image_to_schema(self, image: ImagePayload) -> SchemaResponse:
        text = await self._complete(prompts.image_to_schema(image), "image-to-schema")
        return SchemaResponse(schema_text=strip_code_fences(text))

    async def export_orm(self, sql: str, orm: str) -> ORMExportResponse:
        text = await self._complete(prompts.export_orm(sql, orm), "export-orm")
        return ORMExportResponse(code=strip_code_fences(text))

    async def query_suggestions(
        self, query: str, schema: str | None = None
    ) -> QuerySuggestionsResponse:
        if len(query.strip()) < MIN_SUGGESTION_QUERY_LENGTH:
            return QuerySuggestionsResponse()

        text = await self._complete(prompts.query_suggestions(query, schema), "query-suggestions")
        extraction = extract_structured(text, kind="array")
        if not extraction.is_structured:
            return QuerySuggestionsResponse()

        suggestions = []
        for item in extraction.structured:
            if isinstance(item, str):
                suggestions.append(QuerySuggestion(text=item))
            elif isinstance(item, dict) and item.get("text"):
                suggestions.append(
                    QuerySuggestion(text=str(item["text"]), description=str(item.get("description") or ""))
                )
        return QuerySuggestionsResponse(suggestions=suggestions)

    async def multi_query(
        self, prompt: str, schema: str | None = None, dialect: str | None = None
    ) -> MultiQueryResponse:
        text = await self._complete(prompts.multi_query(prompt, schema, dialect), "multi-query")
        parsed = _coerce(MultiQueryResponse, extract_structured(text))
        if parsed is None:
            return MultiQueryResponse()

        steps: list[MultiQueryStep] = sorted(parsed.queries, key=lambda q: q.order)
        combined = ";\n\n".join(step.sql.strip().rstrip(";") for step in steps)
        if combined:
            combined += ";"
        return MultiQueryResponse(queries=steps, combined=combined)
