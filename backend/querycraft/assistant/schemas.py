"""
Assistant Schemas

Pydantic models for the LLM-backed assistant endpoints.

Required request fields are declared optional so that the router can answer
a missing field with a 400 and a readable message.
"""

from typing import Any

from pydantic import Field

from querycraft.schemas import CamelModel

# =============================================================================
# Requests
# =============================================================================


class GenerateSQLRequest(CamelModel):
    prompt: str | None = None
    schema_text: str | None = Field(default=None, alias="schema")
    dialect: str | None = None


class SQLRequest(CamelModel):
    """Body carrying only a SQL query."""

    sql: str | None = None


class SQLWithSchemaRequest(CamelModel):
    sql: str | None = None
    schema_text: str | None = Field(default=None, alias="schema")


class ConvertSQLRequest(CamelModel):
    sql: str | None = None
    from_dialect: str | None = None
    to_dialect: str | None = None


class DebugSQLRequest(CamelModel):
    sql: str | None = None
    error: str | None = None
    schema_text: str | None = Field(default=None, alias="schema")


class GenerateSchemaRequest(CamelModel):
    description: str | None = None


class ImageToSchemaRequest(CamelModel):
    """ERD image as a data URL, or bare base64 plus its mime type."""

    image: str | None = None
    mime_type: str | None = None


class ExportORMRequest(CamelModel):
    sql: str | None = None
    orm: str | None = None


class QuerySuggestionsRequest(CamelModel):
    query: str | None = None
    schema_text: str | None = Field(default=None, alias="schema")


class MultiQueryRequest(CamelModel):
    prompt: str | None = None
    schema_text: str | None = Field(default=None, alias="schema")
    dialect: str | None = None


# =============================================================================
# Responses
# =============================================================================


class SQLResponse(CamelModel):
    sql: str


class ExplainSection(CamelModel):
    title: str = ""
    explanation: str = ""
    columns: list[str] = Field(default_factory=list)


class ExplainSQLResponse(CamelModel):
    summary: str = ""
    sections: list[ExplainSection] = Field(default_factory=list)
    result: str = ""
    tips: list[str] = Field(default_factory=list)


class OptimizeSQLResponse(CamelModel):
    optimized_query: str = ""
    improvements: list[str] = Field(default_factory=list)
    indexes: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    summary: str = ""


class DescriptionResponse(CamelModel):
    description: str


class MockResultsResponse(CamelModel):
    columns: list[str] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)


class PerformanceOperation(CamelModel):
    type: str = ""
    table: str | None = None
    cost: float | None = None
    rows: float | None = None
    description: str = ""
    warning: str | None = None


class PerformanceSuggestion(CamelModel):
    type: str = ""
    priority: str = "medium"
    description: str = ""
    sql: str | None = None


class PerformanceAnalysisResponse(CamelModel):
    estimated_cost: float | None = None
    estimated_rows: float | None = None
    execution_time: str | None = None
    operations: list[PerformanceOperation] = Field(default_factory=list)
    suggestions: list[PerformanceSuggestion] = Field(default_factory=list)
    summary: str = ""


class DebugSQLResponse(CamelModel):
    error_type: str = "other"
    explanation: str = ""
    location: str = ""
    fixed_query: str = ""
    prevention: str = ""


class SchemaResponse(CamelModel):
    schema_text: str = Field(alias="schema")


class ORMExportResponse(CamelModel):
    code: str


class QuerySuggestion(CamelModel):
    text: str
    description: str = ""


class QuerySuggestionsResponse(CamelModel):
    suggestions: list[QuerySuggestion] = Field(default_factory=list)


class MultiQueryStep(CamelModel):
    order: int
    description: str = ""
    sql: str
    dependencies: list[int] = Field(default_factory=list)


class MultiQueryResponse(CamelModel):
    queries: list[MultiQueryStep] = Field(default_factory=list)
    combined: str = ""
