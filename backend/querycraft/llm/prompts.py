"""
Prompt Builders

One function per assistant operation. Each returns an LLMRequest carrying the
prompt text and the sampling parameters used for that operation.
"""

from querycraft.llm.gateway import ImagePayload, LLMRequest

DEFAULT_DIALECT = "postgresql"

ORM_INSTRUCTIONS = {
    "prisma": "Prisma Client query using findMany, create, update, delete, etc.",
    "typeorm": "TypeORM query using QueryBuilder or Repository methods",
    "sequelize": "Sequelize query using findAll, create, update, destroy, etc.",
    "drizzle": "Drizzle ORM query using select, insert, update, delete",
    "knex": "Knex.js query builder syntax",
    "sqlalchemy": "SQLAlchemy 2.0 query using select(), insert(), update(), delete() and a Session",
    "django": "Django ORM QuerySet code using filter, annotate, values, etc.",
}


def _schema_block(schema: str | None, label: str = "Database Schema") -> str:
    return f"{label}:\n{schema}\n\n" if schema else ""


def generate_sql(prompt: str, schema: str | None = None, dialect: str | None = None) -> LLMRequest:
    dialect = dialect or DEFAULT_DIALECT
    system_prompt = f"""You are an expert SQL query generator. Generate optimized {dialect.upper()} SQL queries based on user requests.

{_schema_block(schema)}Rules:
- Return ONLY the SQL query, no explanations
- Use proper {dialect} syntax
- Include appropriate JOINs when needed
- Add comments for complex queries
- Optimize for performance"""

    return LLMRequest(
        prompt=f"{system_prompt}\n\nUser request: {prompt}",
        temperature=0.3,
        max_tokens=1024,
    )


def explain_sql(sql: str) -> LLMRequest:
    prompt = f"""Explain this SQL query in a structured format. Return a JSON object with this structure:
{{
  "summary": "<one sentence summary of what the query does>",
  "sections": [
    {{
      "title": "<section name like 'SELECT Clause', 'FROM Clause', 'WHERE Conditions', 'JOINs', 'GROUP BY', 'ORDER BY', etc>",
      "explanation": "<clear explanation of this part>",
      "columns": ["<list of columns involved if applicable>"]
    }}
  ],
  "result": "<description of what the result set will contain>",
  "tips": ["<optional tips or best practices>"]
}}

Query to explain:
{sql}"""
    return LLMRequest(prompt=prompt, temperature=0.5, max_tokens=1024)


def convert_sql(sql: str, to_dialect: str, from_dialect: str | None = None) -> LLMRequest:
    prompt = (
        f"Convert this {from_dialect or 'SQL'} query to {to_dialect}. "
        f"Return ONLY the converted SQL, no explanations:\n\n{sql}"
    )
    return LLMRequest(prompt=prompt, temperature=0.2, max_tokens=1024)


def optimize_sql(sql: str, schema: str | None = None) -> LLMRequest:
    prompt = f"""Analyze and optimize this SQL query. Return a JSON object with this structure:
{{
  "optimizedQuery": "<the optimized SQL query>",
  "improvements": ["<what was changed and why>"],
  "indexes": ["<CREATE INDEX statements that would help>"],
  "tips": ["<general performance tips>"],
  "summary": "<overall assessment of the original query>"
}}

{_schema_block(schema, "Schema")}Query:
{sql}"""
    return LLMRequest(prompt=prompt, temperature=0.4, max_tokens=2048)


def sql_to_natural(sql: str) -> LLMRequest:
    prompt = (
        "Convert this SQL query to a natural language description. "
        f"Describe what data it retrieves in simple terms:\n\n{sql}"
    )
    return LLMRequest(prompt=prompt, temperature=0.5, max_tokens=512)


def mock_results(sql: str) -> LLMRequest:
    prompt = f"""Generate realistic mock data for this SQL query. Return ONLY a JSON object with this exact structure:
{{
  "columns": ["column1", "column2", ...],
  "rows": [
    ["value1", "value2", ...],
    ["value1", "value2", ...],
    ...
  ]
}}

Generate 5-10 rows of realistic sample data based on the query columns. Use realistic names, emails, dates, numbers etc.

SQL Query:
{sql}"""
    return LLMRequest(prompt=prompt, temperature=0.7, max_tokens=2048)


def analyze_performance(sql: str, schema: str | None = None) -> LLMRequest:
    prompt = f"""Analyze this SQL query and provide a simulated execution plan analysis. Return a JSON object with this structure:
{{
  "estimatedCost": <number 1-100>,
  "estimatedRows": <number>,
  "executionTime": "<estimated time like '15ms' or '2.3s'>",
  "operations": [
    {{
      "type": "<Seq Scan|Index Scan|Hash Join|Nested Loop|Sort|Aggregate|etc>",
      "table": "<table name or null>",
      "cost": <number>,
      "rows": <number>,
      "description": "<what this operation does>",
      "warning": "<potential issue or null>"
    }}
  ],
  "suggestions": [
    {{
      "type": "<index|rewrite|statistics>",
      "priority": "<high|medium|low>",
      "description": "<suggestion text>",
      "sql": "<CREATE INDEX or optimized query if applicable>"
    }}
  ],
  "summary": "<overall performance assessment>"
}}

{_schema_block(schema, "Schema")}Query:
{sql}"""
    return LLMRequest(prompt=prompt, temperature=0.3, max_tokens=2048)


def debug_sql(sql: str, error: str, schema: str | None = None) -> LLMRequest:
    prompt = f"""Debug this SQL query error. Analyze the error, explain what's wrong, and provide the corrected query.

Return a JSON object with this structure:
{{
  "errorType": "<syntax|type_mismatch|constraint|reference|permission|other>",
  "explanation": "<clear explanation of what went wrong>",
  "location": "<specific part of query with the issue>",
  "fixedQuery": "<corrected SQL query>",
  "prevention": "<tip to avoid this error in future>"
}}

{_schema_block(schema, "Schema")}Query:
{sql}

Error Message:
{error}"""
    return LLMRequest(prompt=prompt, temperature=0.3, max_tokens=1024)


def generate_schema(description: str) -> LLMRequest:
    prompt = f"""Generate a complete PostgreSQL database schema based on this description. Include all necessary tables, relationships, indexes, and constraints.

Return the complete CREATE TABLE statements with:
- Primary keys
- Foreign keys with ON DELETE/UPDATE actions
- Appropriate data types
- NOT NULL constraints where needed
- Default values where appropriate
- Useful indexes for common queries
- Comments explaining the purpose

Description: {description}

Return ONLY the SQL statements, no explanations."""
    return LLMRequest(prompt=prompt, temperature=0.4, max_tokens=4096)


def image_to_schema(image: ImagePayload) -> LLMRequest:
    prompt = """This image is an entity-relationship diagram or a picture of database tables.
Extract every table, column, data type, primary key and relationship you can see and write them as PostgreSQL CREATE TABLE statements.

- Use FOREIGN KEY ... REFERENCES for every relationship line
- Pick sensible data types when the diagram does not show one
- Keep table and column names exactly as written in the image

Return ONLY the SQL statements, no explanations."""
    return LLMRequest(prompt=prompt, temperature=0.2, max_tokens=4096, image=image)


def export_orm(sql: str, orm: str) -> LLMRequest:
    target = ORM_INSTRUCTIONS.get(orm.lower(), orm)
    prompt = f"""Convert this SQL query to {target} code. Return ONLY the code, no explanations. Include necessary imports if applicable.

SQL Query:
{sql}"""
    return LLMRequest(prompt=prompt, temperature=0.3, max_tokens=1024)


def query_suggestions(query: str, schema: str | None = None) -> LLMRequest:
    prompt = f"""A user is typing a natural language request for a database query. Suggest up to 5 complete, specific requests they might mean.

{_schema_block(schema)}Partial request: "{query}"

Return ONLY a JSON array with this structure:
[
  {{"text": "<complete natural language request>", "description": "<what the query would return>"}}
]"""
    return LLMRequest(prompt=prompt, temperature=0.6, max_tokens=512)


def multi_query(prompt: str, schema: str | None = None, dialect: str | None = None) -> LLMRequest:
    dialect = dialect or DEFAULT_DIALECT
    text = f"""Break this request into a sequence of dependent {dialect.upper()} SQL statements that must run in order
(for example: create a staging table, populate it, then query it).

{_schema_block(schema)}Request: {prompt}

Return ONLY a JSON object with this structure:
{{
  "queries": [
    {{
      "order": <1-based position>,
      "description": "<what this step does>",
      "sql": "<the SQL statement for this step>",
      "dependencies": [<order numbers of earlier steps this one needs>]
    }}
  ]
}}"""
    return LLMRequest(prompt=text, temperature=0.3, max_tokens=2048)
