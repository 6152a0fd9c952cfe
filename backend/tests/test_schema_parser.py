"""
Schema Parser Tests
===================
CREATE TABLE and JSON schema extraction.
"""

import json

from querycraft.sqltools.schema_parser import (
    ColumnReference,
    Relationship,
    parse_json_schema,
    parse_schema,
    parse_sql_schema,
)


class TestParseSQLSchema:
    """Tests for the CREATE TABLE parser."""

    def test_single_table_with_primary_key(self):
        schema = parse_sql_schema("CREATE TABLE t (id INTEGER PRIMARY KEY, name VARCHAR(50));")

        assert len(schema.tables) == 1
        table = schema.tables[0]
        assert table.name == "t"
        assert [c.name for c in table.columns] == ["id", "name"]
        assert table.columns[0].is_primary_key is True
        assert table.columns[1].is_primary_key is False
        assert table.columns[1].type == "VARCHAR(50)"
        assert schema.relationships == []

    def test_foreign_key_constraint_line(self):
        sql = """
        CREATE TABLE orders (
            id INTEGER PRIMARY KEY,
            user_id INTEGER NOT NULL,
            FOREIGN KEY (user_id) REFERENCES users(id)
        );
        """
        schema = parse_sql_schema(sql)

        assert schema.relationships == [Relationship("orders", "user_id", "users", "id")]
        user_id = schema.table("orders").column("user_id")
        assert user_id.is_foreign_key is True
        assert user_id.references == ColumnReference("users", "id")

    def test_inline_references(self):
        sql = "CREATE TABLE posts (id SERIAL PRIMARY KEY, author_id INT REFERENCES authors(id));"
        schema = parse_sql_schema(sql)

        author_id = schema.table("posts").column("author_id")
        assert author_id.is_foreign_key is True
        assert author_id.references == ColumnReference("authors", "id")
        assert schema.relationships == [Relationship("posts", "author_id", "authors", "id")]

    def test_multiple_tables_quoted_names_and_if_not_exists(self):
        sql = """
        CREATE TABLE IF NOT EXISTS "users" (id INTEGER PRIMARY KEY, email text);
        create table `orders` (id integer primary key, total decimal);
        """
        schema = parse_sql_schema(sql)

        assert [t.name for t in schema.tables] == ["users", "orders"]
        assert schema.table("users").column("email").type == "TEXT"
        assert schema.table("orders").column("id").is_primary_key is True

    def test_constraint_lines_are_not_columns(self):
        sql = "CREATE TABLE t (a INT, b INT, PRIMARY KEY (a), UNIQUE (b), CHECK (a > 0));"
        schema = parse_sql_schema(sql)

        assert [c.name for c in schema.table("t").columns] == ["a", "b"]

    def test_garbage_yields_empty_schema(self):
        schema = parse_sql_schema("this is not sql at all (")

        assert schema.tables == []
        assert schema.relationships == []

    def test_prompt_text_rendering(self):
        schema = parse_sql_schema(
            "CREATE TABLE orders (id INT PRIMARY KEY, user_id INT REFERENCES users(id));"
        )
        text = schema.to_prompt_text()

        assert "Table: orders" in text
        assert "id (INT) [PRIMARY KEY]" in text
        assert "user_id (INT) [FK -> users.id]" in text


class TestParseJSONSchema:
    """Tests for the JSON schema variant."""

    def test_tables_columns_and_references(self):
        document = {
            "tables": [
                {
                    "name": "orders",
                    "columns": [
                        {"name": "id", "type": "int", "primaryKey": True},
                        {
                            "name": "user_id",
                            "isForeignKey": True,
                            "references": {"table": "users", "column": "id"},
                        },
                    ],
                }
            ]
        }
        schema = parse_json_schema(json.dumps(document))

        orders = schema.table("orders")
        assert orders.column("id").type == "INT"
        assert orders.column("id").is_primary_key is True
        assert orders.column("user_id").type == "VARCHAR"
        assert orders.column("user_id").is_foreign_key is True
        assert schema.relationships == [Relationship("orders", "user_id", "users", "id")]

    def test_invalid_json_returns_empty(self):
        schema = parse_json_schema("{not json")

        assert schema.tables == []
        assert schema.relationships == []

    def test_missing_tables_key_returns_empty(self):
        assert parse_json_schema('{"foo": 1}').tables == []


class TestParseSchemaDispatch:
    def test_json_detected_by_leading_brace(self):
        schema = parse_schema('  {"tables": [{"name": "a", "columns": []}]}')
        assert [t.name for t in schema.tables] == ["a"]

    def test_sql_otherwise(self):
        schema = parse_schema("CREATE TABLE b (id INT);")
        assert [t.name for t in schema.tables] == ["b"]
