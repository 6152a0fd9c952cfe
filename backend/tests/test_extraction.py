"""
Reply Extraction Tests
======================
Fence stripping and tolerant JSON parsing of provider replies.
"""

import pytest

from querycraft.errors import ExtractionError
from querycraft.llm.extraction import (
    extract_json_array,
    extract_json_object,
    extract_structured,
    first_fenced_block,
    repair_json,
    strip_code_fences,
)


class TestStripCodeFences:
    def test_sql_fence(self):
        assert strip_code_fences("```sql\nSELECT 1;\n```") == "SELECT 1;"

    def test_bare_fence_and_language_tags(self):
        assert strip_code_fences("```\nSELECT 1;\n```") == "SELECT 1;"
        assert strip_code_fences("```typescript\nconst x = 1;\n```") == "const x = 1;"

    def test_think_block_removed(self):
        assert strip_code_fences("<think>hmm, users table</think>\nSELECT 1;") == "SELECT 1;"

    def test_plain_text_untouched(self):
        assert strip_code_fences("  SELECT 1;  ") == "SELECT 1;"


class TestJSONExtraction:
    def test_object_inside_fence_with_prose(self):
        reply = 'Here you go:\n```json\n{"summary": "Lists users", "tips": []}\n```\nEnjoy!'

        assert extract_json_object(reply) == {"summary": "Lists users", "tips": []}

    def test_trailing_commas_repaired(self):
        reply = '{"columns": ["a", "b",], "rows": [[1, 2],],}'

        assert extract_json_object(reply) == {"columns": ["a", "b"], "rows": [[1, 2]]}

    def test_repair_json(self):
        assert repair_json('{"a": [1, 2,], }') == '{"a": [1, 2]}'

    def test_array(self):
        assert extract_json_array('```json\n[{"text": "a"}]\n```') == [{"text": "a"}]

    def test_missing_object_raises(self):
        with pytest.raises(ExtractionError):
            extract_json_object("no json here")

    def test_malformed_object_raises(self):
        with pytest.raises(ExtractionError):
            extract_json_object('{"summary": "unterminated}')


class TestExtractStructured:
    def test_structured_branch(self):
        extraction = extract_structured('{"a": 1}')

        assert extraction.is_structured
        assert extraction.structured == {"a": 1}

    def test_fallback_branch_keeps_cleaned_text(self):
        extraction = extract_structured("```\nThis query lists users.\n```")

        assert not extraction.is_structured
        assert extraction.raw_text == "This query lists users."

    def test_array_kind(self):
        extraction = extract_structured('["x", "y"]', kind="array")

        assert extraction.structured == ["x", "y"]


class TestFirstFencedBlock:
    def test_returns_first_sql_block(self):
        text = "Try this:\n```sql\nSELECT id FROM t;\n```\nand maybe\n```sql\nSELECT 2;\n```"

        assert first_fenced_block(text) == "SELECT id FROM t;"

    def test_none_without_fence(self):
        assert first_fenced_block("SELECT 1") is None
