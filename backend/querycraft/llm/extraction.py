"""
Result Extraction

Turns raw provider replies into text or JSON. Providers like to wrap their
answers in Markdown fences and reasoning models add <think> blocks, so every
reply goes through strip_code_fences first.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Literal

from querycraft.errors import ExtractionError

logger = logging.getLogger(__name__)

_THINK_RE = re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE)
_FENCE_RE = re.compile(r"```[\w+-]*[ \t]*\n?")
_FIRST_FENCE_BLOCK_RE = re.compile(r"```(?:sql)?\s*\n(.*?)```", re.DOTALL | re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)
_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove reasoning blocks and Markdown fence markers, then trim."""
    text = _THINK_RE.sub("", text or "")
    return _FENCE_RE.sub("", text).strip()


def first_fenced_block(text: str) -> str | None:
    """Return the body of the first fenced code block, if any."""
    match = _FIRST_FENCE_BLOCK_RE.search(text or "")
    return match.group(1).strip() if match else None


def repair_json(text: str) -> str:
    """Drop trailing commas before closing braces/brackets."""
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def _extract(text: str, pattern: re.Pattern[str], label: str) -> Any:
    cleaned = strip_code_fences(text)
    match = pattern.search(cleaned)
    if not match:
        raise ExtractionError(f"No JSON {label} found in response")

    try:
        return json.loads(repair_json(match.group(0)))
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Malformed JSON {label} in response: {e}") from e


def extract_json_object(text: str) -> dict:
    """Parse the outermost {...} span of a reply."""
    value = _extract(text, _OBJECT_RE, "object")
    if not isinstance(value, dict):
        raise ExtractionError("No JSON object found in response")
    return value


def extract_json_array(text: str) -> list:
    """Parse the outermost [...] span of a reply."""
    value = _extract(text, _ARRAY_RE, "array")
    if not isinstance(value, list):
        raise ExtractionError("No JSON array found in response")
    return value


@dataclass(frozen=True)
class Extraction:
    """Outcome of parsing a reply: structured data, or the raw text only."""

    structured: Any
    raw_text: str

    @property
    def is_structured(self) -> bool:
        return self.structured is not None


def extract_structured(
    text: str, kind: Literal["object", "array"] = "object"
) -> Extraction:
    """Parse JSON from a reply without raising; fall back to the raw text."""
    raw_text = strip_code_fences(text)
    extractor = extract_json_object if kind == "object" else extract_json_array

    try:
        return Extraction(structured=extractor(text), raw_text=raw_text)
    except ExtractionError as e:
        logger.warning(f"Falling back to raw text: {e}")
        return Extraction(structured=None, raw_text=raw_text)
