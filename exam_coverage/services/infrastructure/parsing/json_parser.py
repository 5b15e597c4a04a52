"""
JSON parsing utilities for LLM responses.

Structured-output responses are parsed strictly: markdown fences are
removed, but no salvage (brace extraction, escape repair) is attempted. A
response that is not a single JSON object is an error.
"""

import json
from typing import Any, Dict, List


class JsonParseError(ValueError):
    """Raised when text cannot be parsed as the expected JSON value."""

    def __init__(self, message: str, truncated: bool = False):
        super().__init__(message)
        self.truncated = truncated


def strip_markdown_fences(text: str) -> str:
    """Remove ```json ... ``` fence lines wrapped around a payload."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        lines = [l for l in lines if not l.strip().startswith("```")]
        text = "\n".join(lines).strip()
    return text


def looks_truncated_json(text: str) -> bool:
    """Heuristic check for truncated JSON payloads.

    Detects unterminated strings or unbalanced braces/brackets while
    respecting escape sequences.
    """
    if not text:
        return False

    in_string = False
    escape = False
    stack: List[str] = []

    for ch in text:
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in "{[":
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                continue
            open_ch = stack[-1]
            if (open_ch == "{" and ch == "}") or (open_ch == "[" and ch == "]"):
                stack.pop()
            else:
                # Mismatched closure; invalid but not necessarily truncated.
                return False

    return bool(stack) or in_string


def parse_json_strict(text: str) -> Dict[str, Any]:
    """Parse a JSON object from an LLM response without error recovery.

    Args:
        text: Response text, optionally wrapped in a markdown code fence

    Returns:
        The parsed JSON object

    Raises:
        JsonParseError: If the text is empty, not valid JSON, or not an object
    """
    if text is None:
        raise JsonParseError("Response text is empty")

    cleaned = strip_markdown_fences(text)
    if not cleaned:
        raise JsonParseError("Response text is empty")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        truncated = looks_truncated_json(cleaned)
        hint = " (response appears truncated)" if truncated else ""
        raise JsonParseError(
            f"Invalid JSON: {e.msg}{hint}",
            truncated=truncated,
        ) from e

    if not isinstance(data, dict):
        raise JsonParseError(f"Expected a JSON object, got {type(data).__name__}")

    return data
