"""
Parsing Module

Provides utilities for parsing JSON from LLM responses.

Usage:
    from exam_coverage.services.infrastructure.parsing import parse_json_strict
"""

from .json_parser import (
    JsonParseError,
    parse_json_strict,
    strip_markdown_fences,
    looks_truncated_json,
)

__all__ = [
    "JsonParseError",
    "parse_json_strict",
    "strip_markdown_fences",
    "looks_truncated_json",
]
