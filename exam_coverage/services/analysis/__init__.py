"""
Exam coverage analysis pipeline

    encoder    -> inline parts from uploaded files
    prompts    -> syllabus directive
    schema     -> response schema for constrained generation
    client     -> one Gemini request per run
    validator  -> AnalysisResult from raw JSON
    errors     -> AnalysisFailure from any raised error
    analyzer   -> AnalysisOutcome for a run
"""

from .analyzer import CoverageAnalyzer
from .client import AnalysisClient
from .encoder import encode
from .errors import classify_error
from .exceptions import (
    AnalysisError,
    EmptyResponseError,
    EncodingError,
    MalformedResponseError,
    MissingCredentialError,
    UnknownTopicError,
)
from .prompts import build as build_prompt
from .schema import ANALYSIS_RESPONSE_SCHEMA, get_response_schema
from .validator import parse as parse_response

__all__ = [
    "CoverageAnalyzer",
    "AnalysisClient",
    "encode",
    "classify_error",
    "build_prompt",
    "parse_response",
    "ANALYSIS_RESPONSE_SCHEMA",
    "get_response_schema",
    "AnalysisError",
    "EmptyResponseError",
    "EncodingError",
    "MalformedResponseError",
    "MissingCredentialError",
    "UnknownTopicError",
]
