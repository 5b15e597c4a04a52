"""
Response validator

Parses the raw structured text returned by Gemini into an
``AnalysisResult``. The report is accepted in full or rejected in full:
out-of-range values, missing fields, wrong types and unknown topic ids all
raise ``MalformedResponseError``.
"""

from typing import List

from pydantic import ValidationError

from exam_coverage.config.syllabus import SYLLABUS, SyllabusCatalog
from exam_coverage.models import AnalysisResult
from exam_coverage.services.infrastructure.parsing import JsonParseError, parse_json_strict

from .exceptions import MalformedResponseError, UnknownTopicError


def _format_location(loc) -> str:
    """``topicScores[].score``: list indices are collapsed to ``[]``."""
    location = ""
    for part in loc:
        if isinstance(part, int):
            location += "[]"
        else:
            location += f".{part}" if location else str(part)
    return location or "<root>"


def _describe_validation_error(error: ValidationError) -> str:
    """Field paths and reasons only; input values and list indices are left out."""
    problems: List[str] = []
    for item in error.errors(include_url=False, include_input=False):
        location = _format_location(item["loc"])
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def parse(raw: str, syllabus: SyllabusCatalog = SYLLABUS) -> AnalysisResult:
    """
    Parse and validate a raw analysis response.

    Args:
        raw: JSON text returned by the AI service
        syllabus: Catalog that every referenced topic id must belong to

    Returns:
        The validated, immutable AnalysisResult

    Raises:
        MalformedResponseError: On any parse, shape, range or topic-id violation
    """
    try:
        data = parse_json_strict(raw)
    except JsonParseError as e:
        raise MalformedResponseError(f"Analysis report is not valid JSON: {e}") from e

    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Analysis report does not match the expected structure: {_describe_validation_error(e)}"
        ) from e

    unknown = [topic_id for topic_id in result.referenced_topic_ids() if topic_id not in syllabus]
    if unknown:
        raise UnknownTopicError(unknown)

    return result
