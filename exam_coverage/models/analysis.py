"""
Analysis data models

Wire-facing models use camelCase aliases (``topicId``, ``overallScore``) to
match the response schema sent to Gemini, and snake_case attributes in
Python. All models are immutable once created.

Report fields are strict: values are never coerced from other types (no
"85" for a score, no true for a count), so a report either matches the
schema exactly or is rejected.
"""

import math
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for immutable models exchanged with the AI service or the UI"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class UploadedFile(WireModel):
    """A captured file: base64 payload, optionally with a data-URI prefix"""
    id: str = Field(min_length=1)
    mime_type: str
    payload: str
    name: str = ""

    @property
    def size_bytes(self) -> int:
        """Approximate decoded size of the payload."""
        data = self.payload.split(",", 1)[1] if self.payload.startswith("data:") and "," in self.payload else self.payload
        return (len(data) * 3) // 4 - data.count("=")


class InlinePart(WireModel):
    """Transport-ready inline content: mime type plus raw base64 (no prefix)"""
    mime_type: str
    data: str


class TopicScore(WireModel):
    """How thoroughly the exam tests one syllabus topic"""
    topic_id: str = Field(min_length=1, strict=True)
    score: float = Field(ge=0, le=100, allow_inf_nan=False, strict=True)


class MissingTopic(WireModel):
    """A syllabus topic the exam does not cover"""
    topic_id: str = Field(min_length=1, strict=True)
    reason: str = Field(min_length=1, strict=True)
    suggestion: str = Field(min_length=1, strict=True)

    @field_validator("reason", "suggestion")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _require_text(value)


class AnalysisResult(WireModel):
    """Structured coverage report for one analysis run"""
    topic_scores: List[TopicScore]
    missing_topics: List[MissingTopic]
    overall_score: float = Field(ge=0, le=100, allow_inf_nan=False, strict=True)
    ai_commentary: str = Field(strict=True)
    question_count: int = Field(ge=0, strict=True)

    @field_validator("question_count", mode="before")
    @classmethod
    def _integral_count(cls, value: Any) -> Any:
        # The response schema declares a JSON number, so 12.0 is a valid count.
        if isinstance(value, float) and math.isfinite(value) and value.is_integer():
            return int(value)
        return value

    def referenced_topic_ids(self) -> List[str]:
        """Topic ids in report order (scores first, then missing topics)."""
        return [item.topic_id for item in self.topic_scores] + [item.topic_id for item in self.missing_topics]

    def to_wire(self) -> dict:
        """Serialize with the camelCase field names of the response schema."""
        return self.model_dump(by_alias=True)
