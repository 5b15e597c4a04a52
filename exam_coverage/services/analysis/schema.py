"""
Response schema for schema-constrained generation.

Passed to Gemini as ``response_schema`` together with
``response_mime_type="application/json"``.
"""

import copy
from typing import Any, Dict

RESPONSE_MIME_TYPE = "application/json"

ANALYSIS_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "topicScores": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "topicId": {"type": "string"},
                    "score": {"type": "number"},
                },
                "required": ["topicId", "score"],
            },
        },
        "missingTopics": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "topicId": {"type": "string"},
                    "reason": {"type": "string"},
                    "suggestion": {"type": "string"},
                },
                "required": ["topicId", "reason", "suggestion"],
            },
        },
        "overallScore": {"type": "number"},
        "aiCommentary": {"type": "string"},
        "questionCount": {"type": "number"},
    },
    "required": ["topicScores", "missingTopics", "overallScore", "aiCommentary", "questionCount"],
}


def get_response_schema() -> Dict[str, Any]:
    """A private copy of the schema; the module-level descriptor stays untouched."""
    return copy.deepcopy(ANALYSIS_RESPONSE_SCHEMA)
