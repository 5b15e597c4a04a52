"""
Tests for core/llm_logger module
"""

from unittest.mock import MagicMock

from google.genai import types

from exam_coverage.core.llm_logger import LLMLogger


def _contents():
    return [
        types.Content(
            role="user",
            parts=[
                types.Part.from_bytes(data=b"12345", mime_type="image/png"),
                types.Part.from_text(text="Analyze this exam"),
            ],
        )
    ]


def test_truncate_text_with_none():
    assert LLMLogger()._truncate_text(None, 100) == ""


def test_truncate_text():
    assert LLMLogger._truncate_text("abcdef", 3).startswith("abc... [truncated, total: 6 chars]")
    assert LLMLogger._truncate_text("abc", None) == "abc"


def test_summarize_contents_counts_attachments():
    summary = LLMLogger._summarize_contents(_contents())
    assert summary["prompt"] == "Analyze this exam"
    assert summary["inline_part_count"] == 1
    assert summary["inline_mime_types"] == ["image/png"]
    assert summary["inline_bytes_total"] == 5


def test_summarize_plain_prompt():
    summary = LLMLogger._summarize_contents("just text")
    assert summary["prompt"] == "just text"
    assert summary["inline_part_count"] == 0


def test_summarize_config_shortens_schema():
    summary = LLMLogger._summarize_config({
        "temperature": 0.2,
        "response_schema": {"type": "object", "properties": {"a": {}}, "required": ["a"]},
    })
    assert summary == {"temperature": 0.2, "response_schema": {"required": ["a"]}}


def test_request_response_correlation():
    llm_logger = LLMLogger()
    llm_logger.logger = MagicMock()

    request_id = llm_logger.log_request(model="gemini-3-pro-preview", contents=_contents(), config={})
    assert request_id in llm_logger._active_requests

    llm_logger.log_response(request_id, MagicMock(text='{"overallScore": 80}'))
    assert request_id not in llm_logger._active_requests

    response_extra = llm_logger.logger.info.call_args.kwargs["extra"]
    assert response_extra["event"] == "llm_response"
    assert response_extra["request_id"] == request_id
    assert response_extra["response_length"] == len('{"overallScore": 80}')


def test_log_response_with_none_text():
    llm_logger = LLMLogger()
    llm_logger._active_requests["req"] = 100.0
    llm_logger.log_response(request_id="req", response=MagicMock(text=None), success=True)


def test_log_error():
    llm_logger = LLMLogger()
    llm_logger.logger = MagicMock()
    llm_logger.log_error("req", RuntimeError("403 Forbidden"))

    extra = llm_logger.logger.warning.call_args.kwargs["extra"]
    assert extra["success"] is False
    assert extra["error"] == "403 Forbidden"
