"""
LLM Request/Response Logger

Records every outbound generation request made by the analysis pipeline:
- shortened prompt text and its full length
- inline attachment count, mime types and byte size
- generation config (response schema is summarized, never dumped)
- response length, timing and errors

Credentials never pass through this module.

Usage:
    llm_logger = get_llm_logger()
    request_id = llm_logger.log_request(model="gemini-3-pro-preview", contents=contents, config={...})
    ...
    llm_logger.log_response(request_id, response)
"""

import logging
import os
import time
import uuid
from dataclasses import dataclass, asdict, field
from datetime import datetime, UTC
from pathlib import Path
from typing import Any, Dict, List, Optional

from .logging import get_logger, StructuredFormatter


@dataclass
class LLMRequest:
    """Represents an LLM request"""
    request_id: str
    timestamp: str
    model: str
    prompt: str  # Shortened version
    prompt_length: int  # Full length
    config: Dict[str, Any]
    inline_part_count: int = 0
    inline_bytes_total: int = 0
    inline_mime_types: List[str] = field(default_factory=list)


@dataclass
class LLMResponse:
    """Represents an LLM response"""
    request_id: str
    timestamp: str
    response_text: str
    response_length: int
    duration_seconds: float
    success: bool
    error: Optional[str] = None


def _now() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def _iter_parts(contents: Any):
    """Yield every part of a contents payload (str, Content objects or dicts)."""
    if contents is None:
        return
    if isinstance(contents, (str, bytes)):
        yield contents
        return
    items = contents if isinstance(contents, (list, tuple)) else [contents]
    for item in items:
        if isinstance(item, dict) and "parts" in item:
            yield from item["parts"] or []
        elif getattr(item, "parts", None) is not None:
            yield from item.parts
        else:
            yield item


class LLMLogger:
    """Logger for LLM API requests and responses with request/response correlation."""

    def __init__(
        self,
        max_prompt_length: Optional[int] = 500,
        max_response_length: Optional[int] = 2000,
        log_file: Optional[Path] = None,
    ):
        self.max_prompt_length = max_prompt_length
        self.max_response_length = max_response_length
        self.logger = get_logger(__name__, component="llm_logger")

        if log_file:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(StructuredFormatter())
            logging.getLogger(__name__).addHandler(file_handler)

        self._active_requests: Dict[str, float] = {}

    @staticmethod
    def _truncate_text(text: Optional[str], max_length: Optional[int]) -> str:
        if text is None:
            return ""
        if max_length is None or len(text) <= max_length:
            return text
        return text[:max_length] + f"... [truncated, total: {len(text)} chars]"

    @staticmethod
    def _summarize_contents(contents: Any) -> Dict[str, Any]:
        """Split contents into prompt text and inline attachment metadata."""
        texts: List[str] = []
        mime_types: List[str] = []
        total_bytes = 0

        for part in _iter_parts(contents):
            if isinstance(part, str):
                texts.append(part)
                continue
            if isinstance(part, dict):
                text = part.get("text")
                inline = part.get("inline_data") or part.get("inlineData")
                mime_type = (inline or {}).get("mime_type") or (inline or {}).get("mimeType")
                data = (inline or {}).get("data")
            else:
                text = getattr(part, "text", None)
                inline = getattr(part, "inline_data", None)
                mime_type = getattr(inline, "mime_type", None)
                data = getattr(inline, "data", None)

            if isinstance(text, str):
                texts.append(text)
            if inline is not None:
                mime_types.append(str(mime_type or "application/octet-stream"))
                if isinstance(data, (bytes, bytearray, str)):
                    total_bytes += len(data)

        return {
            "prompt": "\n".join(texts),
            "inline_part_count": len(mime_types),
            "inline_bytes_total": total_bytes,
            "inline_mime_types": mime_types,
        }

    @staticmethod
    def _summarize_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        summary: Dict[str, Any] = {}
        for key, value in (config or {}).items():
            if key == "response_schema" and isinstance(value, dict):
                summary[key] = {"required": list(value.get("required", []))}
            else:
                summary[key] = value
        return summary

    def log_request(
        self,
        model: str,
        contents: Any,
        config: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Log an LLM request and return its correlation ID."""
        request_id = str(uuid.uuid4())
        summary = self._summarize_contents(contents)
        full_prompt = summary.pop("prompt")

        request = LLMRequest(
            request_id=request_id,
            timestamp=_now(),
            model=model,
            prompt=self._truncate_text(full_prompt, self.max_prompt_length),
            prompt_length=len(full_prompt),
            config=self._summarize_config(config),
            **summary,
        )
        self._active_requests[request_id] = time.time()

        self.logger.info(
            f"LLM Request | Model: {model} | Prompt: {len(full_prompt)} chars | "
            f"Attachments: {request.inline_part_count}",
            extra={"event": "llm_request", **asdict(request)},
        )
        return request_id

    def log_response(
        self,
        request_id: str,
        response: Any,
        success: bool = True,
        error: Optional[str] = None,
    ) -> None:
        """Log an LLM response (or failure) correlated to a request."""
        started = self._active_requests.pop(request_id, None)
        duration = time.time() - started if started is not None else 0.0

        response_text = ""
        if success and response is not None:
            if isinstance(response, str):
                response_text = response
            else:
                response_text = getattr(response, "text", None) or ""

        record = LLMResponse(
            request_id=request_id,
            timestamp=_now(),
            response_text=self._truncate_text(response_text, self.max_response_length),
            response_length=len(response_text),
            duration_seconds=round(duration, 3),
            success=success,
            error=error,
        )
        log_data = {"event": "llm_response", **asdict(record)}

        if success:
            self.logger.info(
                f"LLM Response | Duration: {duration:.2f}s | Length: {len(response_text)} chars",
                extra=log_data,
            )
        else:
            self.logger.warning(
                f"LLM Error | Duration: {duration:.2f}s | Error: {error}",
                extra=log_data,
            )

    def log_error(self, request_id: str, error: BaseException) -> None:
        """Log an LLM error."""
        self.log_response(request_id=request_id, response=None, success=False, error=str(error))


_default_logger: Optional[LLMLogger] = None


def get_llm_logger() -> LLMLogger:
    """
    Get the shared LLM logger instance.

    Configuration via environment variables:
    - LLM_LOG_MAX_PROMPT_LENGTH: Max prompt chars to log (default: 500)
    - LLM_LOG_MAX_RESPONSE_LENGTH: Max response chars to log (default: 2000)
    - LLM_LOG_FILE: Path to dedicated LLM log file (default: None)
    """
    global _default_logger

    if _default_logger is None:
        max_response = os.getenv("LLM_LOG_MAX_RESPONSE_LENGTH", "2000")
        log_file = os.getenv("LLM_LOG_FILE")
        _default_logger = LLMLogger(
            max_prompt_length=int(os.getenv("LLM_LOG_MAX_PROMPT_LENGTH", "500")),
            max_response_length=int(max_response) if max_response else None,
            log_file=Path(log_file) if log_file else None,
        )

    return _default_logger
