"""
Gemini Client

Thin wrapper around the ``google-genai`` SDK used by the analysis pipeline.

A client is bound to one API key. The pipeline creates a fresh client from
the credential provider at the start of every run instead of caching one,
so a rotated key is picked up immediately.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Union

from google import genai
from google.genai import types

from exam_coverage.core.llm_logger import get_llm_logger


@dataclass
class GenerationConfig:
    """Configuration for content generation (unset fields use model defaults)"""
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_output_tokens: Optional[int] = None
    thinking_config: Optional[Dict[str, str]] = None
    response_mime_type: Optional[str] = None
    response_schema: Optional[Any] = None
    system_instruction: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Only the fields that were set, keyed by SDK argument name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


class GeminiAPIModels:
    """Gemini API models interface (wraps google-genai), with request logging"""

    def __init__(self, client):
        self.client = client
        self.llm_logger = get_llm_logger()

    def generate_content(
        self,
        model: str,
        contents: Union[str, List[Any]],
        config: Optional[GenerationConfig] = None,
    ):
        """
        Generate content using the Gemini API.

        Args:
            model: Model name (e.g., "gemini-3-pro-preview")
            contents: Text prompt or list of Content objects
            config: Generation configuration

        Returns:
            SDK response object with a ``.text`` property

        Raises:
            Whatever the SDK raises (e.g. ``google.genai.errors.APIError``);
            errors are logged and re-raised unchanged.
        """
        gen_config_dict = (config or GenerationConfig()).to_dict()
        gen_config = types.GenerateContentConfig(**gen_config_dict)

        request_id = self.llm_logger.log_request(
            model=model,
            contents=contents,
            config=gen_config_dict,
        )

        try:
            response = self.client.models.generate_content(
                model=model,
                contents=contents,
                config=gen_config,
            )
        except Exception as e:
            self.llm_logger.log_error(request_id, e)
            raise

        self.llm_logger.log_response(request_id=request_id, response=response)
        return response


class GeminiClient:
    """
    Gemini API client bound to a single API key.

    Usage:
        client = create_client(api_key)
        response = client.models.generate_content(
            model="gemini-3-pro-preview",
            contents=[...],
            config=GenerationConfig(response_mime_type="application/json"),
        )
    """

    def __init__(self, api_key: str):
        if not api_key:
            raise ValueError("An API key is required to create a Gemini client")
        self.backend = genai.Client(api_key=api_key)
        self.models = GeminiAPIModels(self.backend)


def create_client(api_key: str) -> GeminiClient:
    """Create a Gemini client for one API key."""
    return GeminiClient(api_key=api_key)
