"""
Analysis client

Owns the single outbound Gemini call of an analysis run:
credential -> inline parts -> prompt -> schema-constrained request -> raw text.

The client keeps no state between runs. The credential is fetched from the
provider at the start of every run, so a key rotated mid-session is used by
the next run. Callers must not start a second run while one is outstanding.
"""

import asyncio
import base64
import inspect
from typing import Callable, List, Optional, Sequence

from google.genai import types

from exam_coverage.config.models import ModelConfig, get_model_config, get_thinking_config
from exam_coverage.config.syllabus import SYLLABUS, SyllabusCatalog
from exam_coverage.core.credentials import CredentialProvider
from exam_coverage.core.logging import get_logger
from exam_coverage.models import InlinePart, UploadedFile
from exam_coverage.services.infrastructure.llm.gemini import GenerationConfig, create_client

from . import encoder, prompts
from .exceptions import EmptyResponseError, MissingCredentialError
from .schema import RESPONSE_MIME_TYPE, get_response_schema

logger = get_logger(__name__, component="analysis_client")

ClientFactory = Callable[[str], object]


class AnalysisClient:
    """
    Sends uploaded exam pages and the syllabus prompt to Gemini.

    Args:
        credential_provider: Source of the API key, consulted on every run
        syllabus: Catalog interpolated into the prompt
        client_factory: Builds a Gemini client for an API key
        model_config: Model settings (defaults to the ``exam_analysis`` step)
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        syllabus: SyllabusCatalog = SYLLABUS,
        client_factory: ClientFactory = create_client,
        model_config: Optional[ModelConfig] = None,
    ):
        self.credential_provider = credential_provider
        self.syllabus = syllabus
        self.client_factory = client_factory
        self.model_config = model_config or get_model_config("exam_analysis")

    async def _get_credential(self) -> Optional[str]:
        credential = self.credential_provider.get_credential()
        if inspect.isawaitable(credential):
            credential = await credential
        return credential or None

    @staticmethod
    def build_contents(parts: Sequence[InlinePart], prompt: str) -> List[types.Content]:
        """One user turn: every inline part, followed by the prompt text."""
        content_parts = [
            types.Part.from_bytes(data=base64.b64decode(part.data), mime_type=part.mime_type)
            for part in parts
        ]
        content_parts.append(types.Part.from_text(text=prompt))
        return [types.Content(role="user", parts=content_parts)]

    def build_generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=self.model_config.temperature,
            thinking_config=get_thinking_config(self.model_config),
            response_mime_type=RESPONSE_MIME_TYPE,
            response_schema=get_response_schema(),
        )

    async def run(self, files: Sequence[UploadedFile]) -> str:
        """
        Submit one analysis request and return the raw JSON text.

        Raises:
            MissingCredentialError: No credential available (nothing is sent)
            EncodingError: A file payload could not be encoded
            EmptyResponseError: The service answered without text
            Exception: Transport/service errors from the SDK, unchanged
        """
        credential = await self._get_credential()
        if not credential:
            raise MissingCredentialError("No API key is available for the analysis request")

        parts = [encoder.encode(file) for file in files]
        prompt = prompts.build(self.syllabus)
        contents = self.build_contents(parts, prompt)
        config = self.build_generation_config()

        client = self.client_factory(credential)
        model_name = self.model_config.model_name

        logger.info(
            "Submitting analysis request",
            extra={"model": model_name, "file_count": len(parts), "prompt_length": len(prompt)},
        )
        response = await asyncio.to_thread(
            client.models.generate_content,
            model=model_name,
            contents=contents,
            config=config,
        )

        text = getattr(response, "text", None) if response is not None else None
        if not text or not text.strip():
            raise EmptyResponseError("The AI service returned an empty response")

        return text
