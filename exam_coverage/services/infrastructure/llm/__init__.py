"""LLM infrastructure - Gemini client."""

from .gemini import GeminiClient, GenerationConfig, create_client

__all__ = ["GeminiClient", "GenerationConfig", "create_client"]
