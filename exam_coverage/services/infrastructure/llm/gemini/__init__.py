"""
Gemini AI Service Module

Usage:
    from exam_coverage.services.infrastructure.llm.gemini import create_client, GenerationConfig
"""

from .client import GeminiClient, GeminiAPIModels, GenerationConfig, create_client

__all__ = [
    "GeminiClient",
    "GeminiAPIModels",
    "GenerationConfig",
    "create_client",
]
