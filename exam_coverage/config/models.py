"""
Model Configuration for the analysis pipeline

The exam coverage analysis is a single multimodal call. Its model is
configured here so it can be tuned without touching the pipeline code.

Environment overrides:
    ANALYSIS_MODEL: Gemini model id (default: gemini-3-pro-preview)
    ANALYSIS_THINKING_LEVEL: LOW | MEDIUM | HIGH (only for thinking-capable models)
    ANALYSIS_TEMPERATURE: Sampling temperature (default: model default)

Thinking Levels (for gemini-3-flash-preview and gemini-3-pro-preview):
    - LOW: Minimal reasoning, fastest responses
    - MEDIUM: Balanced reasoning and speed
    - HIGH: Deep reasoning, slower but more accurate
"""

import os
from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass


class ThinkingLevel(str, Enum):
    """Thinking budget levels for Gemini 3 models"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Models that support thinking configuration
THINKING_CAPABLE_MODELS = [
    "gemini-3-flash-preview",
    "gemini-3-pro-preview",
]

DEFAULT_ANALYSIS_MODEL = "gemini-3-pro-preview"


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for a single pipeline step's model"""
    model_name: str
    thinking_level: Optional[ThinkingLevel] = None
    temperature: Optional[float] = None
    description: str = ""

    @property
    def supports_thinking(self) -> bool:
        """Check if this model supports thinking configuration"""
        return self.model_name in THINKING_CAPABLE_MODELS


def _parse_thinking_level(value: Optional[str]) -> Optional[ThinkingLevel]:
    if not value:
        return None
    try:
        return ThinkingLevel(value.strip().upper())
    except ValueError:
        raise ValueError(
            f"Invalid thinking level '{value}'. Expected one of: "
            f"{', '.join(level.value for level in ThinkingLevel)}"
        )


def _parse_temperature(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


def load_pipeline_models() -> Dict[str, ModelConfig]:
    """Build the step -> model mapping from the environment."""
    return {
        "exam_analysis": ModelConfig(
            model_name=os.getenv("ANALYSIS_MODEL", DEFAULT_ANALYSIS_MODEL),
            thinking_level=_parse_thinking_level(os.getenv("ANALYSIS_THINKING_LEVEL")),
            temperature=_parse_temperature(os.getenv("ANALYSIS_TEMPERATURE")),
            description="Compare uploaded exam pages against the syllabus catalog",
        ),
    }


def get_model_config(step: str) -> ModelConfig:
    """
    Get the model configuration for a pipeline step.

    Args:
        step: Pipeline step name (e.g., 'exam_analysis')

    Returns:
        ModelConfig for the specified step
    """
    models = load_pipeline_models()
    if step in models:
        return models[step]
    raise ValueError(f"Unknown pipeline step: {step}")


def get_thinking_config(model_config: ModelConfig) -> Optional[Dict[str, str]]:
    """
    Get the thinking configuration for Gemini API calls.

    Returns:
        ThinkingConfig dict or None if thinking is not configured or supported
    """
    if model_config.thinking_level and model_config.supports_thinking:
        return {"thinking_level": model_config.thinking_level.value}
    return None
