"""
Tests for exam_coverage.config
"""

import pytest

from exam_coverage.config import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    API_VERSION,
    DEFAULT_ANALYSIS_MODEL,
    ModelConfig,
    ThinkingLevel,
    get_model_config,
    get_thinking_config,
)


class TestModelConfig:
    def test_default_analysis_model(self):
        config = get_model_config("exam_analysis")
        assert config.model_name == DEFAULT_ANALYSIS_MODEL
        assert config.thinking_level is None
        assert config.temperature is None
        assert config.supports_thinking is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_MODEL", "gemini-3-flash-preview")
        monkeypatch.setenv("ANALYSIS_THINKING_LEVEL", "medium")
        monkeypatch.setenv("ANALYSIS_TEMPERATURE", "0.4")
        config = get_model_config("exam_analysis")
        assert config.model_name == "gemini-3-flash-preview"
        assert config.thinking_level == ThinkingLevel.MEDIUM
        assert config.temperature == 0.4

    def test_invalid_thinking_level(self, monkeypatch):
        monkeypatch.setenv("ANALYSIS_THINKING_LEVEL", "extreme")
        with pytest.raises(ValueError, match="Invalid thinking level"):
            get_model_config("exam_analysis")

    def test_unknown_step(self):
        with pytest.raises(ValueError, match="Unknown pipeline step"):
            get_model_config("video_generation")


class TestThinkingConfig:
    def test_capable_model(self):
        config = ModelConfig(model_name="gemini-3-pro-preview", thinking_level=ThinkingLevel.LOW)
        assert get_thinking_config(config) == {"thinking_level": "LOW"}

    def test_incapable_model(self):
        config = ModelConfig(model_name="gemini-2.5-pro", thinking_level=ThinkingLevel.LOW)
        assert get_thinking_config(config) is None

    def test_not_configured(self):
        assert get_thinking_config(ModelConfig(model_name="gemini-3-pro-preview")) is None


def test_upload_constants():
    assert "application/pdf" in ALLOWED_MIME_TYPES
    assert ".png" in ALLOWED_EXTENSIONS
    assert API_VERSION
