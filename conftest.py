import base64
import json
from unittest.mock import MagicMock

import pytest

from exam_coverage.core.credentials import InMemoryCredentialProvider
from exam_coverage.models import UploadedFile

# Real PNG signature plus a few bytes; the pipeline never decodes the image
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01"
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n%%EOF\n"

CREDENTIAL_ENV_VARS = (
    "GEMINI_API_KEY",
    "API_KEY",
    "ANALYSIS_MODEL",
    "ANALYSIS_THINKING_LEVEL",
    "ANALYSIS_TEMPERATURE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never see a real API key or model override from the shell or .env"""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def png_file():
    encoded = base64.b64encode(PNG_BYTES).decode("ascii")
    return UploadedFile(id="page-1", mime_type="image/png", payload=f"data:image/png;base64,{encoded}", name="page1.png")


@pytest.fixture
def pdf_file():
    encoded = base64.b64encode(PDF_BYTES).decode("ascii")
    return UploadedFile(id="paper", mime_type="application/pdf", payload=encoded, name="paper.pdf")


@pytest.fixture
def valid_report():
    return {
        "topicScores": [
            {"topicId": "M1-01", "score": 85},
            {"topicId": "M1-04", "score": 72.5},
        ],
        "missingTopics": [
            {"topicId": "S2-04", "reason": "未考查概率统计综合应用", "suggestion": "增加一道统计案例分析题"},
        ],
        "overallScore": 78,
        "aiCommentary": "试卷结构合理，函数部分考查充分。",
        "questionCount": 12,
    }


@pytest.fixture
def provider():
    return InMemoryCredentialProvider(credential="test-key")


@pytest.fixture
def fake_genai_client(valid_report):
    """Stand-in for GeminiClient whose generate_content returns the valid report"""
    client = MagicMock()
    client.models.generate_content.return_value = MagicMock(text=json.dumps(valid_report, ensure_ascii=False))
    return client
