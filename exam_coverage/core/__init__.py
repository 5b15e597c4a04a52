"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - llm_logger.py: Request/response logging for the Gemini client
    - credentials.py: Credential provisioning interface and providers
    - exceptions.py: Application exception hierarchy

Usage:
    from exam_coverage.core import get_logger, EnvironmentCredentialProvider
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_run_id,
    clear_context,
    LogTimer,
)

# LLM request logging
from .llm_logger import LLMLogger, get_llm_logger

# Credentials
from .credentials import (
    CredentialProvider,
    EnvironmentCredentialProvider,
    InMemoryCredentialProvider,
)

# Exceptions
from .exceptions import (
    ExamCoverageError,
    PipelineError,
    InfrastructureError,
    UnsupportedFileError,
    AnalysisInProgressError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_run_id",
    "clear_context",
    "LogTimer",
    "LLMLogger",
    "get_llm_logger",
    "CredentialProvider",
    "EnvironmentCredentialProvider",
    "InMemoryCredentialProvider",
    "ExamCoverageError",
    "PipelineError",
    "InfrastructureError",
    "UnsupportedFileError",
    "AnalysisInProgressError",
]
