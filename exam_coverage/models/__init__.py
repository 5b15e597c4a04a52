"""
Pydantic models for the analysis pipeline and API schemas
"""

from .analysis import (
    UploadedFile,
    InlinePart,
    TopicScore,
    MissingTopic,
    AnalysisResult,
)
from .failure import (
    FailureKind,
    RecoveryAction,
    AnalysisFailure,
    AnalysisOutcome,
)
from .session import (
    FileSummary,
    SessionState,
    CredentialStatus,
    CredentialUpdate,
)

__all__ = [
    "UploadedFile",
    "InlinePart",
    "TopicScore",
    "MissingTopic",
    "AnalysisResult",
    "FailureKind",
    "RecoveryAction",
    "AnalysisFailure",
    "AnalysisOutcome",
    "FileSummary",
    "SessionState",
    "CredentialStatus",
    "CredentialUpdate",
]
