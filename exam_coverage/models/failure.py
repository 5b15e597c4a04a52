"""
Failure models

Every failure of the analysis pipeline reaches the caller as an
``AnalysisFailure`` value carrying a kind, a user-facing message and the
recovery action the UI should take.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .analysis import AnalysisResult


class FailureKind(str, Enum):
    """Exhaustive taxonomy of analysis failures"""
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    PERMISSION_DENIED = "permission_denied"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    ENCODING_ERROR = "encoding_error"
    UNKNOWN = "unknown"


class RecoveryAction(str, Enum):
    """What the caller should do after a failure"""
    NONE = "none"
    REACQUIRE_CREDENTIAL = "reacquire_credential"


class AnalysisFailure(BaseModel):
    """A classified failure"""
    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str
    recovery: RecoveryAction = RecoveryAction.NONE
    detail: str = ""  # original error text, kept for diagnostics

    @property
    def requires_reauthentication(self) -> bool:
        return self.recovery == RecoveryAction.REACQUIRE_CREDENTIAL


class AnalysisOutcome(BaseModel):
    """Result-or-failure value returned by the analysis pipeline"""
    model_config = ConfigDict(frozen=True)

    success: bool
    result: Optional[AnalysisResult] = None
    failure: Optional[AnalysisFailure] = None

    @classmethod
    def ok(cls, result: AnalysisResult) -> "AnalysisOutcome":
        return cls(success=True, result=result)

    @classmethod
    def failed(cls, failure: AnalysisFailure) -> "AnalysisOutcome":
        return cls(success=False, failure=failure)
