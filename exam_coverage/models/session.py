"""
Session state schemas returned to the presentation layer
"""

from typing import List, Optional

from pydantic import BaseModel

from .analysis import AnalysisResult
from .failure import AnalysisFailure


class FileSummary(BaseModel):
    """An uploaded file as listed in the UI (payload omitted)"""
    id: str
    name: str
    mime_type: str
    size_bytes: int


class SessionState(BaseModel):
    """Snapshot of the single analysis session"""
    files: List[FileSummary]
    is_analyzing: bool
    credential_required: bool
    result: Optional[AnalysisResult] = None
    failure: Optional[AnalysisFailure] = None


class CredentialStatus(BaseModel):
    """Whether an API credential is currently available"""
    configured: bool
    credential_required: bool


class CredentialUpdate(BaseModel):
    """Request body for supplying a new API key"""
    api_key: str
