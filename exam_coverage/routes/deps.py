"""
Route dependencies
"""

from fastapi import Request

from ..core.credentials import EnvironmentCredentialProvider, InMemoryCredentialProvider
from ..services.analysis import AnalysisClient, CoverageAnalyzer
from ..services.session import AnalysisSession


def build_default_session() -> AnalysisSession:
    """Session wired to Gemini, with a user-selectable key backed by the environment."""
    provider = InMemoryCredentialProvider(fallback=EnvironmentCredentialProvider())
    analyzer = CoverageAnalyzer(AnalysisClient(credential_provider=provider))
    session = AnalysisSession(analyzer, provider)
    session.check_credential()
    return session


def get_session(request: Request) -> AnalysisSession:
    return request.app.state.session
