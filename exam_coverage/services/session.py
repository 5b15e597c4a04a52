"""
Analysis session

The caller side of the pipeline for a single browser session: the queued
uploads, the in-progress gate that keeps analyses single-flight, the last
result or failure, and whether the UI must ask the user for a new API key.
"""

from typing import Iterable, List, Optional, Tuple

from exam_coverage.core.credentials import CredentialProvider
from exam_coverage.core.exceptions import AnalysisInProgressError
from exam_coverage.core.logging import get_logger
from exam_coverage.models import (
    AnalysisFailure,
    AnalysisOutcome,
    AnalysisResult,
    FileSummary,
    SessionState,
    UploadedFile,
)

from .analysis import CoverageAnalyzer

logger = get_logger(__name__, component="analysis_session")


class AnalysisSession:
    """State of one user's analysis workflow."""

    def __init__(self, analyzer: CoverageAnalyzer, credential_provider: CredentialProvider):
        self.analyzer = analyzer
        self.credential_provider = credential_provider
        self._files: List[UploadedFile] = []
        self.is_analyzing = False
        self.credential_required = False
        self.result: Optional[AnalysisResult] = None
        self.failure: Optional[AnalysisFailure] = None

    @property
    def files(self) -> Tuple[UploadedFile, ...]:
        return tuple(self._files)

    def add_files(self, files: Iterable[UploadedFile]) -> None:
        self._files.extend(files)
        self.failure = None

    def remove_file(self, file_id: str) -> bool:
        """Remove a queued file; returns False when the id is unknown."""
        remaining = [f for f in self._files if f.id != file_id]
        removed = len(remaining) != len(self._files)
        self._files = remaining
        return removed

    def clear_files(self) -> None:
        self._files = []

    def check_credential(self) -> bool:
        """Refresh ``credential_required`` from the provider."""
        self.credential_required = not self.credential_provider.has_credential()
        return not self.credential_required

    def select_credential(self) -> None:
        """
        Start the key-selection flow and assume it succeeds.

        The new key is read by the next run; if it is still unusable that run
        fails with a credential error and flips the flag back.
        """
        self.credential_provider.request_credential()
        self.credential_required = False
        self.failure = None

    async def run_analysis(self) -> Optional[AnalysisOutcome]:
        """
        Analyze the queued files.

        Returns:
            The outcome, or None when no files are queued

        Raises:
            AnalysisInProgressError: If a run is already outstanding
        """
        if not self._files:
            return None
        if self.is_analyzing:
            raise AnalysisInProgressError("An analysis is already running")

        self.is_analyzing = True
        self.result = None
        self.failure = None
        try:
            outcome = await self.analyzer.analyze(list(self._files))
        finally:
            self.is_analyzing = False

        if outcome.success:
            self.result = outcome.result
        else:
            self.failure = outcome.failure
            if outcome.failure.requires_reauthentication:
                self.credential_required = True
                logger.info(
                    "Credential must be re-selected",
                    extra={"failure_kind": outcome.failure.kind.value},
                )
        return outcome

    def snapshot(self) -> SessionState:
        return SessionState(
            files=[
                FileSummary(id=f.id, name=f.name, mime_type=f.mime_type, size_bytes=f.size_bytes)
                for f in self._files
            ],
            is_analyzing=self.is_analyzing,
            credential_required=self.credential_required,
            result=self.result,
            failure=self.failure,
        )
