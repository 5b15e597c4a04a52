"""
Tests for exam_coverage.services.session
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from exam_coverage.core.credentials import InMemoryCredentialProvider
from exam_coverage.core.exceptions import AnalysisInProgressError
from exam_coverage.models import AnalysisFailure, AnalysisOutcome, AnalysisResult, FailureKind, RecoveryAction
from exam_coverage.services.session import AnalysisSession


@pytest.fixture
def result(valid_report):
    return AnalysisResult.model_validate(valid_report)


def _analyzer(outcome):
    analyzer = MagicMock()
    analyzer.analyze = AsyncMock(return_value=outcome)
    return analyzer


class TestFiles:
    def test_add_remove_clear(self, png_file, pdf_file, provider):
        session = AnalysisSession(_analyzer(None), provider)
        session.add_files([png_file, pdf_file])
        assert [f.id for f in session.files] == ["page-1", "paper"]

        assert session.remove_file("page-1") is True
        assert session.remove_file("page-1") is False
        assert [f.id for f in session.files] == ["paper"]

        session.clear_files()
        assert session.files == ()

    def test_adding_files_clears_failure(self, png_file, provider):
        session = AnalysisSession(_analyzer(None), provider)
        session.failure = AnalysisFailure(kind=FailureKind.UNKNOWN, message="x")
        session.add_files([png_file])
        assert session.failure is None


class TestRunAnalysis:
    @pytest.mark.asyncio
    async def test_no_files_does_nothing(self, provider):
        analyzer = _analyzer(None)
        session = AnalysisSession(analyzer, provider)
        assert await session.run_analysis() is None
        analyzer.analyze.assert_not_called()

    @pytest.mark.asyncio
    async def test_success_stores_result(self, png_file, provider, result):
        session = AnalysisSession(_analyzer(AnalysisOutcome.ok(result)), provider)
        session.add_files([png_file])
        outcome = await session.run_analysis()

        assert outcome.success
        assert session.result == result
        assert session.failure is None
        assert session.is_analyzing is False

    @pytest.mark.asyncio
    async def test_reauth_failure_flags_credential(self, png_file, provider):
        failure = AnalysisFailure(
            kind=FailureKind.INVALID_CREDENTIAL,
            message="invalid",
            recovery=RecoveryAction.REACQUIRE_CREDENTIAL,
        )
        session = AnalysisSession(_analyzer(AnalysisOutcome.failed(failure)), provider)
        session.add_files([png_file])
        await session.run_analysis()

        assert session.failure == failure
        assert session.result is None
        assert session.credential_required is True

    @pytest.mark.asyncio
    async def test_other_failure_keeps_credential(self, png_file, provider):
        failure = AnalysisFailure(kind=FailureKind.PERMISSION_DENIED, message="403")
        session = AnalysisSession(_analyzer(AnalysisOutcome.failed(failure)), provider)
        session.add_files([png_file])
        await session.run_analysis()
        assert session.credential_required is False

    @pytest.mark.asyncio
    async def test_second_run_rejected_while_outstanding(self, png_file, provider, result):
        release = asyncio.Event()

        async def slow_analyze(files):
            await release.wait()
            return AnalysisOutcome.ok(result)

        analyzer = MagicMock()
        analyzer.analyze = slow_analyze
        session = AnalysisSession(analyzer, provider)
        session.add_files([png_file])

        first = asyncio.create_task(session.run_analysis())
        await asyncio.sleep(0)
        assert session.is_analyzing is True

        with pytest.raises(AnalysisInProgressError):
            await session.run_analysis()

        release.set()
        outcome = await first
        assert outcome.success
        assert session.is_analyzing is False

    @pytest.mark.asyncio
    async def test_gate_reset_when_analyzer_raises(self, png_file, provider):
        analyzer = MagicMock()
        analyzer.analyze = AsyncMock(side_effect=RuntimeError("boom"))
        session = AnalysisSession(analyzer, provider)
        session.add_files([png_file])

        with pytest.raises(RuntimeError):
            await session.run_analysis()
        assert session.is_analyzing is False


class TestCredential:
    def test_check_credential(self):
        provider = InMemoryCredentialProvider()
        session = AnalysisSession(_analyzer(None), provider)
        assert session.check_credential() is False
        assert session.credential_required is True

        provider.set_credential("key")
        assert session.check_credential() is True
        assert session.credential_required is False

    def test_select_credential_assumes_success(self):
        opened = MagicMock()
        provider = InMemoryCredentialProvider(on_request=opened)
        session = AnalysisSession(_analyzer(None), provider)
        session.credential_required = True
        session.failure = AnalysisFailure(kind=FailureKind.MISSING_CREDENTIAL, message="none")

        session.select_credential()

        opened.assert_called_once()
        assert session.credential_required is False
        assert session.failure is None


def test_snapshot(png_file, provider):
    session = AnalysisSession(_analyzer(None), provider)
    session.add_files([png_file])
    state = session.snapshot()

    assert state.files[0].id == "page-1"
    assert state.files[0].mime_type == "image/png"
    assert state.files[0].size_bytes > 0
    assert state.is_analyzing is False
    assert state.result is None
