"""
Coverage analyzer

Runs one analysis end to end and returns an ``AnalysisOutcome``. Stage
errors never escape: they are classified into ``AnalysisFailure`` values so
the caller can branch on the failure kind.
"""

import uuid
from typing import Optional, Sequence

from exam_coverage.config.syllabus import SYLLABUS, SyllabusCatalog
from exam_coverage.core.logging import LogTimer, get_logger, set_run_id
from exam_coverage.models import AnalysisOutcome, UploadedFile

from . import validator
from .client import AnalysisClient
from .errors import classify_error

logger = get_logger(__name__, component="coverage_analyzer")


class CoverageAnalyzer:
    """Analysis client + response validator + error classifier."""

    def __init__(self, client: AnalysisClient, syllabus: Optional[SyllabusCatalog] = None):
        self.client = client
        self.syllabus = syllabus if syllabus is not None else getattr(client, "syllabus", SYLLABUS)

    async def analyze(self, files: Sequence[UploadedFile]) -> AnalysisOutcome:
        run_id = uuid.uuid4().hex
        set_run_id(run_id)
        try:
            with LogTimer(logger, f"exam analysis ({len(files)} file(s))"):
                raw = await self.client.run(files)
                result = validator.parse(raw, self.syllabus)
        except Exception as e:
            failure = classify_error(e)
            logger.warning(
                "Analysis failed",
                extra={
                    "failure_kind": failure.kind.value,
                    "recovery": failure.recovery.value,
                    "error_type": type(e).__name__,
                    "detail": failure.detail,
                },
            )
            return AnalysisOutcome.failed(failure)
        finally:
            set_run_id(None)

        logger.info(
            "Analysis completed",
            extra={
                "overall_score": result.overall_score,
                "question_count": result.question_count,
                "covered_topics": len(result.topic_scores),
                "missing_topics": len(result.missing_topics),
            },
        )
        return AnalysisOutcome.ok(result)
