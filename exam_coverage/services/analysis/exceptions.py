"""
Analysis pipeline exceptions

Each stage raises one of these; ``classify_error`` turns them into
``AnalysisFailure`` values at the pipeline boundary.
"""

from exam_coverage.core.exceptions import PipelineError


class AnalysisError(PipelineError):
    """Base exception for the analysis pipeline."""
    pass


class MissingCredentialError(AnalysisError):
    """No credential was available; no request was sent."""
    pass


class EncodingError(AnalysisError):
    """An uploaded file payload could not be turned into an inline part."""
    pass


class EmptyResponseError(AnalysisError):
    """The AI service answered without any text."""
    pass


class MalformedResponseError(AnalysisError):
    """The answer was not valid JSON or violated the report invariants."""
    pass


class UnknownTopicError(MalformedResponseError):
    """The report references topic ids that are not in the syllabus."""

    def __init__(self, topic_ids):
        self.topic_ids = sorted(set(topic_ids))
        super().__init__("Analysis report references topic ids outside the syllabus")
