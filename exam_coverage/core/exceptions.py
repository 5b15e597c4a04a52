"""
Core Exceptions
Standardized base exceptions for the application.
"""

class ExamCoverageError(Exception):
    """Base exception for all application errors."""
    pass

class PipelineError(ExamCoverageError):
    """Base exception for analysis pipeline errors."""
    pass

class InfrastructureError(ExamCoverageError):
    """Base exception for infrastructure errors (LLM, credentials, uploads)."""
    pass

class UnsupportedFileError(InfrastructureError):
    """Raised when a captured file cannot be accepted for analysis."""
    pass

class AnalysisInProgressError(ExamCoverageError):
    """Raised when a second analysis is started while one is outstanding."""
    pass
