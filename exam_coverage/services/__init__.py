"""
Services - analysis pipeline, file capture and session state
"""

from .capture import capture_file, resolve_mime_type
from .session import AnalysisSession

__all__ = ["capture_file", "resolve_mime_type", "AnalysisSession"]
